import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile

from glowai.auth import get_current_user, require_authenticated
from glowai.engine.normalizer import confidence_label, submit_face_scan, submit_questionnaire
from glowai.engine.questionnaire import QUESTIONS
from glowai.engine.tiers import PLANS, status_label
from glowai.schemas import (
    CurrentUser,
    FaceScanAnalysis,
    FaceScanConfirmation,
    FilterCriteria,
    PlanDetails,
    ProductList,
    QuestionnaireAnswers,
    RecommendationRequest,
    RecommendationResult,
    SkincareGoal,
    SkinProfile,
    SkinType,
    SubscribeRequest,
    SubscriptionReceipt,
    SubscriptionSummary,
)
from glowai.services.face_scan import FaceScanAnalyzer
from glowai.services.recommendation import (
    CatalogStore,
    RecommendationService,
    get_catalog_store,
)
from glowai.services.subscription import SubscriptionService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_face_scan_analyzer() -> FaceScanAnalyzer:
    return FaceScanAnalyzer()


@router.get("/questionnaire")
async def get_questionnaire():
    return {"questions": [q.to_dict() for q in QUESTIONS]}


@router.post("/questionnaire", response_model=SkinProfile)
async def post_questionnaire(answers: QuestionnaireAnswers):
    return submit_questionnaire(answers)


@router.post("/face-scan/analyze", response_model=FaceScanAnalysis)
async def analyze_face_scan(
    image: UploadFile = File(...),
    analyzer: FaceScanAnalyzer = Depends(get_face_scan_analyzer),
):
    estimate = await analyzer.analyze(await image.read())
    return FaceScanAnalysis(
        estimate=estimate,
        confidence_label=confidence_label(estimate.confidence),
    )


@router.post("/face-scan/confirm", response_model=SkinProfile)
async def confirm_face_scan(body: FaceScanConfirmation):
    return submit_face_scan(body.estimate, body.overrides)


@router.get("/products", response_model=ProductList)
async def list_products(
    search: Optional[str] = None,
    skin_type: Optional[SkinType] = None,
    goal: Optional[SkincareGoal] = None,
    min_rating: Optional[float] = Query(default=None, ge=0.0, le=5.0),
    store: CatalogStore = Depends(get_catalog_store),
):
    criteria = FilterCriteria(
        search_text=search,
        skin_type=skin_type,
        goal=goal,
        min_rating=min_rating,
    )
    return await RecommendationService(store).browse(criteria)


@router.get("/plans", response_model=list[PlanDetails])
async def list_plans():
    return list(PLANS)


@router.get("/me/subscription", response_model=SubscriptionSummary)
async def my_subscription(user: CurrentUser = Depends(require_authenticated)):
    return SubscriptionSummary(tier=user.tier, status_label=status_label(user.tier))


@router.post("/subscriptions", response_model=SubscriptionReceipt, status_code=201)
async def create_subscription(
    body: SubscribeRequest,
    user: CurrentUser = Depends(require_authenticated),
    store: CatalogStore = Depends(get_catalog_store),
):
    return await SubscriptionService(store).subscribe(user, body)


@router.post("/recommendations", response_model=RecommendationResult)
async def create_recommendation(
    body: RecommendationRequest,
    user: Optional[CurrentUser] = Depends(get_current_user),
    store: CatalogStore = Depends(get_catalog_store),
):
    return await RecommendationService(store).recommend_for(body.profile, user)
