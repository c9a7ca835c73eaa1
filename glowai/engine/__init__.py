from glowai.engine.catalog import filter_products, primary_link
from glowai.engine.normalizer import (
    FaceScanReview,
    confidence_label,
    submit_face_scan,
    submit_questionnaire,
)
from glowai.engine.questionnaire import QUESTIONS, FlowState, Questionnaire
from glowai.engine.ranker import build_recommendation, rank_products, recommend
from glowai.engine.tiers import PLANS, decide, status_label

__all__ = [
    "filter_products",
    "primary_link",
    "FaceScanReview",
    "confidence_label",
    "submit_face_scan",
    "submit_questionnaire",
    "QUESTIONS",
    "FlowState",
    "Questionnaire",
    "build_recommendation",
    "rank_products",
    "recommend",
    "PLANS",
    "decide",
    "status_label",
]
