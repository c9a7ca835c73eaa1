"""
Pydantic schemas — the single source of truth for all data contracts.

SkinProfile is the handoff contract between the capture flows (questionnaire,
face scan) and the recommendation engine. Everything the engine consumes or
produces is frozen once built.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ── Enums ────────────────────────────────────────────────────────────────────


class SkinType(str, enum.Enum):
    OILY = "Oily"
    DRY = "Dry"
    COMBINATION = "Combination"
    NORMAL = "Normal"
    SENSITIVE = "Sensitive"


# Wildcard a product may list in place of (or next to) specific skin types
ALL_SKIN_TYPES = "All"


class SkinConcern(str, enum.Enum):
    ACNE = "Acne"
    WRINKLES = "Wrinkles"
    DARK_SPOTS = "Dark spots"
    DULLNESS = "Dullness"
    SENSITIVITY = "Sensitivity"


class AgeGroup(str, enum.Enum):
    AGE_18_25 = "18-25"
    AGE_26_35 = "26-35"
    AGE_36_45 = "36-45"
    AGE_45_PLUS = "45+"


class SkincareGoal(str, enum.Enum):
    GLOWING_SKIN = "Glowing skin"
    ANTI_AGING = "Anti-aging"
    ACNE_FREE = "Acne-free"
    HYDRATION = "Hydration"
    EVEN_TONE = "Even tone"
    BASIC_CARE = "Basic Care"  # catalog tag only, never offered as an answer


class SkinTone(str, enum.Enum):
    LIGHT = "Light"
    MEDIUM = "Medium"
    DARK = "Dark"


class ProfileSource(str, enum.Enum):
    QUESTIONNAIRE = "Questionnaire"
    FACE_SCAN = "FaceScan"


class SubscriptionPlan(str, enum.Enum):
    NONE = "none"
    STANDARD = "standard"
    PREMIUM = "premium"


class SubscriptionStatus(str, enum.Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class BillingPeriod(str, enum.Enum):
    MONTHLY = "monthly"
    DAILY = "daily"


class RoutineSlot(str, enum.Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


# ── Capture models ───────────────────────────────────────────────────────────


class QuestionnaireAnswers(BaseModel):
    """Answers collected so far — mutated only by the questionnaire flow."""

    skin_type: Optional[SkinType] = None
    main_concerns: list[SkinConcern] = Field(default_factory=list)
    age_group: Optional[AgeGroup] = None
    skincare_goal: Optional[SkincareGoal] = None


class FaceScanEstimate(BaseModel):
    """Machine output of the image pipeline."""

    model_config = ConfigDict(frozen=True)

    skin_tone: SkinTone
    skin_type: SkinType
    confidence: float = Field(ge=0.0, le=1.0)


class FaceScanOverrides(BaseModel):
    """User corrections to a scan. Confidence is deliberately absent."""

    model_config = ConfigDict(extra="forbid")

    skin_tone: Optional[SkinTone] = None
    skin_type: Optional[SkinType] = None


# ── SkinProfile ─────────────────────────────────────────────────────────────

_QUESTIONNAIRE_FIELDS = ("skin_type", "main_concerns", "age_group", "skincare_goal")
_FACE_SCAN_FIELDS = ("skin_type", "detected_skin_tone", "confidence")


class SkinProfile(BaseModel):
    """Canonical profile. Which fields are required depends on `source`."""

    model_config = ConfigDict(frozen=True)

    source: ProfileSource
    skin_type: Optional[SkinType] = None
    main_concerns: frozenset[SkinConcern] = frozenset()
    age_group: Optional[AgeGroup] = None
    skincare_goal: Optional[SkincareGoal] = None

    # Face scan only
    detected_skin_tone: Optional[SkinTone] = None
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_source_fields(self) -> "SkinProfile":
        if self.source == ProfileSource.QUESTIONNAIRE:
            if self.detected_skin_tone is not None or self.confidence is not None:
                raise ValueError("questionnaire profiles carry no scan attributes")
        elif self.main_concerns or self.age_group or self.skincare_goal:
            raise ValueError("face-scan profiles carry no concerns, age group or goal")
        return self

    def missing_fields(self) -> list[str]:
        required = (
            _QUESTIONNAIRE_FIELDS
            if self.source == ProfileSource.QUESTIONNAIRE
            else _FACE_SCAN_FIELDS
        )
        missing = []
        for name in required:
            value = getattr(self, name)
            if value is None or value == frozenset():
                missing.append(name)
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


# ── Catalog ──────────────────────────────────────────────────────────────────


class StoreLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    store: str
    url: str


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    brand: str
    rating: float = Field(ge=0.0, le=5.0)
    reviews_count: int = Field(ge=0)
    description: str = ""
    skin_types: frozenset[str] = frozenset()
    goals: frozenset[SkincareGoal] = frozenset()
    links: list[StoreLink] = Field(default_factory=list, description="Display/priority order")

    @field_validator("skin_types", mode="before")
    @classmethod
    def _coerce_skin_types(cls, value):
        if value is None:
            return frozenset()
        return frozenset(v.value if isinstance(v, enum.Enum) else v for v in value)

    @field_validator("skin_types")
    @classmethod
    def _check_skin_types(cls, value: frozenset[str]) -> frozenset[str]:
        allowed = {t.value for t in SkinType} | {ALL_SKIN_TYPES}
        unknown = value - allowed
        if unknown:
            raise ValueError(f"unknown skin types: {sorted(unknown)}")
        return value

    def suits(self, skin_type: SkinType) -> bool:
        return skin_type.value in self.skin_types or ALL_SKIN_TYPES in self.skin_types


class FilterCriteria(BaseModel):
    """Composable catalog filter. Unset fields match everything."""

    model_config = ConfigDict(frozen=True)

    search_text: Optional[str] = None
    skin_type: Optional[SkinType] = None
    goal: Optional[SkincareGoal] = None
    min_rating: Optional[float] = Field(default=None, ge=0.0, le=5.0)

    @property
    def is_empty(self) -> bool:
        return (
            not (self.search_text or "").strip()
            and self.skin_type is None
            and self.goal is None
            and self.min_rating is None
        )

    @classmethod
    def cleared(cls) -> "FilterCriteria":
        return cls()


# ── Subscription & gating ────────────────────────────────────────────────────


class SubscriptionTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    plan: SubscriptionPlan = SubscriptionPlan.NONE
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE


class GateDecision(BaseModel):
    """What a tier unlocks for one recommendation request."""

    model_config = ConfigDict(frozen=True)

    personalized: bool
    include_routine: bool
    product_depth: int = Field(ge=1)


class PlanDetails(BaseModel):
    id: SubscriptionPlan
    name: str
    monthly_price: int
    daily_price: int
    currency: str = "KSh"
    features: list[str] = Field(default_factory=list)
    popular: bool = False
    trial_days: int = 0


class CurrentUser(BaseModel):
    id: str
    tier: SubscriptionTier = Field(default_factory=SubscriptionTier)


# ── Results ──────────────────────────────────────────────────────────────────


class Routine(BaseModel):
    model_config = ConfigDict(frozen=True)

    morning: list[str] = Field(default_factory=list)
    afternoon: list[str] = Field(default_factory=list)
    evening: list[str] = Field(default_factory=list)


class RecommendationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    personalized: bool
    routine: Optional[Routine] = None
    products: list[Product] = Field(default_factory=list)
    summary: str


# ── API payloads ─────────────────────────────────────────────────────────────


class FaceScanAnalysis(BaseModel):
    estimate: FaceScanEstimate
    confidence_label: str


class FaceScanConfirmation(BaseModel):
    estimate: FaceScanEstimate
    overrides: FaceScanOverrides = Field(default_factory=FaceScanOverrides)


class RecommendationRequest(BaseModel):
    profile: SkinProfile


class ProductList(BaseModel):
    products: list[Product]
    count: int
    total: int


class SubscriptionSummary(BaseModel):
    tier: SubscriptionTier
    status_label: str


class SubscribeRequest(BaseModel):
    plan: SubscriptionPlan
    period: BillingPeriod = BillingPeriod.MONTHLY

    @field_validator("plan")
    @classmethod
    def plan_must_be_paid(cls, v: SubscriptionPlan) -> SubscriptionPlan:
        if v == SubscriptionPlan.NONE:
            raise ValueError("Choose the standard or premium plan")
        return v


class SubscriptionReceipt(BaseModel):
    """What a successful subscribe call recorded. Payment is not taken here."""

    plan: SubscriptionPlan
    period: BillingPeriod
    price: int
    currency: str = "KSh"
    start_date: datetime
    end_date: datetime
    status_label: str
