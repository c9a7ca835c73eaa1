"""
Profile normalizer — turns questionnaire answers or a corrected face scan
into one canonical SkinProfile.
"""

import logging
from typing import Optional

from glowai.errors import ValidationError
from glowai.schemas import (
    FaceScanEstimate,
    FaceScanOverrides,
    ProfileSource,
    QuestionnaireAnswers,
    SkinProfile,
    SkinTone,
    SkinType,
)

logger = logging.getLogger(__name__)

# Scores above this render as a confident scan
HIGH_CONFIDENCE_THRESHOLD = 0.8

_OVERRIDABLE_FIELDS = ("skin_tone", "skin_type")


def submit_questionnaire(answers: QuestionnaireAnswers) -> SkinProfile:
    """Freeze questionnaire answers into a complete profile."""
    profile = SkinProfile(
        source=ProfileSource.QUESTIONNAIRE,
        skin_type=answers.skin_type,
        main_concerns=frozenset(answers.main_concerns),
        age_group=answers.age_group,
        skincare_goal=answers.skincare_goal,
    )
    missing = profile.missing_fields()
    if missing:
        raise ValidationError(
            f"Questionnaire is incomplete: {', '.join(missing)}", missing=missing
        )
    return profile


def submit_face_scan(
    estimate: FaceScanEstimate,
    overrides: Optional[FaceScanOverrides] = None,
) -> SkinProfile:
    """Apply user corrections to a scan and build the face-scan profile.

    Concerns, age group and goal are never inferred from a scan and stay
    empty. Confidence passes through untouched.
    """
    overrides = overrides or FaceScanOverrides()
    return SkinProfile(
        source=ProfileSource.FACE_SCAN,
        skin_type=overrides.skin_type or estimate.skin_type,
        detected_skin_tone=overrides.skin_tone or estimate.skin_tone,
        confidence=estimate.confidence,
    )


def confidence_label(confidence: float) -> str:
    return "high" if confidence > HIGH_CONFIDENCE_THRESHOLD else "low"


class FaceScanReview:
    """Holds a scan estimate while the user corrects it.

    Only skin tone and skin type are editable; the estimate itself is never
    mutated, corrections accumulate separately until `confirm()`.
    """

    def __init__(self, estimate: FaceScanEstimate):
        self.estimate = estimate
        self._overrides: dict = {}

    def override(self, field: str, value) -> None:
        if field not in _OVERRIDABLE_FIELDS:
            raise ValueError(f"{field!r} cannot be overridden")
        enum_type = SkinTone if field == "skin_tone" else SkinType
        self._overrides[field] = enum_type(value)
        logger.debug(f"Scan override: {field} -> {self._overrides[field].value}")

    @property
    def overrides(self) -> FaceScanOverrides:
        return FaceScanOverrides(**self._overrides)

    @property
    def current(self) -> FaceScanEstimate:
        """The estimate as the user currently sees it."""
        return self.estimate.model_copy(update=self._overrides)

    @property
    def confidence_label(self) -> str:
        return confidence_label(self.estimate.confidence)

    def confirm(self) -> SkinProfile:
        return submit_face_scan(self.estimate, self.overrides)
