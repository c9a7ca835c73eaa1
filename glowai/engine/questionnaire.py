"""
Questionnaire state machine — ordered, resumable capture of the four
profile questions.

States are the question indexes 0..N-1 plus the terminals SUBMITTED and
EXITED. `next()` is guarded by `can_proceed()`; an unmet guard is a no-op,
not an error, since the UI is expected to disable the action.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from glowai.engine.normalizer import submit_questionnaire
from glowai.schemas import (
    AgeGroup,
    QuestionnaireAnswers,
    SkinConcern,
    SkincareGoal,
    SkinProfile,
    SkinType,
)

logger = logging.getLogger(__name__)


class QuestionKind(str, enum.Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


class FlowState(str, enum.Enum):
    ASKING = "asking"
    SUBMITTED = "submitted"
    EXITED = "exited"


@dataclass(frozen=True)
class Question:
    field: str
    prompt: str
    kind: QuestionKind
    options: tuple

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "question": self.prompt,
            "type": self.kind.value,
            "options": [o.value for o in self.options],
        }


QUESTIONS: tuple[Question, ...] = (
    Question(
        field="skin_type",
        prompt="What's your skin type?",
        kind=QuestionKind.SINGLE,
        options=tuple(SkinType),
    ),
    Question(
        field="main_concerns",
        prompt="What are your main skin concerns?",
        kind=QuestionKind.MULTIPLE,
        options=tuple(SkinConcern),
    ),
    Question(
        field="age_group",
        prompt="What's your age group?",
        kind=QuestionKind.SINGLE,
        options=tuple(AgeGroup),
    ),
    Question(
        field="skincare_goal",
        prompt="What's your primary skincare goal?",
        kind=QuestionKind.SINGLE,
        options=(
            SkincareGoal.GLOWING_SKIN,
            SkincareGoal.ANTI_AGING,
            SkincareGoal.ACNE_FREE,
            SkincareGoal.HYDRATION,
            SkincareGoal.EVEN_TONE,
        ),
    ),
)


class Questionnaire:
    """One user's pass through the questionnaire."""

    def __init__(self, answers: Optional[QuestionnaireAnswers] = None):
        self.answers = answers or QuestionnaireAnswers()
        self.step = 0
        self.state = FlowState.ASKING
        self.profile: Optional[SkinProfile] = None

    # ── Introspection ──

    @property
    def current_question(self) -> Question:
        return QUESTIONS[self.step]

    @property
    def is_last_step(self) -> bool:
        return self.step == len(QUESTIONS) - 1

    @property
    def progress(self) -> float:
        """Percentage shown on the progress bar."""
        return (self.step + 1) / len(QUESTIONS) * 100

    def is_selected(self, option) -> bool:
        question = self.current_question
        value = getattr(self.answers, question.field)
        if question.kind == QuestionKind.MULTIPLE:
            return option in value
        return value == option

    def can_proceed(self) -> bool:
        question = self.current_question
        value = getattr(self.answers, question.field)
        if question.kind == QuestionKind.MULTIPLE:
            return len(value) > 0
        return value is not None

    # ── Transitions ──

    def select(self, option) -> None:
        """Select an option on the current question.

        Single-select replaces the previous answer; multi-select toggles.
        """
        self._require_asking()
        question = self.current_question
        matched = next((o for o in question.options if o == option), None)
        if matched is None:
            raise ValueError(f"{option!r} is not an option for {question.field}")

        if question.kind == QuestionKind.MULTIPLE:
            selected = list(getattr(self.answers, question.field))
            if matched in selected:
                selected.remove(matched)
            else:
                selected.append(matched)
            setattr(self.answers, question.field, selected)
        else:
            setattr(self.answers, question.field, matched)

    def next(self) -> Optional[SkinProfile]:
        """Advance one question; on the last one, submit.

        Returns the submitted profile, or None when still asking (or when
        the guard blocked the transition).
        """
        if self.state != FlowState.ASKING or not self.can_proceed():
            return None
        if not self.is_last_step:
            self.step += 1
            return None

        self.profile = submit_questionnaire(self.answers)
        self.state = FlowState.SUBMITTED
        logger.info(
            f"Questionnaire submitted | Skin type: {self.profile.skin_type.value} | "
            f"Goal: {self.profile.skincare_goal.value}"
        )
        return self.profile

    def back(self) -> FlowState:
        """Go to the previous question, or leave the flow from the first one."""
        if self.state != FlowState.ASKING:
            return self.state
        if self.step > 0:
            self.step -= 1
        else:
            self.state = FlowState.EXITED
        return self.state

    def _require_asking(self) -> None:
        if self.state != FlowState.ASKING:
            raise RuntimeError(f"questionnaire is {self.state.value}")
