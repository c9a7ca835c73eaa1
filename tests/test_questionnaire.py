"""
Questionnaire state machine — guards, back navigation, option toggling and
submission only with every answer given.
"""

import pytest

from glowai.engine.questionnaire import QUESTIONS, FlowState, Questionnaire, QuestionKind
from glowai.schemas import (
    AgeGroup,
    ProfileSource,
    QuestionnaireAnswers,
    SkinConcern,
    SkincareGoal,
    SkinType,
)


# ── Fixtures ────────────────────────────────────────────────────────────────


def _answer_all(q: Questionnaire) -> None:
    """Walk a fresh questionnaire through every question."""
    q.select("Oily")
    q.next()
    q.select("Acne")
    q.select("Dark spots")
    q.next()
    q.select("26-35")
    q.next()
    q.select("Hydration")


# ── Question table ──────────────────────────────────────────────────────────


class TestQuestions:
    def test_four_questions_in_fixed_order(self):
        assert [q.field for q in QUESTIONS] == [
            "skin_type",
            "main_concerns",
            "age_group",
            "skincare_goal",
        ]

    def test_only_concerns_is_multi_select(self):
        kinds = {q.field: q.kind for q in QUESTIONS}
        assert kinds["main_concerns"] == QuestionKind.MULTIPLE
        assert kinds["skin_type"] == QuestionKind.SINGLE

    def test_goal_options_exclude_catalog_only_tag(self):
        assert SkincareGoal.BASIC_CARE not in QUESTIONS[3].options
        assert len(QUESTIONS[3].options) == 5

    def test_to_dict_uses_display_values(self):
        data = QUESTIONS[1].to_dict()
        assert data["type"] == "multiple"
        assert "Dark spots" in data["options"]


# ── Guards ──────────────────────────────────────────────────────────────────


class TestGuards:
    def test_next_is_noop_without_answer(self):
        q = Questionnaire()
        assert not q.can_proceed()
        assert q.next() is None
        assert q.step == 0
        assert q.state == FlowState.ASKING

    def test_single_select_enables_next(self):
        q = Questionnaire()
        q.select("Dry")
        assert q.can_proceed()
        q.next()
        assert q.step == 1

    def test_multi_select_needs_one_option(self):
        q = Questionnaire()
        q.select("Dry")
        q.next()
        assert not q.can_proceed()
        q.select(SkinConcern.WRINKLES)
        assert q.can_proceed()

    def test_deselecting_last_concern_blocks_next(self):
        q = Questionnaire()
        q.select("Dry")
        q.next()
        q.select("Acne")
        q.select("Acne")
        assert not q.can_proceed()
        assert q.next() is None
        assert q.step == 1


# ── Selection ───────────────────────────────────────────────────────────────


class TestSelection:
    def test_single_select_replaces(self):
        q = Questionnaire()
        q.select("Oily")
        q.select("Normal")
        assert q.answers.skin_type == SkinType.NORMAL
        assert q.is_selected("Normal")
        assert not q.is_selected("Oily")

    def test_multi_select_toggles(self):
        q = Questionnaire()
        q.select("Oily")
        q.next()
        q.select("Acne")
        q.select("Wrinkles")
        q.select("Acne")
        assert q.answers.main_concerns == [SkinConcern.WRINKLES]

    def test_unknown_option_raises(self):
        q = Questionnaire()
        with pytest.raises(ValueError):
            q.select("Purple")

    def test_option_from_another_question_raises(self):
        q = Questionnaire()
        with pytest.raises(ValueError):
            q.select("Acne")


# ── Navigation ──────────────────────────────────────────────────────────────


class TestNavigation:
    def test_back_keeps_answers(self):
        q = Questionnaire()
        q.select("Combination")
        q.next()
        q.select("Dullness")
        assert q.back() == FlowState.ASKING
        assert q.step == 0
        assert q.answers.main_concerns == [SkinConcern.DULLNESS]
        assert q.is_selected("Combination")

    def test_back_from_first_question_exits(self):
        q = Questionnaire()
        assert q.back() == FlowState.EXITED
        assert q.state == FlowState.EXITED

    def test_revisit_and_change_earlier_answer(self):
        q = Questionnaire()
        _answer_all(q)
        q.back()
        q.back()
        q.back()
        q.select("Sensitive")
        q.next()
        q.next()
        q.next()
        profile = q.next()
        assert profile is not None
        assert profile.skin_type == SkinType.SENSITIVE
        assert profile.age_group == AgeGroup.AGE_26_35

    def test_progress(self):
        q = Questionnaire()
        assert q.progress == 25.0
        q.select("Oily")
        q.next()
        assert q.progress == 50.0


# ── Submission ──────────────────────────────────────────────────────────────


class TestSubmission:
    def test_full_walk_submits_complete_profile(self):
        q = Questionnaire()
        _answer_all(q)
        assert q.is_last_step
        profile = q.next()

        assert q.state == FlowState.SUBMITTED
        assert profile is q.profile
        assert profile.source == ProfileSource.QUESTIONNAIRE
        assert profile.is_complete
        assert profile.main_concerns == frozenset({SkinConcern.ACNE, SkinConcern.DARK_SPOTS})
        assert profile.skincare_goal == SkincareGoal.HYDRATION

    def test_last_question_unanswered_does_not_submit(self):
        q = Questionnaire()
        q.select("Oily")
        q.next()
        q.select("Acne")
        q.next()
        q.select("45+")
        q.next()
        assert q.next() is None
        assert q.state == FlowState.ASKING

    def test_prefilled_answers_still_guarded(self):
        answers = QuestionnaireAnswers(
            main_concerns=[SkinConcern.ACNE],
            age_group=AgeGroup.AGE_18_25,
            skincare_goal=SkincareGoal.ACNE_FREE,
        )
        q = Questionnaire(answers)
        assert q.next() is None
        assert q.state == FlowState.ASKING

    def test_terminal_state_rejects_changes(self):
        q = Questionnaire()
        _answer_all(q)
        q.next()
        assert q.next() is None
        assert q.back() == FlowState.SUBMITTED
        with pytest.raises(RuntimeError):
            q.select("Hydration")
