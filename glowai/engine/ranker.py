"""
Recommendation ranker — filters the catalog against a profile, ranks it,
cuts it to the tier's depth and, for routine tiers, lays the top products
out across the day.

Everything here is a pure function of (profile, decision, catalog).
"""

import logging
import re
from typing import Iterable, Optional, Sequence

from glowai.engine.catalog import filter_products
from glowai.engine.tiers import decide
from glowai.errors import ValidationError
from glowai.schemas import (
    FilterCriteria,
    GateDecision,
    Product,
    RecommendationResult,
    Routine,
    RoutineSlot,
    SkinProfile,
    SubscriptionTier,
)

logger = logging.getLogger(__name__)

DEFAULT_ROUTINE_SIZE = 8

# First matching keyword wins, so the more specific phrases come first
DEFAULT_ROUTINE_RULES: tuple[tuple[str, RoutineSlot], ...] = (
    ("deep cleanser", RoutineSlot.EVENING),
    ("night", RoutineSlot.EVENING),
    ("treatment", RoutineSlot.EVENING),
    ("retinol", RoutineSlot.EVENING),
    ("mist", RoutineSlot.AFTERNOON),
    ("cleanser", RoutineSlot.MORNING),
    ("serum", RoutineSlot.MORNING),
    ("moisturizer", RoutineSlot.MORNING),
    ("moisturiser", RoutineSlot.MORNING),
    ("spf", RoutineSlot.MORNING),
    ("sunscreen", RoutineSlot.MORNING),
)

GENERAL_SUMMARY = (
    "Here are some general skincare recommendations. "
    "Upgrade to Premium for personalized analysis!"
)
NO_MATCH_SUMMARY = (
    "We couldn't find products matching your skin profile yet. "
    "Try browsing the full catalog or clearing your filters."
)


# ── Ranking ─────────────────────────────────────────────────────────────────


def rank_products(products: Iterable[Product]) -> list[Product]:
    """Rating first, then review count, both descending.

    `sorted` is stable, so full ties keep their catalog order.
    """
    return sorted(products, key=lambda p: (-p.rating, -p.reviews_count))


def profile_criteria(profile: SkinProfile) -> FilterCriteria:
    """Catalog criteria implied by a profile.

    Face-scan profiles never carry a goal, so the goal axis is simply left
    open for them.
    """
    return FilterCriteria(skin_type=profile.skin_type, goal=profile.skincare_goal)


# ── Routine synthesis ───────────────────────────────────────────────────────


def assign_slot(
    product_name: str,
    rules: Sequence[tuple[str, RoutineSlot]] = DEFAULT_ROUTINE_RULES,
) -> Optional[RoutineSlot]:
    name = product_name.lower()
    for keyword, slot in rules:
        if re.search(rf"\b{re.escape(keyword.lower())}\b", name):
            return slot
    return None


def build_routine(
    products: Sequence[Product],
    rules: Sequence[tuple[str, RoutineSlot]] = DEFAULT_ROUTINE_RULES,
    size: int = DEFAULT_ROUTINE_SIZE,
) -> Routine:
    """Spread the top `size` products over morning, afternoon and evening.

    Products no rule recognises are left out of the routine. The routine
    only ever draws on `products`, so a `size` above their count changes
    nothing.
    """
    slots: dict[RoutineSlot, list[str]] = {slot: [] for slot in RoutineSlot}
    for product in products[:size]:
        slot = assign_slot(product.name, rules)
        if slot is None:
            logger.debug(f"No routine slot for {product.name!r}")
            continue
        slots[slot].append(product.name)
    return Routine(
        morning=slots[RoutineSlot.MORNING],
        afternoon=slots[RoutineSlot.AFTERNOON],
        evening=slots[RoutineSlot.EVENING],
    )


# ── Summary ─────────────────────────────────────────────────────────────────


def _summary(profile: SkinProfile, decision: GateDecision, has_products: bool) -> str:
    if not has_products:
        return NO_MATCH_SUMMARY
    if not decision.personalized:
        return GENERAL_SUMMARY

    skin = profile.skin_type.value.lower()
    if profile.skincare_goal:
        text = (
            f"Based on your personalized analysis, we recommend products for "
            f"{skin} skin focused on {profile.skincare_goal.value.lower()}."
        )
    else:
        text = f"Based on your personalized analysis, we recommend products suited to {skin} skin."
    if decision.include_routine:
        text += " Your daily routine is laid out below."
    return text


# ── Entry points ────────────────────────────────────────────────────────────


def build_recommendation(
    profile: SkinProfile,
    decision: GateDecision,
    catalog: Iterable[Product],
    routine_rules: Sequence[tuple[str, RoutineSlot]] = DEFAULT_ROUTINE_RULES,
    routine_size: int = DEFAULT_ROUTINE_SIZE,
) -> RecommendationResult:
    missing = profile.missing_fields()
    if missing:
        logger.error(
            f"Incomplete {profile.source.value} profile reached the ranker | "
            f"Missing: {', '.join(missing)}"
        )
        raise ValidationError(
            f"Profile is incomplete: {', '.join(missing)}", missing=missing
        )

    matched = filter_products(catalog, profile_criteria(profile))
    products = rank_products(matched)[: decision.product_depth]

    routine = None
    if decision.include_routine and products:
        routine = build_routine(products, routine_rules, routine_size)

    return RecommendationResult(
        personalized=decision.personalized,
        routine=routine,
        products=products,
        summary=_summary(profile, decision, bool(products)),
    )


def recommend(
    profile: SkinProfile,
    tier: SubscriptionTier,
    catalog: Iterable[Product],
    routine_rules: Sequence[tuple[str, RoutineSlot]] = DEFAULT_ROUTINE_RULES,
    routine_size: int = DEFAULT_ROUTINE_SIZE,
) -> RecommendationResult:
    """Gate once by tier, then rank. The decision is fixed for the whole call."""
    decision = decide(tier)
    return build_recommendation(profile, decision, catalog, routine_rules, routine_size)
