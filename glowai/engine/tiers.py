"""
Tier gate — maps a subscription to what one recommendation may contain.

The mapping is an explicit table keyed by plan so that every plan's
feature set is checkable in tests. Inactive subscriptions fall back to the
free row. Premium depth matches the default routine size, so the routine can
draw on every product a premium user is shown.
"""

from datetime import timedelta

from glowai.schemas import (
    BillingPeriod,
    GateDecision,
    PlanDetails,
    SubscriptionPlan,
    SubscriptionStatus,
    SubscriptionTier,
)

DECISION_TABLE: dict[SubscriptionPlan, GateDecision] = {
    SubscriptionPlan.NONE: GateDecision(
        personalized=False, include_routine=False, product_depth=1
    ),
    SubscriptionPlan.STANDARD: GateDecision(
        personalized=True, include_routine=False, product_depth=3
    ),
    SubscriptionPlan.PREMIUM: GateDecision(
        personalized=True, include_routine=True, product_depth=8
    ),
}

PLANS: tuple[PlanDetails, ...] = (
    PlanDetails(
        id=SubscriptionPlan.STANDARD,
        name="Standard",
        monthly_price=300,
        daily_price=35,
        features=[
            "Basic skin analysis",
            "General product recommendations",
            "Basic skincare tips",
            "Email support",
        ],
    ),
    PlanDetails(
        id=SubscriptionPlan.PREMIUM,
        name="Premium",
        monthly_price=500,
        daily_price=55,
        features=[
            "Advanced AI skin analysis",
            "Personalized skincare routines",
            "Custom product recommendations",
            "Daily routine tracking",
            "Priority support",
            "Exclusive product discounts",
            "Weekly skin progress reports",
        ],
        popular=True,
        trial_days=7,
    ),
)

BILLING_PERIODS: dict[BillingPeriod, timedelta] = {
    BillingPeriod.MONTHLY: timedelta(days=30),
    BillingPeriod.DAILY: timedelta(days=1),
}

_STATUS_LABELS = {
    SubscriptionStatus.ACTIVE: "Active",
    SubscriptionStatus.CANCELLED: "Cancelled",
    SubscriptionStatus.EXPIRED: "Expired",
}


def effective_plan(tier: SubscriptionTier) -> SubscriptionPlan:
    return tier.plan if tier.is_active else SubscriptionPlan.NONE


def decide(tier: SubscriptionTier) -> GateDecision:
    return DECISION_TABLE[effective_plan(tier)]


def status_label(tier: SubscriptionTier) -> str:
    if tier.plan == SubscriptionPlan.NONE:
        return "No Plan"
    return _STATUS_LABELS[tier.status]


def plan_details(plan: SubscriptionPlan) -> PlanDetails:
    for details in PLANS:
        if details.id == plan:
            return details
    raise KeyError(f"No paid plan named {plan.value!r}")


def plan_price(plan: SubscriptionPlan, period: BillingPeriod) -> int:
    """Price charged for one billing period of a paid plan."""
    details = plan_details(plan)
    if period == BillingPeriod.DAILY:
        return details.daily_price
    return details.monthly_price
