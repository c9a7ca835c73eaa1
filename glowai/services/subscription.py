"""
SubscriptionService — records a plan purchase for the signed-in user.

Payment is handled outside this service; by the time `subscribe` runs the
charge for one billing period is assumed settled.
"""

import logging
from datetime import datetime, timezone

from glowai.engine.tiers import BILLING_PERIODS, plan_details, plan_price, status_label
from glowai.schemas import (
    CurrentUser,
    SubscribeRequest,
    SubscriptionReceipt,
    SubscriptionStatus,
    SubscriptionTier,
)
from glowai.services.recommendation import CatalogStore

logger = logging.getLogger(__name__)


class SubscriptionService:
    def __init__(self, store: CatalogStore):
        self.store = store

    async def subscribe(self, user: CurrentUser, request: SubscribeRequest) -> SubscriptionReceipt:
        price = plan_price(request.plan, request.period)
        start = datetime.now(timezone.utc)
        end = start + BILLING_PERIODS[request.period]

        await self.store.add_subscription(
            user.id,
            request.plan,
            status=SubscriptionStatus.ACTIVE,
            price=price,
            period=request.period,
            start_date=start,
            end_date=end,
        )

        logger.info(
            f"Subscribed | User: {user.id} | Plan: {request.plan.value} | "
            f"Period: {request.period.value} | Price: {price}"
        )
        return SubscriptionReceipt(
            plan=request.plan,
            period=request.period,
            price=price,
            currency=plan_details(request.plan).currency,
            start_date=start,
            end_date=end,
            status_label=status_label(SubscriptionTier(plan=request.plan)),
        )
