"""
Catalog & subscription storage — all DB access in one place.

Two interchangeable stores expose the same async interface:
`CatalogRepository` (SQLAlchemy) and `InMemoryCatalog` (sample data).
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from glowai.models.db import ProductRecord, SubscriptionRecord
from glowai.schemas import (
    BillingPeriod,
    Product,
    SubscriptionPlan,
    SubscriptionStatus,
    SubscriptionTier,
)

logger = logging.getLogger(__name__)


def _current_tier(
    plan: SubscriptionPlan,
    status: SubscriptionStatus,
    end_date: Optional[datetime],
) -> SubscriptionTier:
    """An active subscription whose period has run out reads as expired."""
    if end_date is not None and status == SubscriptionStatus.ACTIVE:
        # SQLite hands back naive datetimes; they are stored in UTC
        if end_date.tzinfo is None:
            end_date = end_date.replace(tzinfo=timezone.utc)
        if end_date <= datetime.now(timezone.utc):
            status = SubscriptionStatus.EXPIRED
    return SubscriptionTier(plan=plan, status=status)


def _to_product(record: ProductRecord) -> Product:
    return Product(
        id=record.id,
        name=record.name,
        brand=record.brand,
        rating=record.rating,
        reviews_count=record.reviews_count,
        description=record.description or "",
        skin_types=record.skin_types or [],
        goals=record.goals or [],
        links=record.links or [],
    )


class CatalogRepository:
    """Catalog and subscriptions backed by the database."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_products(self) -> list[Product]:
        result = await self.db.execute(
            select(ProductRecord).order_by(ProductRecord.position, ProductRecord.id)
        )
        return [_to_product(r) for r in result.scalars().all()]

    async def get_subscription(self, user_id: str) -> SubscriptionTier:
        """The user's newest subscription, or the free tier if they have none."""
        result = await self.db.execute(
            select(SubscriptionRecord)
            .where(SubscriptionRecord.user_id == user_id)
            .order_by(SubscriptionRecord.created_at.desc(), SubscriptionRecord.id.desc())
            .limit(1)
        )
        record = result.scalar_one_or_none()
        if record is None:
            return SubscriptionTier()
        return _current_tier(record.plan, record.status, record.end_date)

    async def add_products(self, products: Iterable[Product]) -> int:
        count = 0
        for position, product in enumerate(products):
            data = product.model_dump(mode="json")
            self.db.add(ProductRecord(position=position, **data))
            count += 1
        await self.db.commit()
        logger.info(f"Stored {count} catalog products")
        return count

    async def add_subscription(
        self,
        user_id: str,
        plan: SubscriptionPlan,
        status: SubscriptionStatus = SubscriptionStatus.ACTIVE,
        price: Optional[int] = None,
        period: Optional[BillingPeriod] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
    ) -> None:
        record = SubscriptionRecord(
            user_id=user_id,
            plan=plan,
            status=status,
            price=price,
            period=period.value if period else None,
            start_date=start_date,
            end_date=end_date,
        )
        if created_at is not None:
            record.created_at = created_at
        self.db.add(record)
        await self.db.commit()
        logger.info(f"Stored subscription | User: {user_id} | Plan: {plan.value} | Status: {status.value}")


class InMemoryCatalog:
    """Same interface as CatalogRepository, held in process memory."""

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        subscriptions: Optional[dict[str, SubscriptionTier]] = None,
    ):
        self._products = list(products or [])
        self._subscriptions = dict(subscriptions or {})
        self._end_dates: dict[str, datetime] = {}

    async def list_products(self) -> list[Product]:
        return list(self._products)

    async def get_subscription(self, user_id: str) -> SubscriptionTier:
        tier = self._subscriptions.get(user_id)
        if tier is None:
            return SubscriptionTier()
        return _current_tier(tier.plan, tier.status, self._end_dates.get(user_id))

    async def add_subscription(
        self,
        user_id: str,
        plan: SubscriptionPlan,
        status: SubscriptionStatus = SubscriptionStatus.ACTIVE,
        price: Optional[int] = None,
        period: Optional[BillingPeriod] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> None:
        self.set_subscription(user_id, SubscriptionTier(plan=plan, status=status), end_date)

    def set_subscription(
        self,
        user_id: str,
        tier: SubscriptionTier,
        end_date: Optional[datetime] = None,
    ) -> None:
        self._subscriptions[user_id] = tier
        if end_date is None:
            self._end_dates.pop(user_id, None)
        else:
            self._end_dates[user_id] = end_date
