"""
RecommendationService — fetches the catalog and the caller's tier from
storage, then hands both to the pure engine.

Tier is passed in explicitly, never read from ambient state, so the engine
call stays a pure function of its inputs.
"""

import logging
from typing import Optional, Union

from glowai.config import Settings, get_settings
from glowai.database import SessionLocal
from glowai.engine.catalog import filter_products
from glowai.engine.ranker import recommend
from glowai.engine.tiers import effective_plan
from glowai.repository import CatalogRepository, InMemoryCatalog
from glowai.schemas import (
    CurrentUser,
    FilterCriteria,
    ProductList,
    RecommendationResult,
    SkinProfile,
    SubscriptionTier,
)
from glowai.seed import sample_catalog

logger = logging.getLogger(__name__)

CatalogStore = Union[CatalogRepository, InMemoryCatalog]

_sample_store: Optional[InMemoryCatalog] = None


def _get_sample_store() -> InMemoryCatalog:
    global _sample_store
    if _sample_store is None:
        _sample_store = InMemoryCatalog(sample_catalog())
    return _sample_store


async def get_catalog_store():
    """FastAPI dependency yielding the configured catalog backend."""
    if get_settings().catalog_backend == "database":
        async with SessionLocal() as session:
            yield CatalogRepository(session)
    else:
        yield _get_sample_store()


class RecommendationService:
    def __init__(self, store: CatalogStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()

    async def recommend_for(
        self,
        profile: SkinProfile,
        user: Optional[CurrentUser] = None,
    ) -> RecommendationResult:
        """Build a fresh recommendation; anonymous callers get the free tier."""
        tier = user.tier if user else SubscriptionTier()
        catalog = await self.store.list_products()

        result = recommend(profile, tier, catalog, routine_size=self.settings.routine_size)

        logger.info(
            f"Recommendation | User: {user.id if user else 'anonymous'} | "
            f"Plan: {effective_plan(tier).value} | Source: {profile.source.value} | "
            f"Products: {len(result.products)} | Routine: {result.routine is not None}"
        )
        return result

    async def browse(self, criteria: Optional[FilterCriteria] = None) -> ProductList:
        catalog = await self.store.list_products()
        products = filter_products(catalog, criteria)
        return ProductList(products=products, count=len(products), total=len(catalog))
