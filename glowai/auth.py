"""
Session collaborator — resolves the caller from the X-User-Id header.

Sign-in itself happens elsewhere; by the time a request reaches us the
gateway has put the authenticated user id on the request.
"""

from typing import Optional

from fastapi import Depends, Header

from glowai.errors import Unauthenticated
from glowai.schemas import CurrentUser
from glowai.services.recommendation import CatalogStore, get_catalog_store


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    store: CatalogStore = Depends(get_catalog_store),
) -> Optional[CurrentUser]:
    user_id = (x_user_id or "").strip()
    if not user_id:
        return None
    tier = await store.get_subscription(user_id)
    return CurrentUser(id=user_id, tier=tier)


async def require_authenticated(
    user: Optional[CurrentUser] = Depends(get_current_user),
) -> CurrentUser:
    if user is None:
        raise Unauthenticated("Please sign in to continue.")
    return user
