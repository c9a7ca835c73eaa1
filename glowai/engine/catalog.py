"""
Catalog filter — narrows a product list by search text, skin type, goal and
minimum rating. All criteria are optional and combine with AND; catalog
order is preserved.
"""

from typing import Iterable, Optional

from glowai.schemas import FilterCriteria, Product, StoreLink


def _matches_search(product: Product, term: str) -> bool:
    term = term.strip().lower()
    return (
        term in product.name.lower()
        or term in product.brand.lower()
        or term in product.description.lower()
    )


def matches(product: Product, criteria: FilterCriteria) -> bool:
    if criteria.search_text and not _matches_search(product, criteria.search_text):
        return False
    if criteria.skin_type is not None and not product.suits(criteria.skin_type):
        return False
    if criteria.goal is not None and criteria.goal not in product.goals:
        return False
    if criteria.min_rating is not None and product.rating < criteria.min_rating:
        return False
    return True


def filter_products(
    catalog: Iterable[Product],
    criteria: Optional[FilterCriteria] = None,
) -> list[Product]:
    """Return the products passing every set criterion, in catalog order.

    An empty result is a valid outcome; callers reset with
    `FilterCriteria.cleared()`.
    """
    products = list(catalog)
    if criteria is None or criteria.is_empty:
        return products
    return [p for p in products if matches(p, criteria)]


def primary_link(product: Product) -> Optional[StoreLink]:
    """The "Buy Now" target — the first link in priority order."""
    return product.links[0] if product.links else None
