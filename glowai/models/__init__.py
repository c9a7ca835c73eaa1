from glowai.models.db import ProductRecord, SubscriptionRecord

__all__ = [
    "ProductRecord",
    "SubscriptionRecord",
]
