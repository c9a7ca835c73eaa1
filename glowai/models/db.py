"""
SQLAlchemy models — two tables only.

`products`      — the catalog; list-valued attributes stored as JSON
`subscriptions` — one row per purchase; the newest row per user is current
"""

from sqlalchemy import Column, DateTime, Float, Integer, JSON, String, Text
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.sql import func

from glowai.database import Base
from glowai.schemas import SubscriptionPlan, SubscriptionStatus


class ProductRecord(Base):
    __tablename__ = "products"

    id = Column(String(64), primary_key=True)
    position = Column(Integer, nullable=False, default=0, index=True)
    name = Column(String(200), nullable=False)
    brand = Column(String(100), nullable=False)
    rating = Column(Float, nullable=False, default=0.0)
    reviews_count = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
    skin_types = Column(JSON, default=list)
    goals = Column(JSON, default=list)
    links = Column(JSON, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<ProductRecord(id={self.id}, name={self.name})>"


class SubscriptionRecord(Base):
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    plan = Column(SQLEnum(SubscriptionPlan), nullable=False)
    status = Column(SQLEnum(SubscriptionStatus), nullable=False, default=SubscriptionStatus.ACTIVE)
    price = Column(Integer)
    period = Column(String(10))  # "daily" or "monthly"
    start_date = Column(DateTime(timezone=True))
    end_date = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<SubscriptionRecord(user={self.user_id}, plan={self.plan}, status={self.status})>"
