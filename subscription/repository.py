# src/subscription/repository.py
"""
Data access layer for subscriptions.
All queries against the `subscriptions` table live here; every write commits
on its own, so atomicity is per record only.
"""
import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from subscription.models import Subscription

logger = logging.getLogger(__name__)

class SubscriptionRepository:
    """Record store for Subscription rows over a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Subscription]:
        """All subscriptions ordered by merchant name."""
        return self.db.query(Subscription).order_by(Subscription.merchant_name).all()

    def get(self, subscription_id: UUID) -> Optional[Subscription]:
        return self.db.get(Subscription, subscription_id)

    def count(self) -> int:
        return self.db.query(Subscription).count()

    def insert(self, subscription: Subscription) -> Subscription:
        self.db.add(subscription)
        self._commit(subscription)
        return subscription

    def update(self, subscription: Subscription) -> Subscription:
        self.db.add(subscription)
        self._commit(subscription)
        return subscription

    def _commit(self, subscription: Subscription) -> None:
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to save subscription {subscription.id}: {e}")
            raise
        self.db.refresh(subscription)
