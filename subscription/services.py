# src/subscription/services.py
import logging
import uuid
from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional, List
from subscription.models import Subscription
from subscription.schemas import SubscriptionCreate, SubscriptionUpdate, SubscriptionResponse
from subscription.repository import SubscriptionRepository
from subscription.engine import SubscriptionRecord, derive

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = (
    "merchant_name", "category", "amount", "previous_amount", "billing_interval",
    "status", "next_billing_date", "has_price_increased", "monthly_equivalent",
)

def _apply(record: SubscriptionRecord, subscription: Subscription) -> Subscription:
    """Copy a derived record onto the ORM row."""
    for field in _WRITABLE_FIELDS:
        setattr(subscription, field, getattr(record, field))
    return subscription

class SubscriptionService:
    @staticmethod
    def list_subscriptions(db: Session) -> List[SubscriptionResponse]:
        subs = SubscriptionRepository(db).list_all()
        return [SubscriptionResponse.from_orm(s) for s in subs]

    @staticmethod
    def get_subscription(subscription_id: uuid.UUID, db: Session) -> Optional[SubscriptionResponse]:
        sub = SubscriptionRepository(db).get(subscription_id)
        if not sub:
            return None
        return SubscriptionResponse.from_orm(sub)

    @staticmethod
    def build_subscription(data: SubscriptionCreate, created_at: Optional[datetime] = None) -> Subscription:
        """Build a new, unsaved row from create input via the create derivation path."""
        record = derive(SubscriptionRecord(**data.model_dump()), is_update=False)
        sub = Subscription(id=uuid.uuid4(), created_at=created_at or datetime.utcnow())
        return _apply(record, sub)

    @staticmethod
    def create_subscription(data: SubscriptionCreate, db: Session) -> SubscriptionResponse:
        sub = SubscriptionRepository(db).insert(SubscriptionService.build_subscription(data))
        logger.info(f"Created subscription {sub.id} for '{sub.merchant_name}' ({sub.amount} {sub.billing_interval})")
        return SubscriptionResponse.from_orm(sub)

    @staticmethod
    def update_subscription(
            subscription_id: uuid.UUID,
            data: SubscriptionUpdate,
            db: Session
    ) -> Optional[SubscriptionResponse]:
        repo = SubscriptionRepository(db)
        existing = repo.get(subscription_id)
        if not existing:
            logger.warning(f"Update requested for unknown subscription {subscription_id}")
            return None

        current = SubscriptionRecord.from_orm(existing)
        shifted = current.model_copy(update={
            "previous_amount": current.amount,
            "amount": data.amount,
            "category": data.category,
            "billing_interval": data.billing_interval,
            "status": data.status,
            "next_billing_date": data.next_billing_date,
        })
        record = derive(shifted, is_update=True, fallback_category=existing.category)

        sub = repo.update(_apply(record, existing))
        if sub.has_price_increased:
            logger.info(f"Price increase on subscription {sub.id}: {sub.previous_amount} -> {sub.amount}")
        logger.info(f"Updated subscription {sub.id}")
        return SubscriptionResponse.from_orm(sub)
