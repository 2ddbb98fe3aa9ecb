# src/dev/services.py
import logging
from fastapi import HTTPException
from sqlalchemy.orm import Session
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List
from subscription.models import Subscription
from subscription.repository import SubscriptionRepository
from subscription.schemas import SubscriptionCreate, SubscriptionUpdate, SubscriptionResponse
from subscription.services import SubscriptionService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

class DevService:
    @staticmethod
    def fixtures(now: datetime) -> List[SubscriptionCreate]:
        """Sample subscriptions, with billing dates relative to ``now``."""
        return [
            SubscriptionCreate(
                merchant_name="Netflix",
                category="Entertainment",
                amount=Decimal("15.99"),
                billing_interval="Monthly",
                status="Active",
                next_billing_date=now + timedelta(days=5),
            ),
            SubscriptionCreate(
                merchant_name="Spotify",
                category="Music",
                amount=Decimal("9.99"),
                billing_interval="Monthly",
                status="Active",
                next_billing_date=now + timedelta(days=12),
            ),
            SubscriptionCreate(
                merchant_name="Amazon Prime",
                category="Shopping",
                amount=Decimal("139.00"),
                billing_interval="Yearly",
                status="Active",
                next_billing_date=now + timedelta(days=200),
            ),
            SubscriptionCreate(
                merchant_name="Hulu",
                category="Entertainment",
                amount=Decimal("7.99"),
                billing_interval="Monthly",
                status="Cancelled",
            ),
        ]

    @staticmethod
    def seed(db: Session) -> List[SubscriptionResponse]:
        """Load the sample subscriptions into an empty store."""
        repo = SubscriptionRepository(db)
        if repo.count() > 0:
            logger.warning("Seed rejected: subscriptions already present")
            raise HTTPException(status_code=400, detail="Database already contains subscriptions")

        now = datetime.utcnow()
        seeded: List[Subscription] = []
        for data in DevService.fixtures(now):
            seeded.append(repo.insert(SubscriptionService.build_subscription(data, created_at=now)))

        # Netflix went up from 15.99 to 17.99 so the overview has a price increase to show
        netflix = seeded[0]
        SubscriptionService.update_subscription(netflix.id, SubscriptionUpdate(
            amount=Decimal("17.99"),
            category=netflix.category,
            billing_interval=netflix.billing_interval,
            status=netflix.status,
            next_billing_date=netflix.next_billing_date,
        ), db)

        logger.info(f"Seeded {len(seeded)} subscriptions")
        return [SubscriptionResponse.from_orm(s) for s in repo.list_all()]
