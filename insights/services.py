# src/insights/services.py
import logging
from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional
from insights.engine import aggregate_overview
from insights.schemas import OverviewResponse
from subscription.repository import SubscriptionRepository

logger = logging.getLogger(__name__)

class InsightsService:
    @staticmethod
    def get_overview(db: Session, as_of: Optional[datetime] = None) -> OverviewResponse:
        """Aggregate spending statistics over every stored subscription."""
        subs = SubscriptionRepository(db).list_all()
        stats = aggregate_overview(subs, as_of or datetime.utcnow())
        logger.info(f"Overview computed over {stats.total_subscriptions} subscriptions")
        return OverviewResponse(**stats.model_dump())
