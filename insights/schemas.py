# src/insights/schemas.py
from pydantic import BaseModel
from decimal import Decimal

class OverviewStats(BaseModel):
    """Portfolio-level spending statistics."""
    total_subscriptions: int = 0
    active_subscriptions: int = 0
    cancelled_subscriptions: int = 0
    monthly_spend: Decimal = Decimal("0")
    annualized_spend: Decimal = Decimal("0")
    price_increases_detected: int = 0
    upcoming_renewals: int = 0

class OverviewResponse(BaseModel):
    """Schema for the overview response."""
    total_subscriptions: int
    active_subscriptions: int
    cancelled_subscriptions: int
    monthly_spend: float
    annualized_spend: float
    price_increases_detected: int
    upcoming_renewals: int

