# src/subscription/schemas.py
from pydantic import BaseModel
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

class SubscriptionCreate(BaseModel):
    """Schema for creating a subscription. Missing fields fall back to defaults."""
    merchant_name: str = ""
    category: Optional[str] = None  # blank -> General
    amount: Decimal = Decimal("0")
    previous_amount: Decimal = Decimal("0")
    billing_interval: str = "Monthly"  # Monthly, Yearly
    status: str = "Active"  # Active, Cancelled
    next_billing_date: Optional[datetime] = None

class SubscriptionUpdate(BaseModel):
    """Schema for updating a subscription."""
    amount: Decimal = Decimal("0")
    category: Optional[str] = None  # blank -> keep stored category
    billing_interval: str = "Monthly"
    status: str = "Active"
    next_billing_date: Optional[datetime] = None

class SubscriptionResponse(BaseModel):
    """Schema for subscription response."""
    id: UUID
    merchant_name: str
    category: str
    amount: float
    previous_amount: float
    billing_interval: str
    status: str
    created_at: datetime
    next_billing_date: Optional[datetime]
    has_price_increased: bool
    monthly_equivalent: float

    class Config:
        from_attributes = True
