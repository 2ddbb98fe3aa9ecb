# src/subscription/engine.py
"""Per-record derivation rules for subscriptions.

Everything here is a pure function over plain values: nothing touches the
database, and ``derive`` returns a new record instead of mutating its input.
Inputs are accepted as-is. Negative amounts, unknown interval or status
strings and odd dates are not rejected; unknown values simply fall through
to the non-yearly / non-partitioned behaviour.
"""
from datetime import datetime
from decimal import Decimal, ROUND_HALF_EVEN
from enum import Enum
from typing import Optional
from uuid import UUID
from pydantic import BaseModel
from config import settings

CENTS = Decimal("0.01")
MONTHS_PER_YEAR = Decimal(12)


class BillingInterval(str, Enum):
    MONTHLY = "Monthly"
    YEARLY = "Yearly"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class SubscriptionStatus(str, Enum):
    ACTIVE = "Active"
    CANCELLED = "Cancelled"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class SubscriptionRecord(BaseModel):
    """Immutable snapshot of a subscription the derivation rules work on."""
    id: Optional[UUID] = None
    merchant_name: str = ""
    category: Optional[str] = None
    amount: Decimal = Decimal("0")
    previous_amount: Decimal = Decimal("0")
    billing_interval: str = BillingInterval.MONTHLY.value
    status: str = SubscriptionStatus.ACTIVE.value
    created_at: Optional[datetime] = None
    next_billing_date: Optional[datetime] = None
    has_price_increased: bool = False
    monthly_equivalent: Decimal = Decimal("0")

    class Config:
        from_attributes = True
        frozen = True


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half to even."""
    return value.quantize(CENTS, rounding=ROUND_HALF_EVEN)


def monthly_equivalent(amount: Decimal, billing_interval: Optional[str]) -> Decimal:
    """Normalize a charge to a per-month figure.

    Yearly charges are divided by twelve and rounded to cents; any other
    interval is already monthly and is returned unchanged.
    """
    if BillingInterval(billing_interval) is BillingInterval.YEARLY:
        return round_money(amount / MONTHS_PER_YEAR)
    return amount


def price_increased(previous_amount: Decimal, amount: Decimal) -> bool:
    return previous_amount > 0 and amount > previous_amount


def normalize_category(category: Optional[str], fallback: str = settings.DEFAULT_CATEGORY) -> str:
    """Return ``category`` unless it is missing or blank, else ``fallback``."""
    if category is None or not category.strip():
        return fallback
    return category


def derive(
        record: SubscriptionRecord,
        is_update: bool = False,
        fallback_category: str = settings.DEFAULT_CATEGORY,
) -> SubscriptionRecord:
    """Recompute the derived fields of ``record``.

    On create the price-increase flag is always false. On update the caller
    must already have shifted the old amount into ``previous_amount``, and
    passes the stored category as ``fallback_category`` so a blank input
    keeps it.
    """
    return record.model_copy(update={
        "category": normalize_category(record.category, fallback_category),
        "monthly_equivalent": monthly_equivalent(record.amount, record.billing_interval),
        "has_price_increased": price_increased(record.previous_amount, record.amount) if is_update else False,
    })
