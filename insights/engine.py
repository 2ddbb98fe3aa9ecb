# src/insights/engine.py
"""Portfolio aggregation over a full snapshot of subscriptions.

Works on anything exposing ``status``, ``monthly_equivalent``,
``has_price_increased`` and ``next_billing_date``: ORM rows and
``SubscriptionRecord`` values alike.
"""
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional
from config import settings
from insights.schemas import OverviewStats
from subscription.engine import SubscriptionStatus, round_money


def is_upcoming(next_billing_date: Optional[datetime], cutoff: date) -> bool:
    """True when a billing date is set and falls on or before ``cutoff`` (dates only)."""
    if next_billing_date is None:
        return False
    return next_billing_date.date() <= cutoff


def aggregate_overview(
        records: Iterable,
        as_of: datetime,
        window_days: int = settings.UPCOMING_RENEWAL_WINDOW_DAYS,
) -> OverviewStats:
    records = list(records)
    if not records:
        return OverviewStats()

    active = [r for r in records if SubscriptionStatus(r.status) is SubscriptionStatus.ACTIVE]
    cancelled = [r for r in records if SubscriptionStatus(r.status) is SubscriptionStatus.CANCELLED]

    # keep the running sum unrounded; annualized is rounded once from it
    monthly_spend = sum((Decimal(r.monthly_equivalent) for r in active), Decimal("0"))
    cutoff = as_of.date() + timedelta(days=window_days)

    return OverviewStats(
        total_subscriptions=len(records),
        active_subscriptions=len(active),
        cancelled_subscriptions=len(cancelled),
        monthly_spend=round_money(monthly_spend),
        annualized_spend=round_money(monthly_spend * 12),
        price_increases_detected=sum(1 for r in active if r.has_price_increased),
        upcoming_renewals=sum(1 for r in active if is_upcoming(r.next_billing_date, cutoff)),
    )
