# src/subscription/routes.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
from subscription.services import SubscriptionService
from subscription.schemas import SubscriptionCreate, SubscriptionUpdate, SubscriptionResponse
from database import get_db

router = APIRouter(prefix="/api/subscriptions", tags=["subscriptions"])

@router.get("", response_model=List[SubscriptionResponse])
def get_subscriptions(db: Session = Depends(get_db)) -> List[SubscriptionResponse]:
    """Retrieve all subscriptions ordered by merchant name."""
    return SubscriptionService.list_subscriptions(db)

@router.get("/{subscription_id}", response_model=SubscriptionResponse)
def get_subscription(subscription_id: UUID, db: Session = Depends(get_db)) -> SubscriptionResponse:
    """Retrieve a subscription by ID."""
    sub = SubscriptionService.get_subscription(subscription_id, db)
    if not sub:
        raise HTTPException(status_code=404, detail="Subscription not found")
    return sub

@router.post("", response_model=SubscriptionResponse, status_code=status.HTTP_201_CREATED)
def create_subscription(
    subscription_data: SubscriptionCreate,
    response: Response,
    db: Session = Depends(get_db)
) -> SubscriptionResponse:
    """Create a subscription."""
    sub = SubscriptionService.create_subscription(subscription_data, db)
    response.headers["Location"] = f"{router.prefix}/{sub.id}"
    return sub

@router.put("/{subscription_id}", response_model=SubscriptionResponse)
def update_subscription(
    subscription_id: UUID,
    subscription_data: SubscriptionUpdate,
    db: Session = Depends(get_db)
) -> SubscriptionResponse:
    """Update amount, category, interval, status and next billing date."""
    sub = SubscriptionService.update_subscription(subscription_id, subscription_data, db)
    if not sub:
        raise HTTPException(status_code=404, detail="Subscription not found")
    return sub
