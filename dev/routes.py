# src/dev/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from dev.services import DevService
from subscription.schemas import SubscriptionResponse
from database import get_db

router = APIRouter(prefix="/api/dev", tags=["dev"])

@router.post("/seed", response_model=List[SubscriptionResponse])
def seed(db: Session = Depends(get_db)) -> List[SubscriptionResponse]:
    """Load sample subscriptions. Fails with 400 unless the store is empty."""
    return DevService.seed(db)
