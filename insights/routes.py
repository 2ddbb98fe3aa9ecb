# src/insights/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from insights.services import InsightsService
from insights.schemas import OverviewResponse
from database import get_db

router = APIRouter(prefix="/api/insights", tags=["insights"])

@router.get("/overview", response_model=OverviewResponse)
def get_overview(db: Session = Depends(get_db)) -> OverviewResponse:
    """Spending overview as of now."""
    return InsightsService.get_overview(db)
