# backend/app/routers/dashboard.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from backend.app.schemas.dashboard_schemas import DashboardSnapshot, LandingContent
from backend.app.services.dashboard_service import DashboardService
from backend.app.utils.content_utils import get_landing_content

logger = logging.getLogger(__name__)

router = APIRouter()

dashboard_service = DashboardService()


def get_dashboard_service() -> DashboardService:
    return dashboard_service


@router.get("/api/dashboard", response_model=DashboardSnapshot)
async def dashboard(
    timeframe: str = Query("week", description="week, month, quarter or year"),
    service: DashboardService = Depends(get_dashboard_service),
):
    try:
        return service.generate_snapshot(timeframe)
    except ValueError as e:
        logger.warning(f"Rejected dashboard request: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Dashboard generation failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate dashboard data")


@router.get("/api/landing", response_model=LandingContent)
async def landing():
    return get_landing_content()
