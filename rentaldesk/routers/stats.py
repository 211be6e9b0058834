# rentaldesk/routers/stats.py
from fastapi import APIRouter, Depends

from rentaldesk.dependencies import get_repository
from rentaldesk.repository import RentalRepository
from rentaldesk.schemas.stats import DashboardStatsOut

router = APIRouter()


@router.get("/stats", response_model=DashboardStatsOut, summary="Dashboard figures for today")
def get_stats(repo: RentalRepository = Depends(get_repository)):
    """Fleet size, rentals and revenue today, and revenue completed this month."""
    return repo.get_stats()
