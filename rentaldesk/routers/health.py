# rentaldesk/routers/health.py
"""
System health check endpoint.
Returns status of the backend and the configured storage.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from rentaldesk.dependencies import get_repository
from rentaldesk.repository import RentalRepository

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(repo: RentalRepository = Depends(get_repository)):
    result = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "backend": "ok",
        "storage": repo.store.name,
        "database": "ok",
        "today": repo.today().isoformat(),
    }
    if not repo.store.ping():
        result["database"] = "error"
        result["status"] = "degraded"
    return result
