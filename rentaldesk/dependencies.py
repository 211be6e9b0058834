# rentaldesk/dependencies.py
"""
Repository construction and the FastAPI dependency that hands it to routers.
The repository is built once per app (see main.create_app) and kept on
app.state; tests pass their own instance instead.
"""

from fastapi import Request

from rentaldesk.config import settings
from rentaldesk.repository import RentalRepository
from rentaldesk.storage.base import RentalStore
from rentaldesk.storage.memory import MemoryStore
from rentaldesk.utils.logger import get_logger

logger = get_logger(__name__)


def build_store() -> RentalStore:
    """Store selected by STORAGE_BACKEND."""
    if settings.uses_sql:
        from rentaldesk.database import SessionLocal, create_tables
        from rentaldesk.storage.sql import SqlStore

        create_tables()
        logger.info(f"Using SQL storage at {settings.DATABASE_URL}")
        return SqlStore(SessionLocal)

    logger.info("Using in-memory storage (data is lost on restart)")
    return MemoryStore()


def build_repository() -> RentalRepository:
    repository = RentalRepository(build_store())
    if settings.SEED_DEMO_DATA:
        from rentaldesk.seed import seed_demo_data
        seed_demo_data(repository)
    return repository


def get_repository(request: Request) -> RentalRepository:
    """FastAPI dependency: the app's repository."""
    return request.app.state.repository
