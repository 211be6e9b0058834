# rentaldesk/database.py
"""
Database connection, session management, and table creation for the SQL
storage backend. SQLite by default; any SQLAlchemy URL (e.g. PostgreSQL)
works. All models are imported in create_tables() so one call creates
every table.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from rentaldesk.config import settings

Base = declarative_base()


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool   # one shared in-memory DB
        return create_engine(url, echo=False, **kwargs)
    return create_engine(
        url,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        pool_size=10,
        max_overflow=20,
        echo=False,
    )


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = make_session_factory(engine)


def create_tables(bind: Engine = None):
    """Creates the vehicles and bookings tables. Safe to call multiple times."""
    from rentaldesk.models.vehicle import VehicleRow      # noqa
    from rentaldesk.models.booking import BookingRow      # noqa

    Base.metadata.create_all(bind=bind or engine)
