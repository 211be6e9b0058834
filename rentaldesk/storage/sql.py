# rentaldesk/storage/sql.py
"""
SQLAlchemy-backed store. One session per call, committed immediately.
Rows are converted to plain records on the way out, so callers never hold
live ORM objects.
"""

from typing import Iterable, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session, sessionmaker

from rentaldesk.models.booking import BookingRow
from rentaldesk.models.vehicle import VehicleRow
from rentaldesk.records import Booking, Vehicle
from rentaldesk.storage.base import RentalStore
from rentaldesk.utils.logger import get_logger

logger = get_logger(__name__)

VEHICLE_COLUMNS = ("model", "plate", "daily_rate", "transmission", "color_hex",
                   "status", "image_url", "rate_type")
BOOKING_COLUMNS = ("vehicle_id", "guest_name", "guest_phone", "start_date", "end_date",
                   "total_price", "status", "id_verified", "id_image_url")


def _vehicle_from_row(row: VehicleRow) -> Vehicle:
    return Vehicle(id=row.id, **{c: getattr(row, c) for c in VEHICLE_COLUMNS})


def _booking_from_row(row: BookingRow) -> Booking:
    return Booking(id=row.id, **{c: getattr(row, c) for c in BOOKING_COLUMNS})


def _copy_into(row, record, columns):
    for column in columns:
        setattr(row, column, getattr(record, column))


class SqlStore(RentalStore):
    name = "sql"

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    # ── Vehicles ─────────────────────────────────────────────────────────
    def list_vehicles(self) -> list[Vehicle]:
        with self._session_factory() as db:
            return [_vehicle_from_row(r) for r in db.query(VehicleRow).all()]

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        with self._session_factory() as db:
            row = db.get(VehicleRow, vehicle_id)
            return _vehicle_from_row(row) if row else None

    def save_vehicle(self, vehicle: Vehicle) -> None:
        with self._session_factory() as db:
            row = db.get(VehicleRow, vehicle.id)
            if row is None:
                row = VehicleRow(id=vehicle.id)
                db.add(row)
            _copy_into(row, vehicle, VEHICLE_COLUMNS)
            db.commit()

    def delete_vehicle(self, vehicle_id: str) -> bool:
        with self._session_factory() as db:
            row = db.get(VehicleRow, vehicle_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    # ── Bookings ─────────────────────────────────────────────────────────
    def list_bookings(self) -> list[Booking]:
        with self._session_factory() as db:
            return [_booking_from_row(r) for r in db.query(BookingRow).all()]

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        with self._session_factory() as db:
            row = db.get(BookingRow, booking_id)
            return _booking_from_row(row) if row else None

    def save_booking(self, booking: Booking) -> None:
        with self._session_factory() as db:
            self._upsert_booking(db, booking)
            db.commit()

    def save_bookings(self, bookings: Iterable[Booking]) -> None:
        """Batch write in a single transaction."""
        with self._session_factory() as db:
            for booking in bookings:
                self._upsert_booking(db, booking)
            db.commit()

    @staticmethod
    def _upsert_booking(db: Session, booking: Booking):
        row = db.get(BookingRow, booking.id)
        if row is None:
            row = BookingRow(id=booking.id)
            db.add(row)
        _copy_into(row, booking, BOOKING_COLUMNS)

    def is_empty(self) -> bool:
        with self._session_factory() as db:
            return db.query(VehicleRow).first() is None and db.query(BookingRow).first() is None

    def ping(self) -> bool:
        try:
            with self._session_factory() as db:
                db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False
