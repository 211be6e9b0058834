# rentaldesk/repository.py
"""
RentalRepository: the operations the API exposes, on top of any RentalStore.

Every read that returns bookings or derives figures from them first runs the
expiry sweep. Writes validate the whole resulting record before it reaches the
store, so a rejected write leaves the store unchanged. A single re-entrant lock
serialises operations; callers only ever receive copies.
"""

import threading
import uuid
from datetime import date
from typing import Callable, Optional

from rentaldesk.config import settings
from rentaldesk.errors import NotFoundError, ValidationError
from rentaldesk.records import (
    BOOKING_FIELDS,
    VEHICLE_FIELDS,
    Booking,
    Vehicle,
    apply_booking_changes,
    apply_vehicle_changes,
    validate_booking,
    validate_vehicle,
)
from rentaldesk.services.availability_service import resolve_vehicle_availability
from rentaldesk.services.customer_service import Customer, rename_customer, roll_up_customers
from rentaldesk.services.expiry_service import expired_bookings
from rentaldesk.services.pricing_service import quote_price
from rentaldesk.services.stats_service import DashboardStats, compute_dashboard_stats
from rentaldesk.storage.base import RentalStore
from rentaldesk.utils.dates import parse_date
from rentaldesk.utils.logger import get_logger

logger = get_logger(__name__)

VEHICLE_REQUIRED = ("model", "plate", "daily_rate", "transmission", "color_hex")
BOOKING_REQUIRED = ("vehicle_id", "guest_name", "guest_phone", "start_date", "end_date", "total_price")


def _new_id() -> str:
    return str(uuid.uuid4())


def _check_fields(fields: dict, allowed: frozenset, required: tuple):
    unknown = sorted(set(fields) - allowed)
    if unknown:
        raise ValidationError(f"Unknown or read-only fields: {', '.join(unknown)}", field=unknown[0])
    missing = [f for f in required if fields.get(f) is None]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", field=missing[0])


class RentalRepository:
    def __init__(self, store: RentalStore, today: Callable[[], date] = date.today):
        self.store = store
        self._today = today
        self._lock = threading.RLock()

    def today(self) -> date:
        return self._today()

    # ── Expiry sweep ─────────────────────────────────────────────────────
    def sweep_expired(self) -> int:
        """Marks confirmed bookings that ended before today as completed."""
        with self._lock:
            completed = expired_bookings(self.store.list_bookings(), self.today())
            if completed:
                self.store.save_bookings(completed)
                logger.info(f"[SWEEP] {len(completed)} booking(s) completed: "
                            f"{', '.join(b.id for b in completed)}")
            return len(completed)

    # ── Vehicles ─────────────────────────────────────────────────────────
    def list_vehicles(self, start=None, end=None) -> list[Vehicle]:
        """All vehicles with status computed for the optional [start, end] range."""
        with self._lock:
            self.sweep_expired()
            return resolve_vehicle_availability(
                self.store.list_vehicles(), self.store.list_bookings(), start, end
            )

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        with self._lock:
            vehicle = self.store.get_vehicle(vehicle_id)
            if vehicle is None:
                raise NotFoundError("Vehicle", vehicle_id)
            return vehicle

    def create_vehicle(self, fields: dict) -> Vehicle:
        fields = dict(fields)
        if fields.get("rate_type") is None:
            fields["rate_type"] = settings.DEFAULT_RATE_TYPE
        if fields.get("status") is None:
            fields["status"] = "available"
        if fields.get("image_url") is None:
            fields["image_url"] = ""
        _check_fields(fields, VEHICLE_FIELDS, VEHICLE_REQUIRED)
        with self._lock:
            vehicle = validate_vehicle(Vehicle(id=_new_id(), **fields))
            self._ensure_unique_plate(vehicle)
            self.store.save_vehicle(vehicle)
            logger.info(f"Vehicle created: {vehicle.id} ({vehicle.model}, {vehicle.plate})")
            return vehicle

    def update_vehicle(self, vehicle_id: str, changes: dict) -> Vehicle:
        with self._lock:
            current = self.get_vehicle(vehicle_id)
            try:
                updated = apply_vehicle_changes(current, changes)
                self._ensure_unique_plate(updated)
            except ValidationError as e:
                logger.warning(f"Rejected update for vehicle {vehicle_id}: {e.message}")
                raise
            self.store.save_vehicle(updated)
            logger.info(f"Vehicle updated: {vehicle_id} fields={sorted(changes)}")
            return updated

    def delete_vehicle(self, vehicle_id: str) -> bool:
        """Removes the vehicle only; its bookings stay as they are."""
        with self._lock:
            deleted = self.store.delete_vehicle(vehicle_id)
            if deleted:
                logger.info(f"Vehicle deleted: {vehicle_id}")
            return deleted

    def quote(self, vehicle_id: str, start, end) -> int:
        vehicle = self.get_vehicle(vehicle_id)
        return quote_price(vehicle.daily_rate, parse_date(start, "start"), parse_date(end, "end"))

    def _ensure_unique_plate(self, vehicle: Vehicle):
        for other in self.store.list_vehicles():
            if other.id != vehicle.id and other.plate == vehicle.plate:
                raise ValidationError(f"Plate {vehicle.plate} already registered", field="plate")

    # ── Bookings ─────────────────────────────────────────────────────────
    def list_bookings(self, include_archived: bool = True) -> list[Booking]:
        with self._lock:
            self.sweep_expired()
            bookings = self.store.list_bookings()
        if not include_archived:
            bookings = [b for b in bookings if b.status != "archived"]
        return bookings

    def get_booking(self, booking_id: str) -> Booking:
        with self._lock:
            self.sweep_expired()
            booking = self.store.get_booking(booking_id)
            if booking is None:
                raise NotFoundError("Booking", booking_id)
            return booking

    def get_bookings_for_vehicle(self, vehicle_id: str) -> list[Booking]:
        return [b for b in self.list_bookings() if b.vehicle_id == vehicle_id]

    def create_booking(self, fields: dict) -> Booking:
        fields = dict(fields)
        if fields.get("status") is None:
            fields["status"] = "pending"
        if fields.get("id_verified") is None:
            fields["id_verified"] = False
        _check_fields(fields, BOOKING_FIELDS, BOOKING_REQUIRED)
        with self._lock:
            booking = validate_booking(Booking(id=_new_id(), **fields))
            self.store.save_booking(booking)
            logger.info(f"Booking created: {booking.id} vehicle={booking.vehicle_id} "
                        f"{booking.start_date}..{booking.end_date} status={booking.status}")
            return booking

    def update_booking(self, booking_id: str, changes: dict) -> Booking:
        with self._lock:
            current = self.store.get_booking(booking_id)
            if current is None:
                raise NotFoundError("Booking", booking_id)
            try:
                updated = apply_booking_changes(current, changes)
            except ValidationError as e:
                logger.warning(f"Rejected update for booking {booking_id}: {e.message}")
                raise
            self.store.save_booking(updated)
            if updated.status != current.status:
                logger.info(f"Booking {booking_id}: {current.status} → {updated.status}")
            return updated

    # ── Roll-ups ─────────────────────────────────────────────────────────
    def get_stats(self) -> DashboardStats:
        with self._lock:
            self.sweep_expired()
            return compute_dashboard_stats(
                self.store.list_vehicles(), self.store.list_bookings(), self.today()
            )

    def list_customers(self, search: Optional[str] = None) -> list[Customer]:
        return roll_up_customers(self.list_bookings(), search)

    def update_customer(self, old_name: str, name: str, phone: str,
                        id_image_url: Optional[str] = None, replace_id_image: bool = False) -> int:
        """Rewrites guest details on every booking under `old_name`. Returns the count."""
        if not old_name or not old_name.strip():
            raise ValidationError("old_name must not be empty", field="old_name")
        with self._lock:
            rewritten = rename_customer(self.store.list_bookings(), old_name, name, phone,
                                        id_image_url, replace_id_image)
            for booking in rewritten:
                validate_booking(booking)
            self.store.save_bookings(rewritten)
            logger.info(f"Customer '{old_name}' → '{name}': {len(rewritten)} booking(s) rewritten")
        return len(rewritten)
