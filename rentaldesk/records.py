# rentaldesk/records.py
"""
Vehicle and Booking records as held by the stores.
The repository hands out copies of these, never the stored instances.
Partial updates go through apply_vehicle_changes() and
apply_booking_changes(), which only accept the recognised field names.
Booking status moves are checked against BOOKING_TRANSITIONS.
"""

import re
from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Optional

from rentaldesk.errors import ValidationError
from rentaldesk.utils.dates import parse_date

# ── Enumerations ─────────────────────────────────────────────────────────────
TRANSMISSIONS = ("auto", "manual")
PERSISTED_VEHICLE_STATUSES = ("available", "maintenance")   # "booked" is computed

BOOKING_STATUSES = (
    "pending",
    "pending_id_missing",
    "confirmed",
    "completed",
    "cancelled",
    "archived",
)
# Excluded from overlap checks and from every roll-up
INACTIVE_BOOKING_STATUSES = frozenset({"cancelled", "archived"})

# Status moves an update may make. "archived" is reachable from anywhere and
# staying on the same status is always allowed.
BOOKING_TRANSITIONS = {
    "pending": frozenset({"pending_id_missing", "confirmed", "cancelled"}),
    "pending_id_missing": frozenset({"pending", "confirmed", "cancelled"}),
    "confirmed": frozenset({"completed", "cancelled"}),
    "completed": frozenset(),
    "cancelled": frozenset(),
    "archived": frozenset(),
}

COLOR_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass
class Vehicle:
    id: str
    model: str
    plate: str
    daily_rate: int
    transmission: str
    color_hex: str
    image_url: str
    status: str = "available"
    rate_type: str = "24hr"
    # Only set on range-scoped listings
    next_available_date: Optional[date] = None


@dataclass
class Booking:
    id: str
    vehicle_id: str
    guest_name: str
    guest_phone: str
    start_date: date
    end_date: date
    total_price: int
    status: str = "pending"
    id_verified: bool = False
    id_image_url: Optional[str] = None


VEHICLE_FIELDS = frozenset(f.name for f in fields(Vehicle)) - {"id", "next_available_date"}
BOOKING_FIELDS = frozenset(f.name for f in fields(Booking)) - {"id"}


def _require_non_negative_int(value, field: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer", field=field)
    if value < 0:
        raise ValidationError(f"{field} must not be negative", field=field)


def _require_choice(value, choices, field: str):
    if value not in choices:
        raise ValidationError(
            f"{field} must be one of {', '.join(choices)}; got {value!r}", field=field
        )


def _require_text(value, field: str, allow_empty: bool = False):
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field=field)
    if not allow_empty and not value.strip():
        raise ValidationError(f"{field} must not be empty", field=field)


def validate_vehicle(vehicle: Vehicle) -> Vehicle:
    _require_text(vehicle.model, "model")
    _require_text(vehicle.plate, "plate")
    _require_non_negative_int(vehicle.daily_rate, "daily_rate")
    _require_choice(vehicle.transmission, TRANSMISSIONS, "transmission")
    if not isinstance(vehicle.color_hex, str) or not COLOR_HEX_RE.match(vehicle.color_hex):
        raise ValidationError("color_hex must look like #RRGGBB", field="color_hex")
    _require_text(vehicle.image_url, "image_url", allow_empty=True)
    _require_choice(vehicle.status, PERSISTED_VEHICLE_STATUSES, "status")
    _require_text(vehicle.rate_type, "rate_type")
    return vehicle


def validate_booking(booking: Booking) -> Booking:
    """Checks field values and coerces start_date/end_date to dates."""
    _require_text(booking.vehicle_id, "vehicle_id")
    _require_text(booking.guest_name, "guest_name")
    _require_text(booking.guest_phone, "guest_phone", allow_empty=True)
    booking.start_date = parse_date(booking.start_date, "start_date")
    booking.end_date = parse_date(booking.end_date, "end_date")
    _require_non_negative_int(booking.total_price, "total_price")
    _require_choice(booking.status, BOOKING_STATUSES, "status")
    if not isinstance(booking.id_verified, bool):
        raise ValidationError("id_verified must be a boolean", field="id_verified")
    if booking.id_image_url is not None:
        _require_text(booking.id_image_url, "id_image_url", allow_empty=True)
    return booking


def _check_mask(changes: dict, allowed: frozenset):
    unknown = sorted(set(changes) - allowed)
    if unknown:
        raise ValidationError(f"Unknown or read-only fields: {', '.join(unknown)}", field=unknown[0])


def apply_vehicle_changes(vehicle: Vehicle, changes: dict) -> Vehicle:
    """Returns a validated copy of `vehicle` with `changes` applied."""
    _check_mask(changes, VEHICLE_FIELDS)
    return validate_vehicle(replace(vehicle, **changes))


def apply_booking_changes(booking: Booking, changes: dict) -> Booking:
    """Returns a validated copy of `booking` with `changes` applied."""
    _check_mask(changes, BOOKING_FIELDS)
    updated = validate_booking(replace(booking, **changes))
    check_status_transition(booking.status, updated.status)
    return updated


def check_status_transition(current: str, new: str):
    if new == current or new == "archived":
        return
    if new not in BOOKING_TRANSITIONS.get(current, frozenset()):
        raise ValidationError(f"Cannot move booking from {current} to {new}", field="status")


def is_active(booking: Booking) -> bool:
    return booking.status not in INACTIVE_BOOKING_STATUSES
