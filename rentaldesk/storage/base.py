# rentaldesk/storage/base.py
"""
Storage interface shared by the in-memory and SQL backends.
Stores only persist whole records; every business rule lives in
rentaldesk.services and runs the same way on top of either backend.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from rentaldesk.records import Booking, Vehicle


class RentalStore(ABC):
    name = "abstract"

    # ── Vehicles ─────────────────────────────────────────────────────────
    @abstractmethod
    def list_vehicles(self) -> list[Vehicle]: ...

    @abstractmethod
    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]: ...

    @abstractmethod
    def save_vehicle(self, vehicle: Vehicle) -> None:
        """Insert or replace the whole record."""

    @abstractmethod
    def delete_vehicle(self, vehicle_id: str) -> bool: ...

    # ── Bookings ─────────────────────────────────────────────────────────
    @abstractmethod
    def list_bookings(self) -> list[Booking]: ...

    @abstractmethod
    def get_booking(self, booking_id: str) -> Optional[Booking]: ...

    @abstractmethod
    def save_booking(self, booking: Booking) -> None:
        """Insert or replace the whole record."""

    def save_bookings(self, bookings: Iterable[Booking]) -> None:
        for booking in bookings:
            self.save_booking(booking)

    def is_empty(self) -> bool:
        return not self.list_vehicles() and not self.list_bookings()

    def ping(self) -> bool:
        """Backend reachability for the health check."""
        return True
