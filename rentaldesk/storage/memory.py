# rentaldesk/storage/memory.py
"""Process-local store. Contents are lost on restart."""

from copy import deepcopy
from typing import Optional

from rentaldesk.records import Booking, Vehicle
from rentaldesk.storage.base import RentalStore


class MemoryStore(RentalStore):
    name = "memory"

    def __init__(self):
        self._vehicles: dict[str, Vehicle] = {}
        self._bookings: dict[str, Booking] = {}

    def list_vehicles(self) -> list[Vehicle]:
        return [deepcopy(v) for v in self._vehicles.values()]

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        vehicle = self._vehicles.get(vehicle_id)
        return deepcopy(vehicle) if vehicle else None

    def save_vehicle(self, vehicle: Vehicle) -> None:
        self._vehicles[vehicle.id] = deepcopy(vehicle)

    def delete_vehicle(self, vehicle_id: str) -> bool:
        return self._vehicles.pop(vehicle_id, None) is not None

    def list_bookings(self) -> list[Booking]:
        return [deepcopy(b) for b in self._bookings.values()]

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        booking = self._bookings.get(booking_id)
        return deepcopy(booking) if booking else None

    def save_booking(self, booking: Booking) -> None:
        self._bookings[booking.id] = deepcopy(booking)
