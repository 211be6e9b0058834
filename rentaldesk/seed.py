# rentaldesk/seed.py
"""
Demo fleet loaded at startup when SEED_DEMO_DATA is on.
Booking dates are relative to the repository's "today".
"""

from datetime import timedelta

from rentaldesk.records import Booking, Vehicle, validate_booking, validate_vehicle
from rentaldesk.repository import RentalRepository
from rentaldesk.utils.logger import get_logger

logger = get_logger(__name__)

DEMO_VEHICLES = [
    Vehicle(id="v1", model="Toyota Vios", plate="ABC 1234", daily_rate=1500, transmission="auto",
            color_hex="#3B82F6", status="available",
            image_url="https://images.unsplash.com/photo-1621007947382-bb3c3994e3fb?w=800&q=80"),
    Vehicle(id="v2", model="Honda City", plate="XYZ 5678", daily_rate=1800, transmission="auto",
            color_hex="#10B981", status="available",
            image_url="https://images.unsplash.com/photo-1606611013016-969c19ba27bb?w=800&q=80"),
    Vehicle(id="v3", model="Mitsubishi Mirage", plate="DEF 9012", daily_rate=1200, transmission="manual",
            color_hex="#F59E0B", status="available",
            image_url="https://images.unsplash.com/photo-1494976388531-d1058494cdd8?w=800&q=80"),
    Vehicle(id="v4", model="Nissan Almera", plate="GHI 3456", daily_rate=1600, transmission="auto",
            color_hex="#8B5CF6", status="maintenance",
            image_url="https://images.unsplash.com/photo-1553440569-bcc63803a83d?w=800&q=80"),
    Vehicle(id="v5", model="Suzuki Ertiga", plate="JKL 7890", daily_rate=2200, transmission="auto",
            color_hex="#EF4444", status="available",
            image_url="https://images.unsplash.com/photo-1549317661-bd32c8ce0db2?w=800&q=80"),
]

# (id, vehicle, guest, phone, start offset, end offset, price, status, id verified)
DEMO_BOOKINGS = [
    ("b1", "v1", "Juan dela Cruz", "+63 912 345 6789", 0, 3, 4500, "confirmed", True),
    ("b2", "v2", "Maria Santos", "+63 923 456 7890", 2, 5, 5400, "pending", False),
    ("b3", "v5", "Pedro Reyes", "+63 934 567 8901", 1, 4, 6600, "confirmed", True),
]


def seed_demo_data(repository: RentalRepository) -> bool:
    """Loads the demo fleet into an empty store. Returns False if it had data."""
    store = repository.store
    if not store.is_empty():
        logger.info("Store already has data, demo seed skipped")
        return False

    today = repository.today()
    for vehicle in DEMO_VEHICLES:
        store.save_vehicle(validate_vehicle(vehicle))
    store.save_bookings(
        validate_booking(Booking(
            id=booking_id, vehicle_id=vehicle_id, guest_name=guest, guest_phone=phone,
            start_date=today + timedelta(days=start), end_date=today + timedelta(days=end),
            total_price=price, status=status, id_verified=verified,
        ))
        for booking_id, vehicle_id, guest, phone, start, end, price, status, verified in DEMO_BOOKINGS
    )
    logger.info(f"Demo data seeded: {len(DEMO_VEHICLES)} vehicles, {len(DEMO_BOOKINGS)} bookings")
    return True
