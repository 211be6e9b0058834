# rentaldesk/models/booking.py
"""
Bookings table. vehicle_id is a plain string reference with no foreign key,
so removing a vehicle leaves its bookings in place.
"""

from sqlalchemy import Boolean, Column, Date, Integer, String, Text
from rentaldesk.database import Base


class BookingRow(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True)
    vehicle_id = Column(String(36), nullable=False, index=True)
    guest_name = Column(Text, nullable=False)
    guest_phone = Column(Text, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False, index=True)
    total_price = Column(Integer, nullable=False)
    status = Column(String(30), nullable=False, default="pending", index=True)
    id_verified = Column(Boolean, nullable=False, default=False)
    id_image_url = Column(Text)

    def __repr__(self):
        return f"<BookingRow {self.id} vehicle={self.vehicle_id} status={self.status}>"
