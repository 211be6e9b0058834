# rentaldesk/schemas/booking.py
from datetime import date
from typing import Literal, Optional

from pydantic import Field

from rentaldesk.schemas.common import CamelModel

BookingStatus = Literal["pending", "pending_id_missing", "confirmed", "completed", "cancelled", "archived"]


class BookingCreate(CamelModel):
    vehicle_id: str = Field(..., min_length=1)
    guest_name: str = Field(..., min_length=1)
    guest_phone: str
    start_date: date
    end_date: date
    total_price: int = Field(..., ge=0)
    status: Optional[BookingStatus] = None       # defaults to pending
    id_verified: Optional[bool] = None           # defaults to False
    id_image_url: Optional[str] = None


class BookingUpdate(CamelModel):
    """Partial update: only the fields present in the body are applied."""
    vehicle_id: Optional[str] = Field(None, min_length=1)
    guest_name: Optional[str] = Field(None, min_length=1)
    guest_phone: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_price: Optional[int] = Field(None, ge=0)
    status: Optional[BookingStatus] = None
    id_verified: Optional[bool] = None
    id_image_url: Optional[str] = None


class BookingOut(CamelModel):
    id: str
    vehicle_id: str
    guest_name: str
    guest_phone: str
    start_date: date
    end_date: date
    total_price: int
    status: str
    id_verified: bool
    id_image_url: Optional[str] = None
