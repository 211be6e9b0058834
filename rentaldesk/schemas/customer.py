# rentaldesk/schemas/customer.py
from datetime import date
from typing import Optional

from pydantic import Field

from rentaldesk.schemas.common import CamelModel


class CustomerOut(CamelModel):
    name: str
    phone: str
    id_image_url: Optional[str] = None
    total_bookings: int
    last_booking: date


class CustomerDetails(CamelModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    id_image_url: Optional[str] = None     # omit to keep each booking's current image


class CustomerUpdate(CamelModel):
    old_name: str = Field(..., min_length=1)
    new_details: CustomerDetails


class CustomerUpdateResult(CamelModel):
    success: bool
    updated: int
