# rentaldesk/schemas/vehicle.py
from datetime import date
from typing import Literal, Optional

from pydantic import Field

from rentaldesk.schemas.common import CamelModel

COLOR_HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class VehicleCreate(CamelModel):
    model: str = Field(..., min_length=1)
    plate: str = Field(..., min_length=1)
    daily_rate: int = Field(..., ge=0)
    transmission: Literal["auto", "manual"]
    color_hex: str = Field(..., pattern=COLOR_HEX_PATTERN)
    status: Optional[Literal["available", "maintenance"]] = None   # defaults to available
    image_url: Optional[str] = None
    rate_type: Optional[str] = None                                # defaults to 24hr


class VehicleUpdate(CamelModel):
    """Partial update: only the fields present in the body are applied."""
    model: Optional[str] = Field(None, min_length=1)
    plate: Optional[str] = Field(None, min_length=1)
    daily_rate: Optional[int] = Field(None, ge=0)
    transmission: Optional[Literal["auto", "manual"]] = None
    color_hex: Optional[str] = Field(None, pattern=COLOR_HEX_PATTERN)
    status: Optional[Literal["available", "maintenance"]] = None
    image_url: Optional[str] = None
    rate_type: Optional[str] = None


class VehicleOut(CamelModel):
    id: str
    model: str
    plate: str
    daily_rate: int
    transmission: str
    color_hex: str
    status: str                  # available | maintenance | booked
    image_url: str
    rate_type: str
    next_available_date: Optional[date] = None


class PriceQuoteOut(CamelModel):
    vehicle_id: str
    start: date
    end: date
    days: int
    total_price: int
