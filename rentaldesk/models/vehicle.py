# rentaldesk/models/vehicle.py
"""
Fleet table. One row per vehicle; status only ever stores
"available" or "maintenance".
"""

from sqlalchemy import Column, Integer, String, Text
from rentaldesk.database import Base


class VehicleRow(Base):
    __tablename__ = "vehicles"

    id = Column(String(36), primary_key=True)
    model = Column(Text, nullable=False)
    plate = Column(String(32), unique=True, nullable=False, index=True)
    daily_rate = Column(Integer, nullable=False)
    transmission = Column(String(10), nullable=False)       # auto | manual
    color_hex = Column(String(7), nullable=False)
    status = Column(String(20), nullable=False, default="available")
    image_url = Column(Text, nullable=False, default="")
    rate_type = Column(String(20), nullable=False, default="24hr")

    def __repr__(self):
        return f"<VehicleRow {self.plate} model={self.model} status={self.status}>"
