# RentalDesk: database models
# Import all models here for SQLAlchemy discovery

from rentaldesk.models.vehicle import VehicleRow       # noqa
from rentaldesk.models.booking import BookingRow       # noqa
