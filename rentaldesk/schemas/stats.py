# rentaldesk/schemas/stats.py
from rentaldesk.schemas.common import CamelModel


class DashboardStatsOut(CamelModel):
    total_cars: int
    rented_today: int
    revenue_today: int
    monthly_revenue: int
