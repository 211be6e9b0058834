# rentaldesk/routers/customers.py
"""
Customer directory built from confirmed/completed bookings, and the bulk
rename that pushes corrected guest details onto every matching booking.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from rentaldesk.dependencies import get_repository
from rentaldesk.repository import RentalRepository
from rentaldesk.schemas.customer import CustomerOut, CustomerUpdate, CustomerUpdateResult

router = APIRouter()


@router.get("/customers", response_model=list[CustomerOut], summary="Customers, most recent first")
def list_customers(search: Optional[str] = None, repo: RentalRepository = Depends(get_repository)):
    return repo.list_customers(search)


@router.post("/customers/update", response_model=CustomerUpdateResult,
             summary="Rewrite guest details across a customer's bookings")
def update_customer(body: CustomerUpdate, repo: RentalRepository = Depends(get_repository)):
    details = body.new_details
    updated = repo.update_customer(
        body.old_name,
        name=details.name,
        phone=details.phone,
        id_image_url=details.id_image_url,
        replace_id_image="id_image_url" in details.model_fields_set,
    )
    return CustomerUpdateResult(success=True, updated=updated)
