# rentaldesk/routers/bookings.py
"""Booking endpoints. Status changes (approve, complete, cancel, archive) are PATCHes."""

from fastapi import APIRouter, Depends, Query

from rentaldesk.dependencies import get_repository
from rentaldesk.repository import RentalRepository
from rentaldesk.schemas.booking import BookingCreate, BookingOut, BookingUpdate

router = APIRouter()


@router.get("/bookings", response_model=list[BookingOut], summary="All bookings")
def list_bookings(include_archived: bool = Query(True, alias="includeArchived"),
                  repo: RentalRepository = Depends(get_repository)):
    """Pass includeArchived=false to hide soft-deleted bookings."""
    return repo.list_bookings(include_archived=include_archived)


@router.get("/bookings/vehicle/{vehicle_id}", response_model=list[BookingOut])
def list_bookings_for_vehicle(vehicle_id: str, repo: RentalRepository = Depends(get_repository)):
    return repo.get_bookings_for_vehicle(vehicle_id)


@router.get("/bookings/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: str, repo: RentalRepository = Depends(get_repository)):
    return repo.get_booking(booking_id)


@router.post("/bookings", response_model=BookingOut, summary="Create a booking request")
def create_booking(body: BookingCreate, repo: RentalRepository = Depends(get_repository)):
    return repo.create_booking(body.model_dump(exclude_none=True))


@router.patch("/bookings/{booking_id}", response_model=BookingOut)
def update_booking(booking_id: str, body: BookingUpdate,
                   repo: RentalRepository = Depends(get_repository)):
    return repo.update_booking(booking_id, body.model_dump(exclude_unset=True))
