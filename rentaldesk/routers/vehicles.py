# rentaldesk/routers/vehicles.py
"""Fleet CRUD, date-range availability search and price quotes."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from rentaldesk.dependencies import get_repository
from rentaldesk.errors import NotFoundError
from rentaldesk.repository import RentalRepository
from rentaldesk.schemas.vehicle import PriceQuoteOut, VehicleCreate, VehicleOut, VehicleUpdate
from rentaldesk.services.pricing_service import rental_days

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], response_model_exclude_none=True,
            summary="List vehicles, optionally checked against a date range")
def list_vehicles(start: Optional[str] = None, end: Optional[str] = None,
                  repo: RentalRepository = Depends(get_repository)):
    """
    Without start/end every vehicle is "available" or "maintenance".
    With both, vehicles with a clashing booking come back "booked" along with
    the first day they are free again (nextAvailableDate).
    """
    return repo.list_vehicles(start, end)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut, response_model_exclude_none=True)
def get_vehicle(vehicle_id: str, repo: RentalRepository = Depends(get_repository)):
    return repo.get_vehicle(vehicle_id)


@router.post("/vehicles", response_model=VehicleOut, response_model_exclude_none=True,
             summary="Add a vehicle to the fleet")
def create_vehicle(body: VehicleCreate, repo: RentalRepository = Depends(get_repository)):
    return repo.create_vehicle(body.model_dump(exclude_none=True))


@router.patch("/vehicles/{vehicle_id}", response_model=VehicleOut, response_model_exclude_none=True)
def update_vehicle(vehicle_id: str, body: VehicleUpdate,
                   repo: RentalRepository = Depends(get_repository)):
    return repo.update_vehicle(vehicle_id, body.model_dump(exclude_unset=True))


@router.delete("/vehicles/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Remove a vehicle (its bookings are kept)")
def delete_vehicle(vehicle_id: str, repo: RentalRepository = Depends(get_repository)):
    if not repo.delete_vehicle(vehicle_id):
        raise NotFoundError("Vehicle", vehicle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/vehicles/{vehicle_id}/quote", response_model=PriceQuoteOut,
            summary="Price for renting a vehicle over [start, end]")
def quote_vehicle(vehicle_id: str, start: date, end: date,
                  repo: RentalRepository = Depends(get_repository)):
    return PriceQuoteOut(
        vehicle_id=vehicle_id,
        start=start,
        end=end,
        days=rental_days(start, end),
        total_price=repo.quote(vehicle_id, start, end),
    )
