"""
Trip procedures.
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from trip_planner.api.dependencies import get_store
from trip_planner.db.session import Store
from trip_planner.schemas.common import DeleteResult, IdInput
from trip_planner.schemas.trip import TripCreate, TripResponse, TripUpdate
from trip_planner.services import trip_service

router = APIRouter(tags=["trips"])


@router.post("/createTrip", response_model=TripResponse)
def create_trip(
    trip_data: TripCreate,
    store: Store = Depends(get_store)
):
    """Create a new trip."""
    return trip_service.create_trip(store, trip_data)


@router.get("/getTrips", response_model=List[TripResponse])
def get_trips(store: Store = Depends(get_store)):
    """List all trips, newest first."""
    return trip_service.get_trips(store)


@router.get("/getTripById", response_model=Optional[TripResponse])
def get_trip_by_id(
    trip_id: int = Query(..., alias="id"),
    store: Store = Depends(get_store)
):
    """Get a trip, or null if it does not exist."""
    return trip_service.get_trip_by_id(store, trip_id)


@router.post("/updateTrip", response_model=TripResponse)
def update_trip(
    trip_data: TripUpdate,
    store: Store = Depends(get_store)
):
    """Update the supplied fields of a trip."""
    return trip_service.update_trip(store, trip_data)


@router.post("/deleteTrip", response_model=DeleteResult)
def delete_trip(
    target: IdInput,
    store: Store = Depends(get_store)
):
    """Delete a trip together with its expenses."""
    return trip_service.delete_trip(store, target)
