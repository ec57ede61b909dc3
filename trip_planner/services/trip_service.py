"""
Trip service: create, read, update and delete trips.
"""
import logging
from typing import List, Mapping, Optional, Union

from trip_planner.core.errors import NotFoundError, ValidationError
from trip_planner.core.logging import log_failures
from trip_planner.core.utils import next_timestamp, utcnow
from trip_planner.db.session import Store
from trip_planner.models.trip import Trip
from trip_planner.schemas.common import DeleteResult, IdInput, parse_input
from trip_planner.schemas.trip import TripCreate, TripResponse, TripUpdate, check_date_order

logger = logging.getLogger(__name__)


@log_failures("create_trip")
def create_trip(store: Store, data: Union[TripCreate, Mapping]) -> TripResponse:
    """Validate and insert a trip."""
    trip_data = parse_input(TripCreate, data)
    now = utcnow()

    with store.transaction() as db:
        trip = Trip(**trip_data.model_dump(), created_at=now, updated_at=now)
        db.add(trip)
        db.flush()
        result = TripResponse.model_validate(trip)

    logger.info(f"Created trip {result.id}")
    return result


@log_failures("get_trips")
def get_trips(store: Store) -> List[TripResponse]:
    """All trips, newest first."""
    with store.transaction() as db:
        trips = db.query(Trip).order_by(Trip.created_at.desc(), Trip.id.desc()).all()
        return [TripResponse.model_validate(t) for t in trips]


@log_failures("get_trip_by_id")
def get_trip_by_id(store: Store, trip_id: int) -> Optional[TripResponse]:
    """The trip with ``trip_id``, or None when there is none."""
    with store.transaction() as db:
        trip = db.query(Trip).filter(Trip.id == trip_id).first()
        return TripResponse.model_validate(trip) if trip else None


@log_failures("update_trip")
def update_trip(store: Store, data: Union[TripUpdate, Mapping]) -> TripResponse:
    """Apply the supplied fields to an existing trip."""
    trip_data = parse_input(TripUpdate, data)
    changes = trip_data.changes()

    with store.transaction() as db:
        trip = db.query(Trip).filter(Trip.id == trip_data.id).first()
        if not trip:
            raise NotFoundError("Trip", trip_data.id)

        # Stored values stand in for whichever side of the range is omitted
        try:
            check_date_order(
                changes.get("start_date", trip.start_date),
                changes.get("end_date", trip.end_date),
            )
        except ValueError as e:
            raise ValidationError.single("end_date", str(e)) from e

        for field, value in changes.items():
            setattr(trip, field, value)
        trip.updated_at = next_timestamp(trip.updated_at)
        db.flush()
        result = TripResponse.model_validate(trip)

    logger.info(f"Updated trip {result.id} ({', '.join(changes) or 'no fields'})")
    return result


@log_failures("delete_trip")
def delete_trip(store: Store, data: Union[IdInput, Mapping]) -> DeleteResult:
    """Delete a trip and, through the FK cascade, its expenses."""
    target = parse_input(IdInput, data)

    with store.transaction() as db:
        deleted = db.query(Trip).filter(Trip.id == target.id).delete(synchronize_session=False)

    if deleted:
        logger.info(f"Deleted trip {target.id}")
    return DeleteResult(success=deleted > 0)
