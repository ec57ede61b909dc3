"""
Main API router exposing every operation as a named procedure.

Queries (no side effects) are GET procedures taking their input from the
query string; mutations are POST procedures taking a JSON body.
"""
from fastapi import APIRouter
from trip_planner.api.routes import trips, expenses
from trip_planner.core.utils import serialize_date, utcnow

api_router = APIRouter()


@api_router.get("/healthcheck", tags=["health"])
def healthcheck():
    """Health check procedure."""
    return {"status": "ok", "timestamp": serialize_date(utcnow())}


# Include all route modules
api_router.include_router(trips.router)
api_router.include_router(expenses.router)
