"""
Shared fixtures: an in-memory store per test and an app wired to it.
"""
import pytest
from fastapi.testclient import TestClient

from trip_planner.core.config import Settings
from trip_planner.db.session import Store
from trip_planner.main import create_app
from trip_planner.services import trip_service


@pytest.fixture
def store():
    with Store("sqlite://") as store:
        yield store


@pytest.fixture
def client(store):
    settings = Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")
    app = create_app(settings, store=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def trip_input():
    return {
        "name": "Test Trip",
        "destination": "Tokyo, Japan",
        "start_date": "2024-06-01",
        "end_date": "2024-06-10",
        "description": "A wonderful trip to Tokyo",
        "participants": "John, Jane, Bob",
    }


@pytest.fixture
def trip(store, trip_input):
    return trip_service.create_trip(store, trip_input)


@pytest.fixture
def expense_input(trip):
    return {
        "name": "Hotel",
        "amount": 150.00,
        "currency": "USD",
        "expense_date": "2024-06-01",
        "category": "Accommodation",
        "trip_id": trip.id,
    }
