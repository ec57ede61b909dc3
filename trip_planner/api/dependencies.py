"""
Shared FastAPI dependencies.
"""
from fastapi import Request
from trip_planner.db.session import Store


def get_store(request: Request) -> Store:
    """Dependency for getting the store opened by the application lifespan."""
    return request.app.state.store
