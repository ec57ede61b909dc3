"""
Trip model for planned journeys.
"""
from sqlalchemy import Column, String, Date, Text
from sqlalchemy.orm import relationship
from trip_planner.db.base import BaseModel


class Trip(BaseModel):
    """Trip model representing a planned journey with a date range."""
    __tablename__ = "trips"

    name = Column(Text, nullable=False)
    destination = Column(Text, nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    description = Column(Text, nullable=True)
    participants = Column(Text, nullable=True)  # Free text, e.g. "Alice, Bob"

    # Relationships
    expenses = relationship(
        "Expense",
        back_populates="trip",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
