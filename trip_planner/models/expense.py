"""
Expense model for tracking spending on a trip.
"""
import enum
from sqlalchemy import Column, Numeric, Date, Enum as SQLEnum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from trip_planner.db.base import BaseModel


class ExpenseCategory(str, enum.Enum):
    """Expense category enumeration."""
    FOOD = "Food"
    ACCOMMODATION = "Accommodation"
    TRANSPORT = "Transport"
    ACTIVITIES = "Activities"
    OTHER = "Other"


class Expense(BaseModel):
    """Expense model representing a single spending event."""
    __tablename__ = "expenses"

    trip_id = Column(
        Integer,
        ForeignKey("trips.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    amount = Column(Numeric(10, 2, asdecimal=True), nullable=False)
    currency = Column(Text, nullable=False)
    expense_date = Column(Date, nullable=False, index=True)
    category = Column(
        SQLEnum(
            ExpenseCategory,
            name="expense_category",
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
    )

    # Relationships
    trip = relationship("Trip", back_populates="expenses")
