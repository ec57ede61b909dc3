"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import Optional
from datetime import date, datetime
from trip_planner.core.utils import coerce_date
from trip_planner.schemas.common import reject_null

DATE_ORDER_MESSAGE = "End date must be after or equal to start date"


def check_date_order(start: Optional[date], end: Optional[date]) -> None:
    """Raise ValueError if both dates are known and the range is inverted."""
    if start is not None and end is not None and end < start:
        raise ValueError(DATE_ORDER_MESSAGE)


class TripBase(BaseModel):
    """Base trip schema."""
    name: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    description: Optional[str] = None
    participants: Optional[str] = None


class TripCreate(TripBase):
    """Schema for trip creation."""

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def drop_time(cls, v):
        return coerce_date(v)

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, v: date, info: ValidationInfo) -> date:
        check_date_order(info.data.get("start_date"), v)
        return v


class TripUpdate(BaseModel):
    """Schema for trip update. Only the fields that are set get applied."""
    id: int
    name: Optional[str] = Field(None, min_length=1)
    destination: Optional[str] = Field(None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    participants: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def drop_time(cls, v):
        return coerce_date(v)

    @field_validator("name", "destination", "start_date", "end_date")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, v: date, info: ValidationInfo) -> date:
        # Compared against a start_date in the same input only
        check_date_order(info.data.get("start_date"), v)
        return v

    def changes(self) -> dict:
        """Sparse map of the supplied fields, without the id."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class TripResponse(TripBase):
    """Schema for trip response."""
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
