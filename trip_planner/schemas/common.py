"""
Shared input/output schemas and validation helpers.
"""
from typing import Any, Mapping, Type, TypeVar, Union
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
from trip_planner.core.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class IdInput(BaseModel):
    """Schema for operations addressing a single record (delete)."""
    id: int = Field(..., gt=0)


class TripIdInput(BaseModel):
    """Schema for listing the expenses of one trip."""
    trip_id: int = Field(..., gt=0)


class DeleteResult(BaseModel):
    """Schema for delete response."""
    success: bool


def parse_input(schema: Type[SchemaT], data: Union[SchemaT, Mapping[str, Any]]) -> SchemaT:
    """Validate ``data`` against ``schema``, raising our ValidationError on failure."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


def reject_null(value: Any) -> Any:
    """Supplied-but-null is not allowed for non-nullable columns."""
    if value is None:
        raise ValueError("Field may not be null")
    return value
