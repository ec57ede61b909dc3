"""
Error taxonomy shared by the operation layer and the request router.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors surfaced to callers as structured failures."""
    kind = "internal_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "detail": self.message}


class ValidationError(AppError):
    """Input failed a shape or constraint check."""
    kind = "validation_error"
    status_code = 422

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        super().__init__(summary or "invalid input")

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}])

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        return cls(format_pydantic_errors(exc.errors()))

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "detail": self.errors}


class NotFoundError(AppError):
    """A referenced entity does not exist."""
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Optional[int]):
        self.entity = entity
        self.id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "detail": self.message, "id": self.id}


class StoreError(AppError):
    """The underlying storage failed."""
    kind = "store_error"


def format_pydantic_errors(errors) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``{field, message}`` entries."""
    formatted = []
    for err in errors:
        # Request errors carry the source ("body", "query") as the first element
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        formatted.append({
            "field": ".".join(loc) or "__root__",
            "message": err.get("msg", "invalid value"),
        })
    return formatted


def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, StoreError):
        logger.error(f"Store failure on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "error": ValidationError.kind,
            "detail": format_pydantic_errors(exc.errors()),
        },
    )


def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": NotFoundError.kind,
                "detail": f"No procedure for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
    )


def server_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
