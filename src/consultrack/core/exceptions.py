"""Domain errors and the exception handlers that render them.

Every error response shares one envelope::

    {"kind": "...", "detail": "...", "request_id": "..."}

Validation failures add an ``errors`` list of ``{"field", "reason"}`` items.
"""

from dataclasses import dataclass
from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.consultrack.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldError:
    """A single failing field and why it failed."""

    field: str
    reason: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "reason": self.reason}


class RecordError(Exception):
    """Base class for errors surfaced to API callers."""

    kind: str = "error"
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_content(self) -> dict[str, Any]:
        return {"kind": self.kind, "detail": self.message}


class ValidationError(RecordError):
    """One or more fields failed normalization or validation."""

    kind = "validation_error"
    status_code = 422

    def __init__(self, errors: list[FieldError], message: str = "Invalid input"):
        super().__init__(message)
        self.errors = list(errors)

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        content["errors"] = [e.as_dict() for e in self.errors]
        return content


class NotFoundError(RecordError):
    """The requested identity does not exist."""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, record_id: Any):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class PreconditionError(RecordError):
    """A lifecycle transition was attempted from a state that does not allow it."""

    kind = "precondition_failed"
    status_code = status.HTTP_409_CONFLICT


class StorageError(RecordError):
    """The persistence round trip failed.

    The message is always opaque; the underlying cause is logged server-side.
    """

    kind = "storage_error"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, message: str = "The record store is unavailable, try again later"):
        super().__init__(message)


def _loc_to_field(loc: tuple[Any, ...]) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI adds
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts) or "body"


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(RecordError)
    async def record_error_handler(request: Request, exc: RecordError) -> JSONResponse:
        request_id = correlation_id.get()
        if isinstance(exc, StorageError):
            logger.error(
                "Storage failure",
                request_id=request_id,
                path=request.url.path,
            )
        content = exc.to_content()
        content["request_id"] = request_id
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            FieldError(_loc_to_field(tuple(err.get("loc", ()))), err.get("msg", "invalid"))
            for err in exc.errors()
        ]
        content = ValidationError(errors, message="Malformed request").to_content()
        content["request_id"] = correlation_id.get()
        return JSONResponse(status_code=422, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        kind = "not_found" if exc.status_code == status.HTTP_404_NOT_FOUND else "http_error"
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "kind": kind,
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "kind": "internal_error",
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
