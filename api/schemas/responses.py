"""Response envelopes shared by every endpoint."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from readiness import __version__

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Body of an error envelope."""

    code: str = Field(..., description="Machine-readable error code, e.g. malformed_report")
    message: str = Field(..., description="Human-readable error message")
    field: str | None = Field(None, description="Request field that failed validation")
    details: dict[str, Any] | None = Field(
        None, description="Offending report path, or field and value for range errors"
    )


class ErrorResponse(BaseModel):
    """Error envelope: ``{"error": {...}}``."""

    error: ErrorDetail


class ResponseMeta(BaseModel):
    """Tracing data attached to successful responses."""

    request_id: str | None = None
    engine_version: str = __version__


class SuccessResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"data": ..., "meta": {...}}``."""

    data: T
    meta: ResponseMeta | None = None


def error_body(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    field: str | None = None,
) -> dict[str, Any]:
    """Serialize an error envelope, leaving out empty fields."""
    error = ErrorDetail(code=code, message=message, field=field, details=details or None)
    return ErrorResponse(error=error).model_dump(exclude_none=True)
