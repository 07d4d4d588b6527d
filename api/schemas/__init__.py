"""Pydantic schemas package."""

from api.schemas.responses import (
    ErrorDetail,
    ErrorResponse,
    ResponseMeta,
    SuccessResponse,
    error_body,
)

__all__ = ["ErrorDetail", "ErrorResponse", "ResponseMeta", "SuccessResponse", "error_body"]
