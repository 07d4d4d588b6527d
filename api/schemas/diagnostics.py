"""Diagnostics request and response schemas."""

from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


def _validate_origin(value: str | None) -> str | None:
    """Accept only absolute http(s) origins; strip trailing slashes."""
    if value is None:
        return None
    value = value.strip()
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("origin must be an absolute http(s) URL")
    return f"{parsed.scheme}://{parsed.netloc}"


class EvaluateRequest(BaseModel):
    """Schema for evaluating an assembled report."""

    report: dict[str, Any] = Field(..., description="Report as produced by the assembler")
    origin: str | None = Field(
        None,
        description="Site origin used in example payloads; defaults to the report's site URL",
    )

    @field_validator("origin")
    @classmethod
    def check_origin(cls, v: str | None) -> str | None:
        return _validate_origin(v)


class RecommendationRequest(BaseModel):
    """Schema for a single-indicator recommendation."""

    indicator: dict[str, Any] = Field(..., description="Indicator in report wire format")
    origin: str = Field(..., description="Site origin used in example payloads")

    @field_validator("origin")
    @classmethod
    def check_origin(cls, v: str) -> str:
        return _validate_origin(v)  # type: ignore[return-value]


class RecommendationRead(BaseModel):
    """Recommendation for one indicator."""

    name: str
    status: str
    recommendation: str


class IndicatorInfoRead(BaseModel):
    """Catalog entry for an indicator type."""

    name: str
    display_name: str
    why_it_matters: str
    default_category: str
    impact_level: str
    difficulty_level: str
    estimated_time_to_fix: str | None = None
    create_title: str
    improve_title: str
