"""Errors raised by the readiness engine.

These carry a machine-readable ``code`` and optional ``details`` so the
API layer can turn them into error envelopes without inspecting messages.
"""

from typing import Any


class ReadinessError(Exception):
    """Base exception for the readiness engine."""

    def __init__(
        self,
        message: str,
        code: str = "readiness_error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MalformedReportError(ReadinessError):
    """A report violates a structural invariant."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message=message, code="malformed_report", details=details)


class OutOfRangeScoreError(ReadinessError):
    """A score or weight fell outside [0, 1]."""

    def __init__(self, field: str, value: float):
        super().__init__(
            message=f"{field} must be within [0, 1], got {value!r}",
            code="out_of_range_score",
            details={"field": field, "value": value},
        )
