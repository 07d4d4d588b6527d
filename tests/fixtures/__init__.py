"""Shared test builders."""

from tests.fixtures.reports import (
    EQUAL_WEIGHTS,
    make_evidence,
    make_indicator,
    make_report,
    report_payload,
)

__all__ = [
    "EQUAL_WEIGHTS",
    "make_evidence",
    "make_indicator",
    "make_report",
    "report_payload",
]
