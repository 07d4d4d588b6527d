"""AI readiness scoring and recommendation engine."""

# Lazy imports to avoid pulling every submodule at import time
# Use explicit imports when needed:
# from readiness.models import Indicator, Report
# from readiness.scoring.status import classify
# from readiness.fixes.generator import recommend
# from readiness.reports.assembler import ReportEvaluator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Models
    "Evidence",
    "Indicator",
    "Category",
    "Report",
    # Errors
    "ReadinessError",
    "MalformedReportError",
    "OutOfRangeScoreError",
    # Operations
    "classify",
    "partition",
    "aggregate_category",
    "overall_score",
    "recommend",
    "load_report",
    "ReportEvaluator",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for readiness submodules."""
    if name in ("Evidence", "Indicator", "Category", "Report"):
        from readiness.models import Category, Evidence, Indicator, Report

        return locals()[name]
    elif name in ("ReadinessError", "MalformedReportError", "OutOfRangeScoreError"):
        from readiness.exceptions import (
            MalformedReportError,
            OutOfRangeScoreError,
            ReadinessError,
        )

        return locals()[name]
    elif name == "classify":
        from readiness.scoring.status import classify

        return classify
    elif name == "partition":
        from readiness.scoring.applicability import partition

        return partition
    elif name in ("aggregate_category", "overall_score"):
        from readiness.scoring.aggregator import aggregate_category, overall_score

        return locals()[name]
    elif name == "recommend":
        from readiness.fixes.generator import recommend

        return recommend
    elif name == "load_report":
        from readiness.reports.loader import load_report

        return load_report
    elif name == "ReportEvaluator":
        from readiness.reports.assembler import ReportEvaluator

        return ReportEvaluator
    raise AttributeError(f"module 'readiness' has no attribute '{name}'")
