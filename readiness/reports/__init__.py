"""Report loading, validation and evaluation."""

# Lazy imports to avoid import cycles with fixes and scoring
# Use explicit imports when needed:
# from readiness.reports.loader import load_report
# from readiness.reports.validation import validate_report
# from readiness.reports.assembler import ReportEvaluator, ReportEvaluatorConfig

__all__ = [
    # Loader
    "load_report",
    # Validation
    "validate_report",
    # Contract
    "ReportVersion",
    "CURRENT_VERSION",
    "IndicatorResult",
    "CategoryResult",
    "EvaluatedReport",
    # Evaluator
    "ReportEvaluator",
    "ReportEvaluatorConfig",
    "evaluate_report",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for reports submodules."""
    if name == "load_report":
        from readiness.reports.loader import load_report

        return load_report
    elif name == "validate_report":
        from readiness.reports.validation import validate_report

        return validate_report
    elif name in (
        "ReportVersion",
        "CURRENT_VERSION",
        "IndicatorResult",
        "CategoryResult",
        "EvaluatedReport",
    ):
        from readiness.reports.contract import (
            CURRENT_VERSION,
            CategoryResult,
            EvaluatedReport,
            IndicatorResult,
            ReportVersion,
        )

        return locals()[name]
    elif name in ("ReportEvaluator", "ReportEvaluatorConfig", "evaluate_report"):
        from readiness.reports.assembler import (
            ReportEvaluator,
            ReportEvaluatorConfig,
            evaluate_report,
        )

        return locals()[name]
    raise AttributeError(f"module 'readiness.reports' has no attribute '{name}'")
