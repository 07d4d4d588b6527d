"""Structural validation of assembled reports.

Checks the invariants the engine relies on and reports the first
violation. Nothing is repaired: scores are never clamped and weights are
never renormalized.
"""

from readiness.exceptions import MalformedReportError
from readiness.models import CATEGORY_ORDER, Report
from readiness.scoring.rubric import DEFAULT_WEIGHT_TOLERANCE, check_score, validate_weights


def validate_report(report: Report, tolerance: float = DEFAULT_WEIGHT_TOLERANCE) -> None:
    """
    Validate a report's structural invariants.

    Args:
        report: Report to check
        tolerance: Allowed deviation of the weight sum from 1

    Raises:
        MalformedReportError: a category or weight is missing, a category
            references an unknown indicator, an indicator key does not match
            its name, or the weights do not sum to 1
        OutOfRangeScoreError: a score or weight lies outside [0, 1]
    """
    for key in CATEGORY_ORDER:
        if key not in report.categories:
            raise MalformedReportError(
                f"Missing category '{key.value}'", path=f"categories.{key.value}"
            )

    validate_weights(report.weights, tolerance)

    for key, indicator in report.indicators.items():
        if indicator.name != key:
            raise MalformedReportError(
                f"Indicator key '{key}' does not match its name '{indicator.name}'",
                path=f"indicators.{key}.name",
            )
        check_score(f"indicators.{key}.score", indicator.score)

    for key in CATEGORY_ORDER:
        category = report.categories[key]
        check_score(f"categories.{key.value}.score", category.score)
        for name, score in category.indicator_scores.items():
            path = f"categories.{key.value}.indicator_scores.{name}"
            if name not in report.indicators:
                raise MalformedReportError(
                    f"Category '{key.value}' references unknown indicator '{name}'",
                    path=path,
                )
            check_score(path, score)

    if report.overall is not None:
        check_score("overall.raw_0_1", report.overall.raw_0_1)
