"""Scoring package: classification, applicability and aggregation."""

# Lazy imports to avoid import cycles between scoring and reports
# Use explicit imports when needed:
# from readiness.scoring.status import classify
# from readiness.scoring.applicability import partition
# from readiness.scoring.aggregator import aggregate_category, overall_score
# from readiness.scoring.rubric import overall_label, category_label

__all__ = [
    # Status
    "PASS_THRESHOLD",
    "WARN_THRESHOLD",
    "classify",
    "classify_score",
    # Applicability
    "IndicatorBuckets",
    "applicability_bucket",
    "counts_toward_math",
    "is_excluded",
    "partition",
    # Rubric
    "OverallLabel",
    "CategoryBand",
    "ScoreTone",
    "DEFAULT_CATEGORY_WEIGHTS",
    "overall_label",
    "category_label",
    "score_tone",
    "check_score",
    "validate_weights",
    # Aggregation
    "CategoryAggregate",
    "OverallAggregate",
    "aggregate_category",
    "aggregate_overall",
    "overall_score",
    "round_half_up",
    # Access intent
    "derive_access_intent",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for scoring submodules."""
    if name in ("PASS_THRESHOLD", "WARN_THRESHOLD", "classify", "classify_score"):
        from readiness.scoring.status import (
            PASS_THRESHOLD,
            WARN_THRESHOLD,
            classify,
            classify_score,
        )

        return locals()[name]
    elif name in (
        "IndicatorBuckets",
        "applicability_bucket",
        "counts_toward_math",
        "is_excluded",
        "partition",
    ):
        from readiness.scoring.applicability import (
            IndicatorBuckets,
            applicability_bucket,
            counts_toward_math,
            is_excluded,
            partition,
        )

        return locals()[name]
    elif name in (
        "OverallLabel",
        "CategoryBand",
        "ScoreTone",
        "DEFAULT_CATEGORY_WEIGHTS",
        "overall_label",
        "category_label",
        "score_tone",
        "check_score",
        "validate_weights",
    ):
        from readiness.scoring.rubric import (
            DEFAULT_CATEGORY_WEIGHTS,
            CategoryBand,
            OverallLabel,
            ScoreTone,
            category_label,
            check_score,
            overall_label,
            score_tone,
            validate_weights,
        )

        return locals()[name]
    elif name in (
        "CategoryAggregate",
        "OverallAggregate",
        "aggregate_category",
        "aggregate_overall",
        "overall_score",
        "round_half_up",
    ):
        from readiness.scoring.aggregator import (
            CategoryAggregate,
            OverallAggregate,
            aggregate_category,
            aggregate_overall,
            overall_score,
            round_half_up,
        )

        return locals()[name]
    elif name == "derive_access_intent":
        from readiness.scoring.access import derive_access_intent

        return derive_access_intent
    raise AttributeError(f"module 'readiness.scoring' has no attribute '{name}'")
