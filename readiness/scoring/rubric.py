"""Scoring rubric for the AI Readiness Index.

Defines category weights, category descriptions and the qualitative
labels shown next to scores. Overall scores and category scores use two
different bandings; they are intentionally kept as separate functions.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from readiness.exceptions import MalformedReportError, OutOfRangeScoreError
from readiness.models import CATEGORY_ORDER, CategoryKey


class OverallLabel(StrEnum):
    """Qualitative label for the overall site score."""

    EXCELLENT = "Excellent"  # 80-100
    GOOD = "Good"  # 60-79
    FAIR = "Fair"  # 40-59
    NEEDS_IMPROVEMENT = "Needs Improvement"  # 0-39


class CategoryBand(StrEnum):
    """Qualitative label for a single category score."""

    STRONG = "Strong"  # 80-100
    MODERATE = "Moderate"  # 50-79
    POOR = "Poor"  # 0-49


class ScoreTone(StrEnum):
    """Colour tone used by the presentation layer for any percentage."""

    POSITIVE = "positive"
    CAUTION = "caution"
    CRITICAL = "critical"


def overall_label(score_percentage: float) -> OverallLabel:
    """Label for an overall score on the 0-100 scale."""
    if score_percentage >= 80:
        return OverallLabel.EXCELLENT
    elif score_percentage >= 60:
        return OverallLabel.GOOD
    elif score_percentage >= 40:
        return OverallLabel.FAIR
    else:
        return OverallLabel.NEEDS_IMPROVEMENT


def category_label(score_percentage: float) -> CategoryBand:
    """Label for a category score on the 0-100 scale."""
    if score_percentage >= 80:
        return CategoryBand.STRONG
    elif score_percentage >= 50:
        return CategoryBand.MODERATE
    else:
        return CategoryBand.POOR


def score_tone(score_percentage: float) -> ScoreTone:
    """Tone for a percentage (same cut-points as the category band)."""
    if score_percentage >= 80:
        return ScoreTone.POSITIVE
    elif score_percentage >= 50:
        return ScoreTone.CAUTION
    else:
        return ScoreTone.CRITICAL


@dataclass(frozen=True)
class CategoryInfo:
    """Display metadata and default weight for a category."""

    key: CategoryKey
    display_name: str
    description: str
    default_weight: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "key": self.key.value,
            "display_name": self.display_name,
            "description": self.description,
            "default_weight": self.default_weight,
        }


CATEGORY_INFO: dict[CategoryKey, CategoryInfo] = {
    CategoryKey.DISCOVERY: CategoryInfo(
        key=CategoryKey.DISCOVERY,
        display_name="Discovery",
        description="How easily AI agents can find and identify your site",
        default_weight=0.30,
    ),
    CategoryKey.UNDERSTANDING: CategoryInfo(
        key=CategoryKey.UNDERSTANDING,
        display_name="Understanding",
        description="How well AI agents can interpret your site's content",
        default_weight=0.30,
    ),
    CategoryKey.ACTIONS: CategoryInfo(
        key=CategoryKey.ACTIONS,
        display_name="Actions",
        description="How easily AI agents can perform useful actions",
        default_weight=0.25,
    ),
    CategoryKey.TRUST: CategoryInfo(
        key=CategoryKey.TRUST,
        display_name="Trust",
        description="Signals that establish your site as credible",
        default_weight=0.15,
    ),
}

DEFAULT_CATEGORY_WEIGHTS: dict[CategoryKey, float] = {
    key: info.default_weight for key, info in CATEGORY_INFO.items()
}

DEFAULT_WEIGHT_TOLERANCE = 1e-6


def check_score(field_name: str, value: float) -> None:
    """Raise OutOfRangeScoreError unless ``value`` lies in [0, 1]."""
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise OutOfRangeScoreError(field_name, value)


def validate_weights(
    weights: Mapping[CategoryKey, float],
    tolerance: float = DEFAULT_WEIGHT_TOLERANCE,
) -> None:
    """
    Check weight integrity (configuration-time concern).

    Raises:
        MalformedReportError: a category weight is missing or the weights
            do not sum to 1 within ``tolerance``
        OutOfRangeScoreError: a weight lies outside [0, 1]
    """
    for key in CATEGORY_ORDER:
        if key not in weights:
            raise MalformedReportError(f"Missing weight for category '{key.value}'", path=f"weights.{key.value}")
        check_score(f"weights.{key.value}", weights[key])

    total = math.fsum(weights[key] for key in CATEGORY_ORDER)
    if abs(total - 1.0) > tolerance:
        raise MalformedReportError(
            f"Category weights must sum to 1, got {total:.6f}",
            path="weights",
        )


@dataclass
class ScoringRubric:
    """Bundle of weights and labels used for one evaluation."""

    name: str = "AI Readiness Index"
    version: str = "1.0"
    weights: dict[CategoryKey, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Fall back to the default weights when none are given."""
        if not self.weights:
            self.weights = dict(DEFAULT_CATEGORY_WEIGHTS)

    def get_category_weight(self, key: CategoryKey) -> float:
        """Get weight for a category."""
        return self.weights.get(key, 0.0)

    def to_dict(self) -> dict:
        """Convert rubric to dictionary."""
        return {
            "name": self.name,
            "version": self.version,
            "weights": {k.value: v for k, v in self.weights.items()},
            "categories": [CATEGORY_INFO[k].to_dict() for k in CATEGORY_ORDER],
            "overall_bands": {
                OverallLabel.EXCELLENT.value: 80,
                OverallLabel.GOOD.value: 60,
                OverallLabel.FAIR.value: 40,
                OverallLabel.NEEDS_IMPROVEMENT.value: 0,
            },
            "category_bands": {
                CategoryBand.STRONG.value: 80,
                CategoryBand.MODERATE.value: 50,
                CategoryBand.POOR.value: 0,
            },
        }


# Default rubric instance
DEFAULT_RUBRIC = ScoringRubric()


def get_rubric() -> ScoringRubric:
    """Get the default scoring rubric."""
    return DEFAULT_RUBRIC
