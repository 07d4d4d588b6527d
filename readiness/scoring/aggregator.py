"""Category and overall aggregation.

Category scores are supplied by the report assembler and treated as
ground truth. Locally only the passing/total counters and the display
values are derived. The overall score is the plain weighted sum of the
four category scores; weights are never renormalized here.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

import structlog

from readiness.models import CATEGORY_ORDER, Category, CategoryKey, Indicator, IndicatorStatus
from readiness.scoring.applicability import counts_toward_math
from readiness.scoring.rubric import (
    CategoryBand,
    OverallLabel,
    ScoreTone,
    category_label,
    check_score,
    overall_label,
    score_tone,
)
from readiness.scoring.status import classify

logger = structlog.get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (72.5 -> 73).

    The value is first fixed to 9 decimals so float noise such as
    0.725 * 100 == 72.49999999999999 still rounds as 72.5.
    """
    return int(Decimal(f"{value:.9f}").quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class CategoryAggregate:
    """Derived display values for one category."""

    key: CategoryKey
    score: float
    weight: float
    passing_count: int
    total_count: int
    status_counts: dict[IndicatorStatus, int] = field(default_factory=dict)

    @property
    def score_percentage(self) -> int:
        return round_half_up(self.score * 100)

    @property
    def weight_percentage(self) -> int:
        return round_half_up(self.weight * 100)

    @property
    def contribution_points(self) -> int:
        return round_half_up(self.score * self.weight * 100)

    @property
    def label(self) -> CategoryBand:
        return category_label(self.score_percentage)

    @property
    def tone(self) -> ScoreTone:
        return score_tone(self.score_percentage)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "key": self.key.value,
            "score": self.score,
            "weight": self.weight,
            "score_percentage": self.score_percentage,
            "weight_percentage": self.weight_percentage,
            "contribution_points": self.contribution_points,
            "passing_count": self.passing_count,
            "total_count": self.total_count,
            "status_counts": {s.value: n for s, n in self.status_counts.items()},
            "label": self.label.value,
            "tone": self.tone.value,
        }


@dataclass(frozen=True)
class OverallAggregate:
    """Overall site score."""

    raw: float  # 0-1 weighted sum

    @property
    def score_percentage(self) -> int:
        return round_half_up(self.raw * 100)

    @property
    def label(self) -> OverallLabel:
        return overall_label(self.score_percentage)

    @property
    def tone(self) -> ScoreTone:
        return score_tone(self.score_percentage)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "raw_0_1": self.raw,
            "score_0_100": self.score_percentage,
            "label": self.label.value,
            "tone": self.tone.value,
        }


def aggregate_category(
    key: CategoryKey,
    category: Category,
    indicators: Iterable[Indicator],
    weight: float,
) -> CategoryAggregate:
    """
    Aggregate one category.

    Args:
        key: Category key
        category: Category as supplied by the assembler (score is authoritative)
        indicators: Indicators mapped into this category
        weight: Category weight (0-1)

    Returns:
        CategoryAggregate with counters and display values

    Raises:
        OutOfRangeScoreError: a score or the weight lies outside [0, 1]
    """
    check_score(f"categories.{key.value}.score", category.score)
    check_score(f"weights.{key.value}", weight)

    status_counts = {status: 0 for status in IndicatorStatus}
    passing_count = 0
    total_count = 0

    for indicator in indicators:
        check_score(f"indicators.{indicator.name}.score", indicator.score)
        status = classify(indicator)
        status_counts[status] += 1

        if not counts_toward_math(indicator):
            continue
        total_count += 1
        if status == IndicatorStatus.PASS:
            passing_count += 1

    return CategoryAggregate(
        key=key,
        score=category.score,
        weight=weight,
        passing_count=passing_count,
        total_count=total_count,
        status_counts=status_counts,
    )


def overall_score(
    category_scores: Mapping[CategoryKey, float],
    weights: Mapping[CategoryKey, float],
) -> float:
    """
    Weighted sum of the four category scores.

    No renormalization happens: if the weights do not sum to 1 the result is
    whatever the weighted sum yields. Missing categories contribute nothing.
    """
    total = 0.0
    for key in CATEGORY_ORDER:
        if key not in category_scores or key not in weights:
            continue
        score = category_scores[key]
        weight = weights[key]
        check_score(f"categories.{key.value}.score", score)
        check_score(f"weights.{key.value}", weight)
        total += score * weight
    return total


def aggregate_overall(
    category_scores: Mapping[CategoryKey, float],
    weights: Mapping[CategoryKey, float],
) -> OverallAggregate:
    """Compute the overall aggregate with its display values."""
    return OverallAggregate(raw=overall_score(category_scores, weights))
