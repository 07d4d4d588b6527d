"""Evaluated report contract.

Defines the stable output handed to the presentation layer. All sections
serialize through ``to_dict`` with enums as their values.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from readiness.catalog import display_name_for
from readiness.fixes.action_items import ActionPlan
from readiness.models import (
    AccessIntent,
    Applicability,
    CategoryKey,
    Evidence,
    IndicatorStatus,
    SiteInfo,
)
from readiness.scoring.aggregator import CategoryAggregate, OverallAggregate, round_half_up
from readiness.scoring.rubric import CATEGORY_INFO


class ReportVersion(str, Enum):
    """Evaluated report schema versions."""

    V1_0 = "1.0"


# Current version
CURRENT_VERSION = ReportVersion.V1_0


@dataclass(frozen=True)
class IndicatorResult:
    """One indicator with its classification and advice."""

    name: str
    score: float
    status: IndicatorStatus
    applicability: Applicability
    category: CategoryKey | None
    recommendation: str
    evidence: Evidence | None = None
    excluded: bool = False

    @property
    def display_name(self) -> str:
        return display_name_for(self.name)

    @property
    def score_percentage(self) -> int:
        return round_half_up(self.score * 100)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "score": self.score,
            "score_percentage": self.score_percentage,
            "status": self.status.value,
            "applicability": self.applicability.to_dict(),
            "excluded": self.excluded,
            "category": self.category.value if self.category else None,
            "recommendation": self.recommendation,
            "evidence": self.evidence.to_dict() if self.evidence else None,
        }


@dataclass(frozen=True)
class CategoryResult:
    """One category with its aggregate and member indicators."""

    aggregate: CategoryAggregate
    indicator_names: tuple[str, ...] = ()

    @property
    def key(self) -> CategoryKey:
        return self.aggregate.key

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        info = CATEGORY_INFO[self.key]
        return {
            **self.aggregate.to_dict(),
            "display_name": info.display_name,
            "description": info.description,
            "indicators": list(self.indicator_names),
        }


@dataclass(frozen=True)
class EvaluatedReport:
    """Complete evaluated report."""

    site: SiteInfo
    origin: str
    overall: OverallAggregate
    categories: tuple[CategoryResult, ...]
    indicators: dict[str, IndicatorResult]
    buckets: dict[str, tuple[str, ...]]
    action_plan: ActionPlan
    access_intent: AccessIntent | None = None
    version: ReportVersion = CURRENT_VERSION
    evaluated_at: datetime | None = None
    notes: tuple[str, ...] = field(default_factory=tuple)

    def get_category(self, key: CategoryKey) -> CategoryResult | None:
        """Look up a category result by key."""
        for category in self.categories:
            if category.key == key:
                return category
        return None

    def statuses(self) -> dict[str, IndicatorStatus]:
        """Classified status per indicator name."""
        return {name: result.status for name, result in self.indicators.items()}

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "version": self.version.value,
            "site": self.site.to_dict(),
            "origin": self.origin,
            "overall": self.overall.to_dict(),
            "categories": [c.to_dict() for c in self.categories],
            "indicators": {name: r.to_dict() for name, r in self.indicators.items()},
            "buckets": {bucket: list(names) for bucket, names in self.buckets.items()},
            "action_plan": self.action_plan.to_dict(),
            "access_intent": self.access_intent.value if self.access_intent else None,
            "evaluated_at": self.evaluated_at.isoformat() if self.evaluated_at else None,
            "notes": list(self.notes),
        }
