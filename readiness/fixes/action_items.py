"""Quick wins and strategic improvements.

Builds one RecommendationItem per failing or warning indicator and splits
them into quick wins (easy and high impact) and strategic improvements
(everything else).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from readiness.catalog import DifficultyLevel, ImpactLevel, get_indicator_info
from readiness.models import ApplicabilityStatus, CategoryKey, Indicator, IndicatorStatus, Report

IMPACT_ORDER = {ImpactLevel.HIGH: 0, ImpactLevel.MEDIUM: 1, ImpactLevel.LOW: 2}
DIFFICULTY_ORDER = {DifficultyLevel.EASY: 0, DifficultyLevel.MEDIUM: 1, DifficultyLevel.HARD: 2}

ACTIONABLE_STATUSES = frozenset({IndicatorStatus.FAIL, IndicatorStatus.WARN})


@dataclass(frozen=True)
class RecommendationItem:
    """A single prioritized action."""

    id: str
    title: str
    description: str
    category: CategoryKey
    impact_level: ImpactLevel
    difficulty_level: DifficultyLevel
    estimated_time_to_fix: str | None = None
    related_indicators: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_quick_win(self) -> bool:
        return self.difficulty_level == DifficultyLevel.EASY and self.impact_level == ImpactLevel.HIGH

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "impact_level": self.impact_level.value,
            "difficulty_level": self.difficulty_level.value,
            "estimated_time_to_fix": self.estimated_time_to_fix,
            "related_indicators": sorted(self.related_indicators),
        }


@dataclass(frozen=True)
class ActionPlan:
    """Actions split by effort and impact."""

    quick_wins: tuple[RecommendationItem, ...] = ()
    strategic_improvements: tuple[RecommendationItem, ...] = ()

    @property
    def total(self) -> int:
        return len(self.quick_wins) + len(self.strategic_improvements)

    def to_dict(self) -> dict:
        return {
            "quick_wins": [item.to_dict() for item in self.quick_wins],
            "strategic_improvements": [item.to_dict() for item in self.strategic_improvements],
            "total": self.total,
        }


def _sort_key(item: RecommendationItem) -> tuple[int, int, str]:
    return (IMPACT_ORDER[item.impact_level], DIFFICULTY_ORDER[item.difficulty_level], item.id)


def build_item(indicator: Indicator, category: CategoryKey | None = None) -> RecommendationItem:
    """
    Build the action for one indicator from its catalog entry.

    Args:
        indicator: Indicator needing work
        category: Category listing the indicator; catalog default when None

    Returns:
        RecommendationItem with a deterministic id
    """
    info = get_indicator_info(indicator.name)
    evidence = indicator.evidence
    absent = evidence is None or not evidence.found or indicator.score == 0

    impact = info.impact_level
    if indicator.applicability.status == ApplicabilityStatus.OPTIONAL and impact == ImpactLevel.HIGH:
        impact = ImpactLevel.MEDIUM

    description = info.why_it_matters
    if evidence is not None and evidence.validation.errors:
        description = f"{description} First issue: {evidence.validation.errors[0]}"

    return RecommendationItem(
        id=f"{indicator.name}-{'create' if absent else 'improve'}",
        title=info.create_title if absent else info.improve_title,
        description=description,
        category=category or info.default_category,
        impact_level=impact,
        difficulty_level=info.difficulty_level,
        estimated_time_to_fix=info.estimated_time_to_fix,
        related_indicators=frozenset({indicator.name}),
    )


def build_action_items(
    report: Report,
    statuses: Mapping[str, IndicatorStatus],
) -> ActionPlan:
    """
    Build quick wins and strategic improvements for a report.

    Args:
        report: Validated report
        statuses: Classified status per indicator name

    Returns:
        ActionPlan with both lists sorted by impact, then difficulty, then id
    """
    items = []
    for name, indicator in report.indicators.items():
        if indicator.applicability.status == ApplicabilityStatus.NOT_APPLICABLE:
            continue
        if statuses.get(name) not in ACTIONABLE_STATUSES:
            continue
        items.append(build_item(indicator, report.category_of(name)))

    items.sort(key=_sort_key)
    return ActionPlan(
        quick_wins=tuple(i for i in items if i.is_quick_win),
        strategic_improvements=tuple(i for i in items if not i.is_quick_win),
    )
