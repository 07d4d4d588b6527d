"""Report evaluator.

Runs the whole engine over an assembled report: validation,
classification, applicability buckets, category and overall aggregation,
recommendations, action items and access intent.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import structlog

from readiness.fixes.action_items import build_action_items
from readiness.fixes.generator import normalize_origin, recommend
from readiness.models import CATEGORY_ORDER, Report
from readiness.reports.contract import CategoryResult, EvaluatedReport, IndicatorResult
from readiness.reports.loader import load_report
from readiness.reports.validation import validate_report
from readiness.scoring.access import derive_access_intent
from readiness.scoring.aggregator import aggregate_category, aggregate_overall
from readiness.scoring.applicability import is_excluded, partition
from readiness.scoring.rubric import DEFAULT_WEIGHT_TOLERANCE
from readiness.scoring.status import classify

logger = structlog.get_logger(__name__)


@dataclass
class ReportEvaluatorConfig:
    """Configuration for report evaluation."""

    weight_tolerance: float = DEFAULT_WEIGHT_TOLERANCE

    # Used when neither the caller nor the site URL provides an origin
    default_origin: str | None = None

    # Allowed gap between the supplied and the recomputed overall score
    overall_tolerance: float = 1e-6


class ReportEvaluator:
    """Evaluates assembled reports into presentation-ready results."""

    def __init__(self, config: ReportEvaluatorConfig | None = None):
        self.config = config or ReportEvaluatorConfig()

    def resolve_origin(self, report: Report, origin: str | None = None) -> str:
        """Pick the origin used in example payloads."""
        return normalize_origin(origin or report.site.origin or self.config.default_origin)

    def evaluate(self, report: Report, origin: str | None = None) -> EvaluatedReport:
        """
        Evaluate a report.

        Args:
            report: Report from the assembler
            origin: Site origin for recommendations; defaults to the
                scheme and host of ``report.site.url``

        Returns:
            EvaluatedReport

        Raises:
            MalformedReportError: the report violates a structural invariant
            OutOfRangeScoreError: a score or weight lies outside [0, 1]
        """
        validate_report(report, self.config.weight_tolerance)
        resolved_origin = self.resolve_origin(report, origin)

        indicators = {
            name: IndicatorResult(
                name=name,
                score=indicator.score,
                status=classify(indicator),
                applicability=indicator.applicability,
                category=report.category_of(name),
                recommendation=recommend(indicator, resolved_origin),
                evidence=indicator.evidence,
                excluded=is_excluded(indicator),
            )
            for name, indicator in report.indicators.items()
        }
        statuses = {name: result.status for name, result in indicators.items()}

        categories = tuple(
            CategoryResult(
                aggregate=aggregate_category(
                    key,
                    report.categories[key],
                    report.indicators_for(key),
                    report.weights[key],
                ),
                indicator_names=tuple(report.categories[key].indicator_scores),
            )
            for key in CATEGORY_ORDER
        )

        overall = aggregate_overall(
            {key: report.categories[key].score for key in CATEGORY_ORDER},
            report.weights,
        )

        notes = self._check_supplied_overall(report, overall.raw, overall.score_percentage)
        buckets = partition(report.indicators.values()).to_dict()

        evaluated = EvaluatedReport(
            site=report.site,
            origin=resolved_origin,
            overall=overall,
            categories=categories,
            indicators=indicators,
            buckets={bucket: tuple(names) for bucket, names in buckets.items()},
            action_plan=build_action_items(report, statuses),
            access_intent=derive_access_intent(report),
            evaluated_at=datetime.now(UTC),
            notes=tuple(notes),
        )

        logger.info(
            "report_evaluated",
            site=report.site.url,
            overall_score=overall.score_percentage,
            label=overall.label.value,
            indicators=len(indicators),
            quick_wins=len(evaluated.action_plan.quick_wins),
        )
        return evaluated

    def evaluate_mapping(self, data: Mapping[str, Any], origin: str | None = None) -> EvaluatedReport:
        """Load a report from its JSON mapping and evaluate it."""
        return self.evaluate(load_report(data), origin)

    def _check_supplied_overall(self, report: Report, raw: float, percentage: int) -> list[str]:
        supplied = report.overall
        if supplied is None:
            return []

        notes = []
        if abs(supplied.raw_0_1 - raw) > self.config.overall_tolerance:
            notes.append(
                f"Supplied overall score {supplied.raw_0_1:.4f} differs from recomputed {raw:.4f}"
            )
        elif supplied.score_0_100 is not None and supplied.score_0_100 != percentage:
            notes.append(
                f"Supplied overall percentage {supplied.score_0_100} differs from recomputed {percentage}"
            )

        if notes:
            logger.warning(
                "overall_score_mismatch",
                site=report.site.url,
                supplied=supplied.raw_0_1,
                supplied_percentage=supplied.score_0_100,
                recomputed=raw,
                recomputed_percentage=percentage,
            )
        return notes


def evaluate_report(
    report: Report,
    origin: str | None = None,
    config: ReportEvaluatorConfig | None = None,
) -> EvaluatedReport:
    """Convenience wrapper around ReportEvaluator.evaluate."""
    return ReportEvaluator(config).evaluate(report, origin)
