"""Tests for the report evaluator."""

from dataclasses import replace
from datetime import UTC

import pytest

from readiness.exceptions import MalformedReportError, OutOfRangeScoreError
from readiness.fixes.generator import PLACEHOLDER_ORIGIN
from readiness.models import AccessIntent, CategoryKey, IndicatorStatus, SiteInfo
from readiness.reports.assembler import (
    ReportEvaluator,
    ReportEvaluatorConfig,
    evaluate_report,
)
from readiness.reports.loader import load_report
from readiness.scoring.rubric import OverallLabel
from tests.fixtures import make_indicator, make_report, report_payload


@pytest.fixture
def evaluated():
    return ReportEvaluator().evaluate_mapping(report_payload())


class TestEvaluate:
    """Tests for ReportEvaluator.evaluate on a complete report."""

    def test_overall(self, evaluated) -> None:
        """0.725 displays as 73 and Good."""
        assert evaluated.overall.raw == pytest.approx(0.725)
        assert evaluated.overall.score_percentage == 73
        assert evaluated.overall.label == OverallLabel.GOOD
        assert evaluated.notes == ()

    def test_categories_in_fixed_order(self, evaluated) -> None:
        """Categories follow discovery, understanding, actions, trust."""
        assert [c.key for c in evaluated.categories] == [
            CategoryKey.DISCOVERY,
            CategoryKey.UNDERSTANDING,
            CategoryKey.ACTIONS,
            CategoryKey.TRUST,
        ]

    def test_category_counters(self, evaluated) -> None:
        """Excluded indicators do not count toward passing/total."""
        counters = {
            c.key: (c.aggregate.passing_count, c.aggregate.total_count)
            for c in evaluated.categories
        }
        assert counters == {
            CategoryKey.DISCOVERY: (2, 2),
            CategoryKey.UNDERSTANDING: (0, 1),
            CategoryKey.ACTIONS: (0, 1),
            CategoryKey.TRUST: (1, 1),
        }

    def test_category_score_authoritative(self, evaluated) -> None:
        """The supplied category score is never recomputed."""
        assert evaluated.get_category(CategoryKey.ACTIONS).aggregate.score == 0.4

    def test_statuses(self, evaluated) -> None:
        """Each indicator is classified."""
        statuses = evaluated.statuses()
        assert statuses["sitemap_xml"] == IndicatorStatus.PASS
        assert statuses["json_ld"] == IndicatorStatus.WARN
        assert statuses["agent_json"] == IndicatorStatus.FAIL
        assert statuses["mcp"] == IndicatorStatus.NOT_APPLICABLE

    def test_buckets(self, evaluated) -> None:
        """Indicators are grouped by applicability."""
        assert evaluated.buckets == {
            "required": ("sitemap_xml", "seo_basic", "json_ld", "robots_txt"),
            "optional": ("llms_txt", "agent_json"),
            "not_applicable": ("mcp",),
        }

    def test_excluded_separate_from_math(self, evaluated) -> None:
        """Display exclusion follows the status, not the counter flag."""
        mcp = evaluated.indicators["mcp"]
        llms_txt = evaluated.indicators["llms_txt"]
        assert mcp.excluded is True
        assert llms_txt.excluded is False
        assert llms_txt.applicability.included_in_category_math is False
        assert evaluated.to_dict()["indicators"]["mcp"]["excluded"] is True

    def test_recommendations(self, evaluated) -> None:
        """Every indicator gets non-empty advice using the site origin."""
        for result in evaluated.indicators.values():
            assert result.recommendation
        assert "- missing required field: name" in evaluated.indicators["json_ld"].recommendation
        assert "https://www.acme-tools.com" in evaluated.indicators["llms_txt"].recommendation

    def test_action_plan(self, evaluated) -> None:
        """Failing and warning indicators become actions."""
        plan = evaluated.action_plan
        assert plan.quick_wins == ()
        assert [i.id for i in plan.strategic_improvements] == [
            "json_ld-improve",
            "llms_txt-create",
            "agent_json-improve",
        ]

    def test_access_intent(self, evaluated) -> None:
        """No restrictions means allow."""
        assert evaluated.access_intent == AccessIntent.ALLOW

    def test_metadata(self, evaluated) -> None:
        """Origin and evaluation time are recorded."""
        assert evaluated.origin == "https://www.acme-tools.com"
        assert evaluated.evaluated_at.tzinfo is UTC

    def test_to_dict(self, evaluated) -> None:
        """The whole result serializes."""
        d = evaluated.to_dict()
        assert d["overall"]["score_0_100"] == 73
        assert d["overall"]["label"] == "Good"
        assert len(d["categories"]) == 4
        assert d["indicators"]["mcp"]["status"] == "not_applicable"


class TestOrigin:
    """Tests for origin resolution."""

    def test_explicit_origin_wins(self) -> None:
        """A caller-supplied origin is used for every example."""
        evaluated = ReportEvaluator().evaluate_mapping(report_payload(), "https://shop.example/")
        assert evaluated.origin == "https://shop.example"
        assert "https://shop.example" in evaluated.indicators["llms_txt"].recommendation

    def test_config_default(self) -> None:
        """Relative site URLs fall back to the configured default."""
        payload = report_payload()
        payload["site"]["url"] = "acme-tools"
        config = ReportEvaluatorConfig(default_origin="https://fallback.example")
        evaluated = ReportEvaluator(config).evaluate_mapping(payload)
        assert evaluated.origin == "https://fallback.example"

    def test_placeholder(self) -> None:
        """No origin anywhere uses the placeholder."""
        report = load_report(report_payload())
        evaluator = ReportEvaluator()
        stripped = replace(report, site=SiteInfo(url="acme-tools"))
        assert evaluator.resolve_origin(stripped) == PLACEHOLDER_ORIGIN


class TestSuppliedOverall:
    """Tests for the supplied overall cross-check."""

    def test_mismatch_is_noted(self) -> None:
        """A disagreeing supplied score is reported, not used."""
        payload = report_payload()
        payload["overall"] = {"raw_0_1": 0.8, "score_0_100": 80}
        evaluated = ReportEvaluator().evaluate_mapping(payload)
        assert evaluated.overall.score_percentage == 73
        assert len(evaluated.notes) == 1
        assert "0.8000" in evaluated.notes[0]

    def test_percentage_mismatch(self) -> None:
        """A disagreeing percentage alone is noted."""
        payload = report_payload()
        payload["overall"] = {"raw_0_1": 0.725, "score_0_100": 72}
        evaluated = ReportEvaluator().evaluate_mapping(payload)
        assert evaluated.notes == (
            "Supplied overall percentage 72 differs from recomputed 73",
        )

    def test_absent(self) -> None:
        """No supplied overall means no notes."""
        payload = report_payload()
        del payload["overall"]
        assert ReportEvaluator().evaluate_mapping(payload).notes == ()


class TestErrors:
    """Tests for invalid input."""

    def test_out_of_range(self) -> None:
        """Out-of-range scores are rejected before evaluation."""
        payload = report_payload()
        payload["indicators"]["seo_basic"]["score"] = 1.5
        with pytest.raises(OutOfRangeScoreError):
            ReportEvaluator().evaluate_mapping(payload)

    def test_malformed(self) -> None:
        """Structural problems are rejected."""
        payload = report_payload()
        del payload["categories"]["trust"]
        with pytest.raises(MalformedReportError):
            ReportEvaluator().evaluate_mapping(payload)


class TestEvaluateReport:
    """Tests for the evaluate_report helper."""

    def test_minimal_report(self) -> None:
        """Works on a report built in code."""
        report = make_report(
            members={CategoryKey.TRUST: [make_indicator("robots_txt", score=0.0)]}
        )
        evaluated = evaluate_report(report)
        assert evaluated.access_intent is None
        assert [i.id for i in evaluated.action_plan.quick_wins] == ["robots_txt-create"]
        assert evaluated.indicators["robots_txt"].category == CategoryKey.TRUST

    def test_unknown_indicator_never_raises(self) -> None:
        """Unknown indicator names get the generic advice."""
        report = make_report(
            members={CategoryKey.UNDERSTANDING: [make_indicator("speakable", score=0.3)]}
        )
        evaluated = evaluate_report(report, "https://acme.com")
        assert "Speakable" in evaluated.indicators["speakable"].recommendation
