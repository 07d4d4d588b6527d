"""Tests for evaluated report data structures."""

from datetime import UTC, datetime

from readiness.fixes.action_items import ActionPlan
from readiness.models import (
    AccessIntent,
    Applicability,
    ApplicabilityStatus,
    CategoryKey,
    IndicatorStatus,
    SiteInfo,
)
from readiness.reports.contract import (
    CURRENT_VERSION,
    CategoryResult,
    EvaluatedReport,
    IndicatorResult,
    ReportVersion,
)
from readiness.scoring.aggregator import CategoryAggregate, OverallAggregate
from tests.fixtures import make_evidence


def make_indicator_result(name: str = "json_ld", score: float = 0.6) -> IndicatorResult:
    """Create a test IndicatorResult."""
    return IndicatorResult(
        name=name,
        score=score,
        status=IndicatorStatus.WARN,
        applicability=Applicability(status=ApplicabilityStatus.REQUIRED),
        category=CategoryKey.UNDERSTANDING,
        recommendation="Fix it.",
        evidence=make_evidence(errors=("missing required field: name",)),
    )


def make_category_result(key: CategoryKey = CategoryKey.UNDERSTANDING) -> CategoryResult:
    """Create a test CategoryResult."""
    return CategoryResult(
        aggregate=CategoryAggregate(
            key=key,
            score=0.6,
            weight=0.3,
            passing_count=0,
            total_count=1,
            status_counts={IndicatorStatus.WARN: 1},
        ),
        indicator_names=("json_ld",),
    )


class TestReportVersion:
    """Tests for ReportVersion enum."""

    def test_versions(self) -> None:
        """Has expected versions."""
        assert ReportVersion.V1_0.value == "1.0"

    def test_current_version(self) -> None:
        """Current version is set."""
        assert CURRENT_VERSION == ReportVersion.V1_0


class TestIndicatorResult:
    """Tests for IndicatorResult."""

    def test_display_values(self) -> None:
        """Derives display name and percentage."""
        result = make_indicator_result(score=0.725)
        assert result.display_name == "JSON-LD Structured Data"
        assert result.score_percentage == 73

    def test_to_dict(self) -> None:
        """Converts to dict with enum values."""
        d = make_indicator_result().to_dict()
        assert d["status"] == "warn"
        assert d["category"] == "understanding"
        assert d["applicability"]["status"] == "required"
        assert d["excluded"] is False
        assert d["evidence"]["validation"]["errors"] == ["missing required field: name"]
        assert d["recommendation"] == "Fix it."

    def test_to_dict_without_category_or_evidence(self) -> None:
        """Unlisted indicators serialize null category and evidence."""
        result = IndicatorResult(
            name="speakable",
            score=0.0,
            status=IndicatorStatus.FAIL,
            applicability=Applicability(),
            category=None,
            recommendation="Review.",
        )
        d = result.to_dict()
        assert d["category"] is None
        assert d["evidence"] is None
        assert d["excluded"] is False


class TestCategoryResult:
    """Tests for CategoryResult."""

    def test_to_dict(self) -> None:
        """Adds display metadata to the aggregate values."""
        d = make_category_result().to_dict()
        assert d["key"] == "understanding"
        assert d["score_percentage"] == 60
        assert d["weight_percentage"] == 30
        assert d["contribution_points"] == 18
        assert d["label"] == "Moderate"
        assert d["status_counts"] == {"warn": 1}
        assert d["display_name"]
        assert d["indicators"] == ["json_ld"]


class TestEvaluatedReport:
    """Tests for EvaluatedReport."""

    def make_report(self) -> EvaluatedReport:
        return EvaluatedReport(
            site=SiteInfo(url="https://acme.com/", category="saas"),
            origin="https://acme.com",
            overall=OverallAggregate(raw=0.62),
            categories=(make_category_result(),),
            indicators={"json_ld": make_indicator_result()},
            buckets={"required": ("json_ld",), "optional": (), "not_applicable": ()},
            action_plan=ActionPlan(),
            access_intent=AccessIntent.PARTIAL,
            evaluated_at=datetime(2026, 3, 1, 12, 0, tzinfo=UTC),
            notes=("note",),
        )

    def test_get_category(self) -> None:
        """Looks up categories by key."""
        report = self.make_report()
        assert report.get_category(CategoryKey.UNDERSTANDING).key == CategoryKey.UNDERSTANDING
        assert report.get_category(CategoryKey.TRUST) is None

    def test_statuses(self) -> None:
        """Maps names to statuses."""
        assert self.make_report().statuses() == {"json_ld": IndicatorStatus.WARN}

    def test_to_dict(self) -> None:
        """Serializes every section."""
        d = self.make_report().to_dict()
        assert d["version"] == "1.0"
        assert d["origin"] == "https://acme.com"
        assert d["overall"] == {"raw_0_1": 0.62, "score_0_100": 62, "label": "Good", "tone": "caution"}
        assert d["categories"][0]["key"] == "understanding"
        assert d["buckets"]["required"] == ["json_ld"]
        assert d["action_plan"]["total"] == 0
        assert d["access_intent"] == "partial"
        assert d["evaluated_at"] == "2026-03-01T12:00:00+00:00"
        assert d["notes"] == ["note"]

    def test_to_dict_defaults(self) -> None:
        """Optional fields serialize as null."""
        report = EvaluatedReport(
            site=SiteInfo(url="https://acme.com"),
            origin="https://acme.com",
            overall=OverallAggregate(raw=0.0),
            categories=(),
            indicators={},
            buckets={},
            action_plan=ActionPlan(),
        )
        d = report.to_dict()
        assert d["access_intent"] is None
        assert d["evaluated_at"] is None
        assert d["notes"] == []
