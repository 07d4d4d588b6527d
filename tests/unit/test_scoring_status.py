"""Tests for indicator status classification."""

import pytest

from readiness.models import ApplicabilityStatus, IndicatorStatus
from readiness.scoring.status import PASS_THRESHOLD, WARN_THRESHOLD, classify, classify_score
from tests.fixtures import make_evidence, make_indicator


class TestClassifyScore:
    """Tests for classify_score."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (1.0, IndicatorStatus.PASS),
            (0.8, IndicatorStatus.PASS),
            (0.79, IndicatorStatus.WARN),
            (0.5, IndicatorStatus.WARN),
            (0.49, IndicatorStatus.FAIL),
            (0.0, IndicatorStatus.FAIL),
        ],
    )
    def test_bands(self, score: float, expected: IndicatorStatus) -> None:
        """Bands are inclusive on their lower bound."""
        assert classify_score(score) == expected

    def test_thresholds(self) -> None:
        """Thresholds match the documented bands."""
        assert PASS_THRESHOLD == 0.8
        assert WARN_THRESHOLD == 0.5


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize("score", [0.0, 0.5, 0.8, 1.0])
    def test_not_applicable_overrides_score(self, score: float) -> None:
        """Not-applicable indicators are never pass/warn/fail."""
        indicator = make_indicator(score=score, status=ApplicabilityStatus.NOT_APPLICABLE)
        assert classify(indicator) == IndicatorStatus.NOT_APPLICABLE

    def test_not_applicable_even_when_counted(self) -> None:
        """The math flag does not affect the not-applicable status."""
        indicator = make_indicator(
            score=1.0, status=ApplicabilityStatus.NOT_APPLICABLE, included=True
        )
        assert classify(indicator) == IndicatorStatus.NOT_APPLICABLE

    def test_optional_uses_score(self) -> None:
        """Optional indicators are classified by score."""
        indicator = make_indicator(score=0.8, status=ApplicabilityStatus.OPTIONAL)
        assert classify(indicator) == IndicatorStatus.PASS

    def test_evidence_ignored(self) -> None:
        """Evidence never changes the status."""
        indicator = make_indicator(
            score=0.9,
            evidence=make_evidence(found=False, errors=("broken",)),
        )
        assert classify(indicator) == IndicatorStatus.PASS
