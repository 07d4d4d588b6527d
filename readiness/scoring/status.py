"""Status classification for indicators.

Bands are inclusive on their lower bound:
- score >= 0.8 -> pass
- score >= 0.5 -> warn
- otherwise    -> fail

Applicability wins over score: a not-applicable indicator is always
reported as not_applicable.
"""

from readiness.models import ApplicabilityStatus, Indicator, IndicatorStatus

PASS_THRESHOLD = 0.8
WARN_THRESHOLD = 0.5


def classify_score(score: float) -> IndicatorStatus:
    """Classify a raw 0-1 score into pass/warn/fail."""
    if score >= PASS_THRESHOLD:
        return IndicatorStatus.PASS
    elif score >= WARN_THRESHOLD:
        return IndicatorStatus.WARN
    else:
        return IndicatorStatus.FAIL


def classify(indicator: Indicator) -> IndicatorStatus:
    """Classify an indicator; evidence is never consulted."""
    if indicator.applicability.status == ApplicabilityStatus.NOT_APPLICABLE:
        return IndicatorStatus.NOT_APPLICABLE
    return classify_score(indicator.score)
