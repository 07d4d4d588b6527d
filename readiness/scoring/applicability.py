"""Applicability policy.

Two independent questions are answered per indicator:
- which presentation bucket it belongs to (its own applicability status,
  never the classifier output), and
- whether it feeds the category's passing/total counters.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from readiness.models import ApplicabilityStatus, Indicator


@dataclass(frozen=True)
class IndicatorBuckets:
    """Indicators partitioned by applicability status."""

    required: tuple[Indicator, ...] = ()
    optional: tuple[Indicator, ...] = ()
    not_applicable: tuple[Indicator, ...] = ()

    def __len__(self) -> int:
        return len(self.required) + len(self.optional) + len(self.not_applicable)

    def to_dict(self) -> dict:
        """Convert to dictionary of indicator names."""
        return {
            "required": [i.name for i in self.required],
            "optional": [i.name for i in self.optional],
            "not_applicable": [i.name for i in self.not_applicable],
        }


def applicability_bucket(indicator: Indicator) -> ApplicabilityStatus:
    """Bucket used for grouping in the presentation layer."""
    return indicator.applicability.status


def counts_toward_math(indicator: Indicator) -> bool:
    """Whether the indicator feeds category counters."""
    return indicator.applicability.included_in_category_math


def is_excluded(indicator: Indicator) -> bool:
    """Whether the indicator must be displayed as excluded for this site."""
    return indicator.applicability.status == ApplicabilityStatus.NOT_APPLICABLE


def partition(indicators: Iterable[Indicator]) -> IndicatorBuckets:
    """Split indicators into required/optional/not_applicable, keeping order."""
    required: list[Indicator] = []
    optional: list[Indicator] = []
    not_applicable: list[Indicator] = []

    buckets = {
        ApplicabilityStatus.REQUIRED: required,
        ApplicabilityStatus.OPTIONAL: optional,
        ApplicabilityStatus.NOT_APPLICABLE: not_applicable,
    }
    for indicator in indicators:
        buckets[applicability_bucket(indicator)].append(indicator)

    return IndicatorBuckets(
        required=tuple(required),
        optional=tuple(optional),
        not_applicable=tuple(not_applicable),
    )
