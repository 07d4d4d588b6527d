"""Core data model: evidence, indicators, categories and reports.

Every value here is immutable once built. Reports are produced by the
external assembler (see ``readiness.reports.loader``) and only read by the
engine.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from urllib.parse import urlparse

from readiness.analysis import IndicatorAnalysis


class IndicatorStatus(StrEnum):
    """Discrete display state of an indicator."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"
    NOT_APPLICABLE = "not_applicable"


class ApplicabilityStatus(StrEnum):
    """Whether an indicator matters for the site's profile."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    NOT_APPLICABLE = "not_applicable"


class CategoryKey(StrEnum):
    """The four fixed indicator groups."""

    DISCOVERY = "discovery"
    UNDERSTANDING = "understanding"
    ACTIONS = "actions"
    TRUST = "trust"


# Fixed iteration order for categories
CATEGORY_ORDER: tuple[CategoryKey, ...] = (
    CategoryKey.DISCOVERY,
    CategoryKey.UNDERSTANDING,
    CategoryKey.ACTIONS,
    CategoryKey.TRUST,
)


class SiteProfile(StrEnum):
    """Site profiles that drive applicability upstream."""

    BLOG_CONTENT = "blog_content"
    ECOMMERCE = "ecommerce"
    SAAS_APP = "saas_app"
    KB_SUPPORT = "kb_support"
    GOV_NONTRANSACTING = "gov_nontransacting"
    CUSTOM = "custom"


class AccessIntent(StrEnum):
    """A site's stance toward AI agents."""

    ALLOW = "allow"
    PARTIAL = "partial"
    BLOCK = "block"


@dataclass(frozen=True)
class ValidationFindings:
    """Validation findings grouped by severity."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "missing": list(self.missing),
        }


@dataclass(frozen=True)
class AIFactors:
    """Qualitative factors affecting AI agent compatibility."""

    strengths: tuple[str, ...] = ()
    opportunities: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "strengths": list(self.strengths),
            "opportunities": list(self.opportunities),
        }


@dataclass(frozen=True)
class EvidenceMetadata:
    """Technical details about the scan of one indicator."""

    checked_url: str | None = None
    response_time: float | None = None  # milliseconds
    error: str | None = None
    reason: str | None = None

    def to_dict(self) -> dict:
        return {
            "checked_url": self.checked_url,
            "response_time": self.response_time,
            "error": self.error,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class Evidence:
    """Raw scan findings backing one indicator's score."""

    found: bool = False
    status_code: int | None = None
    content_preview: str | None = None
    validation: ValidationFindings = field(default_factory=ValidationFindings)
    ai_factors: AIFactors = field(default_factory=AIFactors)
    analysis: IndicatorAnalysis | None = None
    metadata: EvidenceMetadata = field(default_factory=EvidenceMetadata)

    def to_dict(self) -> dict:
        """Convert to dictionary (the analysis payload is not echoed back)."""
        return {
            "found": self.found,
            "status_code": self.status_code,
            "content_preview": self.content_preview,
            "validation": self.validation.to_dict(),
            "ai_factors": self.ai_factors.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


@dataclass(frozen=True)
class Applicability:
    """Applicability of an indicator for the site's profile.

    ``status`` and ``included_in_category_math`` are independent flags:
    an excluded indicator may still be counted, and vice versa.
    """

    status: ApplicabilityStatus = ApplicabilityStatus.REQUIRED
    included_in_category_math: bool = True
    reason: str = ""

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "included_in_category_math": self.included_in_category_math,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class Indicator:
    """One measurable AI readiness signal."""

    name: str
    score: float  # 0.0-1.0
    applicability: Applicability = field(default_factory=Applicability)
    evidence: Evidence | None = None


@dataclass(frozen=True)
class Category:
    """A category score as supplied by the assembler."""

    score: float  # 0.0-1.0, authoritative
    indicator_scores: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class SiteInfo:
    """The audited site."""

    url: str
    category: str = SiteProfile.CUSTOM.value  # site profile
    scan_date: str | None = None

    @property
    def origin(self) -> str | None:
        """Scheme and host of the site URL, or None when it is not absolute."""
        parsed = urlparse(self.url)
        if not parsed.scheme or not parsed.netloc:
            return None
        return f"{parsed.scheme}://{parsed.netloc}"

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "category": self.category,
            "scan_date": self.scan_date,
        }


@dataclass(frozen=True)
class SuppliedOverall:
    """Overall score as reported by the assembler (informational)."""

    raw_0_1: float
    score_0_100: int | None = None


@dataclass(frozen=True)
class Report:
    """A complete assembled report, read-only for the engine."""

    site: SiteInfo
    categories: dict[CategoryKey, Category]
    indicators: dict[str, Indicator]
    weights: dict[CategoryKey, float]
    overall: SuppliedOverall | None = None

    def category_of(self, indicator_name: str) -> CategoryKey | None:
        """Return the first category (in fixed order) listing ``indicator_name``."""
        for key in CATEGORY_ORDER:
            category = self.categories.get(key)
            if category is not None and indicator_name in category.indicator_scores:
                return key
        return None

    def indicators_for(self, key: CategoryKey) -> list[Indicator]:
        """Indicators referenced by a category, skipping dangling names."""
        category = self.categories.get(key)
        if category is None:
            return []
        return [
            self.indicators[name]
            for name in category.indicator_scores
            if name in self.indicators
        ]
