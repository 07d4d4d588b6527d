"""Builders for indicators and reports used across tests."""

from typing import Any

from readiness.models import (
    AIFactors,
    Applicability,
    ApplicabilityStatus,
    Category,
    CategoryKey,
    Evidence,
    Indicator,
    Report,
    SiteInfo,
    ValidationFindings,
)

EQUAL_WEIGHTS = {
    CategoryKey.DISCOVERY: 0.25,
    CategoryKey.UNDERSTANDING: 0.25,
    CategoryKey.ACTIONS: 0.25,
    CategoryKey.TRUST: 0.25,
}


def make_evidence(
    found: bool = True,
    errors: tuple[str, ...] = (),
    warnings: tuple[str, ...] = (),
    missing: tuple[str, ...] = (),
    opportunities: tuple[str, ...] = (),
    analysis: Any = None,
) -> Evidence:
    """Evidence with the given findings."""
    return Evidence(
        found=found,
        status_code=200 if found else 404,
        validation=ValidationFindings(errors=errors, warnings=warnings, missing=missing),
        ai_factors=AIFactors(opportunities=opportunities),
        analysis=analysis,
    )


def make_indicator(
    name: str = "sitemap_xml",
    score: float = 1.0,
    status: ApplicabilityStatus = ApplicabilityStatus.REQUIRED,
    included: bool | None = None,
    evidence: Evidence | None = None,
) -> Indicator:
    """Indicator with the math flag defaulting to 'not excluded'."""
    if included is None:
        included = status != ApplicabilityStatus.NOT_APPLICABLE
    return Indicator(
        name=name,
        score=score,
        applicability=Applicability(status=status, included_in_category_math=included),
        evidence=evidence,
    )


def make_report(
    category_scores: dict[CategoryKey, float] | None = None,
    weights: dict[CategoryKey, float] | None = None,
    members: dict[CategoryKey, list[Indicator]] | None = None,
    url: str = "https://www.acme-tools.com/products",
) -> Report:
    """Report with four categories; members default to none."""
    category_scores = category_scores or {
        CategoryKey.DISCOVERY: 0.9,
        CategoryKey.UNDERSTANDING: 0.6,
        CategoryKey.ACTIONS: 0.4,
        CategoryKey.TRUST: 1.0,
    }
    members = members or {}
    indicators = {i.name: i for group in members.values() for i in group}
    categories = {
        key: Category(
            score=score,
            indicator_scores={i.name: i.score for i in members.get(key, [])},
        )
        for key, score in category_scores.items()
    }
    return Report(
        site=SiteInfo(url=url, category="ecommerce"),
        categories=categories,
        indicators=indicators,
        weights=dict(weights or EQUAL_WEIGHTS),
    )


def report_payload() -> dict[str, Any]:
    """A complete report in the assembler's JSON wire format."""
    return {
        "site": {
            "url": "https://www.acme-tools.com/",
            "scan_date": "2026-03-01T10:00:00Z",
            "category": "ecommerce",
        },
        "categories": {
            "discovery": {
                "score": 0.9,
                "indicator_scores": {"sitemap_xml": 1.0, "seo_basic": 0.85},
            },
            "understanding": {
                "score": 0.6,
                "indicator_scores": {"json_ld": 0.6, "llms_txt": 0.0},
            },
            "actions": {
                "score": 0.4,
                "indicator_scores": {"agent_json": 0.4, "mcp": 0.0},
            },
            "trust": {"score": 1.0, "indicator_scores": {"robots_txt": 1.0}},
        },
        "indicators": {
            "sitemap_xml": {
                "name": "sitemap_xml",
                "score": 1.0,
                "applicability": {"status": "required", "included_in_category_math": True},
                "evidence": {
                    "found": True,
                    "statusCode": 200,
                    "validation": {"errors": [], "warnings": []},
                    "aiFactors": {"strengths": ["Valid XML"], "opportunities": []},
                    "analysis": {"urlCount": 120, "hasLastmod": True},
                    "metadata": {"checkedUrl": "https://www.acme-tools.com/sitemap.xml"},
                },
            },
            "seo_basic": {
                "name": "seo_basic",
                "score": 0.85,
                "applicability": {"status": "required"},
                "evidence": {"found": True},
            },
            "json_ld": {
                "name": "json_ld",
                "score": 0.6,
                "applicability": {"status": "required", "included_in_category_math": True},
                "evidence": {
                    "found": True,
                    "validation": {"errors": ["missing required field: name"]},
                    "aiFactors": {"opportunities": ["Add Product markup"]},
                    "analysis": {"count": 1, "types": ["WebSite"]},
                },
            },
            "llms_txt": {
                "name": "llms_txt",
                "score": 0.0,
                "applicability": {"status": "optional", "included_in_category_math": False},
                "evidence": {"found": False, "statusCode": 404},
            },
            "agent_json": {
                "name": "agent_json",
                "score": 0.4,
                "applicability": {"status": "optional", "included_in_category_math": True},
                "evidence": {"found": True, "analysis": {"endpoints": []}},
            },
            "mcp": {
                "name": "mcp",
                "score": 0.0,
                "applicability": {
                    "status": "not_applicable",
                    "reason": "Not expected for this profile",
                },
                "evidence": {"found": False},
            },
            "robots_txt": {
                "name": "robots_txt",
                "score": 1.0,
                "applicability": {"status": "required", "included_in_category_math": True},
                "evidence": {
                    "found": True,
                    "statusCode": 200,
                    "analysis": {
                        "hasUserAgent": True,
                        "robotsMeta": {"found": False},
                        "aiAgentRestrictions": [],
                    },
                },
            },
        },
        "weights": {"discovery": 0.25, "understanding": 0.25, "actions": 0.25, "trust": 0.25},
        "overall": {"raw_0_1": 0.725, "score_0_100": 73},
    }
