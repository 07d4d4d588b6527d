"""Recommendation synthesizer.

Turns one indicator's evidence into remediation advice. Each indicator
type has its own recommender registered in ``RECOMMENDERS``; names without
one fall back to ``recommend_generic``. Every recommender is a pure
function of ``(indicator, origin)``.

All types except robots_txt share the same three branches:
- absent: no evidence, nothing found or a zero score -> creation template
- invalid: validation errors present -> error list
- healthy: otherwise -> enhancement list
"""

from collections.abc import Callable, Iterable

from readiness.analysis import (
    AgentJsonAnalysis,
    CanonicalAnalysis,
    IndicatorAnalysis,
    JsonLdAnalysis,
    LlmsTxtAnalysis,
    McpAnalysis,
    SeoAnalysis,
    SitemapAnalysis,
)
from readiness.catalog import display_name_for
from readiness.fixes.templates import (
    ROBOTS_CREATE_TEMPLATE,
    ROBOTS_REFINE_TEMPLATE,
    ROBOTS_REVIEW_TEMPLATE,
    RECOMMENDATION_TEMPLATES,
    RecommendationTemplate,
    fill_placeholders,
)
from readiness.models import Evidence, Indicator
from readiness.scoring.aggregator import round_half_up

Recommender = Callable[[Indicator, str], str]
AnalysisNotes = Callable[[IndicatorAnalysis | None], list[str]]

# Used in example payloads when no origin is known
PLACEHOLDER_ORIGIN = "https://www.example.com"

# JSON-LD types worth having on most sites
RECOMMENDED_SCHEMA_TYPES: tuple[str, ...] = ("Organization", "WebSite", "BreadcrumbList")


def normalize_origin(origin: str | None) -> str:
    """Strip whitespace and trailing slashes; fall back to a placeholder."""
    cleaned = (origin or "").strip().rstrip("/")
    return cleaned or PLACEHOLDER_ORIGIN


# =============================================================================
# Text building blocks
# =============================================================================


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _section(heading: str, items: Iterable[str]) -> str | None:
    """A heading followed by bullets, or None when there is nothing to list."""
    items = [item for item in items if item]
    if not items:
        return None
    return f"{heading}\n\n{_bullets(items)}"


def _join(parts: Iterable[str | None]) -> str:
    return "\n\n".join(part for part in parts if part)


def _opportunities(indicator: Indicator) -> tuple[str, ...]:
    if indicator.evidence is None:
        return ()
    return indicator.evidence.ai_factors.opportunities


def _is_absent(indicator: Indicator) -> bool:
    evidence = indicator.evidence
    return evidence is None or not evidence.found or indicator.score == 0


def _create_text(template: RecommendationTemplate, origin: str) -> str:
    location = fill_placeholders(template.location, origin)
    if location.startswith(origin):
        where = f"Create it at {location}. Example:"
    else:
        where = f"Add it {location}. Example:"

    followup = None
    if template.create_followup:
        followup = fill_placeholders(template.create_followup, origin)

    return _join(
        [
            f"No {template.display_name} was found. {template.create_intro}",
            where,
            fill_placeholders(template.scaffold_template, origin),
            followup,
        ]
    )


def _invalid_text(evidence: Evidence, template: RecommendationTemplate) -> str:
    validation = evidence.validation
    return _join(
        [
            f"Your {template.display_name} was found but has errors that need fixing:\n\n"
            + _bullets(validation.errors),
            _section("Missing elements:", validation.missing),
            _section("Warnings:", validation.warnings),
            _section("Additional opportunities:", evidence.ai_factors.opportunities),
        ]
    )


def _healthy_text(
    indicator: Indicator,
    template: RecommendationTemplate,
    origin: str,
    notes: list[str],
) -> str:
    warnings = indicator.evidence.validation.warnings if indicator.evidence else ()
    return _join(
        [
            f"Great job! Your {template.display_name} is in place and valid. "
            "Consider these enhancements:\n\n"
            + _bullets(fill_placeholders(e, origin) for e in template.enhancements),
            _section("From the scan:", notes),
            _section("Warnings:", warnings),
            _section("Additional opportunities:", _opportunities(indicator)),
        ]
    )


def _three_branch(
    indicator: Indicator,
    origin: str,
    template: RecommendationTemplate,
    notes: AnalysisNotes,
) -> str:
    evidence = indicator.evidence
    if evidence is None or _is_absent(indicator):
        return _create_text(template, origin)
    if evidence.validation.errors:
        return _invalid_text(evidence, template)
    return _healthy_text(indicator, template, origin, notes(evidence.analysis))


# =============================================================================
# Analysis-driven notes for the healthy branch
# =============================================================================


def _sitemap_notes(analysis: IndicatorAnalysis | None) -> list[str]:
    if not isinstance(analysis, SitemapAnalysis):
        return []
    notes = []
    if analysis.url_count is not None:
        notes.append(f"Your sitemap lists {analysis.url_count} URLs")
    if analysis.url_count is not None and analysis.url_count > 50000:
        notes.append("Over 50,000 URLs: split the sitemap and add a sitemap index")
    if not analysis.has_lastmod:
        notes.append("No <lastmod> dates were found; add them so agents can spot fresh pages")
    return notes


def _llms_txt_notes(analysis: IndicatorAnalysis | None) -> list[str]:
    if not isinstance(analysis, LlmsTxtAnalysis):
        return []
    notes = []
    if analysis.section_count:
        notes.append(f"Found {analysis.section_count} sections")
    if not analysis.has_title:
        notes.append("Start the file with a single '# Site name' heading")
    if not analysis.has_summary:
        notes.append("Add a one-line '> summary' blockquote under the title")
    if analysis.link_count == 0:
        notes.append("No links were found; link each section to the pages it describes")
    return notes


def _json_ld_notes(analysis: IndicatorAnalysis | None) -> list[str]:
    if not isinstance(analysis, JsonLdAnalysis):
        return []
    notes = []
    if analysis.types:
        notes.append(f"Detected types: {', '.join(analysis.types)}")
    present = set(analysis.types)
    if analysis.has_organization:
        present.add("Organization")
    if analysis.has_website:
        present.add("WebSite")
    if analysis.has_breadcrumb:
        present.add("BreadcrumbList")
    missing = [t for t in RECOMMENDED_SCHEMA_TYPES if t not in present]
    if missing:
        notes.append(f"Consider adding: {', '.join(missing)}")
    notes.extend(analysis.validation_issues)
    return notes


def _canonical_notes(analysis: IndicatorAnalysis | None) -> list[str]:
    if not isinstance(analysis, CanonicalAnalysis):
        return []
    notes = []
    if analysis.is_absolute is False:
        notes.append("The canonical URL is relative; use an absolute URL")
    if analysis.is_self_referencing is False and analysis.canonical_url:
        notes.append(f"The canonical link points to {analysis.canonical_url}; confirm this is intended")
    if analysis.matches_og_url is False:
        notes.append("og:url does not match the canonical URL")
    return notes


def _agent_json_notes(analysis: IndicatorAnalysis | None) -> list[str]:
    if not isinstance(analysis, AgentJsonAnalysis):
        return []
    notes = []
    if analysis.endpoints:
        notes.append(f"Declares {len(analysis.endpoints)} endpoints")
    else:
        notes.append("No endpoints are declared; list the actions agents can take")
    if analysis.capability_count == 0:
        notes.append("Add a capabilities list so agents can tell what is supported")
    if not analysis.version:
        notes.append("Add a version field")
    undocumented = [e.path for e in analysis.endpoints if not e.description]
    if undocumented:
        notes.append(f"Describe these endpoints: {', '.join(undocumented)}")
    return notes


def _mcp_notes(analysis: IndicatorAnalysis | None) -> list[str]:
    if not isinstance(analysis, McpAnalysis):
        return []
    notes = [
        f"Advertises {len(analysis.servers)} servers, {len(analysis.tools)} tools "
        f"and {len(analysis.prompts)} prompts"
    ]
    undocumented = [t.name for t in analysis.tools if not t.description]
    if undocumented:
        notes.append(f"Describe these tools: {', '.join(undocumented)}")
    if analysis.auth_required:
        notes.append("Authentication is required; document how agents obtain credentials")
    return notes


def _seo_notes(analysis: IndicatorAnalysis | None) -> list[str]:
    if not isinstance(analysis, SeoAnalysis):
        return []
    notes = []
    if analysis.title.issue:
        notes.append(f"Title: {analysis.title.issue}")
    if analysis.meta_description.issue:
        notes.append(f"Meta description: {analysis.meta_description.issue}")
    if analysis.h1_count != 1:
        notes.append(f"Found {analysis.h1_count} <h1> elements; use exactly one")
    if analysis.heading_issue:
        notes.append(f"Headings: {analysis.heading_issue}")
    if not analysis.og_has_image:
        notes.append("Add an og:image tag")
    return notes


# =============================================================================
# Recommenders
# =============================================================================


def _standard(indicator_name: str, notes: AnalysisNotes) -> Recommender:
    template = RECOMMENDATION_TEMPLATES[indicator_name]

    def recommender(indicator: Indicator, origin: str) -> str:
        return _three_branch(indicator, normalize_origin(origin), template, notes)

    recommender.__name__ = f"recommend_{indicator_name}"
    return recommender


def recommend_robots_txt(indicator: Indicator, origin: str) -> str:
    """robots.txt advice, chosen by the displayed percentage alone."""
    origin = normalize_origin(origin)
    percentage = round_half_up(indicator.score * 100)
    if percentage == 0:
        return fill_placeholders(ROBOTS_CREATE_TEMPLATE, origin)
    if percentage == 100:
        return fill_placeholders(ROBOTS_REFINE_TEMPLATE, origin)
    return fill_placeholders(ROBOTS_REVIEW_TEMPLATE, origin)


def recommend_generic(indicator: Indicator, origin: str) -> str:
    """Fallback for indicator types without a dedicated recommender."""
    display_name = display_name_for(indicator.name)
    return _join(
        [
            f"Review the {display_name} findings from the scan and address any issues "
            "so AI agents can rely on this signal.",
            _section("Opportunities:", _opportunities(indicator)),
        ]
    )


recommend_sitemap_xml = _standard("sitemap_xml", _sitemap_notes)
recommend_llms_txt = _standard("llms_txt", _llms_txt_notes)
recommend_json_ld = _standard("json_ld", _json_ld_notes)
recommend_canonical = _standard("canonical", _canonical_notes)
recommend_agent_json = _standard("agent_json", _agent_json_notes)
recommend_mcp = _standard("mcp", _mcp_notes)
recommend_seo_basic = _standard("seo_basic", _seo_notes)


RECOMMENDERS: dict[str, Recommender] = {
    "robots_txt": recommend_robots_txt,
    "sitemap_xml": recommend_sitemap_xml,
    "llms_txt": recommend_llms_txt,
    "json_ld": recommend_json_ld,
    "canonical": recommend_canonical,
    "agent_json": recommend_agent_json,
    "mcp": recommend_mcp,
    "seo_basic": recommend_seo_basic,
}


def get_recommender(indicator_name: str) -> Recommender:
    """Recommender for an indicator name, never failing."""
    return RECOMMENDERS.get(indicator_name, recommend_generic)


def recommend(indicator: Indicator, origin: str) -> str:
    """
    Produce remediation advice for one indicator.

    Args:
        indicator: Indicator with its evidence
        origin: Scheme and host of the audited site, used in example payloads

    Returns:
        Multi-paragraph advice text
    """
    return get_recommender(indicator.name)(indicator, origin)
