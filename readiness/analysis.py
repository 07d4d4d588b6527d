"""Typed views of the scanner's per-indicator analysis payloads.

The scanner attaches an ``analysis`` object to each indicator's evidence
whose shape depends on the indicator type. Instead of passing that around
as an untyped mapping, it is parsed into one variant of a tagged union
keyed by indicator name. Recommendation generators can then rely on the
fields of their own variant.

Wire payloads use camelCase keys; both camelCase and snake_case are
accepted. Unknown keys are ignored. Missing keys and values of the wrong
JSON type take neutral defaults.
"""

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

# =============================================================================
# Parsing helpers
# =============================================================================


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present, non-None value among ``keys``."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def _as_bool(value: Any) -> bool:
    return bool(value) if value is not None else False


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_strings(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list | tuple):
        return ()
    return tuple(str(item) for item in value if item is not None)


def _as_mappings(value: Any) -> list[Mapping[str, Any]]:
    if not isinstance(value, list | tuple):
        return []
    return [item for item in value if isinstance(item, Mapping)]


# =============================================================================
# Shared pieces
# =============================================================================


@dataclass(frozen=True)
class NamedEntry:
    """A named item advertised by an agent configuration (server, tool, prompt)."""

    name: str
    description: str | None = None
    version: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NamedEntry":
        return cls(
            name=str(data.get("name", "")),
            description=data.get("description"),
            version=data.get("version"),
        )


@dataclass(frozen=True)
class RobotsRule:
    """A user-agent group from robots.txt."""

    user_agent: str
    disallow: tuple[str, ...] = ()
    allow: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RobotsRule":
        return cls(
            user_agent=str(_pick(data, "userAgent", "user_agent", default="*")),
            disallow=_as_strings(data.get("disallow")),
            allow=_as_strings(data.get("allow")),
        )


@dataclass(frozen=True)
class AgentRestriction:
    """A directive restricting a specific AI agent."""

    user_agent: str
    directive: str
    scope: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AgentRestriction":
        return cls(
            user_agent=str(_pick(data, "userAgent", "user_agent", default="")),
            directive=str(data.get("directive", "")),
            scope=data.get("scope"),
        )


@dataclass(frozen=True)
class LlmsTxtSection:
    """A markdown section of llms.txt."""

    title: str
    content: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LlmsTxtSection":
        return cls(title=str(data.get("title", "")), content=str(data.get("content", "")))


@dataclass(frozen=True)
class AgentEndpoint:
    """An endpoint declared in agent.json."""

    path: str
    method: str = "GET"
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AgentEndpoint":
        return cls(
            path=str(data.get("path", "")),
            method=str(data.get("method", "GET")).upper(),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class TextElementCheck:
    """Presence/quality check of a single text element (title, meta description)."""

    exists: bool = False
    text: str | None = None
    length: int | None = None
    optimal: bool = False
    issue: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None, text_key: str) -> "TextElementCheck":
        if not isinstance(data, Mapping) or not data:
            return cls()
        return cls(
            exists=_as_bool(data.get("exists")),
            text=data.get(text_key),
            length=_as_int(data.get("length")),
            optimal=_as_bool(data.get("optimal")),
            issue=data.get("issue"),
        )


# =============================================================================
# Variants
# =============================================================================


@dataclass(frozen=True)
class RobotsAnalysis:
    """robots.txt and robots meta findings."""

    kind: ClassVar[str] = "robots_txt"

    access_intent: str | None = None
    has_user_agent: bool = False
    has_ai_directives: bool = False
    rules: tuple[RobotsRule, ...] = ()
    sitemaps: tuple[str, ...] = ()
    robots_meta_found: bool = False
    robots_meta_allows_ai: bool | None = None
    ai_agent_restrictions: tuple[AgentRestriction, ...] = ()
    sitemap_references: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RobotsAnalysis":
        robots_txt = _as_mapping(_pick(data, "robotsTxt", "robots_txt"))
        robots_meta = _as_mapping(_pick(data, "robotsMeta", "robots_meta"))
        rules = data.get("rules") or robots_txt.get("rules")
        sitemaps = data.get("sitemaps") or robots_txt.get("sitemaps")
        restrictions = _pick(data, "aiAgentRestrictions", "ai_agent_restrictions")

        allows_ai = _pick(robots_meta, "allowsAI", "allows_ai")
        return cls(
            access_intent=_pick(data, "accessIntent", "access_intent"),
            has_user_agent=_as_bool(_pick(data, "hasUserAgent", "has_user_agent")),
            has_ai_directives=_as_bool(_pick(data, "hasAiDirectives", "has_ai_directives")),
            rules=tuple(RobotsRule.from_dict(r) for r in _as_mappings(rules)),
            sitemaps=_as_strings(sitemaps),
            robots_meta_found=_as_bool(robots_meta.get("found")),
            robots_meta_allows_ai=None if allows_ai is None else bool(allows_ai),
            ai_agent_restrictions=tuple(
                AgentRestriction.from_dict(r) for r in _as_mappings(restrictions)
            ),
            sitemap_references=_as_int(_pick(data, "sitemapReferences", "sitemap_references")),
        )


@dataclass(frozen=True)
class SitemapAnalysis:
    """XML sitemap findings."""

    kind: ClassVar[str] = "sitemap_xml"

    url_count: int | None = None
    is_valid: bool | None = None
    last_modified: str | None = None
    has_images: bool = False
    has_videos: bool = False
    has_lastmod: bool = False
    has_changefreq: bool = False
    has_priority: bool = False
    sitemap_urls: tuple[str, ...] = ()
    checked_locations: tuple[str, ...] = ()
    valid_sitemaps: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SitemapAnalysis":
        url_count = _as_int(_pick(data, "urlCount", "url_count", "totalUrls", "total_urls"))
        if url_count is None and data.get("urls"):
            url_count = len(_as_strings(data.get("urls")))
        is_valid = _pick(data, "isValid", "is_valid")
        return cls(
            url_count=url_count,
            is_valid=None if is_valid is None else bool(is_valid),
            last_modified=_pick(data, "lastModified", "last_modified"),
            has_images=_as_bool(_pick(data, "hasImages", "has_images")),
            has_videos=_as_bool(_pick(data, "hasVideos", "has_videos")),
            has_lastmod=_as_bool(_pick(data, "hasLastmod", "has_lastmod")),
            has_changefreq=_as_bool(_pick(data, "hasChangefreq", "has_changefreq")),
            has_priority=_as_bool(_pick(data, "hasPriority", "has_priority")),
            sitemap_urls=_as_strings(_pick(data, "sitemapUrls", "sitemap_urls")),
            checked_locations=_as_strings(_pick(data, "checkedLocations", "checked_locations")),
            valid_sitemaps=_as_int(_pick(data, "validSitemaps", "valid_sitemaps")),
        )


@dataclass(frozen=True)
class LlmsTxtAnalysis:
    """llms.txt structure findings."""

    kind: ClassVar[str] = "llms_txt"

    sections: tuple[LlmsTxtSection, ...] = ()
    section_count: int = 0
    has_title: bool = False
    has_summary: bool = False
    has_instructions: bool = False
    has_examples: bool = False
    link_count: int | None = None
    content_length: int | None = None
    detected_sections: tuple[str, ...] = ()
    checked_paths: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LlmsTxtAnalysis":
        parsed = _as_mapping(_pick(data, "parsedContent", "parsed_content"))
        raw_sections = data.get("sections") or parsed.get("sections")
        sections = tuple(LlmsTxtSection.from_dict(s) for s in _as_mappings(raw_sections))
        count = _as_int(
            _pick(data, "totalSections", "total_sections", "sectionCount", "section_count")
        )
        return cls(
            sections=sections,
            section_count=count if count is not None else len(sections),
            has_title=_as_bool(_pick(data, "hasTitle", "has_title")),
            has_summary=_as_bool(_pick(data, "hasSummary", "has_summary")),
            has_instructions=_as_bool(_pick(data, "hasInstructions", "has_instructions")),
            has_examples=_as_bool(_pick(data, "hasExamples", "has_examples")),
            link_count=_as_int(_pick(data, "linkCount", "link_count")),
            content_length=_as_int(_pick(data, "contentLength", "content_length")),
            detected_sections=_as_strings(_pick(data, "detectedSections", "detected_sections")),
            checked_paths=_as_strings(_pick(data, "checkedPaths", "checked_paths")),
        )


@dataclass(frozen=True)
class JsonLdAnalysis:
    """JSON-LD structured data findings."""

    kind: ClassVar[str] = "json_ld"

    count: int = 0
    types: tuple[str, ...] = ()
    has_organization: bool = False
    has_website: bool = False
    has_webpage: bool = False
    has_breadcrumb: bool = False
    has_product: bool = False
    has_article: bool = False
    validation_issues: tuple[str, ...] = ()
    ai_relevant_types: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JsonLdAnalysis":
        types = _as_strings(data.get("types"))
        return cls(
            count=_as_int(data.get("count")) or len(types),
            types=types,
            has_organization=_as_bool(_pick(data, "hasOrganization", "has_organization")),
            has_website=_as_bool(_pick(data, "hasWebSite", "has_website")),
            has_webpage=_as_bool(_pick(data, "hasWebPage", "has_webpage")),
            has_breadcrumb=_as_bool(_pick(data, "hasBreadcrumb", "has_breadcrumb")),
            has_product=_as_bool(_pick(data, "hasProduct", "has_product")),
            has_article=_as_bool(_pick(data, "hasArticle", "has_article")),
            validation_issues=_as_strings(_pick(data, "validationIssues", "validation_issues")),
            ai_relevant_types=_as_strings(_pick(data, "aiRelevantTypes", "ai_relevant_types")),
        )


@dataclass(frozen=True)
class CanonicalAnalysis:
    """Canonical link findings."""

    kind: ClassVar[str] = "canonical"

    canonical_url: str | None = None
    page_url: str | None = None
    og_url: str | None = None
    is_valid: bool | None = None
    is_self_referencing: bool | None = None
    is_absolute: bool | None = None
    matches_og_url: bool | None = None
    response_code: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CanonicalAnalysis":
        def flag(*keys: str) -> bool | None:
            value = _pick(data, *keys)
            return None if value is None else bool(value)

        return cls(
            canonical_url=_pick(data, "canonicalUrl", "canonical_url", "url"),
            page_url=_pick(data, "pageUrl", "page_url"),
            og_url=_pick(data, "ogUrl", "og_url"),
            is_valid=flag("isValid", "is_valid"),
            is_self_referencing=flag("isSelfReferencing", "is_self_referencing"),
            is_absolute=flag("isAbsolute", "is_absolute"),
            matches_og_url=flag("matchesOgUrl", "matches_og_url"),
            response_code=_as_int(_pick(data, "responseCode", "response_code")),
        )


@dataclass(frozen=True)
class AgentJsonAnalysis:
    """agent.json findings."""

    kind: ClassVar[str] = "agent_json"

    version: str | None = None
    endpoints: tuple[AgentEndpoint, ...] = ()
    capabilities: tuple[str, ...] = ()
    capability_count: int = 0
    has_api: bool = False
    page_url: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AgentJsonAnalysis":
        raw_capabilities = data.get("capabilities")
        # The scanner reports either the capability names or just their number
        if isinstance(raw_capabilities, int | float) and not isinstance(raw_capabilities, bool):
            capabilities: tuple[str, ...] = ()
            capability_count = int(raw_capabilities)
        else:
            capabilities = _as_strings(raw_capabilities)
            capability_count = len(capabilities)
        return cls(
            version=data.get("version"),
            endpoints=tuple(AgentEndpoint.from_dict(e) for e in _as_mappings(data.get("endpoints"))),
            capabilities=capabilities,
            capability_count=capability_count,
            has_api=_as_bool(_pick(data, "hasApi", "has_api")),
            page_url=_pick(data, "pageUrl", "page_url"),
        )


@dataclass(frozen=True)
class McpAnalysis:
    """Model Context Protocol configuration findings."""

    kind: ClassVar[str] = "mcp"

    servers: tuple[NamedEntry, ...] = ()
    tools: tuple[NamedEntry, ...] = ()
    prompts: tuple[NamedEntry, ...] = ()
    checked_url: str | None = None
    has_mcp: bool = False
    action_count: int | None = None
    auth_required: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "McpAnalysis":
        config = _as_mapping(_pick(data, "mcpConfig", "mcp_config"))

        def entries(key: str) -> tuple[NamedEntry, ...]:
            raw = data.get(key) or config.get(key)
            return tuple(NamedEntry.from_dict(e) for e in _as_mappings(raw))

        auth = _pick(data, "authRequired", "auth_required")
        return cls(
            servers=entries("servers"),
            tools=entries("tools"),
            prompts=entries("prompts"),
            checked_url=_pick(data, "checkedUrl", "checked_url"),
            has_mcp=_as_bool(_pick(data, "hasMcp", "has_mcp")),
            action_count=_as_int(_pick(data, "actionCount", "action_count")),
            auth_required=None if auth is None else bool(auth),
        )


@dataclass(frozen=True)
class SeoAnalysis:
    """Basic on-page SEO findings (title, description, headings, Open Graph)."""

    kind: ClassVar[str] = "seo_basic"

    title: TextElementCheck = field(default_factory=TextElementCheck)
    meta_description: TextElementCheck = field(default_factory=TextElementCheck)
    h1_count: int = 0
    has_h1: bool = False
    heading_hierarchy: bool = False
    heading_issue: str | None = None
    og_has_title: bool = False
    og_has_description: bool = False
    og_has_image: bool = False
    og_score: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SeoAnalysis":
        headings = _as_mapping(data.get("headings"))
        open_graph = _as_mapping(_pick(data, "openGraph", "open_graph"))
        og_score = open_graph.get("score")
        return cls(
            title=TextElementCheck.from_dict(data.get("title"), "title"),
            meta_description=TextElementCheck.from_dict(
                _pick(data, "metaDescription", "meta_description"), "metaDescription"
            ),
            h1_count=_as_int(_pick(headings, "h1Count", "h1_count")) or 0,
            has_h1=_as_bool(_pick(headings, "hasH1", "has_h1")),
            heading_hierarchy=_as_bool(headings.get("hierarchy")),
            heading_issue=headings.get("issue"),
            og_has_title=_as_bool(_pick(open_graph, "hasTitle", "has_title")),
            og_has_description=_as_bool(_pick(open_graph, "hasDescription", "has_description")),
            og_has_image=_as_bool(_pick(open_graph, "hasImage", "has_image")),
            og_score=float(og_score) if isinstance(og_score, int | float) else None,
        )


@dataclass(frozen=True)
class GenericAnalysis:
    """Analysis payload of an indicator type without a dedicated view."""

    kind: ClassVar[str] = "generic"

    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenericAnalysis":
        return cls(data=dict(data))


IndicatorAnalysis = (
    RobotsAnalysis
    | SitemapAnalysis
    | LlmsTxtAnalysis
    | JsonLdAnalysis
    | CanonicalAnalysis
    | AgentJsonAnalysis
    | McpAnalysis
    | SeoAnalysis
    | GenericAnalysis
)

ANALYSIS_PARSERS: dict[str, Callable[[Mapping[str, Any]], IndicatorAnalysis]] = {
    RobotsAnalysis.kind: RobotsAnalysis.from_dict,
    SitemapAnalysis.kind: SitemapAnalysis.from_dict,
    LlmsTxtAnalysis.kind: LlmsTxtAnalysis.from_dict,
    JsonLdAnalysis.kind: JsonLdAnalysis.from_dict,
    CanonicalAnalysis.kind: CanonicalAnalysis.from_dict,
    AgentJsonAnalysis.kind: AgentJsonAnalysis.from_dict,
    McpAnalysis.kind: McpAnalysis.from_dict,
    SeoAnalysis.kind: SeoAnalysis.from_dict,
}


def parse_analysis(indicator_name: str, data: Mapping[str, Any] | None) -> IndicatorAnalysis | None:
    """Parse a raw analysis payload into the variant for ``indicator_name``."""
    if data is None:
        return None
    parser = ANALYSIS_PARSERS.get(indicator_name, GenericAnalysis.from_dict)
    return parser(data)
