"""Tests for typed analysis payloads."""

from readiness.analysis import (
    AgentJsonAnalysis,
    CanonicalAnalysis,
    GenericAnalysis,
    JsonLdAnalysis,
    LlmsTxtAnalysis,
    McpAnalysis,
    RobotsAnalysis,
    SeoAnalysis,
    SitemapAnalysis,
    parse_analysis,
)


class TestParseAnalysis:
    """Tests for parse_analysis dispatch."""

    def test_none(self) -> None:
        """No payload gives no analysis."""
        assert parse_analysis("robots_txt", None) is None

    def test_dispatch_by_name(self) -> None:
        """Each registered name gets its own variant."""
        expected = {
            "robots_txt": RobotsAnalysis,
            "sitemap_xml": SitemapAnalysis,
            "llms_txt": LlmsTxtAnalysis,
            "json_ld": JsonLdAnalysis,
            "canonical": CanonicalAnalysis,
            "agent_json": AgentJsonAnalysis,
            "mcp": McpAnalysis,
            "seo_basic": SeoAnalysis,
        }
        for name, variant in expected.items():
            analysis = parse_analysis(name, {})
            assert isinstance(analysis, variant)
            assert analysis.kind == name

    def test_unknown_name_is_generic(self) -> None:
        """Unknown names keep the raw mapping."""
        analysis = parse_analysis("speakable", {"foo": 1})
        assert isinstance(analysis, GenericAnalysis)
        assert analysis.data == {"foo": 1}


class TestVariants:
    """Tests for individual variants."""

    def test_robots(self) -> None:
        """Parses robots.txt and meta findings."""
        analysis = RobotsAnalysis.from_dict(
            {
                "robotsTxt": {
                    "rules": [{"userAgent": "GPTBot", "disallow": ["/"]}],
                    "sitemaps": ["https://a.com/sitemap.xml"],
                },
                "robotsMeta": {"found": True, "allowsAI": False},
                "aiAgentRestrictions": [{"userAgent": "GPTBot", "directive": "Disallow: /"}],
            }
        )
        assert analysis.rules[0].user_agent == "GPTBot"
        assert analysis.rules[0].disallow == ("/",)
        assert analysis.sitemaps == ("https://a.com/sitemap.xml",)
        assert analysis.robots_meta_found is True
        assert analysis.robots_meta_allows_ai is False
        assert analysis.ai_agent_restrictions[0].directive == "Disallow: /"

    def test_sitemap_counts_urls(self) -> None:
        """URL count falls back to the URL list."""
        analysis = SitemapAnalysis.from_dict({"urls": ["a", "b", "c"]})
        assert analysis.url_count == 3

    def test_json_ld(self) -> None:
        """Parses types and flags, snake_case accepted."""
        analysis = JsonLdAnalysis.from_dict(
            {"types": ["Organization", "WebSite"], "has_organization": True}
        )
        assert analysis.count == 2
        assert analysis.has_organization is True

    def test_agent_json_capability_count(self) -> None:
        """Capabilities may be a number."""
        analysis = AgentJsonAnalysis.from_dict(
            {"capabilities": 3, "endpoints": [{"path": "/api", "method": "post"}]}
        )
        assert analysis.capability_count == 3
        assert analysis.capabilities == ()
        assert analysis.endpoints[0].method == "POST"

    def test_mcp_nested_config(self) -> None:
        """Servers and tools may sit under mcpConfig."""
        analysis = McpAnalysis.from_dict(
            {"mcpConfig": {"servers": [{"name": "main"}], "tools": [{"name": "search"}]}}
        )
        assert [s.name for s in analysis.servers] == ["main"]
        assert [t.name for t in analysis.tools] == ["search"]

    def test_seo(self) -> None:
        """Parses title, headings and Open Graph."""
        analysis = SeoAnalysis.from_dict(
            {
                "title": {"exists": True, "title": "Acme", "length": 4, "issue": "Too short"},
                "headings": {"h1Count": 2, "hasH1": True},
                "openGraph": {"hasImage": True, "score": 0.5},
            }
        )
        assert analysis.title.text == "Acme"
        assert analysis.title.issue == "Too short"
        assert analysis.h1_count == 2
        assert analysis.og_has_image is True
        assert analysis.og_score == 0.5

    def test_llms_txt_sections(self) -> None:
        """Section count falls back to parsed sections."""
        analysis = LlmsTxtAnalysis.from_dict(
            {"parsedContent": {"sections": [{"title": "Docs"}, {"title": "About"}]}}
        )
        assert analysis.section_count == 2
        assert analysis.sections[0].title == "Docs"

    def test_unknown_keys_ignored(self) -> None:
        """Unexpected keys do not break parsing."""
        analysis = CanonicalAnalysis.from_dict({"unexpected": True, "isAbsolute": False})
        assert analysis.is_absolute is False
        assert analysis.canonical_url is None


class TestMistypedValues:
    """Wrong JSON types inside analysis payloads take neutral defaults."""

    def test_robots_nested_objects(self) -> None:
        """Scalar robotsMeta and robotsTxt are treated as missing."""
        analysis = RobotsAnalysis.from_dict({"robotsMeta": True, "robotsTxt": "User-agent: *"})
        assert analysis.robots_meta_found is False
        assert analysis.robots_meta_allows_ai is None
        assert analysis.rules == ()

    def test_numbers_instead_of_lists(self) -> None:
        """Numeric sitemaps, endpoints and types become empty."""
        assert RobotsAnalysis.from_dict({"sitemaps": 3}).sitemaps == ()
        assert AgentJsonAnalysis.from_dict({"endpoints": 5}).endpoints == ()
        json_ld = JsonLdAnalysis.from_dict({"types": 2})
        assert json_ld.types == ()
        assert json_ld.count == 0

    def test_seo_sub_objects(self) -> None:
        """Scalar headings, openGraph and title checks are ignored."""
        analysis = SeoAnalysis.from_dict(
            {"headings": "none", "openGraph": 1, "title": "Acme Tools"}
        )
        assert analysis.h1_count == 0
        assert analysis.og_score is None
        assert analysis.title.exists is False

    def test_llms_txt_and_mcp_containers(self) -> None:
        """Non-object parsedContent and mcpConfig are ignored."""
        assert LlmsTxtAnalysis.from_dict({"parsedContent": ["Docs"]}).section_count == 0
        assert McpAnalysis.from_dict({"mcpConfig": "mcp.json"}).servers == ()

    def test_non_finite_counts(self) -> None:
        """Infinite counts are dropped rather than raised."""
        assert SitemapAnalysis.from_dict({"urlCount": float("inf")}).url_count is None

    def test_parse_analysis_by_name(self) -> None:
        """Dispatch applies the same leniency."""
        analysis = parse_analysis("agent_json", {"endpoints": 5, "capabilities": {"a": 1}})
        assert analysis.endpoints == ()
        assert analysis.capabilities == ()
