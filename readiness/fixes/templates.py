"""Recommendation templates for each indicator type.

Provides creation scaffolds with placeholders that are filled with the
audited site's origin, plus the fixed enhancement suggestions shown when
an artifact is already healthy.

Placeholders:
- [ORIGIN]     scheme and host of the site, no trailing slash
- [SITE_NAME]  readable name derived from the host
"""

from dataclasses import dataclass, field
from urllib.parse import urlparse

# AI crawlers worth addressing explicitly in robots.txt
AI_CRAWLERS: tuple[str, ...] = (
    "GPTBot",
    "OAI-SearchBot",
    "ChatGPT-User",
    "ClaudeBot",
    "Claude-SearchBot",
    "PerplexityBot",
    "Google-Extended",
)


@dataclass(frozen=True)
class RecommendationTemplate:
    """Template for the three-branch recommendation of one indicator type."""

    indicator: str
    display_name: str
    location: str  # Where the artifact lives, may contain [ORIGIN]
    create_intro: str  # Why to create it
    scaffold_template: str  # Example payload with [PLACEHOLDERS]
    enhancements: tuple[str, ...] = field(default_factory=tuple)
    create_followup: str | None = None  # Shown after the scaffold

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "indicator": self.indicator,
            "display_name": self.display_name,
            "location": self.location,
            "create_intro": self.create_intro,
            "scaffold_template": self.scaffold_template,
            "enhancements": list(self.enhancements),
            "create_followup": self.create_followup,
        }


def site_name_from_origin(origin: str) -> str:
    """Readable site name from an origin (https://www.acme-tools.com -> Acme Tools)."""
    host = urlparse(origin).hostname or origin
    if host.startswith("www."):
        host = host[4:]
    label = host.split(".")[0] if host else ""
    name = label.replace("-", " ").replace("_", " ").strip().title()
    return name or "Your Site"


def fill_placeholders(text: str, origin: str) -> str:
    """Fill [ORIGIN] and [SITE_NAME] placeholders."""
    return text.replace("[ORIGIN]", origin).replace("[SITE_NAME]", site_name_from_origin(origin))


# =============================================================================
# robots.txt (branches on score only, see generator)
# =============================================================================

ROBOTS_LOCATION = "[ORIGIN]/robots.txt"

ROBOTS_CREATE_SCAFFOLD = "\n\n".join(
    ["User-agent: *\nAllow: /\nDisallow: /admin/"]
    + [f"User-agent: {crawler}\nAllow: /" for crawler in AI_CRAWLERS]
    + ["Sitemap: [ORIGIN]/sitemap.xml"]
)

ROBOTS_CREATE_TEMPLATE = f"""No robots.txt file was found. Create one at {ROBOTS_LOCATION} so AI crawlers know which parts of your site they may read.

Example robots.txt:

{ROBOTS_CREATE_SCAFFOLD}

Adjust the Disallow rules so only private areas (admin, checkout, account pages) are kept out of reach."""

ROBOTS_REFINE_TEMPLATE = """Your robots.txt file already exists and is configured for AI agents. Consider these refinements:

- Add explicit User-agent groups for the AI crawlers you want to welcome (GPTBot, OAI-SearchBot, ClaudeBot, PerplexityBot, Google-Extended)
- Reference every sitemap with a line such as Sitemap: [ORIGIN]/sitemap.xml
- Keep Disallow rules limited to private areas so public content stays readable
- Re-check the file after each deployment; staging rules sometimes leak into production"""

ROBOTS_REVIEW_TEMPLATE = """Review your robots.txt file at [ORIGIN]/robots.txt. Make sure it does not unintentionally block AI crawlers such as GPTBot, ClaudeBot or PerplexityBot, that it references your XML sitemap, and that Disallow rules only cover private areas. Once the rules are clean, run the scan again to confirm the score."""


# =============================================================================
# Standard three-branch templates
# =============================================================================

SITEMAP_SCAFFOLD = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url>
    <loc>[ORIGIN]/</loc>
    <lastmod>YYYY-MM-DD</lastmod>
    <changefreq>weekly</changefreq>
    <priority>1.0</priority>
  </url>
  <url>
    <loc>[ORIGIN]/about</loc>
    <lastmod>YYYY-MM-DD</lastmod>
    <changefreq>monthly</changefreq>
    <priority>0.8</priority>
  </url>
</urlset>"""

LLMS_TXT_SCAFFOLD = """# [SITE_NAME]

> One or two sentences describing what [SITE_NAME] offers and who it is for.

Key facts an assistant should know: what you sell or publish, where you operate, and how to get in touch.

## Docs

- [Getting started]([ORIGIN]/docs/getting-started): How to begin
- [Pricing]([ORIGIN]/pricing): Plans and what they include

## Company

- [About]([ORIGIN]/about): Who we are
- [Contact]([ORIGIN]/contact): How to reach us

## Optional

- [Blog]([ORIGIN]/blog): Announcements and long-form articles"""

JSON_LD_SCAFFOLD = """<script type="application/ld+json">
{
  "@context": "https://schema.org",
  "@type": "Organization",
  "name": "[SITE_NAME]",
  "url": "[ORIGIN]",
  "logo": "[ORIGIN]/logo.png",
  "sameAs": [
    "https://www.linkedin.com/company/your-company"
  ]
}
</script>
<script type="application/ld+json">
{
  "@context": "https://schema.org",
  "@type": "WebSite",
  "name": "[SITE_NAME]",
  "url": "[ORIGIN]"
}
</script>"""

CANONICAL_SCAFFOLD = """<link rel="canonical" href="[ORIGIN]/" />
<meta property="og:url" content="[ORIGIN]/" />"""

AGENT_JSON_SCAFFOLD = """{
  "name": "[SITE_NAME]",
  "description": "What an AI agent can do on [SITE_NAME]",
  "url": "[ORIGIN]",
  "version": "1.0",
  "capabilities": ["search", "read"],
  "endpoints": [
    {
      "path": "/api/search",
      "method": "GET",
      "description": "Search public content by keyword"
    }
  ]
}"""

MCP_SCAFFOLD = """{
  "servers": [
    {
      "name": "[SITE_NAME] MCP",
      "description": "Tools and resources for AI assistants working with [SITE_NAME]",
      "version": "1.0.0",
      "url": "[ORIGIN]/mcp"
    }
  ],
  "tools": [
    {
      "name": "search",
      "description": "Search [SITE_NAME] content"
    }
  ],
  "prompts": []
}"""

SEO_BASIC_SCAFFOLD = """<title>[SITE_NAME] | What you offer in a few words</title>
<meta name="description" content="A 150-160 character summary of this page written for people and AI agents." />
<meta property="og:title" content="[SITE_NAME]" />
<meta property="og:description" content="Short summary of this page." />
<meta property="og:image" content="[ORIGIN]/og-image.png" />
<meta property="og:url" content="[ORIGIN]/" />"""


RECOMMENDATION_TEMPLATES: dict[str, RecommendationTemplate] = {
    "sitemap_xml": RecommendationTemplate(
        indicator="sitemap_xml",
        display_name="XML sitemap",
        location="[ORIGIN]/sitemap.xml",
        create_intro="A sitemap lists the pages you want discovered so AI agents do not have to guess your structure.",
        scaffold_template=SITEMAP_SCAFFOLD,
        create_followup="Reference it from robots.txt with: Sitemap: [ORIGIN]/sitemap.xml",
        enhancements=(
            "Keep <lastmod> dates accurate so agents can prioritize fresh content",
            "Reference the sitemap from robots.txt",
            "Split into a sitemap index once you pass 50,000 URLs",
            "Add image and video extensions for rich media pages",
        ),
    ),
    "llms_txt": RecommendationTemplate(
        indicator="llms_txt",
        display_name="llms.txt file",
        location="[ORIGIN]/llms.txt",
        create_intro="llms.txt gives language models a curated markdown summary of your most important content (see https://llmstxt.org).",
        scaffold_template=LLMS_TXT_SCAFFOLD,
        enhancements=(
            "Keep the summary line current as your offering changes",
            "Link to clean markdown versions of key pages where possible",
            "Group links into clear sections and move nice-to-have links under an Optional heading",
            "Consider publishing an llms-full.txt with the full text of core documentation",
        ),
    ),
    "json_ld": RecommendationTemplate(
        indicator="json_ld",
        display_name="JSON-LD structured data",
        location="in the <head> of your pages",
        create_intro="schema.org data in JSON-LD lets agents understand who you are and what each page describes without parsing prose.",
        scaffold_template=JSON_LD_SCAFFOLD,
        create_followup="Validate the markup with https://validator.schema.org before publishing.",
        enhancements=(
            "Add BreadcrumbList markup to reflect your navigation",
            "Describe key pages with specific types (Product, Article, FAQPage, Service)",
            "Link your Organization to official profiles through sameAs",
            "Re-validate markup after template changes",
        ),
    ),
    "canonical": RecommendationTemplate(
        indicator="canonical",
        display_name="canonical link",
        location="in the <head> of every page",
        create_intro="A canonical link tells agents which URL is authoritative so duplicates do not split your signals.",
        scaffold_template=CANONICAL_SCAFFOLD,
        enhancements=(
            "Use absolute, self-referencing canonical URLs",
            "Keep og:url in sync with the canonical URL",
            "Make sure canonical targets return HTTP 200 and are not redirected",
        ),
    ),
    "agent_json": RecommendationTemplate(
        indicator="agent_json",
        display_name="agent.json manifest",
        location="[ORIGIN]/.well-known/agent.json",
        create_intro="An agent.json manifest describes what AI agents can do on your site and which endpoints they may call.",
        scaffold_template=AGENT_JSON_SCAFFOLD,
        enhancements=(
            "Document every endpoint with a description and expected parameters",
            "Declare authentication requirements explicitly",
            "Version the manifest and update it with your API",
        ),
    ),
    "mcp": RecommendationTemplate(
        indicator="mcp",
        display_name="Model Context Protocol configuration",
        location="[ORIGIN]/.well-known/mcp.json",
        create_intro="A Model Context Protocol server exposes your tools and data to AI assistants through a standard interface.",
        scaffold_template=MCP_SCAFFOLD,
        create_followup="See https://modelcontextprotocol.io for server SDKs and the protocol reference.",
        enhancements=(
            "Give every tool a clear description and input schema",
            "Publish reusable prompts for common tasks",
            "Document authentication and rate limits for agent clients",
        ),
    ),
    "seo_basic": RecommendationTemplate(
        indicator="seo_basic",
        display_name="basic SEO metadata",
        location="in the <head> of every page",
        create_intro="Titles, descriptions and Open Graph tags are the first signals agents use to classify a page.",
        scaffold_template=SEO_BASIC_SCAFFOLD,
        create_followup="Use exactly one <h1> per page and keep headings in order (h1, h2, h3).",
        enhancements=(
            "Keep titles under 60 characters and descriptions between 120 and 160",
            "Write a unique title and description for every page",
            "Add og:image so shared links render a preview",
        ),
    ),
}


def get_template(indicator: str) -> RecommendationTemplate | None:
    """Get the recommendation template for an indicator type, if any."""
    return RECOMMENDATION_TEMPLATES.get(indicator)
