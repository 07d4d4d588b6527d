"""Indicator catalog.

Static metadata about each indicator type the engine knows how to advise
on: display name, a short "why it matters" line, the category it usually
lands in, and the effort/impact profile used for quick wins.
"""

from dataclasses import dataclass
from enum import StrEnum

from readiness.models import CategoryKey


class ImpactLevel(StrEnum):
    """Expected effect of fixing an indicator."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DifficultyLevel(StrEnum):
    """Effort needed to fix an indicator."""

    EASY = "easy"  # < 1 hour, no developer needed
    MEDIUM = "medium"  # a few hours, some technical skills
    HARD = "hard"  # a project, requires a developer


@dataclass(frozen=True)
class IndicatorInfo:
    """Metadata for one indicator type."""

    name: str
    display_name: str
    why_it_matters: str  # <= 120 chars
    default_category: CategoryKey
    impact_level: ImpactLevel
    difficulty_level: DifficultyLevel
    estimated_time_to_fix: str | None
    create_title: str
    improve_title: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "why_it_matters": self.why_it_matters,
            "default_category": self.default_category.value,
            "impact_level": self.impact_level.value,
            "difficulty_level": self.difficulty_level.value,
            "estimated_time_to_fix": self.estimated_time_to_fix,
            "create_title": self.create_title,
            "improve_title": self.improve_title,
        }


INDICATOR_CATALOG: dict[str, IndicatorInfo] = {
    "robots_txt": IndicatorInfo(
        name="robots_txt",
        display_name="robots.txt",
        why_it_matters="Tells AI crawlers which parts of your site they may read and where your sitemap lives.",
        default_category=CategoryKey.TRUST,
        impact_level=ImpactLevel.HIGH,
        difficulty_level=DifficultyLevel.EASY,
        estimated_time_to_fix="15 minutes",
        create_title="Create a robots.txt file",
        improve_title="Review robots.txt rules for AI crawlers",
    ),
    "sitemap_xml": IndicatorInfo(
        name="sitemap_xml",
        display_name="XML Sitemap",
        why_it_matters="Lists every page you want discovered so agents do not have to guess your structure.",
        default_category=CategoryKey.DISCOVERY,
        impact_level=ImpactLevel.HIGH,
        difficulty_level=DifficultyLevel.EASY,
        estimated_time_to_fix="30 minutes",
        create_title="Publish an XML sitemap",
        improve_title="Fix XML sitemap issues",
    ),
    "llms_txt": IndicatorInfo(
        name="llms_txt",
        display_name="llms.txt",
        why_it_matters="Gives language models a curated, markdown summary of your most important content.",
        default_category=CategoryKey.UNDERSTANDING,
        impact_level=ImpactLevel.MEDIUM,
        difficulty_level=DifficultyLevel.EASY,
        estimated_time_to_fix="30 minutes",
        create_title="Create an llms.txt file",
        improve_title="Improve llms.txt structure",
    ),
    "json_ld": IndicatorInfo(
        name="json_ld",
        display_name="JSON-LD Structured Data",
        why_it_matters="Machine-readable schema.org data lets agents understand entities without parsing prose.",
        default_category=CategoryKey.UNDERSTANDING,
        impact_level=ImpactLevel.HIGH,
        difficulty_level=DifficultyLevel.MEDIUM,
        estimated_time_to_fix="1-2 hours",
        create_title="Add JSON-LD structured data",
        improve_title="Fix JSON-LD structured data",
    ),
    "canonical": IndicatorInfo(
        name="canonical",
        display_name="Canonical URL",
        why_it_matters="Points agents at the one authoritative URL for a page so duplicates do not split signals.",
        default_category=CategoryKey.DISCOVERY,
        impact_level=ImpactLevel.MEDIUM,
        difficulty_level=DifficultyLevel.EASY,
        estimated_time_to_fix="15 minutes",
        create_title="Add a canonical link",
        improve_title="Fix canonical link",
    ),
    "agent_json": IndicatorInfo(
        name="agent_json",
        display_name="agent.json",
        why_it_matters="Describes what an AI agent can do on your site and which endpoints it may call.",
        default_category=CategoryKey.ACTIONS,
        impact_level=ImpactLevel.MEDIUM,
        difficulty_level=DifficultyLevel.MEDIUM,
        estimated_time_to_fix="2-4 hours",
        create_title="Publish an agent.json manifest",
        improve_title="Improve agent.json manifest",
    ),
    "mcp": IndicatorInfo(
        name="mcp",
        display_name="Model Context Protocol",
        why_it_matters="An MCP server exposes your tools and data to AI assistants through a standard protocol.",
        default_category=CategoryKey.ACTIONS,
        impact_level=ImpactLevel.MEDIUM,
        difficulty_level=DifficultyLevel.HARD,
        estimated_time_to_fix="1-2 weeks",
        create_title="Expose a Model Context Protocol server",
        improve_title="Improve MCP configuration",
    ),
    "seo_basic": IndicatorInfo(
        name="seo_basic",
        display_name="Basic SEO Metadata",
        why_it_matters="Titles, descriptions and headings are the first signals agents use to classify a page.",
        default_category=CategoryKey.DISCOVERY,
        impact_level=ImpactLevel.HIGH,
        difficulty_level=DifficultyLevel.EASY,
        estimated_time_to_fix="1 hour",
        create_title="Add basic SEO metadata",
        improve_title="Improve SEO metadata",
    ),
}


def display_name_for(name: str) -> str:
    """Human-readable name for an indicator key, known or not."""
    info = INDICATOR_CATALOG.get(name)
    if info is not None:
        return info.display_name
    return name.replace("_", " ").strip().title() or name


def get_indicator_info(name: str) -> IndicatorInfo:
    """Get catalog metadata, synthesizing a neutral entry for unknown names."""
    info = INDICATOR_CATALOG.get(name)
    if info is not None:
        return info

    display = display_name_for(name)
    return IndicatorInfo(
        name=name,
        display_name=display,
        why_it_matters=f"{display} contributes to how well AI agents can use your site.",
        default_category=CategoryKey.DISCOVERY,
        impact_level=ImpactLevel.MEDIUM,
        difficulty_level=DifficultyLevel.MEDIUM,
        estimated_time_to_fix=None,
        create_title=f"Add {display}",
        improve_title=f"Improve {display}",
    )
