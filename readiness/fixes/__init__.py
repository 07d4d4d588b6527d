"""Recommendation text and prioritized actions."""

# Lazy imports to avoid import cycles with scoring
# Use explicit imports when needed:
# from readiness.fixes.templates import RecommendationTemplate, get_template
# from readiness.fixes.generator import recommend, RECOMMENDERS
# from readiness.fixes.action_items import build_action_items, ActionPlan

__all__ = [
    # Templates
    "RecommendationTemplate",
    "RECOMMENDATION_TEMPLATES",
    "get_template",
    "fill_placeholders",
    "site_name_from_origin",
    # Generator
    "Recommender",
    "RECOMMENDERS",
    "recommend",
    "recommend_generic",
    "get_recommender",
    "normalize_origin",
    # Action items
    "RecommendationItem",
    "ActionPlan",
    "build_item",
    "build_action_items",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for fixes submodules."""
    if name in (
        "RecommendationTemplate",
        "RECOMMENDATION_TEMPLATES",
        "get_template",
        "fill_placeholders",
        "site_name_from_origin",
    ):
        from readiness.fixes.templates import (
            RECOMMENDATION_TEMPLATES,
            RecommendationTemplate,
            fill_placeholders,
            get_template,
            site_name_from_origin,
        )

        return locals()[name]
    elif name in (
        "Recommender",
        "RECOMMENDERS",
        "recommend",
        "recommend_generic",
        "get_recommender",
        "normalize_origin",
    ):
        from readiness.fixes.generator import (
            RECOMMENDERS,
            Recommender,
            get_recommender,
            normalize_origin,
            recommend,
            recommend_generic,
        )

        return locals()[name]
    elif name in ("RecommendationItem", "ActionPlan", "build_item", "build_action_items"):
        from readiness.fixes.action_items import (
            ActionPlan,
            RecommendationItem,
            build_action_items,
            build_item,
        )

        return locals()[name]
    raise AttributeError(f"module 'readiness.fixes' has no attribute '{name}'")
