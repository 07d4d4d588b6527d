"""Access intent derived from robots evidence.

Summarizes a site's stance toward AI agents as allow, partial or block.
"""

import structlog

from readiness.analysis import RobotsAnalysis
from readiness.models import AccessIntent, Report

logger = structlog.get_logger(__name__)

ROBOTS_INDICATOR = "robots_txt"

_KNOWN_INTENTS = frozenset(intent.value for intent in AccessIntent)


def derive_access_intent(report: Report) -> AccessIntent | None:
    """
    Derive the access intent from the robots_txt indicator.

    An explicit intent reported by the scanner wins. Otherwise a robots meta
    tag that disallows AI means block, any recorded AI agent restriction
    means partial, and anything else means allow. Returns None when there is
    no robots analysis to look at.
    """
    indicator = report.indicators.get(ROBOTS_INDICATOR)
    if indicator is None or indicator.evidence is None:
        return None

    analysis = indicator.evidence.analysis
    if not isinstance(analysis, RobotsAnalysis):
        return None

    if analysis.access_intent in _KNOWN_INTENTS:
        return AccessIntent(analysis.access_intent)
    if analysis.access_intent:
        logger.debug("unknown_access_intent", access_intent=analysis.access_intent)

    if analysis.robots_meta_found and analysis.robots_meta_allows_ai is False:
        return AccessIntent.BLOCK
    if analysis.ai_agent_restrictions:
        return AccessIntent.PARTIAL
    return AccessIntent.ALLOW
