"""Report loading.

Converts the assembler's JSON report into the immutable model. Report
level keys are snake_case; evidence keys are camelCase on the wire, and
snake_case is accepted as well. Structural problems raise
MalformedReportError with the path of the offending value. Score ranges
are checked later by ``readiness.reports.validation``.
"""

from collections.abc import Mapping
from typing import Any

from readiness.analysis import parse_analysis
from readiness.exceptions import MalformedReportError
from readiness.models import (
    AIFactors,
    Applicability,
    ApplicabilityStatus,
    Category,
    CategoryKey,
    Evidence,
    EvidenceMetadata,
    Indicator,
    Report,
    SiteInfo,
    SiteProfile,
    SuppliedOverall,
    ValidationFindings,
)


def _mapping(value: Any, path: str, required: bool = True) -> Mapping[str, Any]:
    if value is None and not required:
        return {}
    if not isinstance(value, Mapping):
        raise MalformedReportError(f"Expected an object at '{path}'", path=path)
    return value


def _number(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise MalformedReportError(f"Expected a number at '{path}'", path=path)
    return float(value)


def _optional_number(value: Any, path: str) -> float | None:
    return None if value is None else _number(value, path)


def _optional_string(value: Any, path: str) -> str | None:
    if value is not None and not isinstance(value, str):
        raise MalformedReportError(f"Expected a string at '{path}'", path=path)
    return value


def _strings(value: Any, path: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, list | tuple):
        raise MalformedReportError(f"Expected a list of strings at '{path}'", path=path)
    return tuple(str(item) for item in value)


def _get(data: Mapping[str, Any], camel: str, snake: str) -> Any:
    value = data.get(camel)
    return data.get(snake) if value is None else value


def _category_key(value: str, path: str) -> CategoryKey:
    try:
        return CategoryKey(value)
    except ValueError:
        raise MalformedReportError(f"Unknown category '{value}'", path=path) from None


# =============================================================================
# Pieces
# =============================================================================


def load_site(data: Any) -> SiteInfo:
    """Load the ``site`` section."""
    site = _mapping(data, "site")
    url = site.get("url")
    if not isinstance(url, str) or not url:
        raise MalformedReportError("Site URL is required", path="site.url")

    # Unknown profiles are kept verbatim for display
    profile = site.get("category") or SiteProfile.CUSTOM.value
    scan_date = _get(site, "scanDate", "scan_date")
    return SiteInfo(
        url=url,
        category=str(profile),
        scan_date=str(scan_date) if scan_date is not None else None,
    )


def load_applicability(data: Any, path: str) -> Applicability:
    """Load applicability; the math flag defaults to 'not excluded'."""
    raw = _mapping(data, path, required=False)
    try:
        status = ApplicabilityStatus(raw.get("status", ApplicabilityStatus.REQUIRED.value))
    except ValueError:
        raise MalformedReportError(
            f"Unknown applicability status '{raw.get('status')}'", path=f"{path}.status"
        ) from None

    included = _get(raw, "includedInCategoryMath", "included_in_category_math")
    if included is None:
        included = status != ApplicabilityStatus.NOT_APPLICABLE
    elif not isinstance(included, bool):
        raise MalformedReportError(
            "Expected a boolean", path=f"{path}.included_in_category_math"
        )

    return Applicability(
        status=status,
        included_in_category_math=included,
        reason=str(raw.get("reason") or ""),
    )


def load_evidence(indicator_name: str, data: Any, path: str) -> Evidence | None:
    """Load one evidence block, parsing its analysis by indicator name."""
    if data is None:
        return None
    raw = _mapping(data, path)

    validation = _mapping(raw.get("validation"), f"{path}.validation", required=False)
    ai_factors = _mapping(_get(raw, "aiFactors", "ai_factors"), f"{path}.aiFactors", required=False)
    metadata = _mapping(raw.get("metadata"), f"{path}.metadata", required=False)
    analysis = _mapping(raw.get("analysis"), f"{path}.analysis", required=False)

    found = raw.get("found")
    if found is None:
        found = False
    elif not isinstance(found, bool):
        raise MalformedReportError("Expected a boolean", path=f"{path}.found")

    status_code = _get(raw, "statusCode", "status_code")
    if status_code is not None and (isinstance(status_code, bool) or not isinstance(status_code, int)):
        raise MalformedReportError("Expected an integer", path=f"{path}.statusCode")

    return Evidence(
        found=found,
        status_code=status_code,
        content_preview=_optional_string(
            _get(raw, "contentPreview", "content_preview"), f"{path}.contentPreview"
        ),
        validation=ValidationFindings(
            errors=_strings(validation.get("errors"), f"{path}.validation.errors"),
            warnings=_strings(validation.get("warnings"), f"{path}.validation.warnings"),
            missing=_strings(validation.get("missing"), f"{path}.validation.missing"),
        ),
        ai_factors=AIFactors(
            strengths=_strings(ai_factors.get("strengths"), f"{path}.aiFactors.strengths"),
            opportunities=_strings(
                ai_factors.get("opportunities"), f"{path}.aiFactors.opportunities"
            ),
        ),
        analysis=parse_analysis(indicator_name, analysis) if analysis else None,
        metadata=EvidenceMetadata(
            checked_url=_optional_string(
                _get(metadata, "checkedUrl", "checked_url"), f"{path}.metadata.checkedUrl"
            ),
            response_time=_optional_number(
                _get(metadata, "responseTime", "response_time"), f"{path}.metadata.responseTime"
            ),
            error=_optional_string(metadata.get("error"), f"{path}.metadata.error"),
            reason=_optional_string(metadata.get("reason"), f"{path}.metadata.reason"),
        ),
    )


def load_indicator(key: str, data: Any) -> Indicator:
    """Load one entry of the ``indicators`` mapping."""
    path = f"indicators.{key}"
    raw = _mapping(data, path)
    name = raw.get("name", key)
    if not isinstance(name, str):
        raise MalformedReportError("Indicator name must be a string", path=f"{path}.name")
    if "score" not in raw:
        raise MalformedReportError("Indicator score is required", path=f"{path}.score")

    return Indicator(
        name=name,
        score=_number(raw["score"], f"{path}.score"),
        applicability=load_applicability(raw.get("applicability"), f"{path}.applicability"),
        evidence=load_evidence(name, raw.get("evidence"), f"{path}.evidence"),
    )


def load_category(key: CategoryKey, data: Any) -> Category:
    """Load one entry of the ``categories`` mapping."""
    path = f"categories.{key.value}"
    raw = _mapping(data, path)
    if "score" not in raw:
        raise MalformedReportError("Category score is required", path=f"{path}.score")

    scores = _mapping(raw.get("indicator_scores"), f"{path}.indicator_scores", required=False)
    return Category(
        score=_number(raw["score"], f"{path}.score"),
        indicator_scores={
            str(name): _number(value, f"{path}.indicator_scores.{name}")
            for name, value in scores.items()
        },
    )


def load_overall(data: Any) -> SuppliedOverall | None:
    """Load the optional supplied overall score."""
    if data is None:
        return None
    raw = _mapping(data, "overall")
    if "raw_0_1" not in raw:
        return None
    score_0_100 = raw.get("score_0_100")
    return SuppliedOverall(
        raw_0_1=_number(raw["raw_0_1"], "overall.raw_0_1"),
        score_0_100=None if score_0_100 is None else int(_number(score_0_100, "overall.score_0_100")),
    )


# =============================================================================
# Report
# =============================================================================


def load_report(data: Any) -> Report:
    """
    Build a Report from its JSON mapping.

    Args:
        data: Decoded report JSON

    Returns:
        Report (not yet validated, see validate_report)

    Raises:
        MalformedReportError: wrong JSON types, unknown categories or
            applicability statuses, missing required keys
    """
    raw = _mapping(data, "report")

    categories: dict[CategoryKey, Category] = {}
    for key, value in _mapping(raw.get("categories"), "categories").items():
        category_key = _category_key(key, f"categories.{key}")
        categories[category_key] = load_category(category_key, value)

    indicators = {
        str(key): load_indicator(str(key), value)
        for key, value in _mapping(raw.get("indicators"), "indicators").items()
    }

    weights = {
        _category_key(key, f"weights.{key}"): _number(value, f"weights.{key}")
        for key, value in _mapping(raw.get("weights"), "weights").items()
    }

    return Report(
        site=load_site(raw.get("site")),
        categories=categories,
        indicators=indicators,
        weights=weights,
        overall=load_overall(raw.get("overall")),
    )
