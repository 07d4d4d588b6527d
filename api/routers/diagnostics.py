"""Diagnostics endpoints: report evaluation, recommendations and catalog."""

from typing import Any

from fastapi import APIRouter, Request

from api.deps import EvaluatorDep
from api.exceptions import NotFoundError, ValidationError
from api.schemas.diagnostics import (
    EvaluateRequest,
    IndicatorInfoRead,
    RecommendationRead,
    RecommendationRequest,
)
from api.schemas.responses import ErrorResponse, ResponseMeta, SuccessResponse
from readiness.catalog import INDICATOR_CATALOG
from readiness.fixes.generator import recommend
from readiness.reports.loader import load_indicator
from readiness.scoring.rubric import check_score, get_rubric
from readiness.scoring.status import classify

router = APIRouter(
    prefix="/diagnostics",
    tags=["diagnostics"],
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)


def _meta(request: Request) -> ResponseMeta:
    return ResponseMeta(request_id=getattr(request.state, "request_id", None))


@router.post(
    "/evaluate",
    response_model=SuccessResponse[dict[str, Any]],
    summary="Evaluate an assembled report",
)
async def evaluate(
    body: EvaluateRequest,
    request: Request,
    evaluator: EvaluatorDep,
) -> SuccessResponse[dict[str, Any]]:
    """
    Evaluate a report produced by the assembler.

    - Validates structural invariants (422 on malformed reports)
    - Classifies indicators and aggregates categories and the overall score
    - Generates a recommendation per indicator plus quick wins
    """
    evaluated = evaluator.evaluate_mapping(body.report, body.origin)
    return SuccessResponse(data=evaluated.to_dict(), meta=_meta(request))


@router.post(
    "/recommendations",
    response_model=SuccessResponse[RecommendationRead],
    summary="Recommend fixes for one indicator",
)
async def recommendation(
    body: RecommendationRequest, request: Request
) -> SuccessResponse[RecommendationRead]:
    """Generate the recommendation text for a single indicator."""
    name = body.indicator.get("name")
    if not isinstance(name, str) or not name:
        raise ValidationError("Indicator name is required", field="indicator.name")

    indicator = load_indicator(name, body.indicator)
    check_score(f"indicators.{name}.score", indicator.score)

    return SuccessResponse(
        data=RecommendationRead(
            name=indicator.name,
            status=classify(indicator).value,
            recommendation=recommend(indicator, body.origin),
        ),
        meta=_meta(request),
    )


@router.get(
    "/indicators",
    response_model=SuccessResponse[list[IndicatorInfoRead]],
    summary="List known indicator types",
)
async def list_indicators() -> SuccessResponse[list[IndicatorInfoRead]]:
    """List catalog metadata for every indicator type with dedicated advice."""
    return SuccessResponse(
        data=[IndicatorInfoRead(**info.to_dict()) for info in INDICATOR_CATALOG.values()]
    )


@router.get(
    "/indicators/{name}",
    response_model=SuccessResponse[IndicatorInfoRead],
    summary="Get one indicator type",
)
async def get_indicator(name: str) -> SuccessResponse[IndicatorInfoRead]:
    """Get catalog metadata for one indicator type."""
    info = INDICATOR_CATALOG.get(name)
    if info is None:
        raise NotFoundError("Indicator", name)
    return SuccessResponse(data=IndicatorInfoRead(**info.to_dict()))


@router.get(
    "/rubric",
    response_model=SuccessResponse[dict[str, Any]],
    summary="Get the scoring rubric",
)
async def rubric() -> SuccessResponse[dict[str, Any]]:
    """Default category weights and the label bands."""
    return SuccessResponse(data=get_rubric().to_dict())
