"""Health check endpoints."""

import time
from collections.abc import Callable
from datetime import UTC, datetime

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.config import get_settings
from readiness import __version__
from readiness.catalog import INDICATOR_CATALOG
from readiness.exceptions import ReadinessError
from readiness.fixes.generator import RECOMMENDERS
from readiness.models import CATEGORY_ORDER, Category, Indicator, Report, SiteInfo
from readiness.reports.assembler import ReportEvaluator
from readiness.scoring.rubric import DEFAULT_CATEGORY_WEIGHTS, validate_weights

router = APIRouter(tags=["Health"])
logger = structlog.get_logger(__name__)

# Track server start time for uptime calculation
_server_start_time = time.time()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status")
    timestamp: str = Field(..., description="ISO 8601 timestamp")
    version: str = Field(..., description="API version")
    uptime_seconds: int = Field(..., description="Server uptime in seconds")


class EngineCheck(BaseModel):
    """Result of one engine self-check."""

    status: str = Field(..., description="Status: healthy, unhealthy")
    latency_ms: float | None = Field(None, description="Check latency in milliseconds")
    error: str | None = Field(None, description="Error message if unhealthy")


class ReadyResponse(HealthResponse):
    """Readiness response with engine self-checks."""

    checks: dict[str, EngineCheck] = Field(..., description="Individual self-checks")


class ApiInfoResponse(BaseModel):
    """API information response."""

    name: str
    version: str
    env: str
    docs: str | None


def _sample_report() -> Report:
    """One passing indicator per category, equal weights."""
    names = ("sitemap_xml", "json_ld", "agent_json", "robots_txt")
    return Report(
        site=SiteInfo(url="https://www.example.com/"),
        categories={
            key: Category(score=1.0, indicator_scores={name: 1.0})
            for key, name in zip(CATEGORY_ORDER, names, strict=True)
        },
        indicators={name: Indicator(name=name, score=1.0) for name in names},
        weights={key: 0.25 for key in CATEGORY_ORDER},
    )


def _check_rubric() -> None:
    validate_weights(DEFAULT_CATEGORY_WEIGHTS, get_settings().weight_tolerance)


def _check_catalog() -> None:
    missing = sorted(set(INDICATOR_CATALOG) - set(RECOMMENDERS))
    if missing:
        raise ReadinessError(f"No recommender for: {', '.join(missing)}")


def _check_evaluator() -> None:
    evaluated = ReportEvaluator(get_settings().evaluator_config()).evaluate(_sample_report())
    if evaluated.overall.score_percentage != 100:
        score = evaluated.overall.score_percentage
        raise ReadinessError(f"Sample report scored {score}, expected 100")


ENGINE_CHECKS: dict[str, Callable[[], None]] = {
    "rubric": _check_rubric,
    "catalog": _check_catalog,
    "evaluator": _check_evaluator,
}


def _run_check(name: str, check: Callable[[], None]) -> EngineCheck:
    start = time.perf_counter()
    try:
        check()
    except ReadinessError as e:
        logger.warning("engine_check_failed", check=name, error=e.message)
        return EngineCheck(status="unhealthy", error=e.message)
    latency_ms = (time.perf_counter() - start) * 1000
    return EngineCheck(status="healthy", latency_ms=round(latency_ms, 2))


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns healthy if the API is running. Use /ready for engine self-checks.
    """
    uptime = int(time.time() - _server_start_time)
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        uptime_seconds=uptime,
    )


@router.get("/ready", response_model=ReadyResponse)
async def readiness_check() -> ReadyResponse:
    """
    Readiness check.

    Checks:
    - Default rubric weights sum to 1 within the configured tolerance
    - Every catalogued indicator has a dedicated recommender
    - A sample report evaluates to 100
    """
    checks = {name: _run_check(name, check) for name, check in ENGINE_CHECKS.items()}
    healthy = all(c.status == "healthy" for c in checks.values())

    return ReadyResponse(
        status="healthy" if healthy else "unhealthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        uptime_seconds=int(time.time() - _server_start_time),
        checks=checks,
    )


@router.get("/", response_model=ApiInfoResponse)
async def root() -> ApiInfoResponse:
    """Root endpoint with API information."""
    settings = get_settings()
    return ApiInfoResponse(
        name="AI Readiness Index API",
        version=__version__,
        env=settings.env,
        docs="/docs" if settings.debug else None,
    )
