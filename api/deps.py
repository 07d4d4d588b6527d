"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from api.config import Settings, get_settings
from readiness.reports.assembler import ReportEvaluator

__all__ = ["SettingsDep", "EvaluatorDep", "get_evaluator"]


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_evaluator(settings: SettingsDep) -> ReportEvaluator:
    """Get a report evaluator configured from settings."""
    return ReportEvaluator(settings.evaluator_config())


EvaluatorDep = Annotated[ReportEvaluator, Depends(get_evaluator)]
