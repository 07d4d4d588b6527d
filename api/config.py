"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from readiness.reports.assembler import ReportEvaluatorConfig
from readiness.scoring.rubric import DEFAULT_WEIGHT_TOLERANCE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_format: Literal["console", "json"] | None = None  # None: json in production only

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_workers: int = 1
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Evaluation
    weight_tolerance: float = DEFAULT_WEIGHT_TOLERANCE  # Allowed drift of the weight sum from 1
    default_origin: str | None = None  # Fallback origin for example payloads

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"

    @property
    def json_logs(self) -> bool:
        """Whether logs are rendered as JSON lines."""
        if self.log_format is None:
            return self.is_production
        return self.log_format == "json"

    def evaluator_config(self) -> ReportEvaluatorConfig:
        """Build the evaluator configuration from these settings."""
        return ReportEvaluatorConfig(
            weight_tolerance=self.weight_tolerance,
            default_origin=self.default_origin,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
