"""Tests for application settings."""

from api.config import Settings, get_settings
from api.deps import get_evaluator
from readiness.scoring.rubric import DEFAULT_WEIGHT_TOLERANCE


class TestSettings:
    """Tests for Settings."""

    def test_test_env(self) -> None:
        """The test suite runs with ENV=test."""
        get_settings.cache_clear()
        settings = get_settings()
        assert settings.is_test
        assert not settings.is_production

    def test_evaluation_defaults(self) -> None:
        """Evaluation settings default to the rubric tolerance."""
        settings = Settings(env="test")
        assert settings.weight_tolerance == DEFAULT_WEIGHT_TOLERANCE
        assert settings.default_origin is None

    def test_from_environment(self, monkeypatch) -> None:
        """Evaluation settings are read from the environment."""
        monkeypatch.setenv("WEIGHT_TOLERANCE", "0.001")
        monkeypatch.setenv("DEFAULT_ORIGIN", "https://fallback.example")
        settings = Settings()

        config = settings.evaluator_config()
        assert config.weight_tolerance == 0.001
        assert config.default_origin == "https://fallback.example"

    def test_get_evaluator(self) -> None:
        """The dependency builds an evaluator from settings."""
        settings = Settings(env="test", weight_tolerance=0.01)
        evaluator = get_evaluator(settings)
        assert evaluator.config.weight_tolerance == 0.01

    def test_cached(self) -> None:
        """get_settings returns the same instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
