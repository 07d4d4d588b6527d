"""Tests for the readiness package exports."""

import importlib

import pytest

import readiness
from readiness.reports.assembler import ReportEvaluator
from readiness.scoring.status import classify


class TestLazyExports:
    """Tests for names resolved through the package."""

    @pytest.mark.parametrize("name", readiness.__all__)
    def test_every_export_resolves(self, name: str) -> None:
        """Every name in __all__ is importable from the package."""
        assert getattr(readiness, name) is not None

    @pytest.mark.parametrize("package", ["readiness.scoring", "readiness.fixes", "readiness.reports"])
    def test_subpackage_exports_resolve(self, package: str) -> None:
        """Subpackages resolve every name they list."""
        module = importlib.import_module(package)
        for name in module.__all__:
            assert getattr(module, name) is not None, name

    def test_same_objects(self) -> None:
        """Package names are the submodule objects."""
        from readiness import ReportEvaluator as exported_evaluator
        from readiness import classify as exported_classify

        assert exported_classify is classify
        assert exported_evaluator is ReportEvaluator

    def test_unknown_name(self) -> None:
        """Unknown names raise AttributeError."""
        with pytest.raises(AttributeError):
            readiness.speakable  # noqa: B018
