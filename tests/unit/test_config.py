"""
Unit tests for sanitizer settings.
"""

import pytest

from sanitizer.config import SanitizerSettings


class TestSanitizerSettings:
    """Test settings defaults and environment loading."""

    def test_defaults(self):
        settings = SanitizerSettings()

        assert settings.default_method == "sanitize"
        assert settings.metrics_enabled is True
        assert settings.tracing_enabled is False

    def test_from_env_defaults(self):
        assert SanitizerSettings.from_env() == SanitizerSettings()

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SANITIZER_DEFAULT_METHOD", "clean")
        monkeypatch.setenv("SANITIZER_METRICS_ENABLED", "false")
        monkeypatch.setenv("SANITIZER_TRACING_ENABLED", "YES")

        settings = SanitizerSettings.from_env()

        assert settings.default_method == "clean"
        assert settings.metrics_enabled is False
        assert settings.tracing_enabled is True

    @pytest.mark.parametrize("method", ["", "not a name", "1st"])
    def test_invalid_default_method(self, method):
        with pytest.raises(ValueError, match="default_method"):
            SanitizerSettings(default_method=method)
