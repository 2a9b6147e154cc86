"""
Unit tests for the shared sanitizer facade.
"""

from sanitizer import Sanitizer, facade
from sanitizer.utils.metrics import NullMetrics


class TestFacade:
    """Test the process-wide instance."""

    def test_get_sanitizer_is_singleton(self):
        assert facade.get_sanitizer() is facade.get_sanitizer()

    def test_reset_creates_new_instance(self):
        first = facade.get_sanitizer()
        facade.reset_sanitizer()

        assert facade.get_sanitizer() is not first

    def test_settings_loaded_from_env(self, monkeypatch):
        monkeypatch.setenv("SANITIZER_DEFAULT_METHOD", "clean")

        assert facade.get_sanitizer().settings.default_method == "clean"

    def test_module_level_helpers(self):
        facade.register("trim", str.strip)
        facade.register("upper", str.upper)

        assert facade.sanitize_value("trim|upper", " hi ") == "HI"
        assert facade.sanitize({"a": "trim"}, {"a": " x ", "b": " y "}) == {"a": "x", "b": " y "}

    def test_set_sanitizer(self):
        custom = Sanitizer(metrics=NullMetrics())
        facade.set_sanitizer(custom)

        assert facade.get_sanitizer() is custom
