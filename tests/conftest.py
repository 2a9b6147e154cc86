"""
Pytest configuration and fixtures for sanitizer tests.
Provides a ready-to-use Sanitizer with a handful of simple transformers.
"""

import pytest
from hypothesis import HealthCheck, settings
from prometheus_client import CollectorRegistry

from sanitizer import Sanitizer, SanitizerSettings, facade
from sanitizer.utils.metrics import SanitizerMetrics

# The first draw from st.characters(categories=...) builds Hypothesis's
# Unicode table on a fresh checkout, which trips the too_slow health check.
settings.register_profile("default", suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("default")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "property: mark test as property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def truncate(value, length):
    return value[: int(length)]


def replace(value, search, replacement=""):
    return value.replace(search, replacement)


@pytest.fixture(autouse=True)
def clear_sanitizer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SANITIZER_* variables from the outer environment out of tests."""
    for key in (
        "SANITIZER_DEFAULT_METHOD",
        "SANITIZER_METRICS_ENABLED",
        "SANITIZER_TRACING_ENABLED",
        "SANITIZER_LOG_LEVEL",
        "SANITIZER_LOG_FILE",
        "SANITIZER_LOG_JSON",
        "SANITIZER_LOG_CONSOLE",
        "SANITIZER_LOG_PROPAGATE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_shared_sanitizer():
    """Drop the facade's shared instance around every test."""
    facade.reset_sanitizer()
    yield
    facade.reset_sanitizer()


@pytest.fixture
def metrics_registry() -> CollectorRegistry:
    """Isolated Prometheus registry."""
    return CollectorRegistry()


@pytest.fixture
def metrics(metrics_registry: CollectorRegistry) -> SanitizerMetrics:
    return SanitizerMetrics(registry=metrics_registry)


@pytest.fixture
def sanitizer(metrics: SanitizerMetrics) -> Sanitizer:
    """Sanitizer with trim, upper, lower, truncate and replace registered."""
    instance = Sanitizer(settings=SanitizerSettings(), metrics=metrics)
    instance.register("trim", str.strip)
    instance.register("upper", str.upper)
    instance.register("lower", str.lower)
    instance.register("truncate", truncate)
    instance.register("replace", replace)
    return instance
