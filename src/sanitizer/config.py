"""
Runtime settings for the sanitizer engine.

Settings are read from environment variables:
    SANITIZER_DEFAULT_METHOD: Method called on class-backed transformers
        registered without an explicit ``@method`` selector (default: sanitize)
    SANITIZER_METRICS_ENABLED: Record Prometheus metrics (default: true)
    SANITIZER_TRACING_ENABLED: Wrap sanitize calls in OpenTelemetry spans
        (default: false)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "sanitize"

_TRUE_VALUES = ("true", "1", "yes")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class SanitizerSettings:
    """Engine settings."""

    default_method: str = DEFAULT_METHOD
    metrics_enabled: bool = True
    tracing_enabled: bool = False

    def __post_init__(self):
        if not self.default_method or not self.default_method.isidentifier():
            raise ValueError(
                f"default_method must be a valid method name, got {self.default_method!r}"
            )

    @classmethod
    def from_env(cls) -> "SanitizerSettings":
        """
        Build settings from environment variables.

        Returns:
            SanitizerSettings populated from SANITIZER_* variables
        """
        settings = cls(
            default_method=os.getenv("SANITIZER_DEFAULT_METHOD", DEFAULT_METHOD).strip(),
            metrics_enabled=_env_flag("SANITIZER_METRICS_ENABLED", True),
            tracing_enabled=_env_flag("SANITIZER_TRACING_ENABLED", False),
        )

        logger.debug(f"Loaded sanitizer settings: {settings}")

        return settings
