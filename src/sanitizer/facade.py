"""
Process-wide sanitizer instance.

Usage:
    from sanitizer import facade

    facade.register("trim", str.strip)
    facade.sanitize_value("trim", "  hi  ")
"""

import logging
import threading
from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

from sanitizer.config import SanitizerSettings
from sanitizer.engine import Sanitizer
from sanitizer.engine.rules import Pipeline
from sanitizer.utils.logging import configure_from_env

logger = logging.getLogger(__name__)

ACCESSOR = "sanitizer"

_instance: Optional[Sanitizer] = None
_lock = threading.Lock()


def get_sanitizer() -> Sanitizer:
    """
    Get the shared Sanitizer, creating it from environment settings on first use.

    First creation also applies SANITIZER_LOG_* logging settings, if any.
    """
    global _instance

    if _instance is None:
        with _lock:
            if _instance is None:
                configure_from_env()
                _instance = Sanitizer(settings=SanitizerSettings.from_env())
                logger.info(f"Created shared '{ACCESSOR}' instance")

    return _instance


def set_sanitizer(instance: Sanitizer) -> None:
    """Replace the shared instance (application wiring and tests)."""
    global _instance

    with _lock:
        _instance = instance


def reset_sanitizer() -> None:
    """Drop the shared instance; the next access creates a new one."""
    global _instance

    with _lock:
        _instance = None


def register(name: str, handle: Any) -> None:
    get_sanitizer().register(name, handle)


def sanitize(rules: Mapping[str, Pipeline], data: MutableMapping) -> MutableMapping:
    return get_sanitizer().sanitize(rules, data)


def sanitize_value(rules: Pipeline, value: Any) -> Any:
    return get_sanitizer().sanitize_value(rules, value)
