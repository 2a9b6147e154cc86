"""
Prometheus metrics for sanitizer operations.

Usage:
    from sanitizer.utils.metrics import SanitizerMetrics

    metrics = SanitizerMetrics()
    metrics.record_step_applied("trim")
    metrics.record_step_skipped()
"""

import logging
from contextlib import nullcontext
from typing import Callable, Optional, TypeVar

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_or_create_metric(
    metric_factory: Callable[[], T],
    metric_name: str,
    registry: CollectorRegistry = REGISTRY,
) -> T:
    """
    Create a metric or return the one already registered under the same name.

    Args:
        metric_factory: Callable that creates the metric (e.g., lambda: Counter(...))
        metric_name: Name of the metric for lookup if already registered
        registry: Prometheus registry to use (default: global REGISTRY)

    Returns:
        The metric instance (either newly created or existing)
    """
    try:
        return metric_factory()
    except ValueError:
        existing = registry._names_to_collectors.get(metric_name)
        if existing is not None:
            return existing
        raise


class SanitizerMetrics:
    """
    Metrics for the sanitize pipeline

    Tracks processed fields, applied and skipped steps, and lazy
    construction of class-backed transformers.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """
        Initialize sanitizer metrics

        Args:
            registry: Custom Prometheus registry (default: global REGISTRY)
        """
        self.registry = registry or REGISTRY

        self.fields_processed_total = get_or_create_metric(
            lambda: Counter(
                "sanitizer_fields_processed_total",
                "Total number of fields run through a pipeline",
                ["pass"],
                registry=self.registry,
            ),
            "sanitizer_fields_processed_total",
            self.registry,
        )

        self.steps_applied_total = get_or_create_metric(
            lambda: Counter(
                "sanitizer_steps_applied_total",
                "Total number of transformer steps invoked",
                ["step"],
                registry=self.registry,
            ),
            "sanitizer_steps_applied_total",
            self.registry,
        )

        self.steps_skipped_total = get_or_create_metric(
            lambda: Counter(
                "sanitizer_steps_skipped_total",
                "Total number of steps skipped because no transformer resolved",
                registry=self.registry,
            ),
            "sanitizer_steps_skipped_total",
            self.registry,
        )

        self.handles_constructed_total = get_or_create_metric(
            lambda: Counter(
                "sanitizer_handles_constructed_total",
                "Total number of class-backed transformers constructed",
                ["name"],
                registry=self.registry,
            ),
            "sanitizer_handles_constructed_total",
            self.registry,
        )

        self.sanitize_seconds = get_or_create_metric(
            lambda: Histogram(
                "sanitizer_sanitize_seconds",
                "Time to sanitize one record",
                buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
                registry=self.registry,
            ),
            "sanitizer_sanitize_seconds",
            self.registry,
        )

    def record_field(self, pass_name: str) -> None:
        """Record a field run through the wildcard or field pass"""
        self.fields_processed_total.labels(**{"pass": pass_name}).inc()

    def record_step_applied(self, step: str) -> None:
        """Record an invoked step"""
        self.steps_applied_total.labels(step=step).inc()

    def record_step_skipped(self) -> None:
        """Record a step with no resolvable transformer"""
        # Unlabeled: step names come from caller-supplied rules
        self.steps_skipped_total.inc()

    def record_handle_constructed(self, name: str) -> None:
        """Record construction of a class-backed transformer"""
        self.handles_constructed_total.labels(name=name).inc()

    def time_sanitize(self):
        """Context manager timing one sanitize call"""
        return self.sanitize_seconds.time()


class NullMetrics:
    """Drop-in replacement used when metrics are disabled."""

    def record_field(self, pass_name: str) -> None:
        pass

    def record_step_applied(self, step: str) -> None:
        pass

    def record_step_skipped(self) -> None:
        pass

    def record_handle_constructed(self, name: str) -> None:
        pass

    def time_sanitize(self):
        return nullcontext()
