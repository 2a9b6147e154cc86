"""
Span helpers used around sanitize calls.
"""

from contextlib import contextmanager
from typing import Iterator

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from .tracer import get_tracer


def _span_attributes(attributes: dict) -> dict:
    # Span attributes must be primitives; None is not accepted
    return {
        key: value if isinstance(value, (bool, int, float, str)) else str(value)
        for key, value in attributes.items()
        if value is not None
    }


@contextmanager
def trace_operation(operation_name: str, **attributes) -> Iterator[trace.Span]:
    """
    Run a block inside an internal span.

    Primitive attributes are kept as-is, others are stringified. A failure
    marks the span status as ERROR and records the exception before it is
    re-raised.

    Example:
        >>> with trace_operation("sanitize", rule_count=2) as span:
        ...     sanitizer.sanitize(rules, data)
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(
        operation_name,
        attributes=_span_attributes(attributes),
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, f"{type(e).__name__}: {e}"))
            span.record_exception(e)
            raise


def add_span_event(event: str, **attributes) -> None:
    """Add an event to the current span if it is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.add_event(event, _span_attributes(attributes))
