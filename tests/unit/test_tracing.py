"""
Unit tests for sanitizer.utils.tracing
"""

from unittest.mock import MagicMock, patch

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from sanitizer.utils.tracing import context, tracer
from sanitizer.utils.tracing import add_span_event, get_tracer, trace_operation


@pytest.fixture
def exporter():
    """Local provider whose finished spans are kept in memory"""
    memory = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(memory))

    with patch.object(context, "get_tracer", return_value=provider.get_tracer(__name__)):
        yield memory


class TestTraceOperation:
    """Test span creation around operations"""

    def test_attributes_keep_primitive_types(self, exporter):
        with trace_operation("sanitize", field_count=3, tracing=True, rules=["a"], missing=None):
            pass

        (span,) = exporter.get_finished_spans()
        assert span.name == "sanitize"
        assert span.attributes["field_count"] == 3
        assert span.attributes["tracing"] is True
        assert span.attributes["rules"] == "['a']"
        assert "missing" not in span.attributes

    def test_exception_sets_error_status_and_reraises(self, exporter):
        with pytest.raises(RuntimeError, match="boom"):
            with trace_operation("sanitize"):
                raise RuntimeError("boom")

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR
        assert span.status.description == "RuntimeError: boom"
        assert [event.name for event in span.events] == ["exception"]

    def test_span_event_added_to_active_span(self, exporter):
        with trace_operation("sanitize"):
            add_span_event("transformer_constructed", transformer="slug", identifier="Slugger")

        (span,) = exporter.get_finished_spans()
        (event,) = span.events
        assert event.name == "transformer_constructed"
        assert dict(event.attributes) == {"transformer": "slug", "identifier": "Slugger"}

    def test_default_tracer_is_usable(self):
        """Test spans work without initialize_tracing"""
        with trace_operation("noop") as span:
            add_span_event("event", key="value")

        assert span is not None


class TestTracer:
    """Test tracer accessors"""

    def test_get_tracer_without_initialization(self):
        assert get_tracer() is not None

    def test_shutdown_without_initialization_is_noop(self):
        tracer.shutdown_tracing()

    def test_initialize_and_shutdown(self, monkeypatch):
        monkeypatch.delenv("OTLP_ENDPOINT", raising=False)
        monkeypatch.delenv("TRACE_CONSOLE", raising=False)
        provider = MagicMock()

        with patch.object(tracer, "TracerProvider", return_value=provider), \
                patch.object(tracer.trace, "set_tracer_provider") as set_provider, \
                patch.object(tracer, "BatchSpanProcessor"), \
                patch.object(tracer, "ConsoleSpanExporter"):
            result = tracer.initialize_tracing(console_export=True)
            again = tracer.initialize_tracing()
            tracer.shutdown_tracing()

        set_provider.assert_called_once_with(provider)
        provider.add_span_processor.assert_called_once()
        provider.shutdown.assert_called_once()
        assert result is provider.get_tracer.return_value
        assert again is result
        assert tracer._provider is None
