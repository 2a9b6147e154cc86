"""
Utility modules for the sanitizer

Provides:
- logging: structured logging setup
- metrics: Prometheus metrics for sanitize calls
- tracing: OpenTelemetry spans around sanitize calls
"""

__all__ = ["logging", "metrics", "tracing"]
