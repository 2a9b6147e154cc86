"""
Rule-driven sanitization of records.

Usage:
    sanitizer = Sanitizer()
    sanitizer.register("trim", str.strip)
    sanitizer.register("truncate", lambda value, size: value[: int(size)])
    sanitizer.register("slug", "myapp.sanitizers.Slugger@make")

    data = {"name": "  Bob  ", "bio": "..."}
    sanitizer.sanitize({"*": "trim", "name": "truncate:3"}, data)
"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Optional

from sanitizer.config import SanitizerSettings
from sanitizer.container import SupportsMake
from sanitizer.utils.logging import ContextLogger
from sanitizer.utils.metrics import NullMetrics, SanitizerMetrics
from sanitizer.utils.tracing import trace_operation

from .handles import invoke
from .paths import has_path, pull_path, set_path
from .registry import SanitizerRegistry
from .rules import WILDCARD, Pipeline, parse_pipeline

logger = logging.getLogger(__name__)

VALUE_KEY = "value"


class Sanitizer:
    """
    Apply pipelines of named transformers to the fields of a record.

    Unknown step names and non-callable handles leave the value unchanged;
    only constructor failures and errors raised by transformers propagate.
    """

    def __init__(
        self,
        container: Optional[SupportsMake] = None,
        settings: Optional[SanitizerSettings] = None,
        metrics: Any = None,
    ):
        """
        Initialize sanitizer

        Args:
            container: Object exposing ``make(identifier)`` used to build
                class-backed transformers (default: sanitizer.container.Container)
            settings: Engine settings (default: SanitizerSettings())
            metrics: Metrics recorder (default: SanitizerMetrics on the
                global registry, or a no-op when metrics are disabled)
        """
        self.settings = settings or SanitizerSettings()

        if metrics is None:
            metrics = SanitizerMetrics() if self.settings.metrics_enabled else NullMetrics()
        self.metrics = metrics

        self.registry = SanitizerRegistry(
            container=container,
            default_method=self.settings.default_method,
            metrics=self.metrics,
        )
        self.log = ContextLogger(__name__)

        logger.debug(
            f"Sanitizer created (default_method={self.settings.default_method}, "
            f"metrics={self.settings.metrics_enabled}, tracing={self.settings.tracing_enabled})"
        )

    @property
    def container(self) -> SupportsMake:
        return self.registry.container

    def register(self, name: str, handle: Any) -> None:
        """
        Register a transformer.

        Args:
            name: Step name used in rules
            handle: Callable, class, ``"Identifier[@method]"`` reference or
                ClassReference
        """
        self.registry.register(name, handle)

    def sanitize(self, rules: Mapping[str, Pipeline], data: MutableMapping) -> MutableMapping:
        """
        Sanitize a record in place.

        The wildcard pipeline (``*``) runs first over every field present in
        the record; then each remaining rule runs over its field if present.

        Args:
            rules: Field path (or ``*``) -> pipeline
            data: Record to mutate

        Returns:
            The same record object
        """
        if not self.settings.tracing_enabled:
            with self.metrics.time_sanitize():
                return self._sanitize(rules, data)

        with trace_operation("sanitize", rule_count=len(rules), field_count=len(data)):
            with self.metrics.time_sanitize():
                return self._sanitize(rules, data)

    def _sanitize(self, rules: Mapping[str, Pipeline], data: MutableMapping) -> MutableMapping:
        rules = dict(rules)
        wildcard = rules.pop(WILDCARD, None)

        # Wildcard rules run first, over the keys present at this point
        if wildcard is not None:
            for field in list(data.keys()):
                if field not in data:
                    continue
                self.sanitize_field(data, field, wildcard)
                self.metrics.record_field("wildcard")

        for field, ruleset in rules.items():
            if not has_path(data, field):
                continue
            self.sanitize_field(data, field, ruleset)
            self.metrics.record_field("field")

        return data

    def sanitize_value(self, rules: Pipeline, value: Any) -> Any:
        """
        Sanitize a single value.

        Args:
            rules: Pipeline to apply
            value: Value to transform

        Returns:
            Transformed value
        """
        data = self.sanitize({VALUE_KEY: rules}, {VALUE_KEY: value})
        return data[VALUE_KEY]

    def sanitize_field(self, data: MutableMapping, field: str, ruleset: Pipeline) -> None:
        """
        Run one field's value through a pipeline and write it back.

        Args:
            data: Record to mutate
            field: Field path (dotted paths address nested mappings)
            ruleset: Pipeline to apply
        """
        steps = parse_pipeline(ruleset)

        literal = field in data
        value = pull_path(data, field)

        for step in steps:
            arguments = step.build_arguments(value)

            handle = self.registry.resolve(step.name)
            if handle is None:
                self.metrics.record_step_skipped()
                self.log.debug(f"No transformer for step '{step.name}', skipping", field=field)
                continue

            # Chain step output into the next step
            value = invoke(handle, arguments)
            self.metrics.record_step_applied(step.name)

        # A literal key wins over its dotted reading
        if literal:
            data[field] = value
        else:
            set_path(data, field, value)
