"""
Registry of named transformers.

Entries are stored as registered and resolved on demand. Class-backed
entries are constructed through the container on first resolution and the
stored entry is replaced by the resulting handle, so every later lookup of
that name shares one instance.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from sanitizer.config import DEFAULT_METHOD
from sanitizer.container import Container, SupportsMake
from sanitizer.exceptions import BindingResolutionError
from sanitizer.utils.metrics import NullMetrics
from sanitizer.utils.tracing import add_span_event

from .base import Transformer
from .handles import BoundMethodHandle, ClassReference, FunctionHandle, Handle

logger = logging.getLogger(__name__)


class SanitizerRegistry:
    """
    Map transformer names to handles.

    Accepted registrations:
    - any non-class callable (function, lambda, bound method, callable instance)
    - a class object, constructed with no arguments on first use
    - a reference string ``"Identifier"`` or ``"Identifier@method"``, built
      through the container on first use
    - a ClassReference

    Resolution is guarded by a lock so a class-backed entry is constructed at
    most once even when several threads resolve it concurrently.
    """

    def __init__(
        self,
        container: Optional[SupportsMake] = None,
        default_method: str = DEFAULT_METHOD,
        metrics: Any = None,
    ):
        """
        Initialize registry

        Args:
            container: Object exposing ``make(identifier)`` (default: Container())
            default_method: Method called on class-backed transformers
                registered without an ``@method`` selector
            metrics: SanitizerMetrics-like recorder (default: no-op)
        """
        self.container = container if container is not None else Container()
        self.default_method = default_method
        self.metrics = metrics or NullMetrics()
        self._entries: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def register(self, name: str, handle: Any) -> None:
        """
        Insert or overwrite the entry for ``name``.

        No validation happens here; unusable entries resolve to None later.
        """
        with self._lock:
            replaced = name in self._entries
            self._entries[name] = handle

        logger.debug(
            f"{'Replaced' if replaced else 'Registered'} transformer '{name}'"
        )

    def unregister(self, name: str) -> None:
        """Remove the entry for ``name`` if present."""
        with self._lock:
            self._entries.pop(name, None)

    def has(self, name: str) -> bool:
        """Check whether an entry exists for ``name`` (resolvable or not)."""
        return name in self._entries

    def names(self) -> List[str]:
        """Registered names, in registration order."""
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, name: str) -> Optional[Handle]:
        """
        Resolve ``name`` into an invocable handle.

        Args:
            name: Transformer name

        Returns:
            Handle, or None when the name is unknown or its entry is unusable

        Raises:
            Exception: Whatever the transformer's constructor raises
        """
        with self._lock:
            if name not in self._entries:
                return None

            entry = self._entries[name]

            # Already resolved (memoized or registered as a handle)
            if isinstance(entry, (FunctionHandle, BoundMethodHandle)):
                return entry

            if isinstance(entry, type) and not self._is_transformer_class(entry):
                # Conversion types such as int or Decimal are plain callables
                handle = FunctionHandle(entry)
            elif isinstance(entry, type):
                return self._memoize(name, ClassReference(entry, self.default_method))
            elif isinstance(entry, ClassReference):
                return self._memoize(name, entry)
            elif callable(entry):
                handle = FunctionHandle(entry)
            elif isinstance(entry, str) and entry:
                return self._memoize(name, ClassReference.parse(entry, self.default_method))
            else:
                logger.debug(f"Transformer '{name}' has unusable entry of type {type(entry).__name__}")
                return None

            self._entries[name] = handle
            return handle

    def _is_transformer_class(self, cls: type) -> bool:
        """Check whether a class is meant to be constructed and then called."""
        if callable(getattr(cls, self.default_method, None)):
            return True
        # __call__ defined by the class itself, not inherited from object
        return any("__call__" in vars(klass) for klass in cls.__mro__ if klass is not object)

    def _memoize(self, name: str, reference: ClassReference) -> Optional[BoundMethodHandle]:
        bound = self._construct(name, reference)
        if bound is not None:
            # Later lookups share this instance
            self._entries[name] = bound
        return bound

    def _construct(self, name: str, reference: ClassReference) -> Optional[BoundMethodHandle]:
        identifier = reference.identifier

        try:
            instance = self.container.make(identifier)
        except BindingResolutionError as e:
            logger.warning(f"Transformer '{name}' could not be resolved: {e}")
            return None

        if isinstance(instance, Transformer):
            label = instance.get_type()
        else:
            label = identifier if isinstance(identifier, str) else identifier.__name__

        self.metrics.record_handle_constructed(name)
        add_span_event("transformer_constructed", transformer=name, identifier=label)
        logger.info(f"Constructed transformer '{name}' from {label}@{reference.method}")

        return reference.bind(instance)
