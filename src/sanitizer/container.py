"""
Minimal dependency container used to build class-backed transformers.

Applications may pass any object exposing ``make(identifier)``; this
default covers explicit bindings, shared instances and import paths.

Usage:
    from sanitizer.container import Container

    container = Container()
    container.bind("slugger", lambda: Slugger(separator="-"))
    container.make("slugger")
    container.make("myapp.sanitizers.Slugger")
"""

import importlib
import logging
import threading
from typing import Any, Callable, Dict, Protocol

from sanitizer.exceptions import BindingResolutionError

logger = logging.getLogger(__name__)


class SupportsMake(Protocol):
    """Interface the engine consumes from a container."""

    def make(self, identifier: Any) -> Any:
        ...


class Container:
    """
    Resolve identifiers into instances.

    Resolution order for ``make``:
    1. Shared instances registered with ``instance()``
    2. Factories registered with ``bind()``
    3. Class objects, called with no arguments
    4. Import paths (``package.module.ClassName`` or ``package.module:ClassName``)
    """

    def __init__(self):
        self._bindings: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def bind(self, identifier: str, factory: Callable[[], Any]) -> None:
        """
        Register a factory for an identifier.

        Args:
            identifier: Name used in handle references
            factory: Zero-argument callable returning a new instance
        """
        with self._lock:
            self._instances.pop(identifier, None)
            self._bindings[identifier] = factory

        logger.debug(f"Bound container identifier '{identifier}'")

    def instance(self, identifier: str, obj: Any) -> None:
        """Register an existing object to be returned for an identifier."""
        with self._lock:
            self._bindings.pop(identifier, None)
            self._instances[identifier] = obj

    def bound(self, identifier: str) -> bool:
        """Check whether an identifier has an explicit binding or instance."""
        return identifier in self._instances or identifier in self._bindings

    def make(self, identifier: Any) -> Any:
        """
        Build an instance for an identifier.

        Args:
            identifier: Bound name, class object or import path

        Returns:
            New instance (or the shared instance registered for the identifier)

        Raises:
            BindingResolutionError: If the identifier cannot be mapped to a type.
                Exceptions raised by the constructor itself are not wrapped.
        """
        if isinstance(identifier, type):
            return identifier()

        if not isinstance(identifier, str) or not identifier:
            raise BindingResolutionError(repr(identifier), "identifier must be a non-empty string")

        if identifier in self._instances:
            return self._instances[identifier]

        factory = self._bindings.get(identifier)
        if factory is not None:
            return factory()

        return self._import_class(identifier)()

    def _import_class(self, identifier: str) -> type:
        """Import a class from a dotted or colon-separated path."""
        if ":" in identifier:
            module_path, _, attribute = identifier.partition(":")
        else:
            module_path, _, attribute = identifier.rpartition(".")

        if not module_path or not attribute:
            raise BindingResolutionError(identifier, "not bound and not an import path")

        try:
            module = importlib.import_module(module_path)
        except ModuleNotFoundError as e:
            # Only the named module itself being absent is a resolution failure;
            # a missing dependency inside it is the module's own error
            if e.name is None or not _is_same_or_parent(e.name, module_path):
                raise
            raise BindingResolutionError(identifier, f"cannot import '{module_path}': {e}") from e

        target = getattr(module, attribute, None)
        if not isinstance(target, type):
            raise BindingResolutionError(
                identifier, f"'{attribute}' is not a class in module '{module_path}'"
            )

        return target


def _is_same_or_parent(name: str, module_path: str) -> bool:
    return module_path == name or module_path.startswith(name + ".")
