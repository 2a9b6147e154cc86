"""
Transformer handles and the uniform dispatch contract.

Every registered transformer ends up as one of these variants:

- FunctionHandle: a plain callable (function, lambda, bound method,
  callable instance)
- BoundMethodHandle: an instance built from a class reference plus the
  name of the method to call on it
- ClassReference: the unresolved form of a class-backed transformer,
  turned into a BoundMethodHandle by the registry on first use

Handles expose ``invoke(arguments)``, where ``arguments`` is
``[value, *declared_arguments]``. A handle that turns out not to be
callable returns ``arguments[0]`` unchanged.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Union

from sanitizer.config import DEFAULT_METHOD

logger = logging.getLogger(__name__)

METHOD_SEPARATOR = "@"


@dataclass(frozen=True)
class FunctionHandle:
    """Directly callable transformer."""

    func: Callable[..., Any]

    def invoke(self, arguments: Sequence[Any]) -> Any:
        return self.func(*arguments)


@dataclass(frozen=True)
class BoundMethodHandle:
    """
    Instance of a class-backed transformer and the method to call on it.

    When the method was not selected explicitly and the instance lacks it,
    a callable instance is called directly.
    """

    instance: Any
    method: str = DEFAULT_METHOD
    explicit: bool = False

    def target(self) -> Optional[Callable[..., Any]]:
        """Resolve the callable this handle dispatches to, if any."""
        bound = getattr(self.instance, self.method, None)
        if callable(bound):
            return bound
        if not self.explicit and callable(self.instance):
            return self.instance
        return None

    def invoke(self, arguments: Sequence[Any]) -> Any:
        target = self.target()
        if target is None:
            logger.debug(
                f"{type(self.instance).__name__} has no callable '{self.method}', "
                f"passing value through"
            )
            return arguments[0]
        return target(*arguments)


@dataclass(frozen=True)
class ClassReference:
    """Deferred class-backed transformer awaiting construction."""

    identifier: Union[str, type]
    method: str = DEFAULT_METHOD
    explicit: bool = field(default=False, compare=False)

    @classmethod
    def parse(cls, reference: str, default_method: str = DEFAULT_METHOD) -> "ClassReference":
        """
        Parse ``"Identifier"`` or ``"Identifier@method"``.

        Args:
            reference: Handle reference string
            default_method: Method used when no selector is present
        """
        identifier, separator, method = reference.partition(METHOD_SEPARATOR)
        if separator and method:
            return cls(identifier, method, explicit=True)
        return cls(identifier, default_method)

    def bind(self, instance: Any) -> BoundMethodHandle:
        """Pair a constructed instance with this reference's method."""
        return BoundMethodHandle(instance, self.method, self.explicit)


Handle = Union[FunctionHandle, BoundMethodHandle]


def invoke(handle: Any, arguments: Sequence[Any]) -> Any:
    """
    Call any handle shape with ``[value, *declared_arguments]``.

    Raw callables are accepted as well; anything else returns the value.
    """
    if isinstance(handle, (FunctionHandle, BoundMethodHandle)):
        return handle.invoke(arguments)
    if callable(handle):
        return handle(*arguments)
    return arguments[0]
