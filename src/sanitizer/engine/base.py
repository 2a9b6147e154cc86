"""
Base class for class-backed transformers.

Registering a subclass (or its import path) makes the engine construct it
lazily and call ``sanitize`` on every step that names it.
"""

from abc import ABC, abstractmethod
from typing import Any


class Transformer(ABC):
    """Base class for class-backed transformers."""

    @abstractmethod
    def sanitize(self, value: Any, *args: str) -> Any:
        """
        Transform a single value.

        Args:
            value: Current field value
            *args: Arguments declared on the step (``name:arg1,arg2``)

        Returns:
            Transformed value
        """

    def get_type(self) -> str:
        """Get transformer type for logs and metrics."""
        return self.__class__.__name__
