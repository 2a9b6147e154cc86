"""
Rule-driven record sanitizer.

Runs the fields of a record through pipelines of named transformers.
"""

from sanitizer.config import SanitizerSettings
from sanitizer.container import Container
from sanitizer.engine import ClassReference, Sanitizer, SanitizerRegistry, Step, Transformer
from sanitizer.exceptions import BindingResolutionError, SanitizerError

__version__ = "1.0.0"

__all__ = [
    "Sanitizer",
    "SanitizerRegistry",
    "SanitizerSettings",
    "Container",
    "Transformer",
    "Step",
    "ClassReference",
    "SanitizerError",
    "BindingResolutionError",
]
