"""
Transformation dispatch engine.

Supports:
- Named transformer registry (functions, callable instances, lazily
  constructed classes)
- Piped rule strings with step arguments
- Wildcard rules applied to every field
- Dotted paths into nested records
"""

from .base import Transformer
from .handles import BoundMethodHandle, ClassReference, FunctionHandle, invoke
from .registry import SanitizerRegistry
from .rules import WILDCARD, Step, parse_pipeline, parse_step
from .sanitizer import Sanitizer

__all__ = [
    "Sanitizer",
    "SanitizerRegistry",
    "Transformer",
    "Step",
    "FunctionHandle",
    "BoundMethodHandle",
    "ClassReference",
    "invoke",
    "parse_pipeline",
    "parse_step",
    "WILDCARD",
]
