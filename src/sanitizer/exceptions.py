"""
Exceptions raised by the sanitizer package.

The dispatch path itself never raises for unknown steps or unusable
handles; these types cover container wiring problems only.
"""


class SanitizerError(Exception):
    """Base class for sanitizer errors."""


class BindingResolutionError(SanitizerError):
    """Raised when the container cannot map an identifier to a type."""

    def __init__(self, identifier: str, reason: str = ""):
        self.identifier = identifier
        self.reason = reason
        message = f"Unable to resolve binding [{identifier}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
