"""
Logger wrapper that carries fixed context.
"""

import logging
from typing import Any, Dict


class ContextLogger:
    """
    Logger wrapper that adds contextual information to every message

    Usage:
        logger = ContextLogger("sanitizer.engine", ruleset="users")
        logger.info("Sanitized record", field_count=4)
        # Output includes both ruleset and field_count
    """

    def __init__(self, name: str, **context):
        self.logger = logging.getLogger(name)
        self.context: Dict[str, Any] = context

    def _log(self, level: int, msg: str, *args, exc_info=None, **kwargs) -> None:
        if not self.logger.isEnabledFor(level):
            return

        self.logger.log(
            level,
            msg,
            *args,
            exc_info=exc_info,
            extra={**self.context, **kwargs},
        )

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, exc_info=None, **kwargs) -> None:
        self._log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    def bind(self, **context) -> "ContextLogger":
        """
        Create a child logger with additional context

        Args:
            **context: Context merged over the current context

        Returns:
            New ContextLogger sharing the underlying logger name
        """
        return ContextLogger(self.logger.name, **{**self.context, **context})

    def get_context(self) -> Dict[str, Any]:
        """Get a copy of the current context"""
        return self.context.copy()
