"""Logger adapter over the standard logging module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

# Attributes set by logging.LogRecord itself; passing them through `extra` raises KeyError
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def _safe_extra(context: dict[str, Any]) -> dict[str, Any]:
    return {
        (f"ctx_{key}" if key in _RESERVED_ATTRS else key): value for key, value in context.items()
    }


class SimpleLogger(LoggerPort):
    """LoggerPort implementation using Python's standard logging.

    Structured keyword context is attached to records through ``extra``;
    keys that clash with LogRecord attributes are prefixed with ``ctx_``.
    """

    def __init__(self, name: str = "share_intake", level: int | str = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "share_intake")
            level: Logging level, as a number or a level name (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # Add console handler if not already present
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)

    @property
    def name(self) -> str:
        """Name of the underlying logger."""
        return self._logger.name

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, extra=_safe_extra(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._logger.info(message, extra=_safe_extra(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, extra=_safe_extra(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._logger.error(message, extra=_safe_extra(kwargs))

    def exception(self, message: str, exc_info: Exception | None = None, **kwargs: Any) -> None:
        """Log an exception with traceback."""
        self._logger.exception(message, exc_info=exc_info or True, extra=_safe_extra(kwargs))


def component_logger(component: str, level: int | str = logging.INFO) -> SimpleLogger:
    """Create the default logger for a pipeline component."""
    return SimpleLogger(f"share_intake.{component}", level)
