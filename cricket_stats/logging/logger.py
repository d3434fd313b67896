import logging
import sys
from typing import TextIO


class _ContextFormatter(logging.Formatter):
    """Appends the keyword context passed to ``Log`` calls as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context: dict[str, object] = getattr(record, "context", {}) or {}
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{pairs}]"


class Log:
    """Centralized logging for the stats fetcher."""

    _logger: logging.Logger = logging.getLogger("cricket_stats")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler (stdout unless a stream is given)."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(
                _ContextFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra={"context": context})

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra={"context": context})

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra={"context": context})

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra={"context": context})
