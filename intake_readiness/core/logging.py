"""Structured logging configuration for the Intake Readiness service."""

import logging
import sys
from typing import Any

# INTAKE_ENV -> log level; anything unlisted logs at INFO
_ENV_LEVELS = {
    "dev": logging.DEBUG,
    "test": logging.WARNING,
}


def _render(value: Any) -> str:
    """Render a context value, quoting it when it contains whitespace."""
    text = str(value)
    if any(ch.isspace() for ch in text):
        return '"' + text.replace('"', '\\"') + '"'
    return text


class StructuredFormatter(logging.Formatter):
    """key=value structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured output."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        # Intake record being evaluated, when the caller knows it
        if hasattr(record, "intake_id"):
            log_data["intake_id"] = record.intake_id

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        parts = [f"{k}={_render(v)}" for k, v in log_data.items()]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        try:
            from intake_readiness.core.config import get_settings

            logger.setLevel(_ENV_LEVELS.get(get_settings().INTAKE_ENV, logging.INFO))
        except Exception:
            # Default to INFO if settings not available
            logger.setLevel(logging.INFO)

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Context fields; ``intake_id`` is promoted to its own slot
    """
    intake_id = kwargs.pop("intake_id", None)
    extra: dict[str, Any] = {"extra_data": kwargs}
    if intake_id is not None:
        extra["intake_id"] = intake_id

    logger.log(level, msg, extra=extra)
