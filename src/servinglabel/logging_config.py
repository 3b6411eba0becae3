"""Structured logging configuration for servinglabel."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from servinglabel.config import get_settings

# Identifier of the food record whose label is being parsed
label_id_ctx: ContextVar[str | None] = ContextVar("label_id", default=None)


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if label_id := label_id_ctx.get():
            log_data["label_id"] = label_id

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data)


class ContextualFormatter(logging.Formatter):
    """Human-readable formatter with context for development."""

    def format(self, record: logging.LogRecord) -> str:
        label_id = label_id_ctx.get()
        context_str = f" [label={label_id}]" if label_id else ""

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        formatted = f"{timestamp} | {level} | {record.name}{context_str} | {record.getMessage()}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context variables."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})
        if label_id := label_id_ctx.get():
            extra["label_id"] = label_id
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Minimum log level. Defaults to the LOG_LEVEL setting.
        json_format: Use JSON format for logs. If None, use JSON when LOG_FORMAT
            is "json", or when running non-interactively in production.
    """
    settings = get_settings()
    level_str = (log_level or settings.log_level).upper()
    level = getattr(logging, level_str, logging.INFO)
    if json_format is None:
        json_format = settings.json_logs or (
            not sys.stdout.isatty() and settings.environment.lower() == "production"
        )

    formatter = StructuredJsonFormatter() if json_format else ContextualFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr keeps stdout free for parse output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    logging.getLogger("servinglabel").setLevel(level)

    get_logger(__name__).debug(
        f"Logging configured: level={level_str}, format={'json' if json_format else 'text'}"
    )


class LoggingContext:
    """Context manager that tags log records with the label being parsed."""

    def __init__(self, label_id: str | None = None):
        self.label_id = label_id
        self._token: Any = None

    def __enter__(self) -> "LoggingContext":
        if self.label_id is not None:
            self._token = label_id_ctx.set(self.label_id)
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            label_id_ctx.reset(self._token)
            self._token = None
