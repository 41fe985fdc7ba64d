"""Structured JSON logging with operation context."""
import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

CONTEXT_FIELDS = ("operation", "method")


class OperationContextFilter(logging.Filter):
    """Add operation context to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, None)
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with standardized field names."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if "timestamp" not in log_record:
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value:
                log_record[field] = value
            else:
                log_record.pop(field, None)


def setup_logging(level: str | int = "INFO") -> None:
    """
    Configure structured JSON logging on the `euplatesc` logger.

    Args:
        level: Log level name or number.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    handler.addFilter(OperationContextFilter())

    package_logger = logging.getLogger("euplatesc")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges per-call extra into the adapter extra."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_logger(name: str) -> ContextLoggerAdapter:
    """
    Get a logger that accepts operation context in its extra dict.

    Args:
        name: Logger name (typically __name__)
    """
    return ContextLoggerAdapter(logging.getLogger(name), extra={})


def with_operation_context(
    operation: str | None = None,
    method: str | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create an extra dict with operation context for logging.

    Args:
        operation: Public operation name, e.g. "refund"
        method: Wire method name, e.g. "partial_capture"
        **kwargs: Additional context fields

    Returns:
        Dict to pass as extra parameter to logger methods
    """
    extra = kwargs.copy()
    if operation:
        extra["operation"] = operation
    if method:
        extra["method"] = method
    return extra
