r"""Structured logging utilities for retry lifecycle events.

The executor reports what it does as named events (``operation_succeeded``,
``operation_failed``, ``sleeping_before_retry``, ``recovery_succeeded``,
``recovery_failed``) through the standard ``logging`` module. Each event is a
regular log record carrying an ``event`` field plus metadata passed via
``extra``. Nothing is printed unless the host application configures a
handler, so the default behaviour is silent.

Example:
    Render aretry events as JSON lines:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    ```

    Tag every event of a unit of work with a correlation ID:

    ```python
    from aretry.utils.structured_logging import clear_correlation_id, set_correlation_id

    set_correlation_id("job-42")
    try:
        executor.execute(operation)
    finally:
        clear_correlation_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_event",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or ``None`` if not set.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("req-123")
        >>> get_correlation_id()
        'req-123'
        >>> clear_correlation_id()
        >>> get_correlation_id() is None
        True

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    The value is stored in a context variable, so concurrent executions in
    different threads do not see each other's ID.

    Args:
        correlation_id: The correlation ID to attach to subsequent events.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as one JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, the correlation ID when one is set, the
    formatted exception when present, and every field passed via ``extra``
    (``event``, ``attempt``, ``sleep_time_ms``...). Values that are not JSON
    serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter, log_event
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> log_event(logger, logging.INFO, "operation_succeeded", attempt=2)
        >>> data = json.loads(stream.getvalue())
        >>> data["event"], data["attempt"]
        ('operation_succeeded', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record timestamp as ISO 8601 UTC with milliseconds."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g. ``logging.INFO``).
        message: Log message.
        **extra: Additional structured fields attached to the record.
    """
    logger.log(level, message, extra=extra)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log a named lifecycle event.

    The human readable message is built from the event name and its fields,
    and the fields are also attached to the record for structured output.

    Args:
        logger: Logger to use.
        level: Log level (e.g. ``logging.INFO``).
        event: The event name, e.g. ``"operation_failed"``.
        **fields: Event metadata (attempt number, counters, durations).
    """
    if not logger.isEnabledFor(level):
        return
    details = ", ".join(f"{key}={value}" for key, value in fields.items())
    message = f"{event} ({details})" if details else event
    log_structured(logger, level, message, event=event, **fields)
