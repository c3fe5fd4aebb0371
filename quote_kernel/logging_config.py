"""
quote_kernel.logging_config -- JSON log lines for pricing calls.

Every record emitted under the ``quote_kernel`` logger namespace can be
rendered as one JSON object holding the timestamp, level, logger and
message, the quote and item the call was made for, and whatever the
caller passed through ``extra=``.  Decimal amounts render as strings and
enums as their values, so a priced breakdown can be read back from the
log without loss.

Usage:
    from quote_kernel.logging_config import LogContext, configure_logging, get_logger

    configure_logging()
    logger = get_logger("services.pricing")
    with LogContext.bind(quote_id="Q-1042", item_id="3"):
        logger.info("quote_item_priced", extra={"subtotal": "110250.00"})
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TextIO

__all__ = [
    "LogContext",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "reset_logging",
]

_LOGGER_PREFIX = "quote_kernel"

_quote_id: ContextVar[str | None] = ContextVar("quote_log_quote_id", default=None)
_item_id: ContextVar[str | None] = ContextVar("quote_log_item_id", default=None)

_CONTEXT_VARS: dict[str, ContextVar[str | None]] = {
    "quote_id": _quote_id,
    "item_id": _item_id,
}


class LogContext:
    """Quote and item identifiers attached to every record logged inside a call."""

    @staticmethod
    def current() -> dict[str, str]:
        """Identifiers bound in the current context (unset ones omitted)."""
        return {
            name: value
            for name, var in _CONTEXT_VARS.items()
            if (value := var.get()) is not None
        }

    @staticmethod
    @contextmanager
    def bind(*, quote_id: str | None = None, item_id: str | None = None) -> Iterator[None]:
        """Bind identifiers for the duration of a ``with`` block.

        A None argument leaves any outer binding in place.  Previous
        values are restored on exit, including after an exception.
        """
        tokens = [
            (_CONTEXT_VARS[name], _CONTEXT_VARS[name].set(value))
            for name, value in (("quote_id", quote_id), ("item_id", item_id))
            if value is not None
        ]
        try:
            yield
        finally:
            for var, token in reversed(tokens):
                var.reset(token)

    @staticmethod
    def clear() -> None:
        for var in _CONTEXT_VARS.values():
            var.set(None)


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------

_RESERVED_ATTRS: frozenset[str] = frozenset(
    vars(logging.makeLogRecord({})).keys()
) | {"message", "asctime", "taskName"}


def _json_default(value: Any) -> Any:
    # Decimal and UUID fall through to str()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _exception_fields(exc: BaseException) -> dict[str, Any]:
    """``exc_*`` keys for an exception, including QuoteKernelError's code and fields."""
    fields: dict[str, Any] = {
        "exc_type": type(exc).__name__,
        "exc_message": str(exc),
    }
    code = getattr(exc, "code", None)
    if code is not None:
        fields["exc_code"] = code
    for name, value in vars(exc).items():
        if not name.startswith("_"):
            fields.setdefault(f"exc_{name}", value)
    return fields


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **LogContext.current(),
        }
        for name, value in vars(record).items():
            if name not in _RESERVED_ATTRS:
                line.setdefault(name, value)

        if record.exc_info and record.exc_info[1] is not None:
            line.update(_exception_fields(record.exc_info[1]))
            line["traceback"] = self.formatException(record.exc_info)

        return json.dumps(line, default=_json_default)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` under the ``quote_kernel`` namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def _structured_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h.formatter, StructuredFormatter)]


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: TextIO | None = None,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """Send ``quote_kernel`` records to one JSON handler.

    Calling it again once a JSON handler is attached changes nothing, so
    both an application entrypoint and a library caller may call it.
    """
    logger = logging.getLogger(_LOGGER_PREFIX)
    if _structured_handlers(logger):
        return logger

    target = handler or logging.StreamHandler(stream or sys.stderr)
    target.setFormatter(StructuredFormatter())
    logger.addHandler(target)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Detach the JSON handler and hand records back to the root logger. For tests."""
    logger = logging.getLogger(_LOGGER_PREFIX)
    for h in _structured_handlers(logger):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
