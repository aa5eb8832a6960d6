"""Logging setup with trace correlation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from opentelemetry import trace

if TYPE_CHECKING:

    class _TraceRecord(logging.LogRecord):
        trace_id: str | None
        span_id: str | None


TRACE_LOG_FORMAT = (
    "%(asctime)s %(levelname)s [trace_id=%(trace_id)s span_id=%(span_id)s] %(name)s: %(message)s"
)


class TraceContextFilter(logging.Filter):
    """Attach trace/span IDs to log records when available."""

    @staticmethod
    def filter(record: logging.LogRecord) -> bool:
        """Inject trace/span IDs into the log record when available.

        Returns
        -------
        bool
            True to keep the log record.
        """
        context = trace.get_current_span().get_span_context()
        trace_record = cast("_TraceRecord", record)
        if context is None or not context.is_valid:
            trace_record.trace_id = None
            trace_record.span_id = None
            return True
        trace_record.trace_id = f"{context.trace_id:032x}"
        trace_record.span_id = f"{context.span_id:016x}"
        return True


class TraceContextFormatter(logging.Formatter):
    """Formatter that tolerates records missing trace/span IDs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with ensured trace/span fields.

        Returns
        -------
        str
            Formatted log record string.
        """
        if not hasattr(record, "trace_id"):
            record.trace_id = None
        if not hasattr(record, "span_id"):
            record.span_id = None
        return super().format(record)


def install_trace_context_filter(logger: logging.Logger | None = None) -> None:
    """Install the trace context filter on the handlers of ``logger``."""
    target = logger or logging.getLogger()
    if not target.handlers:
        target.addFilter(TraceContextFilter())
        return
    for handler in target.handlers:
        if any(isinstance(existing, TraceContextFilter) for existing in handler.filters):
            continue
        handler.addFilter(TraceContextFilter())


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for a CLI invocation.

    Parameters
    ----------
    level
        Logging level name such as ``"INFO"``.
    """
    logging.basicConfig(level=level.upper())
    root = logging.getLogger()
    root.setLevel(level.upper())
    formatter = TraceContextFormatter(TRACE_LOG_FORMAT)
    for handler in root.handlers:
        handler.setFormatter(formatter)
    install_trace_context_filter(root)


__all__ = [
    "TRACE_LOG_FORMAT",
    "TraceContextFilter",
    "TraceContextFormatter",
    "configure_logging",
    "install_trace_context_filter",
]
