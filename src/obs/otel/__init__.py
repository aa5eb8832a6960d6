"""OpenTelemetry helpers for nrinstrumentation observability."""

from __future__ import annotations

from obs.otel.constants import AttributeName, ScopeName
from obs.otel.logging import (
    TRACE_LOG_FORMAT,
    TraceContextFilter,
    TraceContextFormatter,
    configure_logging,
    install_trace_context_filter,
)
from obs.otel.scopes import (
    SCOPE_CLI,
    SCOPE_DESCRIPTOR,
    SCOPE_EXTRACT,
    SCOPE_PIPELINE,
    SCOPE_STORAGE,
)
from obs.otel.tracing import (
    get_tracer,
    record_exception,
    root_span,
    set_span_attributes,
    stage_span,
)

__all__ = [
    "SCOPE_CLI",
    "SCOPE_DESCRIPTOR",
    "SCOPE_EXTRACT",
    "SCOPE_PIPELINE",
    "SCOPE_STORAGE",
    "TRACE_LOG_FORMAT",
    "AttributeName",
    "ScopeName",
    "TraceContextFilter",
    "TraceContextFormatter",
    "configure_logging",
    "get_tracer",
    "install_trace_context_filter",
    "record_exception",
    "root_span",
    "set_span_attributes",
    "stage_span",
]
