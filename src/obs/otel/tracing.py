"""Tracing helpers for nrinstrumentation stages."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode
from opentelemetry.util.types import AttributeValue

from obs.otel.attributes import normalize_attributes
from obs.otel.constants import AttributeName
from obs.otel.scope_metadata import instrumentation_schema_url, instrumentation_version
from obs.otel.scopes import SCOPE_PIPELINE

logger = logging.getLogger(__name__)

_SLOW_THRESHOLD_S = 5.0


def get_tracer(scope_name: str) -> trace.Tracer:
    """Return a tracer for the given instrumentation scope.

    Parameters
    ----------
    scope_name
        Instrumentation scope name.

    Returns
    -------
    opentelemetry.trace.Tracer
        Tracer bound to the requested scope.
    """
    version_value = instrumentation_version()
    version = version_value if version_value is not None else "unknown"
    return trace.get_tracer(
        scope_name,
        instrumenting_library_version=version,
        schema_url=instrumentation_schema_url(),
    )


def set_span_attributes(span: Span, attrs: Mapping[str, object] | None) -> None:
    """Attach normalized attributes to a span.

    Parameters
    ----------
    span
        Span to update.
    attrs
        Raw attributes to normalize and attach.
    """
    for key, value in normalize_attributes(attrs).items():
        span.set_attribute(key, value)


def record_exception(span: Span, exc: Exception) -> None:
    """Record an exception on a span and mark it as error.

    Parameters
    ----------
    span
        Span to annotate.
    exc
        Exception to record.
    """
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR))


def span_attributes(*, attrs: Mapping[str, object] | None = None) -> dict[str, AttributeValue]:
    """Return normalized attributes for direct use in span creation.

    Returns
    -------
    dict[str, AttributeValue]
        Normalized attributes for span creation.
    """
    return normalize_attributes(attrs)


@contextmanager
def stage_span(
    name: str,
    *,
    stage: str,
    scope_name: str,
    attributes: Mapping[str, object] | None = None,
) -> Iterator[Span]:
    """Start a stage span and record its duration and status.

    Parameters
    ----------
    name
        Span name.
    stage
        Stage name recorded on the span.
    scope_name
        Instrumentation scope name.
    attributes
        Optional span attributes.

    Yields
    ------
    Span
        The started span.
    """
    base_attrs: dict[str, object] = {AttributeName.STAGE_NAME: stage}
    if attributes:
        base_attrs.update(attributes)
    tracer = get_tracer(scope_name)
    start = time.monotonic()
    status = "ok"
    with tracer.start_as_current_span(name, attributes=span_attributes(attrs=base_attrs)) as span:
        try:
            yield span
        except Exception as exc:
            status = "error"
            record_exception(span, exc)
            raise
        finally:
            duration_s = time.monotonic() - start
            slow_attrs: dict[str, object] = {}
            if duration_s >= _SLOW_THRESHOLD_S:
                slow_attrs = {
                    "nrinstrumentation.slow": True,
                    "nrinstrumentation.slow_threshold_s": _SLOW_THRESHOLD_S,
                }
                logger.info("Stage %s took %.2fs.", stage, duration_s)
            set_span_attributes(
                span,
                {"duration_s": duration_s, AttributeName.STATUS: status, **slow_attrs},
            )


@contextmanager
def root_span(
    name: str,
    *,
    attributes: Mapping[str, object] | None = None,
    scope_name: str = SCOPE_PIPELINE,
) -> Iterator[Span]:
    """Start a root span for one invocation.

    Parameters
    ----------
    name
        Span name.
    attributes
        Span attributes.
    scope_name
        Instrumentation scope name.

    Yields
    ------
    Span
        The started span.
    """
    tracer = get_tracer(scope_name)
    with tracer.start_as_current_span(name, attributes=span_attributes(attrs=attributes)) as span:
        yield span


__all__ = [
    "get_tracer",
    "record_exception",
    "root_span",
    "set_span_attributes",
    "span_attributes",
    "stage_span",
]
