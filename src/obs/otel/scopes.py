"""Canonical OpenTelemetry instrumentation scopes for nrinstrumentation."""

from __future__ import annotations

from obs.otel.constants import ScopeName

SCOPE_PIPELINE = ScopeName.PIPELINE
SCOPE_EXTRACT = ScopeName.EXTRACT
SCOPE_DESCRIPTOR = ScopeName.DESCRIPTOR
SCOPE_STORAGE = ScopeName.STORAGE
SCOPE_CLI = ScopeName.CLI

__all__ = [
    "SCOPE_CLI",
    "SCOPE_DESCRIPTOR",
    "SCOPE_EXTRACT",
    "SCOPE_PIPELINE",
    "SCOPE_STORAGE",
]
