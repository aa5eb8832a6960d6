"""Canonical OpenTelemetry constants for nrinstrumentation."""

from __future__ import annotations

from enum import StrEnum


class AttributeName(StrEnum):
    """Canonical attribute names."""

    STATUS = "status"
    STAGE_NAME = "nrinstrumentation.stage"
    ROOT_DIRECTORY = "nrinstrumentation.root_directory"
    REVISION = "nrinstrumentation.format_revision"
    CLASS_COUNT = "nrinstrumentation.class_count"
    POINTCUT_COUNT = "nrinstrumentation.pointcut_count"
    OUTPUT_PATH = "nrinstrumentation.output_path"


class ScopeName(StrEnum):
    """Canonical instrumentation scope names."""

    PIPELINE = "nrinstrumentation.pipeline"
    EXTRACT = "nrinstrumentation.extract"
    DESCRIPTOR = "nrinstrumentation.descriptor"
    STORAGE = "nrinstrumentation.storage"
    CLI = "nrinstrumentation.cli"


__all__ = ["AttributeName", "ScopeName"]
