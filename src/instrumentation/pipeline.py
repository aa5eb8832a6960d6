"""Scan, merge, build and write an instrumentation descriptor."""

from __future__ import annotations

import logging
from pathlib import Path

from extract.class_scan import walk_classes_directory
from instrumentation.descriptor import build_descriptor
from instrumentation.overrides import merge_manual_definitions
from instrumentation.settings import InstrumentationSettings
from instrumentation.writer import write_descriptor
from obs.otel.constants import AttributeName
from obs.otel.scopes import SCOPE_PIPELINE
from obs.otel.tracing import root_span, set_span_attributes

logger = logging.getLogger(__name__)


def execute(settings: InstrumentationSettings) -> Path | None:
    """Generate the descriptor for a compiled class directory.

    Parameters
    ----------
    settings
        Run settings.

    Returns
    -------
    Path | None
        Path of the written descriptor, or ``None`` when the output directory
        does not exist or is not a directory.

    Raises
    ------
    DescriptorWriteError
        Raised when the descriptor cannot be written.
    """
    root = settings.output_directory
    if not root.is_dir():
        logger.info("Output directory %s does not exist; skipping.", root)
        return None
    revision = settings.format_revision()
    with root_span(
        "instrumentation.execute",
        scope_name=SCOPE_PIPELINE,
        attributes={
            AttributeName.ROOT_DIRECTORY: root,
            AttributeName.REVISION: revision.key,
        },
    ) as span:
        registry = walk_classes_directory(
            root,
            revision=revision,
            max_workers=settings.max_workers,
        )
        merge_manual_definitions(registry, settings.manually_definitions)
        descriptor = build_descriptor(registry, metadata=settings.descriptor_metadata())
        path = write_descriptor(descriptor, root)
        set_span_attributes(
            span,
            {
                AttributeName.POINTCUT_COUNT: len(descriptor.pointcuts),
                AttributeName.OUTPUT_PATH: path,
            },
        )
    return path


__all__ = ["execute"]
