"""Instrumentation descriptor generation."""

from __future__ import annotations

from instrumentation.descriptor import (
    DescriptorMetadata,
    ExtensionDescriptor,
    Pointcut,
    build_descriptor,
)
from instrumentation.errors import DescriptorWriteError, InstrumentationError
from instrumentation.overrides import merge_manual_definitions
from instrumentation.pipeline import execute
from instrumentation.settings import InstrumentationSettings
from instrumentation.writer import (
    descriptor_output_path,
    render_descriptor,
    write_descriptor,
)

__all__ = [
    "DescriptorMetadata",
    "DescriptorWriteError",
    "ExtensionDescriptor",
    "InstrumentationError",
    "InstrumentationSettings",
    "Pointcut",
    "build_descriptor",
    "descriptor_output_path",
    "execute",
    "merge_manual_definitions",
    "render_descriptor",
    "write_descriptor",
]
