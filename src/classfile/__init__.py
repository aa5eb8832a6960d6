"""JVM class-file structural reader."""

from __future__ import annotations

from classfile.constants import CLASS_FILE_SUFFIX, HOOK_METHOD_NAMES
from classfile.errors import (
    ClassFormatError,
    UnsupportedClassVersionError,
    UnsupportedFeatureError,
)
from classfile.reader import ClassEventHandler, ClassHeader, MethodInfo, read_class_file
from classfile.revisions import (
    DEFAULT_REVISION,
    DEFAULT_REVISION_KEY,
    FORMAT_REVISIONS,
    FormatRevision,
    resolve_revision,
)

__all__ = [
    "CLASS_FILE_SUFFIX",
    "DEFAULT_REVISION",
    "DEFAULT_REVISION_KEY",
    "FORMAT_REVISIONS",
    "HOOK_METHOD_NAMES",
    "ClassEventHandler",
    "ClassFormatError",
    "ClassHeader",
    "FormatRevision",
    "MethodInfo",
    "UnsupportedClassVersionError",
    "UnsupportedFeatureError",
    "read_class_file",
    "resolve_revision",
]
