"""Extract class and method identifiers from compiled class files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import BinaryIO

from classfile.constants import HOOK_METHOD_NAMES
from classfile.errors import ClassFormatError
from classfile.reader import ClassHeader, MethodInfo, read_class_file
from classfile.revisions import DEFAULT_REVISION, FormatRevision
from extract.identifiers import ClassName, MethodName, MethodNames
from extract.registry import ClassMethodEntry

logger = logging.getLogger(__name__)

# Characters outside the XML 1.0 Char production, including lone surrogates.
_NON_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _require_xml_text(value: str, *, kind: str) -> str:
    match = _NON_XML_CHARS.search(value)
    if match is not None:
        msg = (
            f"{kind} {value!r} contains U+{ord(match.group()):04X}, "
            "which cannot be written to an XML descriptor."
        )
        raise ClassFormatError(msg)
    return value


class ClassMethodCapture:
    """Event handler that records the class name and declared method names.

    Construction and static initialization hooks are not recorded. Names
    holding characters that XML 1.0 cannot represent raise ``ClassFormatError``.
    """

    __slots__ = ("class_name", "method_names")

    def __init__(self) -> None:
        self.class_name: ClassName | None = None
        self.method_names = MethodNames()

    def on_class(self, header: ClassHeader) -> None:
        """Record the normalized class name."""
        internal_name = _require_xml_text(header.internal_name, kind="Class name")
        self.class_name = ClassName.from_internal(internal_name)

    def on_method(self, method: MethodInfo) -> None:
        """Record a method name unless it is an initialization hook."""
        if method.name in HOOK_METHOD_NAMES:
            return
        name = _require_xml_text(method.name, kind="Method name")
        self.method_names.append(MethodName(name))


def extract_class_methods(
    source: bytes | bytearray | BinaryIO,
    *,
    revision: FormatRevision = DEFAULT_REVISION,
) -> ClassMethodEntry:
    """Extract the class name and method names of one class file.

    Parameters
    ----------
    source
        Class-file bytes or a binary stream positioned at the start.
    revision
        Format revision used by the reader.

    Returns
    -------
    ClassMethodEntry
        Class name and its methods in declaration order.

    Raises
    ------
    ClassFormatError
        Raised when the class file cannot be parsed.
    """
    data = bytes(source) if isinstance(source, (bytes, bytearray)) else source.read()
    capture = ClassMethodCapture()
    read_class_file(data, handler=capture, revision=revision)
    if capture.class_name is None:
        msg = "Class file produced no class header."
        raise ClassFormatError(msg)
    return ClassMethodEntry(class_name=capture.class_name, method_names=capture.method_names)


def visit_class_file(
    path: Path,
    *,
    revision: FormatRevision = DEFAULT_REVISION,
) -> ClassMethodEntry | None:
    """Extract one class file, logging and skipping it on failure.

    Parameters
    ----------
    path
        Path to a ``.class`` file.
    revision
        Format revision used by the reader.

    Returns
    -------
    ClassMethodEntry | None
        Extracted entry, or ``None`` when the file could not be read or parsed.
    """
    try:
        with path.open("rb") as stream:
            return extract_class_methods(stream, revision=revision)
    except (ClassFormatError, OSError):
        logger.exception("Failed to read class file %s", path.absolute())
        return None


__all__ = ["ClassMethodCapture", "extract_class_methods", "visit_class_file"]
