"""Structural reader for JVM class files.

Only the structural metadata is decoded: the constant pool, the class header
and the method table. Attribute bodies (``Code``, debug tables, stack map
frames and so on) are skipped by length and never interpreted.
"""

from __future__ import annotations

import struct
from typing import Protocol, cast

from classfile.constants import (
    CLASS_MAGIC,
    CONSTANT_SIZES,
    MAX_MAJOR_VERSION,
    WIDE_CONSTANT_TAGS,
    ConstantTag,
)
from classfile.errors import (
    ClassFormatError,
    UnsupportedClassVersionError,
    UnsupportedFeatureError,
)
from classfile.revisions import (
    DEFAULT_REVISION,
    GATED_CLASS_ATTRIBUTES,
    FormatRevision,
)
from serde_msgspec import StructBaseHotPath

_U2 = struct.Struct(">H")
_U4 = struct.Struct(">I")


class ClassHeader(StructBaseHotPath, frozen=True):
    """Class-level structural metadata."""

    minor_version: int
    major_version: int
    access_flags: int
    internal_name: str
    super_name: str | None
    interfaces: tuple[str, ...] = ()


class MethodInfo(StructBaseHotPath, frozen=True):
    """Declared method as it appears in the method table."""

    access_flags: int
    name: str
    descriptor: str


class ClassEventHandler(Protocol):
    """Receiver for structural events emitted by ``read_class_file``."""

    def on_class(self, header: ClassHeader) -> None:
        """Handle the class header; called once before any method."""
        ...

    def on_method(self, method: MethodInfo) -> None:
        """Handle one declared method, in declaration order."""
        ...


class _ByteCursor:
    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def _require(self, size: int) -> int:
        start = self._offset
        end = start + size
        if end > len(self._data):
            msg = (
                f"Truncated class file: needed {size} bytes at offset {start}, "
                f"{len(self._data) - start} available."
            )
            raise ClassFormatError(msg)
        self._offset = end
        return start

    def u1(self) -> int:
        start = self._require(1)
        return self._data[start]

    def u2(self) -> int:
        start = self._require(2)
        return _U2.unpack_from(self._data, start)[0]

    def u4(self) -> int:
        start = self._require(4)
        return _U4.unpack_from(self._data, start)[0]

    def take(self, size: int) -> bytes:
        start = self._require(size)
        return self._data[start : start + size]

    def skip(self, size: int) -> None:
        self._require(size)


def decode_modified_utf8(raw: bytes) -> str:
    """Decode a JVM modified UTF-8 string.

    NUL is encoded as ``C0 80`` and supplementary characters as two encoded
    surrogates; both are folded back into regular code points.

    Raises
    ------
    ClassFormatError
        Raised when the bytes are not valid modified UTF-8.
    """
    try:
        text = raw.replace(b"\xc0\x80", b"\x00").decode("utf-8", errors="surrogatepass")
    except UnicodeDecodeError as exc:
        msg = f"Invalid modified UTF-8 constant: {exc.reason}."
        raise ClassFormatError(msg) from exc
    if any("\ud800" <= char <= "\udfff" for char in text):
        text = text.encode("utf-16-le", errors="surrogatepass").decode(
            "utf-16-le",
            errors="surrogatepass",
        )
    return text


class _ConstantPool:
    __slots__ = ("_entries",)

    def __init__(self, entries: list[tuple[int, object] | None]) -> None:
        self._entries = entries

    def _entry(self, index: int, tag: ConstantTag) -> object:
        if index <= 0 or index >= len(self._entries):
            msg = f"Constant pool index {index} out of range."
            raise ClassFormatError(msg)
        entry = self._entries[index]
        if entry is None or entry[0] != tag:
            found = "unusable slot" if entry is None else f"tag {entry[0]}"
            msg = f"Constant pool index {index} is {found}, expected {tag.name}."
            raise ClassFormatError(msg)
        return entry[1]

    def utf8(self, index: int) -> str:
        return cast("str", self._entry(index, ConstantTag.UTF8))

    def class_name(self, index: int) -> str:
        return self.utf8(cast("int", self._entry(index, ConstantTag.CLASS)))


def _read_constant_pool(cursor: _ByteCursor) -> _ConstantPool:
    count = cursor.u2()
    entries: list[tuple[int, object] | None] = [None] * max(count, 1)
    index = 1
    while index < count:
        tag = cursor.u1()
        if tag == ConstantTag.UTF8:
            length = cursor.u2()
            entries[index] = (tag, decode_modified_utf8(cursor.take(length)))
        elif tag in (ConstantTag.CLASS, ConstantTag.STRING, ConstantTag.METHOD_TYPE):
            entries[index] = (tag, cursor.u2())
        elif tag in CONSTANT_SIZES:
            cursor.skip(CONSTANT_SIZES[tag])
            entries[index] = (tag, None)
        else:
            msg = f"Unknown constant pool tag {tag} at index {index}."
            raise ClassFormatError(msg)
        index += 2 if tag in WIDE_CONSTANT_TAGS else 1
    return _ConstantPool(entries)


def _skip_attributes(cursor: _ByteCursor) -> None:
    for _ in range(cursor.u2()):
        cursor.skip(2)
        cursor.skip(cursor.u4())


def _read_members(cursor: _ByteCursor, pool: _ConstantPool) -> list[MethodInfo]:
    members: list[MethodInfo] = []
    for _ in range(cursor.u2()):
        access_flags = cursor.u2()
        name = pool.utf8(cursor.u2())
        descriptor = pool.utf8(cursor.u2())
        _skip_attributes(cursor)
        members.append(MethodInfo(access_flags, name, descriptor))
    return members


def _check_class_attributes(
    cursor: _ByteCursor,
    pool: _ConstantPool,
    revision: FormatRevision,
) -> None:
    for _ in range(cursor.u2()):
        attribute = pool.utf8(cursor.u2())
        cursor.skip(cursor.u4())
        if not revision.supports_attribute(attribute):
            raise UnsupportedFeatureError(
                attribute,
                revision=revision.key,
                required=str(GATED_CLASS_ATTRIBUTES[attribute]),
            )


def read_class_file(
    data: bytes,
    *,
    handler: ClassEventHandler,
    revision: FormatRevision = DEFAULT_REVISION,
) -> None:
    """Parse class-file bytes and emit structural events to a handler.

    The whole structure is validated before any event is emitted, so a
    handler never observes a partially parsed class.

    Parameters
    ----------
    data
        Raw class-file bytes.
    handler
        Event receiver; ``on_class`` is called once, then ``on_method`` per
        declared method in declaration order.
    revision
        Format revision that gates class-level attributes.

    Raises
    ------
    ClassFormatError
        Raised when the bytes are not a well-formed class file.
    UnsupportedClassVersionError
        Raised when the class major version is newer than supported.
    UnsupportedFeatureError
        Raised when a class attribute is newer than ``revision``.
    """
    cursor = _ByteCursor(data)
    magic = cursor.u4()
    if magic != CLASS_MAGIC:
        msg = f"Bad class file magic 0x{magic:08X}."
        raise ClassFormatError(msg)
    minor_version = cursor.u2()
    major_version = cursor.u2()
    if major_version > MAX_MAJOR_VERSION:
        raise UnsupportedClassVersionError(major_version, MAX_MAJOR_VERSION)
    pool = _read_constant_pool(cursor)
    access_flags = cursor.u2()
    internal_name = pool.class_name(cursor.u2())
    super_index = cursor.u2()
    super_name = pool.class_name(super_index) if super_index else None
    interfaces = tuple(pool.class_name(cursor.u2()) for _ in range(cursor.u2()))
    _read_members(cursor, pool)  # fields
    methods = _read_members(cursor, pool)
    _check_class_attributes(cursor, pool, revision)

    handler.on_class(
        ClassHeader(
            minor_version=minor_version,
            major_version=major_version,
            access_flags=access_flags,
            internal_name=internal_name,
            super_name=super_name,
            interfaces=interfaces,
        )
    )
    for method in methods:
        handler.on_method(method)


__all__ = [
    "ClassEventHandler",
    "ClassHeader",
    "MethodInfo",
    "decode_modified_utf8",
    "read_class_file",
]
