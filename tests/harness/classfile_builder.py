"""Assemble minimal JVM class files for extraction tests."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path

from classfile.constants import CLASS_MAGIC, AccessFlag, ConstantTag

JAVA_8 = 52
JAVA_17 = 61

_RETURN = b"\xb1"


def encode_modified_utf8(text: str) -> bytes:
    """Encode text using the JVM modified UTF-8 form.

    Returns
    -------
    bytes
        Encoded constant payload.
    """
    out = bytearray()
    for char in text:
        code_point = ord(char)
        if code_point == 0:
            out += b"\xc0\x80"
        elif code_point > 0xFFFF:
            offset = code_point - 0x10000
            for unit in (0xD800 + (offset >> 10), 0xDC00 + (offset & 0x3FF)):
                out += chr(unit).encode("utf-8", errors="surrogatepass")
        else:
            out += char.encode("utf-8", errors="surrogatepass")
    return bytes(out)


@dataclass
class _Member:
    access_flags: int
    name: str
    descriptor: str
    with_code: bool


@dataclass
class ClassFileBuilder:
    """Builder for a structurally valid class file.

    Methods receive a trivial ``Code`` attribute with a ``LineNumberTable``
    so the reader has attribute bodies to skip.
    """

    internal_name: str
    super_name: str | None = "java/lang/Object"
    major_version: int = JAVA_8
    minor_version: int = 0
    access_flags: int = AccessFlag.PUBLIC | 0x0020
    interfaces: list[str] = field(default_factory=list)
    _fields: list[_Member] = field(default_factory=list, init=False)
    _methods: list[_Member] = field(default_factory=list, init=False)
    _class_attributes: list[tuple[str, bytes]] = field(default_factory=list, init=False)
    _long_constants: list[int] = field(default_factory=list, init=False)

    def method(
        self,
        name: str,
        descriptor: str = "()V",
        *,
        access_flags: int = AccessFlag.PUBLIC,
        with_code: bool = True,
    ) -> ClassFileBuilder:
        self._methods.append(_Member(access_flags, name, descriptor, with_code))
        return self

    def constructor(self) -> ClassFileBuilder:
        return self.method("<init>")

    def static_initializer(self) -> ClassFileBuilder:
        return self.method("<clinit>", access_flags=AccessFlag.STATIC)

    def add_field(self, name: str, descriptor: str = "I") -> ClassFileBuilder:
        self._fields.append(_Member(AccessFlag.PRIVATE, name, descriptor, with_code=False))
        return self

    def class_attribute(self, name: str, payload: bytes = b"") -> ClassFileBuilder:
        self._class_attributes.append((name, payload))
        return self

    def long_constant(self, value: int) -> ClassFileBuilder:
        self._long_constants.append(value)
        return self

    def build(self) -> bytes:
        """Return the encoded class file.

        Returns
        -------
        bytes
            Class-file bytes.
        """
        pool = _PoolWriter()
        for value in self._long_constants:
            pool.long(value)
        this_index = pool.class_ref(self.internal_name)
        super_index = pool.class_ref(self.super_name) if self.super_name else 0
        interface_indexes = [pool.class_ref(name) for name in self.interfaces]
        fields = [self._member_bytes(pool, member) for member in self._fields]
        methods = [self._member_bytes(pool, member) for member in self._methods]
        attributes = [
            _attribute(pool.utf8(name), payload) for name, payload in self._class_attributes
        ]

        out = bytearray()
        out += struct.pack(">IHH", CLASS_MAGIC, self.minor_version, self.major_version)
        out += pool.encode()
        out += struct.pack(">HHH", self.access_flags, this_index, super_index)
        out += struct.pack(">H", len(interface_indexes))
        for index in interface_indexes:
            out += struct.pack(">H", index)
        for table in (fields, methods, attributes):
            out += struct.pack(">H", len(table))
            for chunk in table:
                out += chunk
        return bytes(out)

    def write(self, root: Path) -> Path:
        """Write the class file beneath ``root`` following its package path.

        Returns
        -------
        Path
            Path of the written ``.class`` file.
        """
        path = root.joinpath(*self.internal_name.split("/")).with_suffix(".class")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.build())
        return path

    @staticmethod
    def _member_bytes(pool: _PoolWriter, member: _Member) -> bytes:
        out = bytearray(
            struct.pack(
                ">HHH",
                member.access_flags,
                pool.utf8(member.name),
                pool.utf8(member.descriptor),
            )
        )
        if not member.with_code:
            out += struct.pack(">H", 0)
            return bytes(out)
        line_numbers = _attribute(pool.utf8("LineNumberTable"), struct.pack(">HHH", 1, 0, 1))
        code = bytearray(struct.pack(">HHI", 1, 1, len(_RETURN)))
        code += _RETURN
        code += struct.pack(">HH", 0, 1)
        code += line_numbers
        out += struct.pack(">H", 1)
        out += _attribute(pool.utf8("Code"), bytes(code))
        return bytes(out)


class _PoolWriter:
    def __init__(self) -> None:
        self._chunks: list[bytes] = []
        self._next_index = 1
        self._utf8: dict[str, int] = {}
        self._classes: dict[str, int] = {}

    def _add(self, chunk: bytes, *, slots: int = 1) -> int:
        index = self._next_index
        self._chunks.append(chunk)
        self._next_index += slots
        return index

    def utf8(self, text: str) -> int:
        if text not in self._utf8:
            payload = encode_modified_utf8(text)
            self._utf8[text] = self._add(
                struct.pack(">BH", ConstantTag.UTF8, len(payload)) + payload
            )
        return self._utf8[text]

    def class_ref(self, internal_name: str) -> int:
        if internal_name not in self._classes:
            name_index = self.utf8(internal_name)
            self._classes[internal_name] = self._add(
                struct.pack(">BH", ConstantTag.CLASS, name_index)
            )
        return self._classes[internal_name]

    def long(self, value: int) -> int:
        return self._add(struct.pack(">Bq", ConstantTag.LONG, value), slots=2)

    def encode(self) -> bytes:
        return struct.pack(">H", self._next_index) + b"".join(self._chunks)


def _attribute(name_index: int, payload: bytes) -> bytes:
    return struct.pack(">HI", name_index, len(payload)) + payload


__all__ = ["JAVA_8", "JAVA_17", "ClassFileBuilder", "encode_modified_utf8"]
