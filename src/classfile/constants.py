"""Class-file format constants."""

from __future__ import annotations

from enum import IntEnum
from typing import Final

CLASS_MAGIC: Final = 0xCAFEBABE
CLASS_FILE_SUFFIX: Final = ".class"

# Java 25.
MAX_MAJOR_VERSION: Final = 69

INSTANCE_INIT_NAME: Final = "<init>"
CLASS_INIT_NAME: Final = "<clinit>"
HOOK_METHOD_NAMES: Final = frozenset({INSTANCE_INIT_NAME, CLASS_INIT_NAME})


class ConstantTag(IntEnum):
    """Constant pool entry tags."""

    UTF8 = 1
    INTEGER = 3
    FLOAT = 4
    LONG = 5
    DOUBLE = 6
    CLASS = 7
    STRING = 8
    FIELDREF = 9
    METHODREF = 10
    INTERFACE_METHODREF = 11
    NAME_AND_TYPE = 12
    METHOD_HANDLE = 15
    METHOD_TYPE = 16
    DYNAMIC = 17
    INVOKE_DYNAMIC = 18
    MODULE = 19
    PACKAGE = 20


# Payload size in bytes for fixed-width entries; UTF8 is length-prefixed.
CONSTANT_SIZES: Final[dict[int, int]] = {
    ConstantTag.INTEGER: 4,
    ConstantTag.FLOAT: 4,
    ConstantTag.LONG: 8,
    ConstantTag.DOUBLE: 8,
    ConstantTag.CLASS: 2,
    ConstantTag.STRING: 2,
    ConstantTag.FIELDREF: 4,
    ConstantTag.METHODREF: 4,
    ConstantTag.INTERFACE_METHODREF: 4,
    ConstantTag.NAME_AND_TYPE: 4,
    ConstantTag.METHOD_HANDLE: 3,
    ConstantTag.METHOD_TYPE: 2,
    ConstantTag.DYNAMIC: 4,
    ConstantTag.INVOKE_DYNAMIC: 4,
    ConstantTag.MODULE: 2,
    ConstantTag.PACKAGE: 2,
}

WIDE_CONSTANT_TAGS: Final = frozenset({ConstantTag.LONG, ConstantTag.DOUBLE})


class AccessFlag(IntEnum):
    """Access flags shared by classes and methods."""

    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    SYNCHRONIZED = 0x0020
    BRIDGE = 0x0040
    VARARGS = 0x0080
    NATIVE = 0x0100
    INTERFACE = 0x0200
    ABSTRACT = 0x0400
    STRICT = 0x0800
    SYNTHETIC = 0x1000
    ANNOTATION = 0x2000
    ENUM = 0x4000
    MODULE = 0x8000


__all__ = [
    "CLASS_FILE_SUFFIX",
    "CLASS_INIT_NAME",
    "CLASS_MAGIC",
    "CONSTANT_SIZES",
    "HOOK_METHOD_NAMES",
    "INSTANCE_INIT_NAME",
    "MAX_MAJOR_VERSION",
    "WIDE_CONSTANT_TAGS",
    "AccessFlag",
    "ConstantTag",
]
