"""Class-file parsing errors."""

from __future__ import annotations


class ClassFormatError(ValueError):
    """Raised when a class file is malformed or truncated."""


class UnsupportedClassVersionError(ClassFormatError):
    """Raised when a class file is newer than the reader supports."""

    def __init__(self, major_version: int, max_major_version: int) -> None:
        self.major_version = major_version
        self.max_major_version = max_major_version
        msg = (
            f"Unsupported class file major version {major_version} "
            f"(maximum supported is {max_major_version})."
        )
        super().__init__(msg)


class UnsupportedFeatureError(ClassFormatError):
    """Raised when a class uses an attribute the selected revision cannot represent."""

    def __init__(self, attribute: str, *, revision: str, required: str) -> None:
        self.attribute = attribute
        self.revision = revision
        self.required = required
        msg = (
            f"Class attribute {attribute!r} requires format revision {required} "
            f"or later; selected revision is {revision}."
        )
        super().__init__(msg)


__all__ = [
    "ClassFormatError",
    "UnsupportedClassVersionError",
    "UnsupportedFeatureError",
]
