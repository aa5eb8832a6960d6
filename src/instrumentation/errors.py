"""Errors raised while producing instrumentation descriptors."""

from __future__ import annotations

from pathlib import Path


class InstrumentationError(RuntimeError):
    """Base error for descriptor generation failures."""


class DescriptorWriteError(InstrumentationError):
    """Raised when the descriptor file or its directories cannot be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        msg = f"Failed to write instrumentation descriptor {path}: {cause}"
        super().__init__(msg)


__all__ = ["DescriptorWriteError", "InstrumentationError"]
