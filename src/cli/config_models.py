"""Typed configuration models for nrinstrumentation."""

from __future__ import annotations

from serde_msgspec import StructBaseStrict


class RootConfig(StructBaseStrict, frozen=True):
    """Root configuration payload.

    Every field is optional; unset values fall back to command-line flags and
    then to the settings defaults.
    """

    output_directory: str | None = None
    namespace_uri: str | None = None
    name: str | None = None
    version: str | None = None
    enabled: bool | None = None
    manually_definitions: dict[str, str] | None = None
    asm: str | None = None
    max_workers: int | None = None
    log_level: str | None = None


__all__ = ["RootConfig"]
