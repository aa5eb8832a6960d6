"""Run context for CLI command injection."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from core_types import JsonValue


@dataclass(frozen=True)
class RunContext:
    """Injected run context for CLI commands.

    Parameters
    ----------
    log_level
        Logging level applied to the invocation.
    config_contents
        Normalized configuration contents loaded from disk.
    config_location
        Where the configuration was read from, if anywhere.
    """

    log_level: str
    config_contents: Mapping[str, JsonValue] = field(default_factory=dict)
    config_location: str | None = None


__all__ = ["RunContext"]
