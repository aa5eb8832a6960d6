"""CLI result contract for structured command returns."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from cli.exit_codes import ExitCode


@dataclass(frozen=True)
class CliResult:
    """Structured result from CLI command execution.

    Parameters
    ----------
    exit_code
        Integer exit code for the command.
    summary
        Optional human-readable summary of the result.
    artifacts
        Mapping of artifact names to file paths produced.
    """

    exit_code: int
    summary: str | None = None
    artifacts: Mapping[str, Path] = field(default_factory=dict)

    @classmethod
    def success(
        cls,
        *,
        summary: str | None = None,
        artifacts: Mapping[str, Path] | None = None,
    ) -> CliResult:
        """Create a successful result.

        Returns:
        -------
        CliResult
            Success result with exit code 0.
        """
        return cls(
            exit_code=ExitCode.SUCCESS,
            summary=summary,
            artifacts=artifacts or {},
        )

    @classmethod
    def error(
        cls,
        exit_code: ExitCode | int,
        *,
        summary: str | None = None,
    ) -> CliResult:
        """Create an error result.

        Returns:
        -------
        CliResult
            Error result carrying ``exit_code``.
        """
        return cls(exit_code=int(exit_code), summary=summary)

    @property
    def ok(self) -> bool:
        """Return whether the command succeeded."""
        return self.exit_code == ExitCode.SUCCESS


__all__ = ["CliResult"]
