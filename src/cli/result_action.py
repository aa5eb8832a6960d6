"""Result action handler for Cyclopts integration."""

from __future__ import annotations

from typing import Any

from rich.console import Console

from cli.exit_codes import ExitCode
from cli.result import CliResult


def cli_result_action(result: Any) -> int:
    """Handle command results and convert to exit codes.

    Parameters
    ----------
    result
        The return value from the command function.

    Returns
    -------
    int
        Exit code for the process.
    """
    console = Console()
    error_console = Console(stderr=True)

    if result is None:
        return ExitCode.SUCCESS

    if isinstance(result, int):
        return int(result)

    if isinstance(result, CliResult):
        if result.summary:
            (console if result.ok else error_console).print(result.summary)
        if result.artifacts:
            console.print("Artifacts:")
            for name, path in sorted(result.artifacts.items()):
                console.print(f"  {name}: {path}")
        return int(result.exit_code)

    console.print(f"Unexpected command return type: {type(result).__name__} (value: {result!r})")
    return ExitCode.GENERAL_ERROR


__all__ = ["cli_result_action"]
