"""Telemetry wrappers for CLI invocation."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from cyclopts import App
from cyclopts.exceptions import CycloptsError

from cli.context import RunContext
from cli.exit_codes import ExitCode
from cli.result_action import cli_result_action
from obs.otel import SCOPE_CLI, root_span, set_span_attributes

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliInvokeEvent:
    """Structured telemetry event for CLI invocation."""

    ok: bool
    command: str | None
    parse_ms: float
    exec_ms: float
    exit_code: int
    error_class: str | None = None
    error_stage: str | None = None


@dataclass
class _InvokeState:
    t0: float
    command_name: str
    parse_ms: float | None = None
    exec_ms: float | None = None


def _command_name_from_tokens(tokens: Sequence[str] | None) -> str:
    if not tokens:
        return "<default>"
    return tokens[0]


def _run_command(
    app: App,
    tokens: Sequence[str],
    *,
    run_context: RunContext | None,
    state: _InvokeState,
) -> int:
    command, bound, ignored = app.parse_args(list(tokens), exit_on_error=False, print_error=True)
    state.parse_ms = (time.perf_counter() - state.t0) * 1000.0
    state.command_name = getattr(command, "__qualname__", repr(command))
    if run_context is not None:
        for name, hint in ignored.items():
            if hint is RunContext or name == "run_context":
                bound.arguments[name] = run_context
    t1 = time.perf_counter()
    result = command(*bound.args, **bound.kwargs)
    state.exec_ms = (time.perf_counter() - t1) * 1000.0
    return cli_result_action(result)


def invoke_with_telemetry(
    app: App,
    tokens: Sequence[str],
    *,
    run_context: RunContext | None,
) -> tuple[int, CliInvokeEvent]:
    """Parse and execute a command inside a root span.

    Exceptions raised by the command are logged and mapped to an exit code.

    Parameters
    ----------
    app
        CLI app instance.
    tokens
        Command tokens to execute.
    run_context
        Context injected into commands that accept ``run_context``.

    Returns
    -------
    tuple[int, CliInvokeEvent]
        Exit code and the invocation event.
    """
    state = _InvokeState(time.perf_counter(), _command_name_from_tokens(tokens))
    with root_span(
        "cli.invocation",
        scope_name=SCOPE_CLI,
        attributes={"cli.command": state.command_name, "cli.tokens": len(tokens)},
    ) as span:
        try:
            exit_code = _run_command(app, tokens, run_context=run_context, state=state)
            event = CliInvokeEvent(
                ok=exit_code == ExitCode.SUCCESS,
                command=state.command_name,
                parse_ms=state.parse_ms or 0.0,
                exec_ms=state.exec_ms or 0.0,
                exit_code=exit_code,
            )
        except CycloptsError as exc:
            exit_code = ExitCode.from_exception(exc)
            event = CliInvokeEvent(
                ok=False,
                command=state.command_name,
                parse_ms=(time.perf_counter() - state.t0) * 1000.0,
                exec_ms=0.0,
                exit_code=exit_code,
                error_class=f"cyclopts.{exc.__class__.__name__}",
                error_stage="parse",
            )
        except Exception as exc:
            exit_code = ExitCode.from_exception(exc)
            _LOGGER.exception("Command execution failed.")
            event = CliInvokeEvent(
                ok=False,
                command=state.command_name,
                parse_ms=state.parse_ms or 0.0,
                exec_ms=(time.perf_counter() - state.t0) * 1000.0 - (state.parse_ms or 0.0),
                exit_code=exit_code,
                error_class=f"{exc.__class__.__module__}.{exc.__class__.__name__}",
                error_stage="execution",
            )
        set_span_attributes(
            span,
            {
                "cli.exit_code": event.exit_code,
                "cli.ok": event.ok,
                "cli.parse_ms": event.parse_ms,
                "cli.exec_ms": event.exec_ms,
                "cli.error_class": event.error_class,
            },
        )
    return exit_code, event


__all__ = ["CliInvokeEvent", "invoke_with_telemetry"]
