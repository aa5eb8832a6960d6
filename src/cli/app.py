"""Main application setup for the nrinstrumentation CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated, Literal

from cyclopts import App, Parameter

from cli.commands.version import get_version
from cli.config_loader import ConfigError, load_config_with_location
from cli.context import RunContext
from cli.exit_codes import ExitCode
from cli.groups import admin_group, session_group
from cli.result_action import cli_result_action
from cli.telemetry import invoke_with_telemetry
from obs.otel import configure_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_HELP_EPILOGUE = """
Examples:
  nrinstrumentation generate build/classes       Write the descriptor for a class directory
  nrinstrumentation generate out --name orders   Use a custom extension name
  nrinstrumentation generate out --define com.example.Outer-Inner="run call"
  nrinstrumentation config show                  Show effective configuration

Environment Variables:
  NRINSTRUMENTATION_LOG_LEVEL  Default log level (DEBUG, INFO, WARNING, ERROR)
"""

app = App(
    name="nrinstrumentation",
    help="Generate New Relic extension descriptors from compiled class files.",
    help_format="rich",
    help_epilogue=_HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(
        show_default=True,
        show_env_var=True,
    ),
    result_action=cli_result_action,
    exit_on_error=True,
    print_error=True,
    help_on_error=False,
)

app.meta.group_parameters = session_group


@dataclass(frozen=True)
class SessionOptions:
    """Session-level configuration parameters."""

    config_file: Annotated[
        str | None,
        Parameter(
            name="--config",
            help="Path to configuration file (overrides default search).",
            group=session_group,
        ),
    ] = None
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None,
        Parameter(
            name="--log-level",
            help="Logging verbosity level.",
            env_var="NRINSTRUMENTATION_LOG_LEVEL",
            group=session_group,
        ),
    ] = None


_DEFAULT_SESSION_OPTIONS = SessionOptions()


@app.meta.default
def meta_launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    session: Annotated[SessionOptions, Parameter(name="*")] = _DEFAULT_SESSION_OPTIONS,
) -> int:
    """Meta launcher for config selection and context injection.

    Returns
    -------
    int
        Exit status code from command execution.
    """
    try:
        config_contents, config_location = load_config_with_location(session.config_file)
    except ConfigError as exc:
        configure_logging(session.log_level or "INFO")
        logger.error("%s", exc)
        return ExitCode.CONFIG_ERROR

    configured_level = config_contents.get("log_level")
    log_level = session.log_level or (
        str(configured_level).upper() if isinstance(configured_level, str) else "INFO"
    )
    if log_level not in LOG_LEVELS:
        configure_logging("INFO")
        logger.error("Unsupported log level %r.", log_level)
        return ExitCode.CONFIG_ERROR
    configure_logging(log_level)

    run_context = RunContext(
        log_level=log_level,
        config_contents=config_contents,
        config_location=config_location,
    )
    exit_code, _event = invoke_with_telemetry(app, tokens, run_context=run_context)
    return exit_code


app.command("cli.commands.generate:generate_command", name="generate", alias="g")

_config_app = App(name="config", help="Configuration management.", group=admin_group)
_config_app.command("cli.commands.config:show_config", name="show")
_config_app.command("cli.commands.config:init_config", name="init")
app.command(_config_app, alias="cfg")
app.command("cli.commands.version:version_command", name="version", group=admin_group)


def main() -> None:
    """Run the nrinstrumentation CLI."""
    raise SystemExit(app.meta())


__all__ = ["app", "main"]
