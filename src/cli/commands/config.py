"""Configuration management commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from cli.config_loader import CONFIG_FILENAME, load_effective_config
from cli.context import RunContext
from cli.exit_codes import ExitCode
from cli.groups import admin_group
from cli.result import CliResult
from serde_msgspec import dumps_json_sorted

_TEMPLATE = """# nrinstrumentation.toml

# Directory of compiled class files; the descriptor is written to
# <output_directory>/newrelic-instrumentation/extensions/<name>.xml
# output_directory = "build/classes/java/main"

name = "newrelic-extension"
version = "1.0"
enabled = true
namespace_uri = "https://newrelic.com/docs/java/xsd/v1.0"

# Class format revision: "5" through "9".
asm = "9"

# Threads used to parse class files; 0 uses the CPU count.
# max_workers = 4

# log_level = "INFO"

# Extra methods per class. Use "-" for nested classes (Outer-Inner).
[manually_definitions]
# "com.example.Outer-Inner" = "run call"
"""


def show_config(
    *,
    run_context: Annotated[RunContext | None, Parameter(parse=False)] = None,
) -> int:
    """Show the effective configuration payload.

    Returns
    -------
    int
        Exit status code.
    """
    if run_context is None:
        contents = load_effective_config(None)
        location = None
    else:
        contents = dict(run_context.config_contents)
        location = run_context.config_location
    payload = dumps_json_sorted({"location": location, "config": contents}, pretty=True)
    sys.stdout.write(payload.decode("utf-8") + "\n")
    return 0


def init_config(
    *,
    path: Annotated[
        Path | None,
        Parameter(
            name="--path",
            help=f"Path to write the configuration template (default: {CONFIG_FILENAME}).",
        ),
    ] = None,
    force: Annotated[
        bool,
        Parameter(
            name="--force",
            help="Overwrite existing config file.",
            group=admin_group,
        ),
    ] = False,
) -> CliResult:
    """Write a configuration template to disk.

    Returns
    -------
    CliResult
        Success with the written path as the ``config`` artifact, or a
        configuration error when the target exists and ``force`` is false.
    """
    target_path = path if path is not None else Path(CONFIG_FILENAME)
    if target_path.exists() and not force:
        return CliResult.error(
            ExitCode.CONFIG_ERROR,
            summary=f"Config file already exists: {target_path}. Use --force to overwrite.",
        )
    target_path.write_text(_TEMPLATE, encoding="utf-8")
    return CliResult.success(artifacts={"config": target_path})


__all__ = ["init_config", "show_config"]
