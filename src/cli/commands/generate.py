"""Generate command for writing the instrumentation descriptor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from rich.console import Console

from cli.config_loader import load_effective_config, settings_from_config
from cli.context import RunContext
from cli.groups import descriptor_group, output_group, scan_group
from cli.kv_parser import parse_kv_pairs
from cli.result import CliResult
from instrumentation.pipeline import execute

logger = logging.getLogger(__name__)


def generate_command(
    output_directory: Annotated[
        Path | None,
        Parameter(
            help="Directory of compiled class files; the descriptor is written beneath it.",
            group=output_group,
        ),
    ] = None,
    *,
    name: Annotated[
        str | None,
        Parameter(
            name="--name",
            help="Extension name; also the descriptor file name.",
            group=descriptor_group,
        ),
    ] = None,
    extension_version: Annotated[
        str | None,
        Parameter(
            name="--extension-version",
            help="Extension version attribute.",
            group=descriptor_group,
        ),
    ] = None,
    namespace_uri: Annotated[
        str | None,
        Parameter(
            name="--namespace-uri",
            help="XML namespace of the extension element; empty omits it.",
            group=descriptor_group,
        ),
    ] = None,
    enabled: Annotated[
        bool | None,
        Parameter(
            name="--enabled",
            help="Whether the agent loads the extension.",
            group=descriptor_group,
        ),
    ] = None,
    asm: Annotated[
        str | None,
        Parameter(
            name="--asm",
            help="Class format revision (5-9); unknown values use the newest.",
            group=scan_group,
        ),
    ] = None,
    define: Annotated[
        tuple[str, ...],
        Parameter(
            name="--define",
            help="Manually defined methods as CLASS=METHODS (repeatable).",
            group=scan_group,
        ),
    ] = (),
    workers: Annotated[
        int | None,
        Parameter(
            name="--workers",
            help="Threads used to parse class files (0 = CPU count).",
            group=scan_group,
        ),
    ] = None,
    run_context: Annotated[RunContext | None, Parameter(parse=False)] = None,
) -> CliResult:
    """Scan compiled classes and write the extension descriptor.

    Returns
    -------
    CliResult
        Result carrying the descriptor path, or a skip summary.
    """
    config = (
        dict(run_context.config_contents)
        if run_context is not None
        else load_effective_config(None)
    )
    settings = settings_from_config(
        config,
        {
            "output_directory": output_directory,
            "name": name,
            "version": extension_version,
            "namespace_uri": namespace_uri,
            "enabled": enabled,
            "asm": asm,
            "manually_definitions": parse_kv_pairs(define) if define else None,
            "max_workers": workers,
        },
    )
    path = execute(settings)
    if path is None:
        return CliResult.success(
            summary=f"Skipped: {settings.output_directory} is not a directory.",
        )
    Console().print(f"[green]Wrote[/green] {path}")
    return CliResult.success(artifacts={"descriptor": path})


__all__ = ["generate_command"]
