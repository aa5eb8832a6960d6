"""Tests for CLI command functions and result handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.commands.config import init_config, show_config
from cli.commands.generate import generate_command
from cli.commands.version import get_version_info, version_command
from cli.config_loader import load_effective_config
from cli.context import RunContext
from cli.exit_codes import ExitCode
from cli.result import CliResult
from cli.result_action import cli_result_action
from core_types import JsonValue
from instrumentation.writer import descriptor_output_path


def _context(**config: JsonValue) -> RunContext:
    return RunContext(log_level="INFO", config_contents=config)


def test_generate_writes_descriptor(foo_and_empty: Path) -> None:
    """Ensure generate writes the descriptor and reports it as an artifact."""
    result = generate_command(
        foo_and_empty,
        name="orders",
        define=("com.example.Foo=qux",),
        run_context=_context(),
    )
    expected = descriptor_output_path(foo_and_empty, "orders")
    assert result.ok
    assert result.artifacts == {"descriptor": expected}
    assert b"<name>qux</name>" in expected.read_bytes()


def test_generate_uses_configured_directory(foo_and_empty: Path) -> None:
    """Ensure the output directory may come from configuration."""
    result = generate_command(
        run_context=_context(output_directory=str(foo_and_empty), name="configured"),
    )
    assert result.ok
    assert descriptor_output_path(foo_and_empty, "configured").is_file()


def test_generate_skips_missing_directory(tmp_path: Path) -> None:
    """Ensure a missing directory succeeds without writing."""
    result = generate_command(tmp_path / "missing", run_context=_context())
    assert result.ok
    assert result.artifacts == {}
    assert result.summary is not None
    assert "Skipped" in result.summary


def test_generate_rejects_malformed_define(foo_and_empty: Path) -> None:
    """Ensure --define values must be CLASS=METHODS."""
    with pytest.raises(ValueError, match="key=value"):
        generate_command(foo_and_empty, define=("com.example.Foo",), run_context=_context())


def test_result_action_exit_codes() -> None:
    """Ensure command returns map to exit codes."""
    assert cli_result_action(None) == ExitCode.SUCCESS
    assert cli_result_action(3) == 3
    assert cli_result_action(CliResult.error(ExitCode.WRITE_ERROR, summary="boom")) == 11
    assert cli_result_action(CliResult.success(summary="done")) == 0
    assert cli_result_action(object()) == ExitCode.GENERAL_ERROR


def test_result_action_routes_summaries(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure failed summaries go to stderr and successful ones to stdout."""
    failed = CliResult.error(ExitCode.WRITE_ERROR, summary="write failed")
    assert cli_result_action(failed) == ExitCode.WRITE_ERROR
    captured = capsys.readouterr()
    assert "write failed" in captured.err
    assert "write failed" not in captured.out

    assert cli_result_action(CliResult.success(summary="all good")) == ExitCode.SUCCESS
    captured = capsys.readouterr()
    assert "all good" in captured.out
    assert captured.err == ""


def test_show_config(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure show prints the effective configuration and its location."""
    context = RunContext(
        log_level="INFO",
        config_contents={"name": "orders"},
        config_location="nrinstrumentation.toml",
    )
    assert show_config(run_context=context) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"config": {"name": "orders"}, "location": "nrinstrumentation.toml"}


def test_init_config(tmp_path: Path) -> None:
    """Ensure init writes a template that refuses to overwrite without force."""
    target = tmp_path / "nrinstrumentation.toml"
    created = init_config(path=target)
    assert created.ok
    assert created.artifacts == {"config": target}
    assert 'name = "newrelic-extension"' in target.read_text(encoding="utf-8")
    refused = init_config(path=target)
    assert not refused.ok
    assert refused.exit_code == ExitCode.CONFIG_ERROR
    assert refused.summary is not None
    assert "already exists" in refused.summary
    assert init_config(path=target, force=True).ok


def test_init_template_is_valid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the written template loads cleanly."""
    monkeypatch.chdir(tmp_path)
    init_config()
    contents = load_effective_config(None)
    assert contents["asm"] == "9"
    assert contents["manually_definitions"] == {}


def test_version_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure version prints a JSON payload."""
    assert version_command() == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == json.loads(json.dumps(get_version_info()))
    assert "nrinstrumentation" in payload
