"""Tests for configuration discovery and settings resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.config_loader import (
    ConfigError,
    load_config_with_location,
    load_effective_config,
    settings_from_config,
)


def test_no_config_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure a directory without config files yields empty contents."""
    monkeypatch.chdir(tmp_path)
    assert load_config_with_location(None) == ({}, None)


def test_config_file_in_parent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure nrinstrumentation.toml is found in a parent directory."""
    (tmp_path / "nrinstrumentation.toml").write_text(
        'name = "orders"\nenabled = false\n\n[manually_definitions]\n"a.B-C" = "run"\n',
        encoding="utf-8",
    )
    nested = tmp_path / "sub" / "dir"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    contents, location = load_config_with_location(None)
    assert contents == {
        "name": "orders",
        "enabled": False,
        "manually_definitions": {"a.B-C": "run"},
    }
    assert location == str(tmp_path / "nrinstrumentation.toml")


def test_pyproject_tool_table(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure [tool.nrinstrumentation] is read from pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.nrinstrumentation]\nasm = "8"\n',
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    contents, location = load_config_with_location(None)
    assert contents == {"asm": "8"}
    assert location is not None
    assert location.endswith("pyproject.toml:tool.nrinstrumentation")


def test_dedicated_file_wins_over_pyproject(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Ensure nrinstrumentation.toml takes precedence."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.nrinstrumentation]\nname = "from-pyproject"\n',
        encoding="utf-8",
    )
    (tmp_path / "nrinstrumentation.toml").write_text('name = "from-file"\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_effective_config(None) == {"name": "from-file"}


def test_explicit_config_file(tmp_path: Path) -> None:
    """Ensure an explicit file is read as-is."""
    path = tmp_path / "custom.toml"
    path.write_text("max_workers = 4\n", encoding="utf-8")
    assert load_effective_config(str(path)) == {"max_workers": 4}


def test_explicit_config_missing(tmp_path: Path) -> None:
    """Ensure a missing explicit file is an error."""
    with pytest.raises(ConfigError, match="not found"):
        load_effective_config(str(tmp_path / "missing.toml"))


def test_config_rejects_unknown_keys(tmp_path: Path) -> None:
    """Ensure unknown keys fail validation."""
    path = tmp_path / "custom.toml"
    path.write_text('colour = "blue"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="Config validation failed"):
        load_effective_config(str(path))


def test_config_rejects_wrong_types(tmp_path: Path) -> None:
    """Ensure strict validation rejects mistyped values."""
    path = tmp_path / "custom.toml"
    path.write_text('enabled = "yes"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_effective_config(str(path))


def test_config_rejects_invalid_toml(tmp_path: Path) -> None:
    """Ensure malformed TOML is reported as a configuration error."""
    path = tmp_path / "custom.toml"
    path.write_text("name = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_effective_config(str(path))


def test_settings_from_config_merges_overrides(tmp_path: Path) -> None:
    """Ensure command-line values win and manual definitions combine."""
    config = {
        "output_directory": "ignored",
        "name": "from-config",
        "log_level": "DEBUG",
        "manually_definitions": {"a.B": "one", "c.D": "two"},
    }
    settings = settings_from_config(
        config,
        {
            "output_directory": tmp_path,
            "name": None,
            "enabled": False,
            "manually_definitions": {"c.D": "three"},
        },
    )
    assert settings.output_directory == tmp_path
    assert settings.name == "from-config"
    assert settings.enabled is False
    assert settings.manually_definitions == {"a.B": "one", "c.D": "three"}


def test_settings_from_config_requires_output_directory() -> None:
    """Ensure a missing output directory is a configuration error."""
    with pytest.raises(ConfigError, match="No output directory"):
        settings_from_config({}, {"name": "orders"})


def test_settings_from_config_rejects_invalid_values(tmp_path: Path) -> None:
    """Ensure settings validation failures are configuration errors."""
    with pytest.raises(ConfigError, match="Invalid instrumentation settings"):
        settings_from_config({}, {"output_directory": tmp_path, "max_workers": "many"})
