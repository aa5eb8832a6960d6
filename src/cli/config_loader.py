"""Config loading and normalization helpers for the CLI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import cast

import msgspec

from cli.config_models import RootConfig
from core_types import JsonValue
from instrumentation.settings import InstrumentationSettings
from serde_msgspec import convert, to_builtins, validation_error_payload

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "nrinstrumentation.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_KEY = "nrinstrumentation"

_RUNTIME_ONLY_KEYS = frozenset({"log_level"})


class ConfigError(ValueError):
    """Raised when configuration cannot be located, decoded or validated."""


def load_effective_config(config_file: str | None) -> dict[str, JsonValue]:
    """Load config contents from nrinstrumentation.toml / pyproject.toml or explicit --config.

    Parameters
    ----------
    config_file
        Optional explicit config file path.

    Returns
    -------
    dict[str, JsonValue]
        Validated configuration contents with unset keys omitted.
    """
    contents, _location = load_config_with_location(config_file)
    return contents


def load_config_with_location(
    config_file: str | None,
) -> tuple[dict[str, JsonValue], str | None]:
    """Load config contents and report where they came from.

    An explicit file must exist. Without one, ``nrinstrumentation.toml`` in
    the working directory or its parents wins over the
    ``[tool.nrinstrumentation]`` table of the nearest ``pyproject.toml``.

    Parameters
    ----------
    config_file
        Optional explicit config file path.

    Returns
    -------
    tuple[dict[str, JsonValue], str | None]
        Configuration contents and a location label, or ``None`` when no
        configuration was found.

    Raises
    ------
    ConfigError
        Raised when the explicit file does not exist.
    """
    if config_file:
        path = Path(config_file)
        if not path.is_file():
            msg = f"Config file not found: {config_file!r}."
            raise ConfigError(msg)
        raw, location = _resolve_explicit_payload(path)
        return _config_to_mapping(_decode_root_config(raw, location=location)), location

    config_path = _find_in_parents(CONFIG_FILENAME)
    if config_path is not None:
        raw = _read_toml(config_path)
        root = _decode_root_config(raw, location=str(config_path))
        return _config_to_mapping(root), str(config_path)

    pyproject_path = _find_in_parents(PYPROJECT_FILENAME)
    if pyproject_path is not None:
        nested = _extract_tool_config(_read_toml(pyproject_path))
        if nested is not None:
            location = f"{pyproject_path}:tool.{TOOL_KEY}"
            return _config_to_mapping(_decode_root_config(nested, location=location)), location

    logger.debug("No configuration file found; using defaults.")
    return {}, None


def settings_from_config(
    config: Mapping[str, JsonValue],
    overrides: Mapping[str, object] | None = None,
) -> InstrumentationSettings:
    """Merge configuration contents and command-line overrides into settings.

    Overrides whose value is ``None`` are ignored. ``manually_definitions``
    from both sources are combined, with override entries replacing file
    entries for the same class.

    Parameters
    ----------
    config
        Configuration contents from :func:`load_effective_config`.
    overrides
        Values supplied on the command line.

    Returns
    -------
    InstrumentationSettings
        Validated settings.

    Raises
    ------
    ConfigError
        Raised when no output directory is configured or values are invalid.
    """
    merged: dict[str, object] = {
        key: value for key, value in config.items() if key not in _RUNTIME_ONLY_KEYS
    }
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key == "manually_definitions":
            definitions = dict(cast("Mapping[str, str]", merged.get(key) or {}))
            definitions.update(cast("Mapping[str, str]", value))
            merged[key] = definitions
            continue
        merged[key] = value
    output_directory = merged.get("output_directory")
    if output_directory is None:
        msg = "No output directory configured; pass OUTPUT_DIRECTORY or set output_directory."
        raise ConfigError(msg)
    merged["output_directory"] = str(output_directory)
    try:
        return convert(merged, target_type=InstrumentationSettings, strict=False)
    except msgspec.ValidationError as exc:
        details = validation_error_payload(exc)
        msg = f"Invalid instrumentation settings: {details}"
        raise ConfigError(msg) from exc


def _find_in_parents(filename: str) -> Path | None:
    """Walk parents from cwd to find a filename.

    Returns
    -------
    Path | None
        Path to the first matching file in the current directory or parents.
    """
    path = Path.cwd()
    while True:
        candidate = path / filename
        if candidate.is_file():
            return candidate
        if path.parent == path:
            return None
        path = path.parent


def _resolve_explicit_payload(path: Path) -> tuple[Mapping[str, JsonValue], str]:
    raw = _read_toml(path)
    if path.name != PYPROJECT_FILENAME:
        return raw, str(path)
    nested = _extract_tool_config(raw)
    return (nested or {}), f"{path}:tool.{TOOL_KEY}"


def _read_toml(path: Path) -> dict[str, JsonValue]:
    try:
        payload = msgspec.toml.decode(path.read_bytes(), type=object, strict=True)
    except msgspec.DecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Expected TOML mapping in {path}, got {type(payload).__name__}."
        raise ConfigError(msg)
    return cast("dict[str, JsonValue]", payload)


def _extract_tool_config(pyproject: Mapping[str, JsonValue]) -> Mapping[str, JsonValue] | None:
    tool = pyproject.get("tool")
    if not isinstance(tool, Mapping):
        return None
    section = tool.get(TOOL_KEY)
    if not isinstance(section, Mapping):
        return None
    return cast("Mapping[str, JsonValue]", section)


def _decode_root_config(raw: Mapping[str, JsonValue], *, location: str) -> RootConfig:
    try:
        return msgspec.convert(raw, type=RootConfig, strict=True)
    except msgspec.ValidationError as exc:
        details = validation_error_payload(exc)
        msg = f"Config validation failed for {location}: {details}"
        raise ConfigError(msg) from exc


def _config_to_mapping(config: RootConfig) -> dict[str, JsonValue]:
    payload = to_builtins(config)
    return cast("dict[str, JsonValue]", payload)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "load_config_with_location",
    "load_effective_config",
    "settings_from_config",
]
