"""Key/value parsing helpers for CLI options."""

from __future__ import annotations

from collections.abc import Iterable


def parse_kv_pairs(values: Iterable[str]) -> dict[str, str]:
    """Parse key=value pairs from CLI repeatable options.

    Later occurrences of a key replace earlier ones. The value may be empty.

    Parameters
    ----------
    values
        Key=value strings.

    Returns
    -------
    dict[str, str]
        Parsed key/value mapping in first-seen key order.

    Raises
    ------
    ValueError
        Raised when a value is not formatted as key=value.
    """
    parsed: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            msg = f"Expected key=value, got {item!r}."
            raise ValueError(msg)
        parsed[key] = value
    return parsed


__all__ = ["parse_kv_pairs"]
