"""Observability helpers: tracing spans and trace-correlated logging."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    configure_logging: object
    stage_span: object

_EXPORT_MAP: dict[str, tuple[str, str]] = {
    "configure_logging": ("obs.otel.logging", "configure_logging"),
    "stage_span": ("obs.otel.tracing", "stage_span"),
}


def __getattr__(name: str) -> object:
    target = _EXPORT_MAP.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    module_name, attr_name = target
    module = importlib.import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(__all__)


__all__ = ("configure_logging", "stage_span")
