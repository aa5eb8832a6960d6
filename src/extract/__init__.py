"""Extraction layer.

Scans a directory of compiled class files and folds the class and method
identifiers found in each into an ordered registry.

Exports:
- identifier values -> ClassName, MethodName, MethodNames
- per-file extraction -> extract_class_methods, visit_class_file
- directory scanning -> iter_class_files, walk_classes_directory
- ordered registry -> ClassMethodRegistry
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from extract.class_metadata import (
        ClassMethodCapture,
        extract_class_methods,
        visit_class_file,
    )
    from extract.class_scan import iter_class_files, walk_classes_directory
    from extract.identifiers import ClassName, MethodName, MethodNames
    from extract.registry import ClassMethodEntry, ClassMethodRegistry

# Map of export names to (module_path, attribute_name) for lazy loading
_EXPORTS: dict[str, tuple[str, str]] = {
    "ClassMethodCapture": ("extract.class_metadata", "ClassMethodCapture"),
    "extract_class_methods": ("extract.class_metadata", "extract_class_methods"),
    "visit_class_file": ("extract.class_metadata", "visit_class_file"),
    "iter_class_files": ("extract.class_scan", "iter_class_files"),
    "walk_classes_directory": ("extract.class_scan", "walk_classes_directory"),
    "ClassName": ("extract.identifiers", "ClassName"),
    "MethodName": ("extract.identifiers", "MethodName"),
    "MethodNames": ("extract.identifiers", "MethodNames"),
    "ClassMethodEntry": ("extract.registry", "ClassMethodEntry"),
    "ClassMethodRegistry": ("extract.registry", "ClassMethodRegistry"),
}


def __getattr__(name: str) -> object:
    target = _EXPORTS.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    module_name, attr = target
    module = importlib.import_module(module_name)
    return getattr(module, attr)


def __dir__() -> list[str]:
    return sorted(list(globals()) + list(_EXPORTS))


__all__ = (
    "ClassMethodCapture",
    "ClassMethodEntry",
    "ClassMethodRegistry",
    "ClassName",
    "MethodName",
    "MethodNames",
    "extract_class_methods",
    "iter_class_files",
    "visit_class_file",
    "walk_classes_directory",
)
