"""Shared pytest fixtures for nrinstrumentation tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.harness.classfile_builder import ClassFileBuilder


@pytest.fixture
def classes_dir(tmp_path: Path) -> Path:
    """Return an empty directory for compiled class files."""
    root = tmp_path / "classes"
    root.mkdir()
    return root


@pytest.fixture
def write_class(classes_dir: Path) -> Callable[[ClassFileBuilder], Path]:
    """Return a helper that writes a built class beneath ``classes_dir``."""

    def _write(builder: ClassFileBuilder) -> Path:
        return builder.write(classes_dir)

    return _write


@pytest.fixture
def foo_and_empty(classes_dir: Path) -> Path:
    """Write ``com/example/Foo`` (bar, baz, <init>) and ``com/example/Empty`` (<init>)."""
    ClassFileBuilder("com/example/Foo").constructor().method("bar").method(
        "baz", "(I)Ljava/lang/String;"
    ).write(classes_dir)
    ClassFileBuilder("com/example/Empty").constructor().write(classes_dir)
    return classes_dir
