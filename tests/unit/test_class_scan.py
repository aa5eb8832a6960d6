"""Tests for scanning a directory of class files into a registry."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from extract.class_scan import is_class_file, iter_class_files, walk_classes_directory
from extract.identifiers import ClassName
from tests.harness.classfile_builder import ClassFileBuilder


def test_is_class_file() -> None:
    """Ensure the suffix check ignores letter case."""
    assert is_class_file("Foo.class")
    assert is_class_file("FOO.CLASS")
    assert not is_class_file("Foo.java")
    assert not is_class_file("Foo.class.bak")


def test_iter_class_files_order(classes_dir: Path) -> None:
    """Ensure files are yielded in sorted order and other files are skipped."""
    for relative in ("b/A.class", "a/Z.class", "a/B.class", "Top.class", "a/readme.txt"):
        path = classes_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    root = classes_dir.resolve()
    found = [path.relative_to(root).as_posix() for path in iter_class_files(classes_dir)]
    assert found == ["Top.class", "a/B.class", "a/Z.class", "b/A.class"]


def test_iter_class_files_sorts_by_relative_path(classes_dir: Path) -> None:
    """Ensure root files and sibling directories follow relative-path order."""
    for relative in ("z.class", "a/X.class", "com/example-x/A.class", "com/example/B.class"):
        path = classes_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    root = classes_dir.resolve()
    found = [path.relative_to(root).as_posix() for path in iter_class_files(classes_dir)]
    assert found == [
        "a/X.class",
        "com/example-x/A.class",
        "com/example/B.class",
        "z.class",
    ]


def test_iter_class_files_logs_unreadable_directory(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Ensure a directory that cannot be listed is logged instead of silently skipped."""
    missing = tmp_path / "missing"
    caplog.set_level(logging.WARNING, logger="extract.class_scan")
    assert list(iter_class_files(missing)) == []
    assert "Cannot read directory" in caplog.text
    assert str(missing.resolve()) in caplog.text


def test_walk_scenario_foo_and_empty(foo_and_empty: Path) -> None:
    """Ensure every class is registered with its methods in declaration order."""
    registry = walk_classes_directory(foo_and_empty)
    assert registry.class_names() == (
        ClassName("com.example.Empty"),
        ClassName("com.example.Foo"),
    )
    foo = registry.get(ClassName("com.example.Foo"))
    empty = registry.get(ClassName("com.example.Empty"))
    assert foo is not None
    assert foo.values() == ("bar", "baz")
    assert empty is not None
    assert not empty


def test_walk_empty_tree(classes_dir: Path) -> None:
    """Ensure an empty directory yields an empty registry."""
    (classes_dir / "com" / "example").mkdir(parents=True)
    assert len(walk_classes_directory(classes_dir)) == 0


def test_walk_skips_unparseable_files(
    foo_and_empty: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Ensure a corrupt file is logged and the remaining files are kept."""
    broken = foo_and_empty / "com" / "example" / "Broken.class"
    broken.write_bytes(b"garbage")
    caplog.set_level(logging.ERROR, logger="extract.class_metadata")
    registry = walk_classes_directory(foo_and_empty)
    assert len(registry) == 2
    assert str(broken.resolve()) in caplog.text


def test_walk_duplicate_class_keeps_later_file(classes_dir: Path) -> None:
    """Ensure a class seen twice keeps the list from the later file."""
    first = ClassFileBuilder("com/example/Foo").method("old").build()
    second = ClassFileBuilder("com/example/Foo").method("new").build()
    (classes_dir / "a").mkdir()
    (classes_dir / "b").mkdir()
    (classes_dir / "a" / "Foo.class").write_bytes(first)
    (classes_dir / "b" / "Foo.class").write_bytes(second)
    ClassFileBuilder("com/example/Bar").method("run").write(classes_dir / "b")
    registry = walk_classes_directory(classes_dir)
    assert [name.value for name in registry.class_names()] == [
        "com.example.Foo",
        "com.example.Bar",
    ]
    foo = registry.get(ClassName("com.example.Foo"))
    assert foo is not None
    assert foo.values() == ("new",)


def test_walk_parallel_matches_sequential(classes_dir: Path) -> None:
    """Ensure threaded extraction preserves file order."""
    for index in range(12):
        ClassFileBuilder(f"pkg/C{index:02d}").method(f"m{index}").write(classes_dir)
    sequential = walk_classes_directory(classes_dir)
    parallel = walk_classes_directory(classes_dir, max_workers=4)
    assert parallel.class_names() == sequential.class_names()
    assert [names.values() for _, names in parallel.items()] == [
        names.values() for _, names in sequential.items()
    ]
