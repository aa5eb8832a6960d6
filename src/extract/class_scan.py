"""Filesystem scan of compiled class files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from functools import partial
from pathlib import Path

from classfile.constants import CLASS_FILE_SUFFIX
from classfile.revisions import DEFAULT_REVISION, FormatRevision
from extract.class_metadata import visit_class_file
from extract.parallel import ordered_parallel_map
from extract.registry import ClassMethodRegistry
from obs.otel.constants import AttributeName
from obs.otel.scopes import SCOPE_EXTRACT
from obs.otel.tracing import set_span_attributes, stage_span

logger = logging.getLogger(__name__)


def is_class_file(name: str) -> bool:
    """Return whether a file name carries the class-file suffix.

    Returns
    -------
    bool
        ``True`` for names ending in ``.class`` in any letter case.
    """
    return name.lower().endswith(CLASS_FILE_SUFFIX)


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Cannot read directory %s: %s", exc.filename, exc.strerror or exc)


def iter_class_files(root: Path) -> Iterator[Path]:
    """Yield class files beneath ``root`` in deterministic order.

    Matches are yielded in lexicographic order of their root-relative POSIX
    path. Symlinked directories are not followed, and directories that
    cannot be listed are logged and skipped.

    Parameters
    ----------
    root : Path
        Directory to walk.

    Yields
    ------
    Path
        Absolute paths of matching regular files.
    """
    root = root.resolve()
    matches: list[tuple[str, Path]] = []
    for current, _dirs, files in os.walk(root, onerror=_log_walk_error):
        current_path = Path(current)
        for filename in files:
            if not is_class_file(filename):
                continue
            path = current_path / filename
            if path.is_file():
                matches.append((path.relative_to(root).as_posix(), path))
    matches.sort(key=lambda match: match[0])
    for _, path in matches:
        yield path


def walk_classes_directory(
    root: Path,
    *,
    revision: FormatRevision = DEFAULT_REVISION,
    max_workers: int | None = None,
) -> ClassMethodRegistry:
    """Scan a directory tree and collect class methods into a registry.

    Every class file is extracted independently; a file that fails to parse
    is logged and contributes nothing. Results are inserted in file order
    even when extraction runs on several threads. A class seen twice keeps
    the list from the later file.

    Parameters
    ----------
    root
        Directory to scan.
    revision
        Format revision used by the reader.
    max_workers
        Thread count for extraction; ``None`` extracts sequentially.

    Returns
    -------
    ClassMethodRegistry
        Registry with one entry per parsed class.
    """
    registry = ClassMethodRegistry()
    with stage_span(
        "extract.class_scan",
        stage="extract",
        scope_name=SCOPE_EXTRACT,
        attributes={
            AttributeName.ROOT_DIRECTORY: root,
            AttributeName.REVISION: revision.key,
        },
    ) as span:
        paths = list(iter_class_files(root))
        visit = partial(visit_class_file, revision=revision)
        skipped = 0
        for entry in ordered_parallel_map(paths, visit, max_workers=max_workers):
            if entry is None:
                skipped += 1
                continue
            registry.put_entry(entry)
        set_span_attributes(
            span,
            {AttributeName.CLASS_COUNT: len(registry), "nrinstrumentation.skipped": skipped},
        )
    logger.info(
        "Scanned %d class files under %s (%d classes, %d skipped).",
        len(paths),
        root,
        len(registry),
        skipped,
    )
    return registry


__all__ = ["is_class_file", "iter_class_files", "walk_classes_directory"]
