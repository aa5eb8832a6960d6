"""Parallel execution helpers for extractors."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from opentelemetry import context as otel_context

T = TypeVar("T")
U = TypeVar("U")


def ordered_parallel_map(
    items: Iterable[T],
    fn: Callable[[T], U],
    *,
    max_workers: int | None = None,
) -> Iterator[U]:
    """Map items on a thread pool, yielding results in input order.

    The caller's OpenTelemetry context is attached in every worker so spans
    and log records stay correlated with the invoking stage.

    Yields
    ------
    U
        Results produced by applying the function to each item, in the order
        of ``items`` regardless of completion order.
    """
    workers = resolve_max_workers(max_workers)
    if workers == 1:
        for item in items:
            yield fn(item)
        return
    current = otel_context.get_current()

    def _wrapped(item: T) -> U:
        token = otel_context.attach(current)
        try:
            return fn(item)
        finally:
            otel_context.detach(token)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        yield from executor.map(_wrapped, items)


def resolve_max_workers(max_workers: int | None) -> int:
    """Resolve a worker count; ``None`` means sequential.

    ``0`` selects the CPU count.

    Returns
    -------
    int
        Effective worker count.
    """
    if max_workers is None:
        return 1
    if max_workers == 0:
        return max(1, os.cpu_count() or 1)
    return max(1, max_workers)


__all__ = ["ordered_parallel_map", "resolve_max_workers"]
