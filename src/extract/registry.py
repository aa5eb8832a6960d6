"""Ordered class-to-methods registry."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from extract.identifiers import ClassName, MethodName, MethodNames


@dataclass(frozen=True)
class ClassMethodEntry:
    """Class name paired with the methods captured for it."""

    class_name: ClassName
    method_names: MethodNames


class ClassMethodRegistry:
    """Insertion-ordered mapping from class name to method names.

    Iteration follows the first insertion of each class. Re-putting a class
    replaces its list in place without moving it. Entries are never removed.
    """

    __slots__ = ("_lookup", "_order")

    def __init__(self) -> None:
        self._order: list[ClassName] = []
        self._lookup: dict[ClassName, MethodNames] = {}

    def contains_key(self, class_name: ClassName) -> bool:
        """Return whether the class has an entry.

        Returns
        -------
        bool
            ``True`` when ``class_name`` was inserted.
        """
        return class_name in self._lookup

    def get(self, class_name: ClassName) -> MethodNames | None:
        """Return the method list for a class, if present.

        Returns
        -------
        MethodNames | None
            Stored list, or ``None`` when the class is unknown.
        """
        return self._lookup.get(class_name)

    def put(self, class_name: ClassName, method_names: MethodNames) -> MethodNames | None:
        """Store a method list, replacing any existing one.

        Returns
        -------
        MethodNames | None
            The previous list, or ``None`` for a new class.
        """
        previous = self._lookup.get(class_name)
        if previous is None:
            self._order.append(class_name)
        self._lookup[class_name] = method_names
        return previous

    def put_entry(self, entry: ClassMethodEntry) -> MethodNames | None:
        """Store an extracted entry; see ``put``.

        Returns
        -------
        MethodNames | None
            The previous list, or ``None`` for a new class.
        """
        return self.put(entry.class_name, entry.method_names)

    def ensure(self, class_name: ClassName) -> MethodNames:
        """Return the list for a class, creating an empty one if absent.

        Returns
        -------
        MethodNames
            Existing or newly created list.
        """
        method_names = self._lookup.get(class_name)
        if method_names is None:
            method_names = MethodNames()
            self.put(class_name, method_names)
        return method_names

    def merge_append(self, class_name: ClassName, method_name: MethodName) -> None:
        """Append a method to a class, creating the class entry if absent."""
        self.ensure(class_name).append(method_name)

    def class_names(self) -> tuple[ClassName, ...]:
        """Return class names in iteration order.

        Returns
        -------
        tuple[ClassName, ...]
            Class names in first-insertion order.
        """
        return tuple(self._order)

    def items(self) -> Iterator[tuple[ClassName, MethodNames]]:
        """Yield ``(class_name, method_names)`` pairs in first-insertion order.

        Yields
        ------
        tuple[ClassName, MethodNames]
            Registry entries.
        """
        for class_name in self._order:
            yield class_name, self._lookup[class_name]

    def __iter__(self) -> Iterator[tuple[ClassName, MethodNames]]:
        return self.items()

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._lookup

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"ClassMethodRegistry({len(self)} classes)"


__all__ = ["ClassMethodEntry", "ClassMethodRegistry"]
