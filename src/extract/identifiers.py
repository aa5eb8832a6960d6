"""Class and method identifier values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from serde_msgspec import StructBaseHotPath

NESTED_CLASS_SEPARATOR = "$"
OVERRIDE_NESTED_CLASS_SEPARATOR = "-"


class ClassName(StructBaseHotPath, frozen=True):
    """Dot-delimited fully qualified class name."""

    value: str

    @classmethod
    def from_internal(cls, internal_name: str) -> ClassName:
        """Build a class name from a slash-delimited internal name.

        Returns
        -------
        ClassName
            Class name with ``/`` replaced by ``.``.
        """
        return cls(internal_name.replace("/", "."))

    @classmethod
    def from_override(cls, identifier: str) -> ClassName:
        """Build a class name from a manually supplied identifier.

        ``-`` stands in for the nested-class separator ``$`` and is
        translated before the slash normalization.

        Returns
        -------
        ClassName
            Normalized class name.
        """
        return cls.from_internal(
            identifier.replace(OVERRIDE_NESTED_CLASS_SEPARATOR, NESTED_CLASS_SEPARATOR)
        )

    def __str__(self) -> str:
        return self.value


class MethodName(StructBaseHotPath, frozen=True):
    """Bare method name without descriptor."""

    value: str

    def __str__(self) -> str:
        return self.value


class MethodNames:
    """Append-only, ordered list of method names.

    Duplicates are kept; order is discovery order.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[MethodName] = ()) -> None:
        self._items: list[MethodName] = list(items)

    @classmethod
    def of(cls, *names: str) -> MethodNames:
        """Build a list from plain strings.

        Returns
        -------
        MethodNames
            List holding one ``MethodName`` per string, in argument order.
        """
        return cls(MethodName(name) for name in names)

    def append(self, method_name: MethodName) -> None:
        """Append one method name."""
        self._items.append(method_name)

    def extend(self, method_names: Iterable[MethodName]) -> None:
        """Append method names in iteration order."""
        self._items.extend(method_names)

    def values(self) -> tuple[str, ...]:
        """Return the raw method name strings in order.

        Returns
        -------
        tuple[str, ...]
            Method name strings.
        """
        return tuple(item.value for item in self._items)

    def __iter__(self) -> Iterator[MethodName]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MethodNames):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MethodNames([{', '.join(self.values())}])"


__all__ = [
    "NESTED_CLASS_SEPARATOR",
    "OVERRIDE_NESTED_CLASS_SEPARATOR",
    "ClassName",
    "MethodName",
    "MethodNames",
]
