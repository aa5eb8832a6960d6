"""Merge manually defined classes and methods into a registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from extract.identifiers import ClassName, MethodName
from extract.registry import ClassMethodRegistry

logger = logging.getLogger(__name__)


def split_method_names(methods: str) -> tuple[str, ...]:
    """Split a whitespace-separated method list.

    Returns
    -------
    tuple[str, ...]
        Method names in order; blank input yields no names.
    """
    return tuple(methods.split())


def merge_manual_definitions(
    registry: ClassMethodRegistry,
    definitions: Mapping[str, str],
) -> ClassMethodRegistry:
    """Append manually defined methods to the registry.

    Each key is a class identifier that may use ``-`` for the nested-class
    separator; each value lists method names separated by whitespace.
    Methods are appended after any already recorded for the class, and
    unseen classes are added at the end of the registry in mapping order.

    Parameters
    ----------
    registry
        Registry to update in place.
    definitions
        Mapping of class identifier to method names.

    Returns
    -------
    ClassMethodRegistry
        The updated registry.
    """
    for identifier, methods in definitions.items():
        class_name = ClassName.from_override(identifier)
        if not registry.contains_key(class_name):
            logger.debug("Adding manually defined class %s.", class_name)
        registry.ensure(class_name)
        for name in split_method_names(methods):
            registry.merge_append(class_name, MethodName(name))
    return registry


__all__ = ["merge_manual_definitions", "split_method_names"]
