"""Class-file format revisions accepted by the reader.

A revision selects which class-level attributes the reader understands. Older
revisions reject classes that carry attributes introduced after them, the same
way a visitor bound to an older API level refuses newer structural events.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from serde_msgspec import StructBaseStrict

logger = logging.getLogger(__name__)


class FormatRevision(StructBaseStrict, frozen=True):
    """Named reader revision and its API level."""

    key: str
    api: int

    def supports_attribute(self, attribute: str) -> bool:
        """Return whether a class-level attribute is readable at this revision.

        Parameters
        ----------
        attribute
            Attribute name from the class file.

        Returns
        -------
        bool
            ``True`` when the attribute is ungated or introduced at or before
            this revision's API level.
        """
        required = GATED_CLASS_ATTRIBUTES.get(attribute)
        return required is None or required <= self.api


# Class-level attributes that require a minimum API level.
GATED_CLASS_ATTRIBUTES: Mapping[str, int] = MappingProxyType(
    {
        "Module": 6,
        "ModulePackages": 6,
        "ModuleMainClass": 6,
        "NestHost": 7,
        "NestMembers": 7,
        "Record": 8,
        "PermittedSubclasses": 9,
    }
)

DEFAULT_REVISION_KEY = "9"

FORMAT_REVISIONS: Mapping[str, FormatRevision] = MappingProxyType(
    {
        key: FormatRevision(key=key, api=int(key))
        for key in ("5", "6", "7", "8", "9")
    }
)

DEFAULT_REVISION = FORMAT_REVISIONS[DEFAULT_REVISION_KEY]


def resolve_revision(key: str | None) -> FormatRevision:
    """Resolve a revision selector, falling back to the default.

    Parameters
    ----------
    key
        Revision selector such as ``"9"``; ``None`` selects the default.

    Returns
    -------
    FormatRevision
        Matching revision, or the default revision for unknown keys.
    """
    if key is None:
        return DEFAULT_REVISION
    revision = FORMAT_REVISIONS.get(key.strip())
    if revision is None:
        logger.debug(
            "Unknown class format revision %r; using %s.",
            key,
            DEFAULT_REVISION_KEY,
        )
        return DEFAULT_REVISION
    return revision


__all__ = [
    "DEFAULT_REVISION",
    "DEFAULT_REVISION_KEY",
    "FORMAT_REVISIONS",
    "GATED_CLASS_ATTRIBUTES",
    "FormatRevision",
    "resolve_revision",
]
