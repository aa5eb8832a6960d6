"""Settings for one descriptor generation run."""

from __future__ import annotations

from pathlib import Path

import msgspec

from classfile.revisions import DEFAULT_REVISION_KEY, FormatRevision, resolve_revision
from instrumentation.descriptor import (
    DEFAULT_DESCRIPTOR_NAME,
    DEFAULT_DESCRIPTOR_VERSION,
    DEFAULT_NAMESPACE_URI,
    DescriptorMetadata,
)
from serde_msgspec import StructBaseStrict


class InstrumentationSettings(StructBaseStrict, frozen=True):
    """Inputs for scanning a class directory and writing its descriptor.

    ``manually_definitions`` maps class identifiers (``-`` in place of ``$``)
    to whitespace-separated method names. ``asm`` selects the class format
    revision; unknown values fall back to the default revision.
    """

    output_directory: Path
    namespace_uri: str = DEFAULT_NAMESPACE_URI
    name: str = DEFAULT_DESCRIPTOR_NAME
    version: str = DEFAULT_DESCRIPTOR_VERSION
    enabled: bool = True
    manually_definitions: dict[str, str] = msgspec.field(default_factory=dict)
    asm: str = DEFAULT_REVISION_KEY
    max_workers: int | None = None

    def descriptor_metadata(self) -> DescriptorMetadata:
        """Return the descriptor root attributes.

        Returns
        -------
        DescriptorMetadata
            Name, version, enabled flag and namespace.
        """
        return DescriptorMetadata(
            name=self.name,
            version=self.version,
            enabled=self.enabled,
            namespace_uri=self.namespace_uri,
        )

    def format_revision(self) -> FormatRevision:
        """Return the class format revision for ``asm``.

        Returns
        -------
        FormatRevision
            Selected revision, or the default for unknown selectors.
        """
        return resolve_revision(self.asm)


__all__ = ["InstrumentationSettings"]
