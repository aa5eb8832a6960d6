"""Render and write instrumentation descriptors as XML."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path

from instrumentation.descriptor import ExtensionDescriptor
from instrumentation.errors import DescriptorWriteError
from obs.otel.constants import AttributeName
from obs.otel.scopes import SCOPE_STORAGE
from obs.otel.tracing import stage_span

logger = logging.getLogger(__name__)

DESCRIPTOR_SUBPATH = Path("newrelic-instrumentation", "extensions")
DESCRIPTOR_SUFFIX = ".xml"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
INDENT = " " * 4


def descriptor_output_path(root: Path, name: str) -> Path:
    """Return the descriptor path for a root directory and document name.

    Returns
    -------
    Path
        ``<root>/newrelic-instrumentation/extensions/<name>.xml``.
    """
    return root / DESCRIPTOR_SUBPATH / f"{name}{DESCRIPTOR_SUFFIX}"


def descriptor_to_element(descriptor: ExtensionDescriptor) -> ET.Element:
    """Convert a descriptor into an XML element tree.

    Parameters
    ----------
    descriptor
        Descriptor document.

    Returns
    -------
    xml.etree.ElementTree.Element
        ``extension`` root element.
    """
    metadata = descriptor.metadata
    attrib: dict[str, str] = {}
    if metadata.namespace_uri:
        attrib["xmlns"] = metadata.namespace_uri
    attrib["name"] = metadata.name
    attrib["version"] = metadata.version
    attrib["enabled"] = "true" if metadata.enabled else "false"
    root = ET.Element("extension", attrib)
    container = ET.SubElement(root, "instrumentation")
    for pointcut in descriptor.pointcuts:
        element = ET.SubElement(
            container,
            "pointcut",
            {"transactionStartPoint": "true" if pointcut.transaction_start_point else "false"},
        )
        ET.SubElement(element, "className").text = pointcut.class_name
        for method_name in pointcut.method_names:
            method = ET.SubElement(element, "method")
            ET.SubElement(method, "name").text = method_name
    return root


def render_descriptor(descriptor: ExtensionDescriptor) -> bytes:
    """Render a descriptor to indented UTF-8 XML.

    Returns
    -------
    bytes
        XML document with declaration and four-space indentation.
    """
    root = descriptor_to_element(descriptor)
    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n".encode()


def write_descriptor(descriptor: ExtensionDescriptor, root: Path) -> Path:
    """Write a descriptor beneath ``root``, replacing any existing file.

    The document is rendered in full and written to a temporary sibling
    before being renamed into place.

    Parameters
    ----------
    descriptor
        Descriptor document.
    root
        Output root directory.

    Returns
    -------
    Path
        Path of the written descriptor.

    Raises
    ------
    DescriptorWriteError
        Raised when directories cannot be created or the file cannot be written.
    """
    path = descriptor_output_path(root, descriptor.metadata.name)
    payload = render_descriptor(descriptor)
    with stage_span(
        "descriptor.write",
        stage="write",
        scope_name=SCOPE_STORAGE,
        attributes={AttributeName.OUTPUT_PATH: path},
    ):
        tmp = path.with_name(f"{path.name}.tmp-{os.getpid()}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            try:
                tmp.write_bytes(payload)
                os.replace(tmp, path)
            except OSError:
                tmp.unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise DescriptorWriteError(path, exc) from exc
    logger.info("Wrote %d pointcuts to %s.", len(descriptor.pointcuts), path)
    return path


__all__ = [
    "DESCRIPTOR_SUBPATH",
    "DESCRIPTOR_SUFFIX",
    "XML_DECLARATION",
    "descriptor_output_path",
    "descriptor_to_element",
    "render_descriptor",
    "write_descriptor",
]
