"""Descriptor document model and builder."""

from __future__ import annotations

from extract.identifiers import ClassName
from extract.registry import ClassMethodRegistry
from obs.otel.constants import AttributeName
from obs.otel.scopes import SCOPE_DESCRIPTOR
from obs.otel.tracing import set_span_attributes, stage_span
from serde_msgspec import StructBaseStrict

DEFAULT_NAMESPACE_URI = "https://newrelic.com/docs/java/xsd/v1.0"
DEFAULT_DESCRIPTOR_NAME = "newrelic-extension"
DEFAULT_DESCRIPTOR_VERSION = "1.0"


class DescriptorMetadata(StructBaseStrict, frozen=True):
    """Attributes carried by the descriptor root element."""

    name: str = DEFAULT_DESCRIPTOR_NAME
    version: str = DEFAULT_DESCRIPTOR_VERSION
    enabled: bool = True
    namespace_uri: str = DEFAULT_NAMESPACE_URI


class Pointcut(StructBaseStrict, frozen=True):
    """One instrumented class and its methods."""

    class_name: str
    method_names: tuple[str, ...]
    transaction_start_point: bool = True


class ExtensionDescriptor(StructBaseStrict, frozen=True):
    """Instrumentation extension document."""

    metadata: DescriptorMetadata
    pointcuts: tuple[Pointcut, ...] = ()


def build_descriptor(
    registry: ClassMethodRegistry,
    *,
    metadata: DescriptorMetadata | None = None,
) -> ExtensionDescriptor:
    """Build the descriptor document from a registry.

    Classes are emitted in registry order; classes without methods are
    left out.

    Parameters
    ----------
    registry
        Registry holding scanned and manually defined classes.
    metadata
        Root attributes; defaults apply when omitted.

    Returns
    -------
    ExtensionDescriptor
        Descriptor with one pointcut per class that has methods.
    """
    resolved = metadata if metadata is not None else DescriptorMetadata()
    with stage_span(
        "descriptor.build",
        stage="build",
        scope_name=SCOPE_DESCRIPTOR,
        attributes={AttributeName.CLASS_COUNT: len(registry)},
    ) as span:
        pointcuts = tuple(
            _pointcut(class_name, method_names.values())
            for class_name, method_names in registry.items()
            if method_names
        )
        set_span_attributes(span, {AttributeName.POINTCUT_COUNT: len(pointcuts)})
    return ExtensionDescriptor(metadata=resolved, pointcuts=pointcuts)


def _pointcut(class_name: ClassName, method_names: tuple[str, ...]) -> Pointcut:
    return Pointcut(class_name=class_name.value, method_names=method_names)


__all__ = [
    "DEFAULT_DESCRIPTOR_NAME",
    "DEFAULT_DESCRIPTOR_VERSION",
    "DEFAULT_NAMESPACE_URI",
    "DescriptorMetadata",
    "ExtensionDescriptor",
    "Pointcut",
    "build_descriptor",
]
