"""Tests for building descriptor documents from a registry."""

from __future__ import annotations

from extract.identifiers import ClassName, MethodNames
from extract.registry import ClassMethodRegistry
from instrumentation.descriptor import (
    DEFAULT_DESCRIPTOR_NAME,
    DEFAULT_NAMESPACE_URI,
    DescriptorMetadata,
    Pointcut,
    build_descriptor,
)


def test_build_skips_classes_without_methods() -> None:
    """Ensure only classes with methods produce pointcuts."""
    registry = ClassMethodRegistry()
    registry.put(ClassName("com.example.Empty"), MethodNames())
    registry.put(ClassName("com.example.Foo"), MethodNames.of("bar", "baz"))
    descriptor = build_descriptor(registry)
    assert descriptor.pointcuts == (
        Pointcut(class_name="com.example.Foo", method_names=("bar", "baz")),
    )
    assert descriptor.pointcuts[0].transaction_start_point


def test_build_preserves_registry_order() -> None:
    """Ensure pointcuts follow registry iteration order."""
    registry = ClassMethodRegistry()
    for name in ("z.Last", "a.First", "m.Middle"):
        registry.put(ClassName(name), MethodNames.of("run"))
    descriptor = build_descriptor(registry)
    assert [pointcut.class_name for pointcut in descriptor.pointcuts] == [
        "z.Last",
        "a.First",
        "m.Middle",
    ]


def test_build_default_and_custom_metadata() -> None:
    """Ensure metadata defaults apply unless supplied."""
    registry = ClassMethodRegistry()
    default = build_descriptor(registry)
    assert default.metadata.name == DEFAULT_DESCRIPTOR_NAME
    assert default.metadata.namespace_uri == DEFAULT_NAMESPACE_URI
    assert default.metadata.enabled
    assert default.pointcuts == ()

    metadata = DescriptorMetadata(name="orders", version="2.1", enabled=False)
    assert build_descriptor(registry, metadata=metadata).metadata == metadata
