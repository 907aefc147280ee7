"""Builders – fluent override engine for test fixtures."""
from ease.builders.builder import Builder, InstanceFactory
from ease.builders.dynamic import DynamicBuilder
from ease.builders.factory import A, BuilderFactory
from ease.builders.fields import FieldLike, FieldPath, FieldRef, fields_of, resolve_key
from ease.builders.materializer import apply_overrides, default_instance
from ease.builders.store import OverrideStore

__all__ = [
    "A",
    "Builder",
    "BuilderFactory",
    "DynamicBuilder",
    "FieldLike",
    "FieldPath",
    "FieldRef",
    "InstanceFactory",
    "OverrideStore",
    "apply_overrides",
    "default_instance",
    "fields_of",
    "resolve_key",
]
