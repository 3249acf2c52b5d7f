"""Reflected extension metadata consumed by the stub generator."""

from .models import (
    BUILTIN_TYPE_NAMES,
    BuiltinType,
    ClassMetadata,
    ConstantMetadata,
    FunctionMetadata,
    IntersectionType,
    LiteralValue,
    MethodMetadata,
    ModuleMetadata,
    NamedType,
    ParameterMetadata,
    PropertyMetadata,
    TypeReference,
    UnionType,
    UnresolvedValue,
    ValueReference,
    parse_type,
    split_qualified_name,
)

__all__ = [
    "BUILTIN_TYPE_NAMES",
    "BuiltinType",
    "ClassMetadata",
    "ConstantMetadata",
    "FunctionMetadata",
    "IntersectionType",
    "LiteralValue",
    "MethodMetadata",
    "ModuleMetadata",
    "NamedType",
    "ParameterMetadata",
    "PropertyMetadata",
    "TypeReference",
    "UnionType",
    "UnresolvedValue",
    "ValueReference",
    "parse_type",
    "split_qualified_name",
]
