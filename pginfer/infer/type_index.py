# pginfer/infer/type_index.py
"""Name -> type lookup over an introspection document."""

from typing import Dict, List

from pginfer.models.introspection import IntrospectionType

# Root, scalar and PostGraphile plumbing types that are never entities
BUILTIN_TYPES = frozenset({
    "Query",
    "Mutation",
    "Subscription",
    "String",
    "Int",
    "Float",
    "Boolean",
    "ID",
    "Node",
    "PageInfo",
    "Cursor",
    "UUID",
    "Datetime",
    "Date",
    "Time",
    "JSON",
    "BigInt",
    "BigFloat",
})

TypeIndex = Dict[str, IntrospectionType]


def build_type_index(types: List[IntrospectionType]) -> TypeIndex:
    """Map every type name to its definition. Nothing is filtered here."""
    return {t.name: t for t in types}


def is_internal_type(name: str) -> bool:
    return name.startswith("__")


def is_builtin_type(name: str) -> bool:
    return name in BUILTIN_TYPES


def is_ignored_type(name: str) -> bool:
    """True for names that can never be an entity (``__Type``, ``PageInfo``, ...)."""
    return is_internal_type(name) or is_builtin_type(name)


def is_object_type(name: str, type_index: TypeIndex) -> bool:
    type_def = type_index.get(name)
    return type_def is not None and type_def.kind == "OBJECT"


def is_enum_type(name: str, type_index: TypeIndex) -> bool:
    type_def = type_index.get(name)
    return type_def is not None and type_def.kind == "ENUM"
