# pginfer/models/introspection.py
"""Models for standard GraphQL ``__schema`` introspection results.

Parsing is lenient: unknown keys are ignored and everything except
``__schema`` itself is optional, so partial or unusual introspection
documents still load. Attribute names are snake_case; the JSON aliases
(``ofType``, ``inputFields``, ...) are accepted on input.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Wrapper nesting is finite in GraphQL, but unwrapping still stops here
MAX_TYPE_DEPTH = 16

WRAPPER_KINDS = ("LIST", "NON_NULL")


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IntrospectionTypeRef(_IntrospectionModel):
    """Reference to a type, possibly wrapped in LIST / NON_NULL."""
    kind: Optional[str] = None
    name: Optional[str] = None
    of_type: Optional["IntrospectionTypeRef"] = Field(default=None, alias="ofType")


class IntrospectionInputValue(_IntrospectionModel):
    """Field argument or INPUT_OBJECT field."""
    name: str
    description: Optional[str] = None
    type: IntrospectionTypeRef = Field(default_factory=IntrospectionTypeRef)
    default_value: Optional[str] = Field(default=None, alias="defaultValue")


class IntrospectionField(_IntrospectionModel):
    """Field on an OBJECT or INTERFACE type."""
    name: str
    description: Optional[str] = None
    args: List[IntrospectionInputValue] = Field(default_factory=list)
    type: IntrospectionTypeRef = Field(default_factory=IntrospectionTypeRef)
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    deprecation_reason: Optional[str] = Field(default=None, alias="deprecationReason")

    @field_validator("args", mode="before")
    @classmethod
    def _null_args(cls, v):
        return v if v is not None else []


class IntrospectionEnumValue(_IntrospectionModel):
    name: str
    description: Optional[str] = None
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    deprecation_reason: Optional[str] = Field(default=None, alias="deprecationReason")


class IntrospectionNamedRef(_IntrospectionModel):
    name: str


class IntrospectionType(_IntrospectionModel):
    """Complete type definition from introspection."""
    kind: Optional[str] = None
    name: str
    description: Optional[str] = None
    fields: Optional[List[IntrospectionField]] = None
    input_fields: Optional[List[IntrospectionInputValue]] = Field(default=None, alias="inputFields")
    enum_values: Optional[List[IntrospectionEnumValue]] = Field(default=None, alias="enumValues")
    interfaces: Optional[List[IntrospectionNamedRef]] = None
    possible_types: Optional[List[IntrospectionNamedRef]] = Field(default=None, alias="possibleTypes")


class IntrospectionSchema(_IntrospectionModel):
    query_type: Optional[IntrospectionNamedRef] = Field(default=None, alias="queryType")
    mutation_type: Optional[IntrospectionNamedRef] = Field(default=None, alias="mutationType")
    subscription_type: Optional[IntrospectionNamedRef] = Field(default=None, alias="subscriptionType")
    types: List[IntrospectionType] = Field(default_factory=list)
    directives: List[dict] = Field(default_factory=list)

    @field_validator("types", "directives", mode="before")
    @classmethod
    def _null_lists(cls, v):
        return v if v is not None else []


class IntrospectionQueryResponse(_IntrospectionModel):
    """Response of the standard introspection query (the ``data`` part)."""
    schema_: IntrospectionSchema = Field(alias="__schema")


IntrospectionTypeRef.model_rebuild()


# ============================================================================
# Type reference helpers
# ============================================================================

def is_wrapper_type(kind: Optional[str]) -> bool:
    return kind in WRAPPER_KINDS


def is_named_type(kind: Optional[str]) -> bool:
    return not is_wrapper_type(kind)


def unwrap_type(type_ref: IntrospectionTypeRef) -> IntrospectionTypeRef:
    """Follow ``ofType`` down to the named leaf, at most MAX_TYPE_DEPTH levels."""
    current = type_ref
    depth = 0
    while current.of_type is not None and depth < MAX_TYPE_DEPTH:
        current = current.of_type
        depth += 1
    if current.of_type is not None:
        # Over-deep chain: report an unnamed leaf instead of a wrapper
        return IntrospectionTypeRef(kind=current.kind)
    return current


def get_base_type_name(type_ref: Optional[IntrospectionTypeRef]) -> Optional[str]:
    if type_ref is None:
        return None
    return unwrap_type(type_ref).name


def is_non_null(type_ref: IntrospectionTypeRef) -> bool:
    return type_ref.kind == "NON_NULL"


def is_list(type_ref: IntrospectionTypeRef) -> bool:
    """True for ``[T]`` and ``[T]!``."""
    if type_ref.kind == "LIST":
        return True
    if type_ref.kind == "NON_NULL" and type_ref.of_type is not None:
        return type_ref.of_type.kind == "LIST"
    return False
