# pginfer/models/__init__.py
"""Input (introspection) and output (clean table) models."""

from .introspection import (
    IntrospectionQueryResponse,
    IntrospectionSchema,
    IntrospectionType,
    IntrospectionField,
    IntrospectionInputValue,
    IntrospectionTypeRef,
    unwrap_type,
    get_base_type_name,
    is_list,
    is_non_null,
)
from .schema import (
    CleanTable,
    CleanField,
    CleanFieldType,
    CleanRelations,
    CleanBelongsToRelation,
    CleanHasOneRelation,
    CleanHasManyRelation,
    CleanManyToManyRelation,
    TableQueryNames,
    TableConstraints,
    TableInflection,
    ConstraintInfo,
)

__all__ = [
    'IntrospectionQueryResponse', 'IntrospectionSchema', 'IntrospectionType',
    'IntrospectionField', 'IntrospectionInputValue', 'IntrospectionTypeRef',
    'unwrap_type', 'get_base_type_name', 'is_list', 'is_non_null',
    'CleanTable', 'CleanField', 'CleanFieldType', 'CleanRelations',
    'CleanBelongsToRelation', 'CleanHasOneRelation', 'CleanHasManyRelation',
    'CleanManyToManyRelation', 'TableQueryNames', 'TableConstraints',
    'TableInflection', 'ConstraintInfo',
]
