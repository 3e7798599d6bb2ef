# pginfer/infer/fields.py

from typing import List

from pginfer.infer.entities import EntityMaps, is_connection_name
from pginfer.infer.type_index import TypeIndex, is_object_type
from pginfer.models.introspection import (
    IntrospectionType,
    IntrospectionTypeRef,
    get_base_type_name,
    is_list,
)
from pginfer.models.schema import CleanField, CleanFieldType


def to_clean_field_type(type_ref: IntrospectionTypeRef) -> CleanFieldType:
    return CleanFieldType(
        gql_type=get_base_type_name(type_ref) or "Unknown",
        is_array=is_list(type_ref),
    )


def is_relation_type(base_type_name: str, type_index: TypeIndex, entity_maps: EntityMaps) -> bool:
    """An OBJECT that is a Connection or an entity makes a field a relation."""
    if not is_object_type(base_type_name, type_index):
        return False
    return is_connection_name(base_type_name) or entity_maps.is_entity(base_type_name)


def extract_entity_fields(
    entity_type: IntrospectionType,
    type_index: TypeIndex,
    entity_maps: EntityMaps,
) -> List[CleanField]:
    """Return the data fields of an entity: scalars, enums and embedded objects.

    Relation-shaped fields are left to ``infer_relations``.
    """
    fields: List[CleanField] = []

    for entity_field in entity_type.fields or []:
        base_type_name = get_base_type_name(entity_field.type)
        if base_type_name and is_relation_type(base_type_name, type_index, entity_maps):
            continue
        fields.append(CleanField(name=entity_field.name, type=to_clean_field_type(entity_field.type)))

    return fields
