# pginfer/infer/relations.py
"""Classify relation-shaped entity fields.

Introspection carries no foreign-key metadata, so relations are recovered
from field shapes and PostGraphile's field naming:

- ``author: User``                        -> belongsTo User
- ``posts: PostsConnection``              -> hasMany Post
- ``productsByOrderItemOrderIdAndProductId: ProductsConnection``
                                          -> manyToMany Product via OrderItem

hasOne is never produced: one-to-one and one-to-many look identical here.
"""

import re
from typing import Optional

from pginfer.infer.entities import CONNECTION_RE, EntityMaps, is_connection_name
from pginfer.models.introspection import IntrospectionField, IntrospectionType, get_base_type_name
from pginfer.models.schema import (
    CleanBelongsToRelation,
    CleanHasManyRelation,
    CleanManyToManyRelation,
    CleanRelations,
)
from pginfer.utils.inflection import singularize, upper_camel

# {relatedEntities}By{JunctionTable}{Key1}And{Key2}
MANY_TO_MANY_PREFIX_RE = re.compile(r"^([a-z]+)By")
JUNCTION_TABLE_RE = re.compile(r"By([A-Z][a-z]+(?:[A-Z][a-z]+)*?)(?:[A-Z][a-z]+Id)")

UNKNOWN_JUNCTION = "Unknown"


def is_many_to_many_field(field_name: str) -> bool:
    # Known to misfire on hasMany fields that happen to contain both words
    return "By" in field_name and "And" in field_name


def extract_right_table(field_name: str) -> Optional[str]:
    """``productsByOrderItem...`` -> ``Product``; None if there is no lowercase prefix."""
    match = MANY_TO_MANY_PREFIX_RE.match(field_name)
    if not match:
        return None
    return singularize(upper_camel(match.group(1)))


def extract_junction_table(field_name: str) -> str:
    """``productsByProductCategoryProductIdAndCategoryId`` -> ``ProductCategory``."""
    match = JUNCTION_TABLE_RE.search(field_name)
    return match.group(1) if match else UNKNOWN_JUNCTION


def connection_entity_name(connection_type_name: str, entity_maps: EntityMaps) -> str:
    """Entity listed by a connection, falling back to its singularized name prefix."""
    entity_name = entity_maps.connection_to_entity.get(connection_type_name)
    if entity_name:
        return entity_name
    match = CONNECTION_RE.match(connection_type_name)
    return singularize(match.group(1) if match else connection_type_name)


def _connection_relation(field: IntrospectionField, connection_type_name: str, entity_maps: EntityMaps):
    related_entity_name = connection_entity_name(connection_type_name, entity_maps)

    if is_many_to_many_field(field.name):
        return CleanManyToManyRelation(
            field_name=field.name,
            right_table=extract_right_table(field.name) or related_entity_name,
            junction_table=extract_junction_table(field.name),
            type=connection_type_name,
        )

    return CleanHasManyRelation(
        field_name=field.name,
        referenced_by_table=related_entity_name,
        type=connection_type_name,
        keys=[],
    )


def infer_relations(entity_type: IntrospectionType, entity_maps: EntityMaps) -> CleanRelations:
    relations = CleanRelations()

    for entity_field in entity_type.fields or []:
        base_type_name = get_base_type_name(entity_field.type)
        if not base_type_name:
            continue

        if is_connection_name(base_type_name):
            relation = _connection_relation(entity_field, base_type_name, entity_maps)
            if isinstance(relation, CleanManyToManyRelation):
                relations.many_to_many.append(relation)
            else:
                relations.has_many.append(relation)
            continue

        if entity_maps.is_entity(base_type_name):
            relations.belongs_to.append(CleanBelongsToRelation(
                field_name=entity_field.name,
                references_table=base_type_name,
                type=base_type_name,
                keys=[],
            ))

    return relations
