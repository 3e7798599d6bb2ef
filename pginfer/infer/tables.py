# pginfer/infer/tables.py
"""Infer PostGraphile table metadata from standard GraphQL introspection.

Replaces a server-side ``_meta`` query by recognizing PostGraphile's naming
conventions:

- Connection types: {PluralName}Connection -> entity
- Input types: Create{Name}Input, Update{Name}Input, Delete{Name}Input
- Query operations: {pluralName} (list), {singularName} (single)
- Mutation operations: create{Name}, update{Name}, delete{Name}

Every call works on its own document and allocates fresh results, so it is
safe to run concurrently for several schemas.
"""

import logging
from typing import Any, Dict, List, Tuple, Union

from pginfer.infer.constraints import build_inflection, infer_constraints, infer_patch_field_name
from pginfer.infer.entities import EntityMaps, detect_entities
from pginfer.infer.fields import extract_entity_fields
from pginfer.infer.operations import has_real_operation, match_mutation_operations, match_query_operations
from pginfer.infer.relations import infer_relations
from pginfer.infer.type_index import TypeIndex, build_type_index
from pginfer.models.introspection import IntrospectionField, IntrospectionQueryResponse
from pginfer.models.schema import CleanTable, TableQueryNames
from pginfer.utils.inflection import lower_camel, pluralize

logger = logging.getLogger("pginfer_infer")


def _root_fields(type_index: TypeIndex, root_ref) -> List[IntrospectionField]:
    if root_ref is None:
        return []
    root_type = type_index.get(root_ref.name)
    if root_type is None:
        return []
    return root_type.fields or []


def build_clean_table(
    entity_name: str,
    type_index: TypeIndex,
    entity_maps: EntityMaps,
    query_fields: List[IntrospectionField],
    mutation_fields: List[IntrospectionField],
) -> Tuple[CleanTable, bool]:
    """Build the table for one entity.

    Returns:
        (table, has_real_operation) - the flag is False when every
        operation name in ``table.query`` is a conventional fallback.
    """
    entity_type = type_index[entity_name]
    connection_type_name = entity_maps.entity_to_connection[entity_name]

    query_ops = match_query_operations(entity_name, connection_type_name, query_fields)
    mutation_ops = match_mutation_operations(entity_name, mutation_fields)

    query = TableQueryNames(
        all=query_ops["all"] or lower_camel(pluralize(entity_name)),
        one=query_ops["one"],
        create=mutation_ops["create"] or f"create{entity_name}",
        update=mutation_ops["update"],
        delete=mutation_ops["delete"],
        patch_field_name=infer_patch_field_name(entity_name, type_index),
    )

    table = CleanTable(
        name=entity_name,
        fields=extract_entity_fields(entity_type, type_index, entity_maps),
        relations=infer_relations(entity_type, entity_maps),
        inflection=build_inflection(entity_name, connection_type_name, type_index),
        query=query,
        constraints=infer_constraints(entity_name, type_index),
    )
    return table, has_real_operation(query_ops, mutation_ops)


def infer_tables(
    introspection: Union[IntrospectionQueryResponse, Dict[str, Any]],
) -> List[CleanTable]:
    """Infer tables from an introspection result.

    Args:
        introspection: ``{"__schema": {...}}`` as a dict or parsed model

    Returns:
        One CleanTable per entity that has at least one real query or
        mutation, in the order entities appear in ``__schema.types``.

    Raises:
        pydantic.ValidationError: if the document has no ``__schema``
    """
    if not isinstance(introspection, IntrospectionQueryResponse):
        introspection = IntrospectionQueryResponse.model_validate(introspection)

    schema = introspection.schema_
    type_index = build_type_index(schema.types)
    query_fields = _root_fields(type_index, schema.query_type)
    mutation_fields = _root_fields(type_index, schema.mutation_type)

    entity_maps = detect_entities(schema.types, type_index)
    logger.debug(f"Detected {len(entity_maps.entity_names)} entities: {entity_maps.entity_names}")

    tables: List[CleanTable] = []
    for entity_name in entity_maps.entity_names:
        table, is_real = build_clean_table(
            entity_name, type_index, entity_maps, query_fields, mutation_fields
        )
        if not is_real:
            logger.debug(f"Dropping '{entity_name}': no query or mutation operations found")
            continue
        tables.append(table)

    logger.info(f"Inferred {len(tables)} tables from introspection")
    return tables
