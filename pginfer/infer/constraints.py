# pginfer/infer/constraints.py
"""Primary keys, patch field names, OrderBy enums and inflection names.

All of these are derived from the companion types PostGraphile generates
for a table (``Update{Entity}Input``, ``{Entities}OrderBy``, ...). When the
evidence is ambiguous nothing is inferred rather than guessing.
"""

import logging
from typing import List, Optional

from pginfer.infer.fields import to_clean_field_type
from pginfer.infer.type_index import TypeIndex, is_enum_type
from pginfer.models.introspection import IntrospectionInputValue, get_base_type_name
from pginfer.models.schema import CleanField, ConstraintInfo, TableConstraints, TableInflection
from pginfer.utils.inflection import lower_camel, pluralize, singularize

logger = logging.getLogger("pginfer_infer")

PRIMARY_KEY_NAMES = ("id", "nodeId", "rowId")
ENTITY_KEY_NAMES = ("id", "nodeId")
ORDER_BY_SUFFIX = "OrderBy"


def _input_fields(type_name: str, type_index: TypeIndex) -> Optional[List[IntrospectionInputValue]]:
    type_def = type_index.get(type_name)
    if type_def is None:
        return None
    return type_def.input_fields


def _is_patch_input(input_field: IntrospectionInputValue) -> bool:
    if input_field.name.lower().endswith("patch"):
        return True
    base_type_name = get_base_type_name(input_field.type) or ""
    return base_type_name.endswith("Patch")


def _single_lookup_candidate(input_fields: List[IntrospectionInputValue]) -> Optional[IntrospectionInputValue]:
    candidates = [
        f for f in input_fields
        if f.name != "clientMutationId" and not _is_patch_input(f)
    ]
    if len(candidates) == 1:
        return candidates[0]
    return None


def _primary_constraint(name: str, type_ref) -> ConstraintInfo:
    return ConstraintInfo(
        name="primary",
        fields=[CleanField(name=name, type=to_clean_field_type(type_ref))],
    )


def infer_constraints(entity_name: str, type_index: TypeIndex) -> TableConstraints:
    """Infer the primary (lookup) key of an entity.

    Priority:
      1. ``id`` / ``nodeId`` / ``rowId`` on Update{Entity}Input, then Delete{Entity}Input
      2. the only non-patch, non-clientMutationId field of those inputs
      3. ``id`` / ``nodeId`` on the entity type itself
    """
    mutation_inputs = [
        fields for fields in (
            _input_fields(f"Update{entity_name}Input", type_index),
            _input_fields(f"Delete{entity_name}Input", type_index),
        )
        if fields
    ]

    for input_fields in mutation_inputs:
        for input_field in input_fields:
            if input_field.name in PRIMARY_KEY_NAMES:
                return TableConstraints(primary_key=[_primary_constraint(input_field.name, input_field.type)])

    for input_fields in mutation_inputs:
        candidate = _single_lookup_candidate(input_fields)
        if candidate is not None:
            return TableConstraints(primary_key=[_primary_constraint(candidate.name, candidate.type)])

    entity_type = type_index.get(entity_name)
    for entity_field in (entity_type.fields if entity_type else None) or []:
        if entity_field.name in ENTITY_KEY_NAMES:
            return TableConstraints(primary_key=[_primary_constraint(entity_field.name, entity_field.type)])

    logger.debug(f"No primary key inferred for '{entity_name}'")
    return TableConstraints()


def infer_patch_field_name(entity_name: str, type_index: TypeIndex) -> str:
    """Name of the ``*Patch`` argument on Update{Entity}Input (``userPatch`` by default)."""
    for input_field in _input_fields(f"Update{entity_name}Input", type_index) or []:
        base_type_name = get_base_type_name(input_field.type)
        if base_type_name and base_type_name.endswith("Patch"):
            return input_field.name
    return lower_camel(entity_name) + "Patch"


def find_order_by_type(entity_name: str, plural_name: str, type_index: TypeIndex) -> Optional[str]:
    """Find the OrderBy enum for an entity, or None.

    ``{Plural}OrderBy`` first, then naive suffix variants, then any
    ``*OrderBy`` enum whose singularized base is exactly the entity name,
    so ``SchemaGrantsOrderBy`` is never taken for ``Schema``.
    """
    standard_name = f"{plural_name}{ORDER_BY_SUFFIX}"
    if standard_name in type_index:
        return standard_name

    candidates = (
        f"{entity_name}s{ORDER_BY_SUFFIX}",
        f"{entity_name}es{ORDER_BY_SUFFIX}",
        f"{entity_name}{ORDER_BY_SUFFIX}",
    )
    for candidate in candidates:
        if is_enum_type(candidate, type_index):
            return candidate

    for type_name, type_def in type_index.items():
        if type_def.kind != "ENUM" or not type_name.endswith(ORDER_BY_SUFFIX):
            continue
        base_name = type_name[:-len(ORDER_BY_SUFFIX)]
        if base_name and singularize(base_name) == entity_name:
            return type_name

    return None


def build_inflection(entity_name: str, connection_type_name: str, type_index: TypeIndex) -> TableInflection:
    plural_name = pluralize(entity_name)
    singular_field_name = lower_camel(entity_name)
    plural_field_name = lower_camel(plural_name)

    filter_type = f"{entity_name}Filter"
    patch_type = f"{entity_name}Patch"
    update_payload_type = f"Update{entity_name}Payload"
    order_by_type = (
        find_order_by_type(entity_name, plural_name, type_index)
        or f"{plural_name}{ORDER_BY_SUFFIX}"
    )

    return TableInflection(
        all_rows=plural_field_name,
        all_rows_simple=plural_field_name,
        condition_type=f"{entity_name}Condition",
        connection=connection_type_name,
        create_field=f"create{entity_name}",
        create_input_type=f"Create{entity_name}Input",
        create_payload_type=f"Create{entity_name}Payload",
        delete_by_primary_key=f"delete{entity_name}",
        delete_payload_type=f"Delete{entity_name}Payload",
        edge=f"{plural_name}Edge",
        edge_field=plural_field_name,
        enum_type=f"{entity_name}Enum",
        filter_type=filter_type if filter_type in type_index else None,
        input_type=f"{entity_name}Input",
        order_by_type=order_by_type,
        patch_field=singular_field_name,
        patch_type=patch_type if patch_type in type_index else None,
        table_field_name=singular_field_name,
        table_type=entity_name,
        type_name=entity_name,
        update_by_primary_key=f"update{entity_name}",
        update_payload_type=update_payload_type if update_payload_type in type_index else None,
    )
