# pginfer/infer/operations.py
"""Match root Query / Mutation fields to table CRUD operations."""

from typing import Dict, List, Optional

from pginfer.models.introspection import IntrospectionField, get_base_type_name
from pginfer.utils.inflection import lower_camel, pluralize


def _has_id_arg(field: IntrospectionField) -> bool:
    return any(
        arg.name == "id" or arg.name == "nodeId" or arg.name.lower().endswith("id")
        for arg in field.args
    )


def match_query_operations(
    entity_name: str,
    connection_type_name: str,
    query_fields: List[IntrospectionField],
) -> Dict[str, Optional[str]]:
    """Find the list (``all``) and single-row (``one``) queries of an entity.

    - all: returns the entity's connection; ``users`` preferred over ``allUsers``
    - one: returns the entity and takes an id-like argument; ``user`` preferred
    """
    preferred_all = lower_camel(pluralize(entity_name))
    preferred_one = lower_camel(entity_name)
    all_name: Optional[str] = None
    one_name: Optional[str] = None

    for query_field in query_fields:
        return_type_name = get_base_type_name(query_field.type)
        if not return_type_name:
            continue

        if return_type_name == connection_type_name:
            if all_name is None or query_field.name == preferred_all:
                all_name = query_field.name

        if return_type_name == entity_name and _has_id_arg(query_field):
            if one_name is None or query_field.name == preferred_one:
                one_name = query_field.name

    return {"all": all_name, "one": one_name}


def match_mutation_operations(
    entity_name: str,
    mutation_fields: List[IntrospectionField],
) -> Dict[str, Optional[str]]:
    """Find create / update / delete mutations by name.

    ``update{Entity}`` always beats ``update{Entity}ById`` (same for delete),
    whatever order they appear in.
    """
    names = {f.name for f in mutation_fields}

    def pick(canonical: str) -> Optional[str]:
        if canonical in names:
            return canonical
        if f"{canonical}ById" in names:
            return f"{canonical}ById"
        return None

    create_name = f"create{entity_name}"
    return {
        "create": create_name if create_name in names else None,
        "update": pick(f"update{entity_name}"),
        "delete": pick(f"delete{entity_name}"),
    }


def has_real_operation(query_ops: Dict[str, Optional[str]], mutation_ops: Dict[str, Optional[str]]) -> bool:
    """True if any CRUD operation was actually found in the schema."""
    return any((
        query_ops.get("all"),
        query_ops.get("one"),
        mutation_ops.get("create"),
        mutation_ops.get("update"),
        mutation_ops.get("delete"),
    ))
