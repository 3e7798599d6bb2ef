# pginfer/infer/filters.py
"""Helpers for consumers of inferred tables.

- include / exclude filtering of tables by glob pattern
- splitting root operations into table CRUD and custom operations
- resolving relation targets (stored as names) to tables on demand
"""

from fnmatch import fnmatchcase
from typing import Any, Dict, List, NamedTuple, Optional, Set, Tuple, Union

from pginfer.models.introspection import IntrospectionQueryResponse
from pginfer.models.schema import (
    CleanBelongsToRelation,
    CleanHasManyRelation,
    CleanHasOneRelation,
    CleanManyToManyRelation,
    CleanTable,
)


class TableOperationNames(NamedTuple):
    queries: Set[str]
    mutations: Set[str]


def matches_patterns(name: str, patterns: List[str]) -> bool:
    """True if ``name`` matches any glob pattern (``*`` and ``?`` wildcards)."""
    return any(fnmatchcase(name, pattern) for pattern in patterns)


def filter_tables(
    tables: List[CleanTable],
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
) -> List[CleanTable]:
    """Keep tables matching ``include`` (if given) and not matching ``exclude``."""
    result = tables
    if include:
        result = [t for t in result if matches_patterns(t.name, include)]
    if exclude:
        result = [t for t in result if not matches_patterns(t.name, exclude)]
    return result


def get_table_operation_names(tables: List[CleanTable]) -> TableOperationNames:
    """Exact query / mutation names already covered by table CRUD."""
    queries: Set[str] = set()
    mutations: Set[str] = set()

    for table in tables:
        queries.add(table.query.all)
        if table.query.one:
            queries.add(table.query.one)
        mutations.add(table.query.create)
        if table.query.update:
            mutations.add(table.query.update)
        if table.query.delete:
            mutations.add(table.query.delete)

    return TableOperationNames(queries=queries, mutations=mutations)


def get_custom_operations(
    introspection: Union[IntrospectionQueryResponse, Dict[str, Any]],
    table_operation_names: TableOperationNames,
) -> List[Tuple[str, str]]:
    """Root fields that are not table CRUD, as ``(kind, name)`` pairs.

    Unique-key lookups (``userByEmail``), ``update*By*`` mutations and true
    custom operations (``login``, ...) all land here.
    """
    if not isinstance(introspection, IntrospectionQueryResponse):
        introspection = IntrospectionQueryResponse.model_validate(introspection)

    schema = introspection.schema_
    types_by_name = {t.name: t for t in schema.types}
    custom: List[Tuple[str, str]] = []

    roots = (
        ("query", schema.query_type, table_operation_names.queries),
        ("mutation", schema.mutation_type, table_operation_names.mutations),
    )
    for kind, root_ref, known in roots:
        root_type = types_by_name.get(root_ref.name) if root_ref else None
        for root_field in (root_type.fields if root_type else None) or []:
            if root_field.name not in known:
                custom.append((kind, root_field.name))

    return custom


Relation = Union[
    CleanBelongsToRelation,
    CleanHasOneRelation,
    CleanHasManyRelation,
    CleanManyToManyRelation,
]


def build_table_index(tables: List[CleanTable]) -> Dict[str, CleanTable]:
    return {table.name: table for table in tables}


def relation_target_name(relation: Relation) -> str:
    if isinstance(relation, CleanBelongsToRelation):
        return relation.references_table
    if isinstance(relation, CleanManyToManyRelation):
        return relation.right_table
    return relation.referenced_by_table


def resolve_relation(relation: Relation, table_index: Dict[str, CleanTable]) -> Optional[CleanTable]:
    """Look up the table a relation points to; None if it was not emitted."""
    return table_index.get(relation_target_name(relation))
