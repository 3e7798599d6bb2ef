# pginfer/infer/__init__.py
"""Table inference over GraphQL introspection."""

from .tables import infer_tables, build_clean_table
from .filters import (
    filter_tables,
    get_table_operation_names,
    get_custom_operations,
    build_table_index,
    resolve_relation,
    TableOperationNames,
)

__all__ = [
    'infer_tables',
    'build_clean_table',
    'filter_tables',
    'get_table_operation_names',
    'get_custom_operations',
    'build_table_index',
    'resolve_relation',
    'TableOperationNames',
]
