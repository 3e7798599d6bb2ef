# pginfer/__init__.py
"""Infer PostGraphile table metadata from standard GraphQL introspection."""

from .infer import (
    infer_tables,
    filter_tables,
    get_table_operation_names,
    get_custom_operations,
    build_table_index,
    resolve_relation,
)
from .loader import load_tables
from .models import CleanTable, IntrospectionQueryResponse
from .sources import SchemaSourceError, create_schema_source

__version__ = "0.1.0"

__all__ = [
    'infer_tables',
    'filter_tables',
    'get_table_operation_names',
    'get_custom_operations',
    'build_table_index',
    'resolve_relation',
    'load_tables',
    'CleanTable',
    'IntrospectionQueryResponse',
    'SchemaSourceError',
    'create_schema_source',
]
