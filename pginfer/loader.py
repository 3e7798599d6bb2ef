# pginfer/loader.py
"""Fetch a schema from a source and infer its tables in one call."""

import logging
from typing import Dict, List, Optional

from pginfer.infer import filter_tables, infer_tables
from pginfer.models.schema import CleanTable
from pginfer.sources import create_schema_source, validate_source_options

logger = logging.getLogger("pginfer_loader")


def load_tables(
    endpoint: Optional[str] = None,
    schema: Optional[str] = None,
    authorization: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
) -> List[CleanTable]:
    """Introspect ``endpoint`` or read ``schema`` and return the inferred tables.

    Args:
        endpoint: GraphQL endpoint URL
        schema: Path to a .graphql SDL file or a saved .json introspection result
        authorization: Optional Authorization header value for the endpoint
        headers: Extra HTTP headers for the endpoint
        include: Glob patterns of table names to keep
        exclude: Glob patterns of table names to drop

    Raises:
        ValueError: if not exactly one of endpoint / schema is given
        SchemaSourceError: if the schema cannot be loaded
    """
    valid, error = validate_source_options(endpoint=endpoint, schema=schema)
    if not valid:
        raise ValueError(error)

    source = create_schema_source(
        endpoint=endpoint,
        schema=schema,
        authorization=authorization,
        headers=headers,
    )
    introspection = source.fetch()

    tables = filter_tables(infer_tables(introspection), include=include, exclude=exclude)
    if not tables:
        logger.warning(f"No tables found in {source.describe()} after filtering")
    else:
        logger.info(f"Loaded {len(tables)} tables from {source.describe()}")
    return tables
