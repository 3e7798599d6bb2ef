# pginfer/sources/__init__.py
"""Schema sources: where introspection results come from.

- endpoint: introspect a live GraphQL endpoint
- schema: load a local SDL (.graphql) or introspection (.json) file
"""

from typing import Dict, Optional, Tuple, Union

from .types import SchemaSourceError, parse_introspection_payload, INTROSPECTION_QUERY
from .endpoint import EndpointSchemaSource
from .endpoint_async import AsyncEndpointSchemaSource
from .file import FileSchemaSource

SchemaSource = Union[EndpointSchemaSource, FileSchemaSource]


def detect_source_mode(endpoint: Optional[str] = None, schema: Optional[str] = None) -> Optional[str]:
    """Return ``"endpoint"``, ``"schema"`` or None (endpoint wins if both are set)."""
    if endpoint:
        return "endpoint"
    if schema:
        return "schema"
    return None


def validate_source_options(endpoint: Optional[str] = None, schema: Optional[str] = None) -> Tuple[bool, Optional[str]]:
    """Check that exactly one source is configured.

    Returns:
        (valid, error message or None)
    """
    sources = [s for s in (endpoint, schema) if s]
    if not sources:
        return False, "No source specified. Use one of: endpoint or schema."
    if len(sources) > 1:
        return False, "Multiple sources specified. Use only one of: endpoint or schema."
    return True, None


def create_schema_source(
    endpoint: Optional[str] = None,
    schema: Optional[str] = None,
    authorization: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> SchemaSource:
    """Build the schema source matching the given options.

    Raises:
        SchemaSourceError: if neither an endpoint nor a schema file is given
    """
    mode = detect_source_mode(endpoint=endpoint, schema=schema)
    if mode == "schema":
        return FileSchemaSource(schema)
    if mode == "endpoint":
        return EndpointSchemaSource(
            endpoint,
            authorization=authorization,
            headers=headers,
            timeout=timeout,
        )
    raise SchemaSourceError(
        "No source specified. Use one of: endpoint (URL) or schema (file path).",
        "none",
    )


__all__ = [
    'SchemaSource',
    'SchemaSourceError',
    'EndpointSchemaSource',
    'AsyncEndpointSchemaSource',
    'FileSchemaSource',
    'INTROSPECTION_QUERY',
    'parse_introspection_payload',
    'detect_source_mode',
    'validate_source_options',
    'create_schema_source',
]
