# pginfer/sources/types.py
"""Shared pieces of the schema sources: the error type and payload parsing."""

import logging
from typing import Any, Optional

from graphql import get_introspection_query
from pydantic import ValidationError

from pginfer.models.introspection import IntrospectionQueryResponse

logger = logging.getLogger("pginfer_sources")

# Standard introspection query (TypeRef fragment nests ofType 7+ levels)
INTROSPECTION_QUERY = get_introspection_query(descriptions=True)


class SchemaSourceError(Exception):
    """Raised when a schema source cannot produce an introspection result."""

    def __init__(self, message: str, source: str, cause: Optional[BaseException] = None):
        super().__init__(f"{message} [{source}]")
        self.message = message
        self.source = source
        self.cause = cause


def _error_messages(errors: Any) -> str:
    messages = []
    for error in errors if isinstance(errors, list) else [errors]:
        if isinstance(error, dict):
            messages.append(str(error.get("message", error)))
        else:
            messages.append(str(error))
    return "; ".join(messages)


def parse_introspection_payload(payload: Any, source: str) -> IntrospectionQueryResponse:
    """Turn a raw GraphQL response into a parsed introspection result.

    Accepts ``{"data": {"__schema": ...}}`` and bare ``{"__schema": ...}``.

    Raises:
        SchemaSourceError: on GraphQL errors, a missing ``__schema`` (usually
            introspection disabled on the server) or a malformed document
    """
    if not isinstance(payload, dict):
        raise SchemaSourceError("Introspection response is not a JSON object", source)

    errors = payload.get("errors")
    if errors:
        raise SchemaSourceError(f"GraphQL errors: {_error_messages(errors)}", source)

    data = payload.get("data", payload)
    if not isinstance(data, dict) or not data.get("__schema"):
        raise SchemaSourceError(
            "No __schema field in response. Introspection may be disabled on this endpoint.",
            source,
        )

    try:
        return IntrospectionQueryResponse.model_validate(data)
    except ValidationError as e:
        logger.error(f"Malformed introspection result from {source}: {e}")
        raise SchemaSourceError(f"Malformed introspection result: {e.error_count()} validation errors", source, e)
