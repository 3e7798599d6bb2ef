# pginfer/sources/file.py

import json
import logging
from pathlib import Path

from graphql import GraphQLError, build_schema, introspection_from_schema

from pginfer.models.introspection import IntrospectionQueryResponse
from pginfer.sources.types import SchemaSourceError, parse_introspection_payload

logger = logging.getLogger("pginfer_sources")


class FileSchemaSource:
    """Load a schema from a local file.

    ``*.json`` files hold a saved introspection result; anything else is
    read as SDL and converted to introspection format with graphql-core.
    """

    def __init__(self, schema_path: str):
        self.schema_path = schema_path

    def describe(self) -> str:
        return f"schema: {self.schema_path}"

    def _resolve_path(self) -> Path:
        path = Path(self.schema_path).expanduser()
        return path if path.is_absolute() else Path.cwd() / path

    def fetch(self) -> IntrospectionQueryResponse:
        path = self._resolve_path()
        if not path.is_file():
            raise SchemaSourceError(f"Schema file not found: {path}", self.describe())

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaSourceError(f"Failed to read schema file: {e}", self.describe(), e)

        if path.suffix.lower() == ".json":
            try:
                payload = json.loads(content)
            except json.JSONDecodeError as e:
                raise SchemaSourceError(f"Invalid JSON in schema file: {e}", self.describe(), e)
        else:
            try:
                payload = introspection_from_schema(build_schema(content))
            except (GraphQLError, TypeError) as e:
                raise SchemaSourceError(f"Invalid GraphQL schema: {e}", self.describe(), e)

        result = parse_introspection_payload(payload, self.describe())
        logger.info(f"Loaded {len(result.schema_.types)} types from {path}")
        return result
