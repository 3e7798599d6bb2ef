# pginfer/sources/endpoint.py

import hashlib
import logging
from typing import Dict, Optional

import requests

from pginfer.models.introspection import IntrospectionQueryResponse
from pginfer.security import validate_header_value, validate_url
from pginfer.sources.types import INTROSPECTION_QUERY, SchemaSourceError, parse_introspection_payload
from pginfer.utils.cache import cached
from pginfer.utils.config_utils import TimeoutConfig

logger = logging.getLogger("pginfer_sources")


def _cache_key(endpoint: str, authorization: Optional[str], headers: Optional[Dict[str, str]] = None) -> str:
    """Cache key for an endpoint as seen with the given credentials and headers.

    Extra headers can select a different database or tenant, so they are
    part of the key. Values are hashed so they never show up in cache logs.
    """
    if not authorization and not headers:
        return f"introspection:{endpoint}:anonymous"
    parts = [authorization or ""]
    parts.extend(sorted(f"{name.lower()}:{value}" for name, value in (headers or {}).items()))
    digest = hashlib.sha256("\n".join(parts).encode()).hexdigest()[:16]
    return f"introspection:{endpoint}:{digest}"


class EndpointSchemaSource:
    """Introspect a live GraphQL endpoint over HTTP."""

    def __init__(
        self,
        endpoint: str,
        authorization: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        self.endpoint = validate_url(endpoint)
        self.authorization = validate_header_value(authorization) if authorization else None
        self.extra_headers = {k: validate_header_value(v) for k, v in (headers or {}).items()}
        self.timeout = timeout or TimeoutConfig.get_request_timeout()

    def describe(self) -> str:
        return f"endpoint: {self.endpoint}"

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        headers.update(self.extra_headers)
        if self.authorization:
            headers["Authorization"] = self.authorization
        return headers

    @cached(lambda self: _cache_key(self.endpoint, self.authorization, self.extra_headers))
    def fetch(self) -> IntrospectionQueryResponse:
        """Run the introspection query (cached for the configured TTL).

        Raises:
            SchemaSourceError: on transport failure, non-2xx status, GraphQL
                errors, or a response without ``__schema``
        """
        try:
            response = requests.post(
                self.endpoint,
                headers=self._headers(),
                json={"query": INTROSPECTION_QUERY, "variables": {}},
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.error(f"Introspection request to {self.endpoint} timed out")
            raise SchemaSourceError(f"Request timeout after {self.timeout}s", self.describe(), e)
        except requests.RequestException as e:
            logger.error(f"Introspection request to {self.endpoint} failed: {e}")
            raise SchemaSourceError(f"Request failed: {e}", self.describe(), e)

        if not response.ok:
            raise SchemaSourceError(f"HTTP {response.status_code}: {response.reason}", self.describe())

        try:
            payload = response.json()
        except ValueError as e:
            raise SchemaSourceError("Response is not valid JSON", self.describe(), e)

        result = parse_introspection_payload(payload, self.describe())
        logger.info(f"Loaded {len(result.schema_.types)} types from {self.endpoint}")
        return result
