# pginfer/sources/endpoint_async.py

import logging
from typing import Dict, Optional

import httpx

from pginfer.models.introspection import IntrospectionQueryResponse
from pginfer.security import validate_header_value, validate_url
from pginfer.sources.endpoint import _cache_key
from pginfer.sources.types import INTROSPECTION_QUERY, SchemaSourceError, parse_introspection_payload
from pginfer.utils.cache import cached
from pginfer.utils.config_utils import TimeoutConfig

logger = logging.getLogger("pginfer_sources")


class AsyncEndpointSchemaSource:
    """Async endpoint introspection with caching and connection pooling.

    Useful when introspecting several targets concurrently.
    """

    def __init__(
        self,
        endpoint: str,
        authorization: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = validate_url(endpoint)
        self.authorization = validate_header_value(authorization) if authorization else None
        self.extra_headers = {k: validate_header_value(v) for k, v in (headers or {}).items()}

        timeout = httpx.Timeout(
            connect=TimeoutConfig.get_connect_timeout(),
            read=TimeoutConfig.get_request_timeout(),
            write=TimeoutConfig.get_request_timeout(),
            pool=TimeoutConfig.get_pool_timeout()
        )

        limits = httpx.Limits(
            max_keepalive_connections=TimeoutConfig.get_max_keepalive_connections(),
            max_connections=TimeoutConfig.get_max_connections()
        )

        self.client = httpx.AsyncClient(timeout=timeout, limits=limits, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.client.aclose()

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
    async def fetch(self) -> IntrospectionQueryResponse:
        """Run the introspection query (cached for the configured TTL)."""
        try:
            response = await self.client.post(
                self.endpoint,
                headers=self._headers(),
                json={"query": INTROSPECTION_QUERY, "variables": {}},
            )
        except httpx.TimeoutException as e:
            logger.error(f"Introspection request to {self.endpoint} timed out")
            raise SchemaSourceError("Request timeout", self.describe(), e)
        except httpx.HTTPError as e:
            logger.error(f"Introspection request to {self.endpoint} failed: {e}")
            raise SchemaSourceError(f"Request failed: {e}", self.describe(), e)

        if response.is_error:
            raise SchemaSourceError(f"HTTP {response.status_code}: {response.reason_phrase}", self.describe())

        try:
            payload = response.json()
        except ValueError as e:
            raise SchemaSourceError("Response is not valid JSON", self.describe(), e)

        result = parse_introspection_payload(payload, self.describe())
        logger.info(f"Loaded {len(result.schema_.types)} types from {self.endpoint}")
        return result

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
