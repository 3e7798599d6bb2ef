# pginfer/utils/cache.py

import inspect
import logging
from functools import wraps
from typing import Any, Callable, Optional

from cachetools import TTLCache

from pginfer.utils.config_utils import TimeoutConfig

logger = logging.getLogger(__name__)


class IntrospectionCache:
    """TTL cache of fetched introspection results, keyed by endpoint.

    A schema that changes on the server is picked up again on the first
    fetch after its entry expires.
    """

    def __init__(self, ttl: int = 300, maxsize: int = 32):
        self.cache = TTLCache(maxsize=maxsize, ttl=ttl)

    def __len__(self) -> int:
        return len(self.cache)

    def get(self, key: str) -> Optional[Any]:
        """Return the cached result for ``key``, or None if absent or expired."""
        result = self.cache.get(key)
        logger.debug(f"Introspection cache {'HIT' if result is not None else 'MISS'}: {key}")
        return result

    def set(self, key: str, value: Any) -> None:
        self.cache[key] = value

    def clear(self) -> None:
        self.cache.clear()
        logger.info("Introspection cache cleared")


introspection_cache = IntrospectionCache(
    ttl=TimeoutConfig.get_cache_ttl(),
    maxsize=TimeoutConfig.get_cache_maxsize(),
)


def cached(key_func: Callable) -> Callable:
    """Cache a fetch method's result in ``introspection_cache``.

    Works for both plain and ``async`` methods. ``key_func`` receives the
    same arguments as the method. Exceptions propagate and are not cached.

    Example:
        @cached(lambda self: f"introspection:{self.endpoint}")
        async def fetch(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                key = key_func(*args, **kwargs)
                result = introspection_cache.get(key)
                if result is None:
                    result = await func(*args, **kwargs)
                    introspection_cache.set(key, result)
                return result
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            key = key_func(*args, **kwargs)
            result = introspection_cache.get(key)
            if result is None:
                result = func(*args, **kwargs)
                introspection_cache.set(key, result)
            return result
        return wrapper
    return decorator
