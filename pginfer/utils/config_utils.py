# pginfer/utils/config_utils.py

import os
from typing import Callable, TypeVar, Union

import dotenv

# Load environment variables from .env file if it exists
dotenv.load_dotenv()

T = TypeVar("T", int, float)


def _positive_env(name: str, default: Union[int, float], cast: Callable[[str], T]) -> T:
    """Read a positive number from ``PGINFER_<name>``, falling back to ``default``."""
    key = f"PGINFER_{name}"
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return cast(str(default))
    try:
        value = cast(raw.strip())
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {raw!r}")
    return value


class TimeoutConfig:
    """HTTP timeouts, pool limits and introspection cache sizing for endpoint sources.

    Every value is read from a ``PGINFER_*`` environment variable (or a
    ``.env`` file) at call time.
    """

    @staticmethod
    def get_request_timeout() -> float:
        """Seconds to wait for the introspection response (``PGINFER_REQUEST_TIMEOUT``, 30)."""
        return _positive_env("REQUEST_TIMEOUT", 30.0, float)

    @staticmethod
    def get_connect_timeout() -> float:
        return _positive_env("CONNECT_TIMEOUT", 10.0, float)

    @staticmethod
    def get_pool_timeout() -> float:
        return _positive_env("POOL_TIMEOUT", 5.0, float)

    @staticmethod
    def get_max_keepalive_connections() -> int:
        return _positive_env("MAX_KEEPALIVE", 5, int)

    @staticmethod
    def get_max_connections() -> int:
        return _positive_env("MAX_CONNECTIONS", 10, int)

    @staticmethod
    def get_cache_ttl() -> int:
        """Seconds an introspection result stays cached (``PGINFER_CACHE_TTL``, 300)."""
        return _positive_env("CACHE_TTL", 300, int)

    @staticmethod
    def get_cache_maxsize() -> int:
        """Number of endpoints whose introspection is kept (``PGINFER_CACHE_MAXSIZE``, 32)."""
        return _positive_env("CACHE_MAXSIZE", 32, int)
