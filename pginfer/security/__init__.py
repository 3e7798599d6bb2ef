# pginfer/security/__init__.py

from .validators import validate_url, validate_header_value

__all__ = ['validate_url', 'validate_header_value']
