# pginfer/utils/__init__.py
"""Utility modules for pginfer."""

from .cache import introspection_cache, cached
from .inflection import pluralize, singularize, lower_camel, upper_camel

__all__ = [
    'introspection_cache', 'cached',
    'pluralize', 'singularize', 'lower_camel', 'upper_camel',
]
