"""
Conversion of request payload keys to the underscore convention used by
the Gengo API (``revId`` -> ``rev_id``).
"""

import re
from typing import Any, Mapping

_UPPERCASE = re.compile(r"([A-Z])")


def to_underscore_key(key: str) -> str:
    """Insert ``_`` before every uppercase letter and lower-case the key."""
    return _UPPERCASE.sub(r"_\1", key).lower()


def keys_to_underscore(value: Any) -> Any:
    """
    Recursively rewrite mapping keys with :func:`to_underscore_key`.

    Returns a new structure; ``value`` itself is left untouched.  Mappings
    nested in lists or tuples are rewritten as well, any other value is
    returned unchanged.  When two keys collapse into the same name the one
    seen last wins.
    """
    if isinstance(value, Mapping):
        return {
            to_underscore_key(k) if isinstance(k, str) else k: keys_to_underscore(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [keys_to_underscore(v) for v in value]
    if isinstance(value, tuple):
        return tuple(keys_to_underscore(v) for v in value)
    return value
