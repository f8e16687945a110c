"""
Query-string encoding of nested payloads.

``requests`` only understands flat parameter mappings, so nested mappings and
lists are flattened into bracket keys the way the API expects them
(``filter[lc_src]=en``, ``ids[0]=1``).  Booleans are sent as ``true`` /
``false`` and ``None`` as an empty value.
"""

from typing import Any, Dict, Mapping


def _scalar(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return value


def _flatten(prefix: str, value: Any, out: Dict[str, Any]) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, out)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, out)
    else:
        out[prefix] = _scalar(value)


def flatten_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten ``params`` into a single-level mapping of bracket keys."""
    out: Dict[str, Any] = {}
    for key, value in params.items():
        _flatten(str(key), value, out)
    return out
