"""Figma API - Query string serialization."""
from typing import Any, Mapping, Optional
from urllib.parse import quote


# Characters left unescaped by JavaScript's encodeURIComponent
_SAFE = "-_.!~*'()"


def _format_value(value: Any) -> str:
    if value is True:
        return "true"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


def to_query_params(params: Optional[Mapping[str, Any]]) -> str:
    """Serialize a mapping into ``key=value&key2=value2``.

    Pairs with a falsy key or value are dropped, so ``None``, ``False``,
    ``0`` and empty strings or lists never reach the wire. Values are
    percent-encoded; lists are joined with commas first.

    >>> to_query_params({"ids": ["1:2", "3:4"], "depth": None, "scale": 2})
    'ids=1%3A2%2C3%3A4&scale=2'
    """
    if not params:
        return ""
    return "&".join(
        f"{key}={quote(_format_value(value), safe=_SAFE)}"
        for key, value in params.items()
        if key and value
    )
