"""
Canonical Query Serialization

Produces the exact byte string that is both hashed and emitted as the URL
query. The build path and the verify path must go through this module so
that the two sides agree bit-for-bit:
- Empty values (None, "", 0, False) are dropped
- Keys sorted by ordinal string comparison (locale independent)
- Keys and values form-urlencoded (space -> "+", UTF-8 percent escapes)
"""
from enum import Enum
from numbers import Number
from typing import Any, List, Mapping, Tuple
from urllib.parse import quote_plus


def is_empty(value: Any) -> bool:
    """Values that never reach the canonical query."""
    return value is None or value == "" or value is False or (
        isinstance(value, Number) and value == 0
    )


def value_to_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def form_encode(text: str) -> str:
    """
    application/x-www-form-urlencoded serializer.

    Matches the WHATWG form serializer VNPay's reference clients use:
    '*' stays literal and '~' is escaped, unlike quote_plus defaults.
    """
    return quote_plus(text, safe="*").replace("~", "%7E")


def canonicalize(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Turn a parameter mapping into sorted, encoded (key, value) pairs.

    Args:
        params: Field name to raw value

    Returns:
        Pairs ascending by key, empty values removed
    """
    # Ordinal key order, never locale collation
    return [
        (form_encode(str(key)), form_encode(value_to_text(value)))
        for key, value in sorted(params.items(), key=lambda item: str(item[0]))
        if not is_empty(value)
    ]


def to_query_string(params: Mapping[str, Any]) -> str:
    """Canonical "k1=v1&k2=v2" string used for signing and for the URL."""
    return "&".join(f"{key}={value}" for key, value in canonicalize(params))
