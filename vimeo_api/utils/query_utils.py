"""
Query Utilities

URL-encoding helpers shared by the request builder and the OAuth helpers.
"""

from typing import Any, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode


def flatten_query(
    query: Mapping[str, Any],
    prefix: Optional[str] = None,
) -> Iterator[Tuple[str, Any]]:
    """
    Yield (key, value) pairs ready for urlencode.

    Nested mappings become key[sub] pairs, booleans become "true"/"false"
    and None becomes an empty value.

    Example:
        list(flatten_query({"upload": {"approach": "tus"}}))
        # [("upload[approach]", "tus")]
    """
    for key, value in query.items():
        full_key = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            yield from flatten_query(value, full_key)
        elif isinstance(value, bool):
            yield full_key, "true" if value else "false"
        elif value is None:
            yield full_key, ""
        else:
            yield full_key, value


def encode_query(query: Mapping[str, Any]) -> str:
    """
    URL-encode a query mapping.

    Spaces are encoded as %20 (not "+") so scope lists survive intact.
    Lists repeat the key once per item.

    Example:
        encode_query({"scope": "public private"})
        # Returns: "scope=public%20private"
    """
    pairs: List[Tuple[str, Any]] = list(flatten_query(query))
    return urlencode(pairs, doseq=True, quote_via=quote)
