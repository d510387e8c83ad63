"""
Utilities Package

Helper functions for request construction.
"""

from vimeo_api.utils.query_utils import encode_query, flatten_query

__all__ = [
    "encode_query",
    "flatten_query",
]
