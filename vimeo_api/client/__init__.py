"""
Client Package

Request construction and the Vimeo API client.
"""

from vimeo_api.client.vimeo_client import VimeoClient

__all__ = [
    "VimeoClient",
]
