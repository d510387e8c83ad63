"""
Configuration Package

Environment-driven settings for the Vimeo client.
"""

from vimeo_api.config import settings

__all__ = [
    "settings",
]
