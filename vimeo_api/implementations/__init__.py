"""
Implementations Package

Concrete uploader implementations and offline test doubles.
"""

from vimeo_api.implementations.mock_session import MockSession
from vimeo_api.implementations.mock_uploader import MockUploader
from vimeo_api.implementations.tus_uploader import TusUploader

__all__ = [
    "MockSession",
    "MockUploader",
    "TusUploader",
]
