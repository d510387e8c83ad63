"""
Models Package

Data classes shared across the client.
"""

from vimeo_api.models.request_options import RequestOptions
from vimeo_api.models.response import VimeoRequestError, VimeoResponse
from vimeo_api.models.upload_descriptor import UploadDescriptor

__all__ = [
    "RequestOptions",
    "UploadDescriptor",
    "VimeoRequestError",
    "VimeoResponse",
]
