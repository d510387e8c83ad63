"""
Vimeo API Client

Client library for the Vimeo REST API: OAuth, signed requests and
resumable (tus) uploads.

Public API:
    - VimeoClient: Requests, OAuth token exchange, upload/replace
    - UploadController: Blocking upload coordinator
    - UploadResult: Upload operation result
    - UploadStatus: Status codes
    - create_client: Factory function

Usage:
    from vimeo_api import VimeoClient

    client = VimeoClient(client_id, client_secret, access_token)
    url = client.build_authorization_endpoint("https://myapp.com/login", ["public", "upload"])

    client.upload(
        "/path/to/video.mp4",
        {"name": "My video"},
        on_complete=print,
    )
"""

from vimeo_api.client.vimeo_client import VimeoClient
from vimeo_api.constants import AUTH_ENDPOINTS, REQUEST_DEFAULTS, UploadStatus, __version__
from vimeo_api.controllers.upload_controller import UploadController
from vimeo_api.factory import create_client
from vimeo_api.interfaces.uploader_interface import UploaderError, UploadResult
from vimeo_api.models.response import VimeoRequestError, VimeoResponse

# Public API
__all__ = [
    "AUTH_ENDPOINTS",
    "REQUEST_DEFAULTS",
    "UploadController",
    "UploadResult",
    "UploadStatus",
    "UploaderError",
    "VimeoClient",
    "VimeoRequestError",
    "VimeoResponse",
    "__version__",
    "create_client",
]
