"""
Vimeo API Constants

Centralized configuration for the Vimeo client.
Request defaults, OAuth endpoints and upload settings live here so every
module builds requests the same way.
"""

from enum import Enum

__version__ = "1.0.0"

# =============================================================================
# REQUEST DEFAULTS
# =============================================================================

# Every request falls back to these values when the caller does not set them
REQUEST_DEFAULTS = {
    "protocol": "https",
    "hostname": "api.vimeo.com",
    "port": 443,
    "method": "GET",
    "query": {},
    "headers": {
        # Pin the API version so response shapes don't change under us
        "Accept": "application/vnd.vimeo.*+json;version=3.4",
        "User-Agent": f"vimeo-api-client/{__version__}",
    },
}

# Ports that are implied by the protocol and left out of URLs
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}

# Methods whose query is sent as the request body instead of the URL
BODY_METHODS = ("POST", "PATCH", "PUT", "DELETE")

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# =============================================================================
# OAUTH CONFIGURATION
# =============================================================================

# https://developer.vimeo.com/api/authentication
AUTH_ENDPOINTS = {
    "authorization": "/oauth/authorize",
    "access_token": "/oauth/access_token",
    "client_credentials": "/oauth/authorize/client",
}

DEFAULT_SCOPE = "public"

GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"
GRANT_TYPE_AUTHORIZATION_CODE = "authorization_code"

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Vimeo only hands out tus upload links; other approaches are overridden
UPLOAD_APPROACH = "tus"

# Field filtering keeps the ticket response down to what the upload needs
UPLOAD_TICKET_PATH = "/me/videos?fields=uri,name,upload"
REPLACE_TICKET_SUFFIX = "/versions?fields=upload"

# Seconds to wait before each retry of a failed chunk
TUS_RETRY_DELAYS = [0, 1, 3, 5]

# Chunk size for resumable uploads (in bytes)
UPLOAD_CHUNK_SIZE = 128 * 1024 * 1024  # 128 MB

# HTTP request timeout (seconds)
HTTP_TIMEOUT = 30

# Lightweight authenticated endpoint used for connection checks
CONNECTION_TEST_PATH = "/tutorial"

# =============================================================================
# ERROR MESSAGES
# =============================================================================

MISSING_PATH_MESSAGE = "You must provide an API path."
FILE_NOT_FOUND_MESSAGE = "Unable to locate file to upload."
UPLOAD_INIT_FAILED_MESSAGE = "Unable to initiate an upload. [{error}]"

# =============================================================================
# UPLOAD STATUS
# =============================================================================


class UploadStatus(Enum):
    """Upload operation status codes"""

    SUCCESS = "success"
    FAILED = "failed"
    AUTH_ERROR = "auth_error"
    NETWORK_ERROR = "network_error"
    INVALID_FILE = "invalid_file"
