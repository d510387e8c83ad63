"""
Central Configuration File

Runtime configuration for the Vimeo client. Values come from the
environment (optionally a .env file) and fall back to the defaults in
vimeo_api.constants.

Guidelines:
- Secrets (client secret, access tokens) belong in .env, NOT here
- Import these settings in modules: from vimeo_api.config import settings
"""

import os

from dotenv import load_dotenv

from vimeo_api.constants import HTTP_TIMEOUT, REQUEST_DEFAULTS, UPLOAD_CHUNK_SIZE

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# API CONFIGURATION
# =============================================================================

VIMEO_API_HOSTNAME = os.getenv("VIMEO_API_HOSTNAME", REQUEST_DEFAULTS["hostname"])

# HTTP request timeout (seconds)
VIMEO_HTTP_TIMEOUT = float(os.getenv("VIMEO_HTTP_TIMEOUT", str(HTTP_TIMEOUT)))

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

VIMEO_UPLOAD_CHUNK_SIZE = int(
    os.getenv("VIMEO_UPLOAD_CHUNK_SIZE", str(UPLOAD_CHUNK_SIZE))
)

# =============================================================================
# SECRETS (loaded from .env)
# =============================================================================
# IMPORTANT: These should NEVER be committed to version control!
# Create a .env file in the project root with these values
# Apps are registered at https://developer.vimeo.com/apps

VIMEO_CLIENT_ID = os.getenv("VIMEO_CLIENT_ID", "")
VIMEO_CLIENT_SECRET = os.getenv("VIMEO_CLIENT_SECRET", "")
VIMEO_ACCESS_TOKEN = os.getenv("VIMEO_ACCESS_TOKEN", "")  # Optional
