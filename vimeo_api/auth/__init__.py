"""
Authentication Package

OAuth 2.0 parameter builders for the Vimeo API.
"""

from vimeo_api.auth.oauth import (
    authorization_code_query,
    authorization_query,
    build_authorization_url,
    client_credentials_query,
    format_scope,
)

__all__ = [
    "authorization_code_query",
    "authorization_query",
    "build_authorization_url",
    "client_credentials_query",
    "format_scope",
]
