"""
OAuth Helpers

Builds the parameters for Vimeo's OAuth 2.0 flows:
1. Authorization code: send the user to build_authorization_url(), then
   exchange the returned code (authorization_code_query)
2. Client credentials: unauthenticated app-level token
   (client_credentials_query)

The network side lives in VimeoClient; these helpers only shape queries.
"""

from typing import Dict, Iterable, Optional, Union

from vimeo_api.constants import (
    AUTH_ENDPOINTS,
    DEFAULT_SCOPE,
    GRANT_TYPE_AUTHORIZATION_CODE,
    GRANT_TYPE_CLIENT_CREDENTIALS,
    REQUEST_DEFAULTS,
)
from vimeo_api.utils.query_utils import encode_query

Scope = Union[str, Iterable[str], None]


def format_scope(scope: Scope = None) -> str:
    """
    Normalize a scope argument to Vimeo's space-separated form.

    Example:
        format_scope(["public", "private"])  # "public private"
        format_scope("public upload")        # "public upload"
        format_scope()                       # "public"
    """
    if not scope:
        return DEFAULT_SCOPE
    if isinstance(scope, str):
        return scope
    return " ".join(scope)


def authorization_query(
    client_id: Optional[str],
    redirect_uri: str,
    scope: Scope = None,
    state: Optional[str] = None,
) -> Dict[str, str]:
    """Query parameters for the authorization endpoint"""
    query = {
        "response_type": "code",
        "client_id": client_id or "",
        "redirect_uri": redirect_uri,
        "scope": format_scope(scope),
    }
    if state:
        query["state"] = state
    return query


def build_authorization_url(
    client_id: Optional[str],
    redirect_uri: str,
    scope: Scope = None,
    state: Optional[str] = None,
    hostname: Optional[str] = None,
) -> str:
    """
    Build the URL users visit to grant the application access.

    Args:
        client_id: Application client identifier
        redirect_uri: Where Vimeo sends the user (with ?code=...) afterwards
        scope: Space-separated string or list of scopes (default: public)
        state: Opaque CSRF token echoed back on redirect
        hostname: Override the API host (defaults to api.vimeo.com)

    Returns:
        Absolute authorization URL

    Example:
        build_authorization_url("abc123", "https://myapp.com/login", ["public"])
        # https://api.vimeo.com/oauth/authorize?response_type=code&client_id=abc123&...
    """
    query = authorization_query(client_id, redirect_uri, scope, state)
    return (
        f"{REQUEST_DEFAULTS['protocol']}://"
        f"{hostname or REQUEST_DEFAULTS['hostname']}"
        f"{AUTH_ENDPOINTS['authorization']}?{encode_query(query)}"
    )


def client_credentials_query(scope: Scope = None) -> Dict[str, str]:
    """Form parameters for the client credentials grant"""
    return {
        "grant_type": GRANT_TYPE_CLIENT_CREDENTIALS,
        "scope": format_scope(scope),
    }


def authorization_code_query(code: str, redirect_uri: str) -> Dict[str, str]:
    """Form parameters for exchanging an authorization code"""
    return {
        "grant_type": GRANT_TYPE_AUTHORIZATION_CODE,
        "code": code,
        "redirect_uri": redirect_uri,
    }
