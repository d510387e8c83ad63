"""
Request Builder

Turns caller-supplied request options into fully specified requests:
defaults applied, Authorization header set, query placed in the URL or
the body depending on the method.

All functions here are pure. They never touch the network, which keeps
request construction testable on its own.
"""

import base64
import json
import logging
from typing import Any, Dict, Mapping, Optional

from vimeo_api.constants import (
    CONTENT_TYPE_JSON,
    REQUEST_DEFAULTS,
)
from vimeo_api.models.request_options import RequestOptions
from vimeo_api.utils.query_utils import encode_query

logger = logging.getLogger(__name__)


def apply_default_request_options(options: RequestOptions) -> RequestOptions:
    """
    Fill in everything the caller left out from REQUEST_DEFAULTS.

    Caller headers always win over default headers.

    Args:
        options: Caller request options

    Returns:
        New RequestOptions with protocol, hostname, port, method and
        headers populated
    """
    headers: Dict[str, str] = dict(options.headers or {})
    for key, value in REQUEST_DEFAULTS["headers"].items():
        if not headers.get(key):
            headers[key] = value

    return RequestOptions(
        path=options.path,
        method=options.method or REQUEST_DEFAULTS["method"],
        protocol=options.protocol or REQUEST_DEFAULTS["protocol"],
        hostname=options.hostname or REQUEST_DEFAULTS["hostname"],
        port=options.port or REQUEST_DEFAULTS["port"],
        query=dict(options.query or {}),
        headers=headers,
        body="",
    )


def apply_querystring_params(path: str, query: Optional[Mapping[str, Any]]) -> str:
    """
    Append query parameters to a path.

    Args:
        path: Request path, possibly already carrying a query string
        query: Parameters to append

    Returns:
        Path with the encoded query appended ("&" if it already had "?")
    """
    if not query:
        return path

    querystring = encode_query(query)
    if "?" in path:
        return f"{path}&{querystring}"
    return f"{path}?{querystring}"


def authorization_header(
    client_id: Optional[str],
    client_secret: Optional[str],
    access_token: Optional[str],
) -> Optional[str]:
    """
    Build the Authorization header value for the current credentials.

    An access token takes precedence. Without one, client id and secret
    are sent as HTTP Basic credentials (used by the OAuth endpoints).

    Returns:
        Header value, or None for unauthenticated requests
    """
    if access_token:
        return f"Bearer {access_token}"

    if client_id and client_secret:
        basic_token = base64.b64encode(f"{client_id}:{client_secret}".encode("utf-8"))
        return f"Basic {basic_token.decode('ascii')}"

    return None


def build_request_options(
    options: RequestOptions,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    access_token: Optional[str] = None,
) -> RequestOptions:
    """
    Turn caller options into options ready to send.

    - Defaults applied
    - Authorization header set from the credentials
    - Body methods default to a JSON Content-Type
    - GET requests carry the query in the URL

    Args:
        options: Caller options (path must already be validated)
        client_id: Application client identifier
        client_secret: Application client secret
        access_token: OAuth access token

    Returns:
        RequestOptions for the transport
    """
    request_options = apply_default_request_options(options)

    auth_value = authorization_header(client_id, client_secret, access_token)
    if auth_value:
        request_options.headers["Authorization"] = auth_value

    if request_options.has_body_method:
        if not request_options.headers.get("Content-Type"):
            request_options.headers["Content-Type"] = CONTENT_TYPE_JSON
    elif request_options.method == "GET":
        request_options.path = apply_querystring_params(
            request_options.path,
            options.query,
        )

    return request_options


def encode_body(request_options: RequestOptions) -> RequestOptions:
    """
    Serialize the query into the request body for body methods.

    JSON when the Content-Type is application/json, form-encoded
    otherwise. Content-Length always reflects the encoded body.

    Args:
        request_options: Output of build_request_options (modified in place)

    Returns:
        The same RequestOptions, for chaining
    """
    if not request_options.has_body_method:
        return request_options

    query = request_options.query
    if not query:
        body = ""
    elif request_options.headers.get("Content-Type") == CONTENT_TYPE_JSON:
        body = json.dumps(query)
    else:
        body = encode_query(query)

    request_options.body = body
    request_options.headers["Content-Length"] = str(len(body.encode("utf-8")))

    logger.debug(
        f"Encoded {request_options.method} body "
        f"({request_options.headers['Content-Length']} bytes)"
    )
    return request_options
