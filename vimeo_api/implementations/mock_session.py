"""
Mock Session Implementation

Stand-in for requests.Session that answers like the Vimeo API without
touching the network. Pairs with MockUploader for fully offline clients.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlsplit
from uuid import uuid4

import requests
from requests.structures import CaseInsensitiveDict

from vimeo_api.constants import AUTH_ENDPOINTS


class MockSession:
    """
    Fake HTTP session for testing.

    Built-in routes:
    - POST /me/videos: upload ticket with a fake tus upload link
    - POST /videos/{id}/versions: replace ticket
    - POST OAuth token endpoints: fake access token
    - GET /tutorial: connection check

    Anything else answers 200 with an empty JSON object, unless a canned
    response was registered with add_response().
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.responses: Dict[Tuple[str, str], Tuple[int, Any]] = {}

        # Track requests for testing
        self.request_history: list[dict] = []

    def add_response(self, method: str, path: str, status: int, body: Any) -> None:
        """
        Register a canned response.

        Example:
            session.add_response("GET", "/me", 401, {"error": "Unauthorized"})
        """
        self.responses[(method.upper(), path)] = (status, body)

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data: Any = None,
        timeout: Optional[float] = None,
        **kwargs,
    ) -> requests.Response:
        """Answer a request from the canned responses or built-in routes"""
        parts = urlsplit(url)
        method = method.upper()

        self.request_history.append(
            {
                "method": method,
                "url": url,
                "path": parts.path,
                "query": parts.query,
                "headers": dict(headers or {}),
                "data": data,
            }
        )
        self.logger.debug(f"[MOCK] {method} {url}")

        status, body = self._route(method, parts.path, data)
        return self._build_response(status, body, url)

    def _route(self, method: str, path: str, data: Any) -> Tuple[int, Any]:
        if (method, path) in self.responses:
            return self.responses[(method, path)]

        if method == "POST" and path in (
            AUTH_ENDPOINTS["access_token"],
            AUTH_ENDPOINTS["client_credentials"],
        ):
            return 200, {
                "access_token": f"mock_token_{uuid4().hex[:16]}",
                "token_type": "bearer",
                "scope": "public",
            }

        if method == "POST" and path == "/me/videos":
            video_id = uuid4().int % 10**9
            return 200, {
                "uri": f"/videos/{video_id}",
                "name": self._field(data, "name"),
                "upload": {
                    "approach": "tus",
                    "upload_link": f"https://files.tus.mock/upload/{video_id}",
                },
            }

        if method == "POST" and path.endswith("/versions"):
            return 200, {
                "upload": {
                    "approach": "tus",
                    "upload_link": f"https://files.tus.mock/replace/{uuid4().hex[:8]}",
                },
            }

        if method == "GET" and path == "/tutorial":
            return 200, {"message": "Success!", "token_is_authenticated": True}

        return 200, {}

    @staticmethod
    def _field(data: Any, key: str) -> Optional[str]:
        try:
            return json.loads(data).get(key)
        except (TypeError, ValueError, AttributeError):
            return None

    @staticmethod
    def _build_response(status: int, body: Any, url: str) -> requests.Response:
        response = requests.Response()
        response.status_code = status
        response.url = url
        response.encoding = "utf-8"
        if isinstance(body, (bytes, str)):
            content = body.encode("utf-8") if isinstance(body, str) else body
        else:
            content = json.dumps(body).encode("utf-8")
        response._content = content
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        return response

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_last_request(self) -> Optional[dict]:
        """Get most recent request, or None"""
        return self.request_history[-1] if self.request_history else None

    def clear_history(self) -> None:
        self.request_history.clear()

    def close(self) -> None:
        """Nothing to release; mirrors requests.Session.close()"""
