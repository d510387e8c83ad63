"""
Request Options Model

Data class describing a single Vimeo API request before it is sent.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from vimeo_api.constants import BODY_METHODS, DEFAULT_PORTS


@dataclass
class RequestOptions:
    """
    Everything needed to send one API request.

    Fields left as None are filled from REQUEST_DEFAULTS by the
    request builder.
    """

    path: Optional[str] = None
    method: Optional[str] = None
    protocol: Optional[str] = None
    hostname: Optional[str] = None
    port: Optional[int] = None
    query: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Union[str, bytes] = ""

    def __post_init__(self):
        """Normalize method and protocol spelling"""
        if self.method:
            self.method = self.method.upper()
        if self.protocol:
            # Accept node-style "https:" as well as "https"
            self.protocol = self.protocol.rstrip(":").lower()
        if self.query is None:
            self.query = {}
        if self.headers is None:
            self.headers = {}

    @classmethod
    def coerce(
        cls,
        value: Union[str, Mapping[str, Any], "RequestOptions", None],
    ) -> "RequestOptions":
        """
        Build options from a bare path, a mapping, or existing options.

        A bare string is treated as a GET on that path. Anything that is
        not a mapping (None included) gives options without a path.

        Example:
            RequestOptions.coerce("/me/videos")
            RequestOptions.coerce({"method": "POST", "path": "/me/videos"})
        """
        if isinstance(value, RequestOptions):
            return value

        if isinstance(value, str):
            return cls(path=value, method="GET")

        if not isinstance(value, Mapping):
            return cls()

        return cls(
            path=value.get("path"),
            method=value.get("method"),
            protocol=value.get("protocol"),
            hostname=value.get("hostname") or value.get("host"),
            port=value.get("port"),
            query=dict(value.get("query") or {}),
            headers=dict(value.get("headers") or {}),
            body=value.get("body", ""),
        )

    @property
    def has_body_method(self) -> bool:
        return self.method in BODY_METHODS

    @property
    def url(self) -> str:
        """Absolute URL for this request (default ports omitted)"""
        netloc = self.hostname or ""
        if self.port and DEFAULT_PORTS.get(self.protocol) != int(self.port):
            netloc = f"{netloc}:{self.port}"
        return f"{self.protocol}://{netloc}{self.path or ''}"
