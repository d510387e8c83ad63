"""
Response Models

Result of a Vimeo API call and the error raised for failed HTTP statuses.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


class VimeoRequestError(Exception):
    """
    Exception for API calls answered with a 4xx/5xx status.

    The message is the raw response body, which for Vimeo is a JSON
    document describing the error.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.headers = dict(headers or {})


@dataclass
class VimeoResponse:
    """
    Outcome of one request, in the same order callbacks receive it.

    Attributes:
        error: Exception describing the failure, or None
        body: Decoded JSON on success, raw text on failure
        status: HTTP status code (None if the request never completed)
        headers: Response headers
    """

    error: Optional[BaseException] = None
    body: Any = None
    status: Optional[int] = None
    headers: Optional[Mapping[str, str]] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_tuple(self) -> tuple:
        return self.error, self.body, self.status, self.headers

    def raise_for_error(self) -> "VimeoResponse":
        """Raise the stored error, if any, otherwise return self"""
        if self.error is not None:
            raise self.error
        return self
