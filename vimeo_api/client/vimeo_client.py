"""
Vimeo Client

Signed requests against the Vimeo REST API, OAuth token exchange and
resumable uploads.

Flow of an upload:
1. Ask the API for an upload ticket (POST /me/videos, approach=tus)
2. Hand the file to the resumable uploader with the returned upload_link
3. Report completion with the new video URI

Every call reports through callbacks with the same arguments the
underlying request produced. Nothing is retried or reclassified here.
"""

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

import requests

from vimeo_api.auth.oauth import (
    Scope,
    authorization_code_query,
    build_authorization_url,
    client_credentials_query,
)
from vimeo_api.client.request_builder import build_request_options, encode_body
from vimeo_api.constants import (
    AUTH_ENDPOINTS,
    CONTENT_TYPE_FORM,
    FILE_NOT_FOUND_MESSAGE,
    HTTP_TIMEOUT,
    MISSING_PATH_MESSAGE,
    REPLACE_TICKET_SUFFIX,
    REQUEST_DEFAULTS,
    UPLOAD_APPROACH,
    UPLOAD_INIT_FAILED_MESSAGE,
    UPLOAD_TICKET_PATH,
)
from vimeo_api.implementations.tus_uploader import TusUploader
from vimeo_api.interfaces.uploader_interface import (
    ProgressCallback,
    ResumableUploaderInterface,
)
from vimeo_api.models.request_options import RequestOptions
from vimeo_api.models.response import VimeoRequestError, VimeoResponse
from vimeo_api.models.upload_descriptor import UploadDescriptor, UploadSource

# callback(error, body, status, headers)
RequestCallback = Callable[[Optional[BaseException], Any, Optional[int], Any], None]
CompleteCallback = Callable[[str], None]
ErrorCallback = Callable[[Any], None]


class VimeoClient:
    """
    Client for the Vimeo API.

    Usage:
        client = VimeoClient(client_id, client_secret, access_token)

        response = client.request("/me")
        if response.ok:
            print(response.body["name"])

        client.upload(
            "/path/to/video.mp4",
            {"name": "My video"},
            on_complete=lambda uri: print(f"Uploaded: {uri}"),
            on_progress=lambda sent, total: print(f"{sent}/{total}"),
            on_error=lambda error: print(f"Failed: {error}"),
        )
    """

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        uploader: Optional[ResumableUploaderInterface] = None,
        timeout: float = HTTP_TIMEOUT,
        hostname: Optional[str] = None,
    ):
        """
        Initialize Vimeo client.

        Args:
            client_id: Application client identifier
            client_secret: Application client secret
            access_token: OAuth access token (optional; without one the
                client authenticates with client id/secret)
            session: requests session to send through (default: new session)
            uploader: Resumable uploader for the byte transfer
                (default: TusUploader)
            timeout: HTTP timeout in seconds
            hostname: API host used when a request names none
                (default: api.vimeo.com)
        """
        self.logger = logging.getLogger(__name__)

        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout
        self.hostname = hostname or REQUEST_DEFAULTS["hostname"]

        self.uploader = uploader or TusUploader()

        self.logger.debug(
            f"Vimeo client initialized (token: {'yes' if access_token else 'no'})"
        )

    def set_access_token(self, access_token: Optional[str]) -> None:
        """Use a new access token for all following requests"""
        self.access_token = access_token

    # =========================================================================
    # REQUESTS
    # =========================================================================

    def request(
        self,
        options: Union[str, Mapping[str, Any], RequestOptions, None],
        callback: Optional[RequestCallback] = None,
    ) -> VimeoResponse:
        """
        Send one API request.

        Args:
            options: A path ("/me/videos") or a mapping with any of
                method, path, query, headers, hostname, port, protocol
            callback: Called as callback(error, body, status, headers)

        Returns:
            VimeoResponse with the same four values the callback receives

        Example:
            client.request(
                {"method": "PATCH", "path": "/videos/1", "query": {"name": "New"}},
                lambda err, body, status, headers: ...,
            )
        """
        request_options = RequestOptions.coerce(options)

        if not isinstance(request_options.path, str):
            return self._finish(
                VimeoResponse(error=ValueError(MISSING_PATH_MESSAGE)),
                callback,
            )

        if not request_options.path.startswith("/"):
            request_options.path = f"/{request_options.path}"
        if not request_options.hostname:
            request_options.hostname = self.hostname

        prepared = encode_body(
            build_request_options(
                request_options,
                client_id=self.client_id,
                client_secret=self.client_secret,
                access_token=self.access_token,
            )
        )

        self.logger.debug(f"{prepared.method} {prepared.url}")

        try:
            http_response = self.session.request(
                prepared.method,
                prepared.url,
                headers=prepared.headers,
                data=prepared.body or None,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.error(f"Request failed: {prepared.method} {prepared.path}: {e}")
            return self._finish(VimeoResponse(error=e), callback)

        return self._finish(self._handle_response(http_response), callback)

    def _handle_response(self, http_response: requests.Response) -> VimeoResponse:
        """
        Convert an HTTP response into a VimeoResponse.

        - status >= 400: VimeoRequestError carrying the raw body
        - otherwise: JSON-decoded body ({} when empty)
        """
        status = http_response.status_code
        headers = dict(http_response.headers)
        text = http_response.text

        if status >= 400:
            self.logger.warning(f"API error {status}: {text[:200]}")
            return VimeoResponse(
                error=VimeoRequestError(text, status_code=status, headers=headers),
                body=text,
                status=status,
                headers=headers,
            )

        try:
            body = json.loads(text) if text else {}
        except ValueError as e:
            self.logger.warning(f"Invalid JSON in {status} response: {e}")
            return VimeoResponse(error=e, body=text, status=status, headers=headers)

        return VimeoResponse(body=body, status=status, headers=headers)

    @staticmethod
    def _finish(
        response: VimeoResponse,
        callback: Optional[RequestCallback],
    ) -> VimeoResponse:
        if callback:
            callback(*response.as_tuple())
        return response

    # =========================================================================
    # AUTHENTICATION
    # =========================================================================

    def build_authorization_endpoint(
        self,
        redirect_uri: str,
        scope: Scope = None,
        state: Optional[str] = None,
    ) -> str:
        """
        URL to send users to for the authorization code flow.

        Args:
            redirect_uri: Registered redirect URI of the app
            scope: List or space-separated string (default: "public")
            state: CSRF token, echoed back on redirect

        Returns:
            Absolute URL on the API host
        """
        return build_authorization_url(
            self.client_id,
            redirect_uri,
            scope=scope,
            state=state,
            hostname=self.hostname,
        )

    def generate_client_credentials(
        self,
        scope: Scope = None,
        callback: Optional[RequestCallback] = None,
    ) -> VimeoResponse:
        """
        Request an unauthenticated (app-level) access token.

        The callback receives (error, None, status, headers) on failure and
        (None, body, status, headers) on success. The token is in
        body["access_token"]; the client does not store it.
        """
        return self._token_request(
            AUTH_ENDPOINTS["client_credentials"],
            client_credentials_query(scope),
            callback,
        )

    def exchange_code(
        self,
        code: str,
        redirect_uri: str,
        callback: Optional[RequestCallback] = None,
    ) -> VimeoResponse:
        """
        Exchange an authorization code for an access token.

        Args:
            code: The ?code= value Vimeo appended to redirect_uri
            redirect_uri: Same redirect URI used to build the authorization URL
            callback: Same contract as generate_client_credentials()
        """
        return self._token_request(
            AUTH_ENDPOINTS["access_token"],
            authorization_code_query(code, redirect_uri),
            callback,
        )

    def _token_request(
        self,
        path: str,
        query: Dict[str, str],
        callback: Optional[RequestCallback],
    ) -> VimeoResponse:
        """POST a form-encoded grant to an OAuth endpoint"""
        result = {}

        def forward(error, body, status, headers):
            response = VimeoResponse(
                error=error,
                body=None if error else body,
                status=status,
                headers=headers,
            )
            result["response"] = response
            if callback:
                callback(*response.as_tuple())

        self.logger.info(f"Requesting token ({query['grant_type']})")
        self.request(
            {
                "method": "POST",
                "hostname": self.hostname,
                "path": path,
                "query": query,
                "headers": {"Content-Type": CONTENT_TYPE_FORM},
            },
            forward,
        )
        return result.get("response", VimeoResponse())

    # =========================================================================
    # UPLOADS
    # =========================================================================

    def upload(
        self,
        file: UploadSource,
        params: Optional[Dict[str, Any]] = None,
        on_complete: Optional[CompleteCallback] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """
        Upload a new video.

        Args:
            file: Path or open binary stream
            params: Video metadata (name, description, privacy, ...).
                Any upload.approach / upload.size is overridden.
            on_complete: Called with the new video URI
            on_progress: Called with (bytes_uploaded, bytes_total)
            on_error: Called with an error message or exception
        """
        on_error = on_error or self._log_error

        descriptor = self._describe(file, on_error)
        if descriptor is None:
            return

        params = self._with_upload_params(params, descriptor)

        self.logger.info(f"Requesting upload ticket ({descriptor.size} bytes)")

        def on_ticket(error, attempt, status, headers):
            if error:
                on_error(UPLOAD_INIT_FAILED_MESSAGE.format(error=error))
                return
            self._perform_tus_upload(
                file,
                descriptor.size,
                attempt,
                on_complete,
                on_progress,
                on_error,
            )

        self.request(
            {
                "method": "POST",
                "path": UPLOAD_TICKET_PATH,
                "query": params,
            },
            on_ticket,
        )

    def replace(
        self,
        file: UploadSource,
        video_uri: str,
        params: Optional[Dict[str, Any]] = None,
        on_complete: Optional[CompleteCallback] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """
        Upload a new version of an existing video.

        Same callbacks as upload(); on_complete receives video_uri.

        Args:
            file: Path or open binary stream
            video_uri: URI of the video to replace, e.g. /videos/12345
            params: Extra version parameters
        """
        on_error = on_error or self._log_error

        descriptor = self._describe(file, on_error)
        if descriptor is None:
            return

        params = self._with_upload_params(params, descriptor)
        if descriptor.file_name:
            params["file_name"] = descriptor.file_name

        self.logger.info(f"Requesting replace ticket for {video_uri}")

        def on_ticket(error, attempt, status, headers):
            if error:
                on_error(UPLOAD_INIT_FAILED_MESSAGE.format(error=error))
                return
            attempt["uri"] = video_uri
            self._perform_tus_upload(
                file,
                descriptor.size,
                attempt,
                on_complete,
                on_progress,
                on_error,
            )

        self.request(
            {
                "method": "POST",
                "path": f"{video_uri}{REPLACE_TICKET_SUFFIX}",
                "query": params,
            },
            on_ticket,
        )

    def _perform_tus_upload(
        self,
        file: UploadSource,
        file_size: int,
        attempt: Dict[str, Any],
        on_complete: Optional[CompleteCallback],
        on_progress: Optional[ProgressCallback],
        on_error: ErrorCallback,
    ) -> None:
        """
        Send the bytes to the upload link from the ticket.

        Args:
            attempt: Ticket body; needs upload.upload_link and uri
        """
        try:
            upload_link = attempt["upload"]["upload_link"]
        except (KeyError, TypeError):
            on_error(f"Upload ticket has no upload link: {attempt}")
            return

        try:
            self.uploader.upload(file, file_size, upload_link, on_progress)
        except Exception as e:
            self.logger.error(f"Upload to {upload_link} failed: {e}")
            on_error(e)
            return

        self.logger.info(f"Upload complete: {attempt.get('uri')}")
        if on_complete:
            on_complete(attempt.get("uri"))

    def _describe(
        self,
        file: UploadSource,
        on_error: ErrorCallback,
    ) -> Optional[UploadDescriptor]:
        """Size the file, reporting FILE_NOT_FOUND_MESSAGE on failure"""
        try:
            return UploadDescriptor.from_source(file)
        except (OSError, ValueError, AttributeError) as e:
            self.logger.error(f"Cannot size upload source {file!r}: {e}")
            on_error(FILE_NOT_FOUND_MESSAGE)
            return None

    @staticmethod
    def _with_upload_params(
        params: Optional[Dict[str, Any]],
        descriptor: UploadDescriptor,
    ) -> Dict[str, Any]:
        """Copy params with upload.approach/size forced to tus and the real size"""
        params = dict(params or {})
        upload = dict(params.get("upload") or {})
        upload["approach"] = UPLOAD_APPROACH
        upload["size"] = descriptor.size
        params["upload"] = upload
        return params

    def _log_error(self, error: Any) -> None:
        self.logger.error(f"Upload error: {error}")
