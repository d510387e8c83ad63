"""
Upload Controller

High-level coordinator for video uploads.
Wraps the callback-based VimeoClient upload flow in a blocking call that
returns an UploadResult, for callers that don't want to juggle callbacks.
"""

import logging
import os
import time
from typing import Any, Dict, Optional

from vimeo_api.client.vimeo_client import VimeoClient
from vimeo_api.constants import (
    CONNECTION_TEST_PATH,
    FILE_NOT_FOUND_MESSAGE,
    UploadStatus,
)
from vimeo_api.factory import create_client
from vimeo_api.interfaces.uploader_interface import (
    ProgressCallback,
    UploaderError,
    UploadResult,
)


class UploadController:
    """
    High-level video upload controller.

    This class:
    - Validates the file before asking for an upload ticket
    - Runs the upload and collects the callback outcome
    - Maps failures to UploadStatus codes
    - Provides connection testing

    Usage:
        controller = UploadController()

        result = controller.upload_video(
            video_path="/path/to/video.mp4",
            name="Rehearsal",
        )

        if result.success:
            print(f"Uploaded: {result.video_uri}")
    """

    def __init__(
        self,
        client: Optional[VimeoClient] = None,
        default_params: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize upload controller.

        Args:
            client: VimeoClient to use, or None to auto-create from .env
            default_params: Video parameters merged into every upload
                (e.g. {"privacy": {"view": "unlisted"}})

        Example:
            # Normal usage - auto-creates from .env
            controller = UploadController()

            # Offline client (testing)
            controller = UploadController(client=create_client(force_mock=True))
        """
        self.logger = logging.getLogger(__name__)

        self.client = client or create_client()
        self.default_params = dict(default_params or {})

        if not self.is_ready():
            self.logger.warning(
                "Upload Controller has no access token. "
                "Uploads need a token with the 'upload' scope."
            )

        self.logger.info("Upload Controller initialized")

    def upload_video(
        self,
        video_path: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> UploadResult:
        """
        Upload a new video and wait for completion.

        Args:
            video_path: Path to video file
            name: Video title (default: file name without extension)
            description: Video description (optional)
            params: Extra video parameters, merged over default_params
            on_progress: Called with (bytes_uploaded, bytes_total)

        Returns:
            UploadResult with success status and details
        """
        video_params = {**self.default_params, **(params or {})}
        video_params["name"] = name or os.path.splitext(os.path.basename(video_path))[0]
        if description:
            video_params["description"] = description

        self.logger.info(f"Uploading video: {video_path}")
        self.logger.debug(f"Params: {video_params}")

        return self._run(
            video_path,
            lambda done, progress, fail: self.client.upload(
                video_path,
                video_params,
                done,
                progress,
                fail,
            ),
            on_progress,
        )

    def replace_video(
        self,
        video_path: str,
        video_uri: str,
        params: Optional[Dict[str, Any]] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> UploadResult:
        """
        Replace the source file of an existing video and wait for completion.

        Args:
            video_path: Path to the new video file
            video_uri: URI of the video to replace, e.g. /videos/12345
            params: Extra version parameters
            on_progress: Called with (bytes_uploaded, bytes_total)
        """
        self.logger.info(f"Replacing {video_uri} with {video_path}")

        return self._run(
            video_path,
            lambda done, progress, fail: self.client.replace(
                video_path,
                video_uri,
                dict(params or {}),
                done,
                progress,
                fail,
            ),
            on_progress,
        )

    def _run(self, video_path, start, on_progress) -> UploadResult:
        """
        Validate, start the upload and turn callbacks into an UploadResult.

        The client reports synchronously, so the outcome is known once
        start() returns.
        """
        start_time = time.time()
        outcome: Dict[str, Any] = {}

        try:
            file_size = self._validate_video_file(video_path)
        except UploaderError as e:
            self.logger.error(f"Upload failed: {e}")
            return UploadResult(
                success=False,
                status=e.status,
                error_message=str(e),
            )

        if not self.is_ready():
            return UploadResult(
                success=False,
                status=UploadStatus.AUTH_ERROR,
                error_message="No access token configured",
                file_size=file_size,
            )

        start(
            lambda uri: outcome.update(uri=uri),
            on_progress,
            lambda error: outcome.update(error=error),
        )

        upload_duration = time.time() - start_time

        if "error" in outcome or "uri" not in outcome:
            error = outcome.get("error", "Upload did not report completion")
            status = self._parse_error(error)
            self.logger.error(
                f"❌ Upload failed: {error} (status: {status.value})"
            )
            return UploadResult(
                success=False,
                status=status,
                error_message=str(error),
                upload_duration=upload_duration,
                file_size=file_size,
            )

        self.logger.info(
            f"✅ Upload successful: {outcome['uri']} "
            f"({upload_duration:.1f}s, {file_size / (1024 * 1024):.1f} MB)"
        )
        return UploadResult(
            success=True,
            video_uri=outcome["uri"],
            status=UploadStatus.SUCCESS,
            upload_duration=upload_duration,
            file_size=file_size,
        )

    def _validate_video_file(self, video_path: str) -> int:
        """
        Validate video file before upload.

        Returns:
            File size in bytes

        Raises:
            UploaderError: If file is missing or empty
        """
        if not os.path.isfile(video_path):
            raise UploaderError(
                f"Video file not found: {video_path}",
                status=UploadStatus.INVALID_FILE,
            )

        file_size = os.path.getsize(video_path)
        if file_size == 0:
            raise UploaderError(
                f"Video file is empty: {video_path}",
                status=UploadStatus.INVALID_FILE,
            )

        self.logger.debug(f"Video file validated: {video_path} ({file_size} bytes)")
        return file_size

    def _parse_error(self, error: Any) -> UploadStatus:
        """
        Determine the status code for an error reported by the client.

        Returns:
            Appropriate UploadStatus enum
        """
        if isinstance(error, UploaderError):
            return error.status
        if error == FILE_NOT_FOUND_MESSAGE:
            return UploadStatus.INVALID_FILE
        return UploadStatus.FAILED

    def test_connection(self) -> bool:
        """
        Test connection to the Vimeo API.

        Calls the /tutorial endpoint, which needs a valid token but does
        nothing else.

        Returns:
            True if connection successful
        """
        self.logger.info("Testing Vimeo connection...")

        response = self.client.request(CONNECTION_TEST_PATH)
        if response.ok:
            self.logger.info("✅ Connection test passed")
            return True

        self.logger.warning(f"❌ Connection test failed: {response.error}")
        return False

    def is_ready(self) -> bool:
        """True if the client has an access token to upload with"""
        return bool(self.client.access_token)

    def get_status(self) -> Dict[str, Any]:
        """
        Get current controller status.

        Example:
            status = controller.get_status()
            print(f"Ready: {status['ready']}")
        """
        return {
            "ready": self.is_ready(),
            "default_params": dict(self.default_params),
            "uploader_type": type(self.client.uploader).__name__,
        }
