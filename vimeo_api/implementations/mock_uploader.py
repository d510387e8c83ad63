"""
Mock Uploader Implementation

Simulated resumable uploader for testing without a tus server.
"""

import logging
import random
import time
from typing import Optional

from vimeo_api.constants import UploadStatus
from vimeo_api.interfaces.uploader_interface import (
    ProgressCallback,
    ResumableUploaderInterface,
    UploaderError,
)
from vimeo_api.models.upload_descriptor import UploadSource


class MockUploader(ResumableUploaderInterface):
    """
    Mock resumable uploader for testing.

    This simulates chunked progress without sending any bytes.
    Useful for:
    - Unit tests
    - Development without Vimeo credentials
    - CI/CD pipelines
    """

    def __init__(
        self,
        chunk_size: int = 1024 * 1024,
        fail_rate: float = 0.0,
    ):
        """
        Initialize mock uploader.

        Args:
            chunk_size: Simulated chunk size used for progress callbacks
            fail_rate: Probability of upload failure (0.0 to 1.0)

        Example:
            # Always succeeds
            uploader = MockUploader()

            # Always fails
            uploader = MockUploader(fail_rate=1.0)
        """
        self.logger = logging.getLogger(__name__)
        self.chunk_size = max(1, chunk_size)
        self.fail_rate = fail_rate

        # Track upload history for testing
        self.upload_history: list[dict] = []

        self.logger.info(f"Mock Uploader initialized (fail_rate: {fail_rate})")

    def upload(
        self,
        source: UploadSource,
        file_size: int,
        upload_link: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """Simulate a chunked upload"""
        self.logger.info(f"[MOCK] Starting upload: {file_size} bytes -> {upload_link}")

        if random.random() < self.fail_rate:
            raise UploaderError(
                "Simulated upload failure",
                status=UploadStatus.NETWORK_ERROR,
            )

        offset = 0
        while offset < file_size:
            offset = min(offset + self.chunk_size, file_size)
            if on_progress:
                on_progress(offset, file_size)

        self.upload_history.append(
            {
                "source": source,
                "file_size": file_size,
                "upload_link": upload_link,
                "timestamp": time.time(),
            }
        )
        self.logger.info(f"[MOCK] Upload complete: {upload_link}")

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_upload_history(self) -> list[dict]:
        """Get list of all uploads performed"""
        return self.upload_history.copy()

    def clear_history(self) -> None:
        """Clear upload history"""
        self.upload_history.clear()
        self.logger.debug("[MOCK] Upload history cleared")

    def get_last_upload(self) -> Optional[dict]:
        """Get most recent upload, or None"""
        return self.upload_history[-1] if self.upload_history else None
