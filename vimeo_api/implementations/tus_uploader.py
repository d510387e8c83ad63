"""
Tus Uploader Implementation

Concrete implementation of ResumableUploaderInterface for the tus 1.0
resumable upload protocol, as used by Vimeo upload links.
"""

import logging
import time
from typing import Callable, List, Optional

import requests

from tusclient import client as tus_client
from tusclient.exceptions import TusCommunicationError

from vimeo_api.constants import TUS_RETRY_DELAYS, UPLOAD_CHUNK_SIZE, UploadStatus
from vimeo_api.interfaces.uploader_interface import (
    ProgressCallback,
    ResumableUploaderInterface,
    UploaderError,
)
from vimeo_api.models.upload_descriptor import UploadSource


class TusUploader(ResumableUploaderInterface):
    """
    Resumable uploader backed by tuspy.

    Features:
    - Resumes an upload created by the Vimeo API (no tus creation step)
    - Chunk-based upload (memory efficient)
    - Progress reported after every chunk
    - Retries a failed chunk after each delay in retry_delays,
      re-reading the server offset before resuming
    """

    def __init__(
        self,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
        retry_delays: Optional[List[float]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize tus uploader.

        Args:
            chunk_size: Bytes sent per PATCH request
            retry_delays: Seconds to wait before each retry (default: TUS_RETRY_DELAYS)
            sleep: Sleep function (tests pass a no-op)

        Example:
            uploader = TusUploader(chunk_size=64 * 1024 * 1024)
        """
        self.logger = logging.getLogger(__name__)
        self.chunk_size = chunk_size
        self.retry_delays = list(TUS_RETRY_DELAYS if retry_delays is None else retry_delays)
        self._sleep = sleep

    def _create_tus_uploader(self, source: UploadSource, upload_link: str):
        """
        Open the existing upload on the server.

        The upload link already exists, so tuspy skips creation and asks
        the server for the current offset.
        """
        client = tus_client.TusClient(upload_link)
        kwargs = {"url": upload_link, "chunk_size": self.chunk_size}
        if isinstance(source, str) or hasattr(source, "__fspath__"):
            kwargs["file_path"] = str(source)
        else:
            kwargs["file_stream"] = source
        return client.uploader(**kwargs)

    def upload(
        self,
        source: UploadSource,
        file_size: int,
        upload_link: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """
        Upload the file chunk by chunk to upload_link.

        Raises:
            UploaderError: If the upload can't be opened, or a chunk keeps
                failing once every retry delay has been used
        """
        self.logger.info(f"Starting tus upload: {file_size} bytes -> {upload_link}")

        try:
            uploader = self._create_tus_uploader(source, upload_link)
        except (TusCommunicationError, requests.RequestException) as e:
            raise UploaderError(
                f"Unable to open upload link: {e}",
                status=UploadStatus.NETWORK_ERROR,
            ) from e

        attempt = 0
        while uploader.offset < file_size:
            try:
                uploader.upload_chunk()
            except TusCommunicationError as e:
                if attempt >= len(self.retry_delays):
                    raise UploaderError(
                        f"Upload failed after {attempt} retries: {e}",
                        status=UploadStatus.NETWORK_ERROR,
                    ) from e

                delay = self.retry_delays[attempt]
                attempt += 1
                self.logger.warning(
                    f"Chunk failed at offset {uploader.offset} ({e}), "
                    f"retry {attempt}/{len(self.retry_delays)} in {delay}s"
                )
                self._sleep(delay)
                uploader.offset = self._resume_offset(uploader)
                continue

            # A successful chunk resets the retry budget
            attempt = 0
            self.logger.debug(f"Uploaded {uploader.offset}/{file_size} bytes")
            if on_progress:
                on_progress(uploader.offset, file_size)

        self.logger.info(f"Tus upload complete: {upload_link}")

    def _resume_offset(self, uploader) -> int:
        """Ask the server how much it has; keep the local offset if that fails"""
        try:
            return uploader.get_offset()
        except (TusCommunicationError, requests.RequestException) as e:
            self.logger.debug(f"Offset check failed ({e}), keeping {uploader.offset}")
            return uploader.offset
