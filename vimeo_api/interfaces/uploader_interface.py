"""
Uploader Interface

Abstract interface for the byte-transfer half of a Vimeo upload.
The client obtains an upload link from the API, then hands the file to
an implementation of this interface. Tests swap in a mock instead of
talking to a tus server.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from vimeo_api.constants import UploadStatus
from vimeo_api.models.upload_descriptor import UploadSource

# on_progress(bytes_uploaded, bytes_total)
ProgressCallback = Callable[[int, int], None]


@dataclass
class UploadResult:
    """
    Result of an upload operation.

    Attributes:
        success: True if upload completed successfully
        video_uri: Vimeo video URI, e.g. /videos/12345 (if successful)
        status: Upload status code
        error_message: Error description (if failed)
        upload_duration: Time taken to upload in seconds
        file_size: Size of uploaded file in bytes
    """

    success: bool
    video_uri: Optional[str] = None
    status: UploadStatus = UploadStatus.SUCCESS
    error_message: Optional[str] = None
    upload_duration: float = 0.0
    file_size: int = 0

    @property
    def video_id(self) -> Optional[str]:
        """Numeric id taken from the end of the video URI"""
        if not self.video_uri:
            return None
        return self.video_uri.rstrip("/").rsplit("/", 1)[-1]


class ResumableUploaderInterface(ABC):
    """
    Abstract base class for resumable uploaders.

    Implementations send the file to an upload link that already exists
    on the server and must resume from the server's offset after a
    failed chunk.
    """

    @abstractmethod
    def upload(
        self,
        source: UploadSource,
        file_size: int,
        upload_link: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """
        Transfer the whole file to upload_link.

        Args:
            source: Path or open binary stream
            file_size: Total number of bytes to send
            upload_link: Upload URL returned by the API
            on_progress: Called with (bytes_uploaded, bytes_total) after each chunk

        Raises:
            UploaderError: If the transfer can't be completed
        """


class UploaderError(Exception):
    """
    Exception raised for upload-related errors.

    Examples:
    - File missing or unreadable
    - Upload ticket request rejected
    - Chunk transfer failed after all retries
    """

    def __init__(self, message: str, status: UploadStatus = UploadStatus.FAILED):
        super().__init__(message)
        self.status = status
