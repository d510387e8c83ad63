"""
Interfaces Package

Abstract interfaces for upload implementations.
"""

from vimeo_api.interfaces.uploader_interface import (
    ProgressCallback,
    ResumableUploaderInterface,
    UploaderError,
    UploadResult,
)

__all__ = [
    "ProgressCallback",
    "ResumableUploaderInterface",
    "UploadResult",
    "UploaderError",
]
