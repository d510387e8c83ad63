"""
Controllers Package

High-level upload coordinators.
"""

from vimeo_api.controllers.upload_controller import UploadController

__all__ = [
    "UploadController",
]
