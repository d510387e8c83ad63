"""
Upload Descriptor Model

Describes the file handed to an upload: where the bytes come from and
how many there are.
"""

import os
from dataclasses import dataclass
from typing import BinaryIO, Optional, Union

from vimeo_api.constants import UPLOAD_APPROACH

UploadSource = Union[str, "os.PathLike[str]", BinaryIO]


@dataclass
class UploadDescriptor:
    """
    A file queued for upload.

    Attributes:
        source: Filesystem path or an open binary stream
        size: Total number of bytes to send
        approach: Upload protocol requested from Vimeo (always tus)
    """

    source: UploadSource
    size: int
    approach: str = UPLOAD_APPROACH

    @classmethod
    def from_source(cls, source: UploadSource) -> "UploadDescriptor":
        """
        Size a path or stream and wrap it.

        Streams are measured from byte 0 to the end, whatever their
        current position, since the tus transfer always sends the whole
        stream. The position is restored afterwards.

        Raises:
            OSError: If the path can't be stat'ed or the stream can't seek
        """
        if isinstance(source, (str, os.PathLike)):
            return cls(source=source, size=os.stat(source).st_size)

        position = source.tell()
        size = source.seek(0, os.SEEK_END)
        source.seek(position)
        return cls(source=source, size=size)

    @property
    def is_path(self) -> bool:
        return isinstance(self.source, (str, os.PathLike))

    @property
    def file_name(self) -> Optional[str]:
        """Base name of the file, or the stream's name when it has one"""
        if self.is_path:
            return os.path.basename(os.fspath(self.source))
        name = getattr(self.source, "name", None)
        return os.path.basename(name) if isinstance(name, str) else None
