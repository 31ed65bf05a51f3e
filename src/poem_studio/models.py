import io
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError


@dataclass(frozen=True)
class UploadedFile:
    """
    A candidate image upload.

    Either holds the bytes in memory or points at a file on disk. Disk-backed
    uploads are sized with stat() and only read once they pass validation.
    """
    filename: str
    content_type: Optional[str]
    data: bytes = b""
    path: Optional[Path] = None

    @property
    def size(self) -> int:
        if self.path is not None:
            return self.path.stat().st_size
        return len(self.data)

    @property
    def media_kind(self) -> str:
        """Top-level media kind, e.g. 'image' for 'image/png'."""
        if not self.content_type:
            return ""
        return self.content_type.split("/", 1)[0].strip().lower()

    def read_bytes(self) -> bytes:
        """Return the file content, reading it from disk if needed."""
        if self.path is not None:
            return self.path.read_bytes()
        return self.data

    @classmethod
    def from_path(cls, file_path: str) -> "UploadedFile":
        """
        Reference a file on disk without reading it.

        The content type is guessed from the name, falling back to Pillow
        header sniffing.

        :raises FileNotFoundError: If the path is not an existing file
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"No such file: '{file_path}'")
        content_type, _ = mimetypes.guess_type(path.name)
        if content_type is None:
            content_type = sniff_image_type(path)
        return cls(filename=path.name, content_type=content_type, path=path)


def sniff_image_type(source: Union[bytes, Path]) -> Optional[str]:
    """Return the image MIME type Pillow detects in source, or None."""
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    try:
        with Image.open(source) as img:
            return Image.MIME.get(img.format)
    except (UnidentifiedImageError, OSError):
        return None
