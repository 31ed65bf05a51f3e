"""
File ingestion: turns a validated upload into a data-URI image payload.
"""
import asyncio
import base64
import io
import logging

from PIL import Image

from ..exceptions import ImageDecodeError
from ..models import UploadedFile

logger = logging.getLogger(__name__)


class ImageIngestor:
    """
    Decodes uploads off the event loop.
    
    Pillow confirms the bytes are a readable image before they are encoded.
    """

    async def decode(self, upload: UploadedFile) -> str:
        """
        Decode an upload into a data URI.
        
        :param upload: File that already passed validation
        :return: data:<mime>;base64,<payload>
        :raises ImageDecodeError: If the bytes are not a readable image
        """
        return await asyncio.to_thread(self._encode, upload)

    def _encode(self, upload: UploadedFile) -> str:
        try:
            data = upload.read_bytes()
            with Image.open(io.BytesIO(data)) as img:
                image_format = img.format
                img.verify()
        except Exception as e:
            raise ImageDecodeError(f"Failed to decode image '{upload.filename}': {str(e)}") from e

        mime_type = upload.content_type or Image.MIME.get(image_format, "image/png")
        encoded = base64.b64encode(data).decode("ascii")
        logger.debug(f"Decoded {upload.filename} ({image_format}, {len(data)} bytes)")
        return f"data:{mime_type};base64,{encoded}"
