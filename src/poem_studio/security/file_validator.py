"""
File upload validation.

Runs before any session state is touched, so a rejected file has no side effects.
"""
from typing import Tuple, Optional

from ..models import UploadedFile
from .exceptions import FileValidationError, InvalidFileType, FileTooLarge


class FileValidator:
    """
    Validates uploaded files by media kind and size.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024

    def __init__(self, max_file_size: int = MAX_FILE_SIZE):
        self.max_file_size = max_file_size

    def validate(self, upload: UploadedFile) -> None:
        """
        Validate an uploaded file.
        
        :param upload: Candidate file
        :raises InvalidFileType: If the media kind is not image
        :raises FileTooLarge: If the file exceeds the size limit
        """
        if upload.media_kind != "image":
            raise InvalidFileType(
                f"File '{upload.filename}' has type '{upload.content_type or 'unknown'}'. "
                f"Please upload an image file (JPEG, PNG, GIF, etc.)."
            )

        if upload.size > self.max_file_size:
            raise FileTooLarge(
                f"File size {upload.size} bytes exceeds maximum {self.max_file_size} bytes"
            )

    def check(self, upload: UploadedFile) -> Tuple[bool, Optional[str]]:
        """
        Non-raising variant of validate().
        
        :return: Tuple of (is_valid, error_message)
        """
        try:
            self.validate(upload)
        except FileValidationError as e:
            return False, str(e)
        return True, None
