"""
Upload validation exceptions.
"""
from ..exceptions import PoemStudioError


class FileValidationError(PoemStudioError):
    """Raised when an uploaded file fails validation."""

    pass


class InvalidFileType(FileValidationError):
    """Raised when the uploaded file is not an image."""

    pass


class FileTooLarge(FileValidationError):
    """Raised when the uploaded file exceeds the size limit."""

    pass
