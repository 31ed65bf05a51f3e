"""
Upload validation: rejects files before they reach the session.
"""

from .exceptions import FileValidationError, InvalidFileType, FileTooLarge
from .file_validator import FileValidator

__all__ = [
    "FileValidationError",
    "InvalidFileType",
    "FileTooLarge",
    "FileValidator",
]
