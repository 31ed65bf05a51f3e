"""
Poem Studio: turn a photograph into a poem and restyle it.
"""
from .app import PoemStudioApp
from .config import PoemStudioConfig
from .config_loader import load_config_from_env
from .exceptions import (
    AdjustmentError,
    ClipboardUnavailable,
    ConfigurationError,
    GenerationError,
    ImageDecodeError,
    PoemStudioError,
)
from .models import UploadedFile
from .security import FileTooLarge, FileValidationError, InvalidFileType
from .service import PoemStudioService
from .session import SessionSnapshot, SessionStatus

__all__ = [
    "PoemStudioApp",
    "PoemStudioConfig",
    "PoemStudioService",
    "load_config_from_env",
    "UploadedFile",
    "SessionSnapshot",
    "SessionStatus",
    "PoemStudioError",
    "ConfigurationError",
    "GenerationError",
    "AdjustmentError",
    "ClipboardUnavailable",
    "ImageDecodeError",
    "FileValidationError",
    "InvalidFileType",
    "FileTooLarge",
]
