class PoemStudioError(Exception):
    """Base exception for poem studio."""


class ConfigurationError(PoemStudioError):
    """Raised when required configuration is missing or invalid."""


class GenerationError(PoemStudioError):
    """Raised when the poem generation service fails or times out."""


class AdjustmentError(PoemStudioError):
    """Raised when the style adjustment service fails or times out."""


class ClipboardUnavailable(PoemStudioError):
    """Raised when no system clipboard can be written to."""


class ImageDecodeError(PoemStudioError):
    """Raised when a validated upload cannot be decoded into an image payload."""
