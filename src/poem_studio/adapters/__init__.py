"""
Boundary adapters the orchestration layer calls into: file ingestion,
notifications, clipboard and download.
"""
from .ingestion import ImageIngestor
from .notifications import (
    Notification,
    Notifier,
    LoggingNotifier,
    RecordingNotifier,
    Severity,
)
from .clipboard import Clipboard, SystemClipboard
from .download import PoemDownloader, DOWNLOAD_FILENAME

__all__ = [
    "ImageIngestor",
    "Notification",
    "Notifier",
    "LoggingNotifier",
    "RecordingNotifier",
    "Severity",
    "Clipboard",
    "SystemClipboard",
    "PoemDownloader",
    "DOWNLOAD_FILENAME",
]
