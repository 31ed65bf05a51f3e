"""
Notification channel.

Fire-and-forget (title, message, severity) messages for every success
and failure the orchestration layer reports to the user.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    severity: Severity
    kind: Optional[str] = None


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None:
        ...


class LoggingNotifier(Notifier):
    """Writes notifications to the log."""

    _LEVELS = {
        Severity.INFO: logging.INFO,
        Severity.SUCCESS: logging.INFO,
        Severity.WARNING: logging.WARNING,
        Severity.ERROR: logging.ERROR,
    }

    def notify(self, notification: Notification) -> None:
        logger.log(
            self._LEVELS[notification.severity],
            f"{notification.title}: {notification.message}",
        )


class RecordingNotifier(Notifier):
    """
    Keeps every notification in order, optionally forwarding to another notifier.
    """

    def __init__(self, forward_to: Optional[Notifier] = None):
        self.notifications: List[Notification] = []
        self._forward_to = forward_to

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        if self._forward_to is not None:
            self._forward_to.notify(notification)

    def kinds(self) -> List[Optional[str]]:
        return [n.kind for n in self.notifications]

    def drain(self) -> List[Notification]:
        """Return and forget the recorded notifications."""
        drained, self.notifications = self.notifications, []
        return drained


INVALID_FILE_TYPE = Notification(
    title="Invalid File Type",
    message="Please upload an image file (JPEG, PNG, GIF, etc.).",
    severity=Severity.ERROR,
    kind="InvalidFileType",
)

FILE_TOO_LARGE = Notification(
    title="File Too Large",
    message="Please upload an image smaller than 10MB.",
    severity=Severity.ERROR,
    kind="FileTooLarge",
)

GENERATION_FAILED = Notification(
    title="Poem Generation Failed",
    message="Could not generate a poem. Please try another image or check your connection.",
    severity=Severity.ERROR,
    kind="GenerationError",
)

ADJUSTMENT_FAILED = Notification(
    title="Style Adjustment Failed",
    message="Could not adjust the poem style. Please try again.",
    severity=Severity.ERROR,
    kind="AdjustmentError",
)

COPIED = Notification(
    title="Copied to Clipboard!",
    message="Poem copied.",
    severity=Severity.SUCCESS,
    kind="Copied",
)

CLIPBOARD_UNAVAILABLE = Notification(
    title="Clipboard Unavailable",
    message="Could not access the clipboard. Try downloading the poem instead.",
    severity=Severity.WARNING,
    kind="ClipboardUnavailable",
)

DOWNLOADED = Notification(
    title="Poem Downloaded",
    message="Saved as my-poem.txt.",
    severity=Severity.SUCCESS,
    kind="Downloaded",
)
