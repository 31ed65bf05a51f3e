"""
Creation session state.

The session is owned by the orchestration layer and mutated only by the
upload controller and the coordinators. Everything else reads snapshots.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..styles import DEFAULT_STYLE, SAMPLE_POEM
from .epoch import RequestEpoch
from .history import HistoryBuffer, HistoryEntry

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    GENERATING = "generating"
    ADJUSTING = "adjusting"
    READY = "ready"
    FAILED = "failed"


BUSY_STATUSES = frozenset({
    SessionStatus.UPLOADING,
    SessionStatus.GENERATING,
    SessionStatus.ADJUSTING,
})


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a CreationSession at one point in time."""
    status: SessionStatus
    image_payload: Optional[str]
    poem_text: str
    style: str
    is_sample: bool
    progress: int
    epoch: int
    history: Tuple[HistoryEntry, ...]

    @property
    def is_busy(self) -> bool:
        return self.status in BUSY_STATUSES

    @property
    def has_poem(self) -> bool:
        return bool(self.poem_text)


class CreationSession:
    """
    Aggregate state of one user's image, poem, style and history.
    
    Starts in sample mode with placeholder content and is discarded,
    never persisted, when the interaction ends.
    """

    def __init__(
        self,
        default_style: str = DEFAULT_STYLE,
        history_capacity: int = HistoryBuffer.DEFAULT_CAPACITY,
        placeholder_poem: str = SAMPLE_POEM,
    ):
        self.status: SessionStatus = SessionStatus.IDLE
        self.image_payload: Optional[str] = None
        self.poem_text: str = placeholder_poem
        self.style: str = default_style
        self.is_sample: bool = True
        self.progress: int = 0
        self.history = HistoryBuffer(capacity=history_capacity)
        self._epoch = RequestEpoch()

    @property
    def epoch(self) -> int:
        return self._epoch.current

    def is_current(self, epoch: int) -> bool:
        """Check if a result tagged with epoch still belongs to this session."""
        return self._epoch.is_current(epoch)

    @property
    def is_busy(self) -> bool:
        return self.status in BUSY_STATUSES

    def transition(self, status: SessionStatus) -> None:
        if status is not self.status:
            logger.debug(f"Session status: {self.status.value} -> {status.value}")
        self.status = status

    def settle(self, status: SessionStatus) -> None:
        """
        Move to a resting status after a request resolves.
        
        A newer upload that is still decoding owns the status, so it is left alone.
        """
        if self.status is SessionStatus.UPLOADING:
            logger.debug(f"Upload in progress, not settling to {status.value}")
            return
        self.transition(status)

    def begin_upload(self) -> None:
        self.transition(SessionStatus.UPLOADING)
        self.progress = 0

    def advance_progress(self, step: int) -> int:
        self.progress = min(100, self.progress + step)
        return self.progress

    def attach_image(self, image_payload: str) -> int:
        """
        Store a decoded image and open a new epoch for its generation.
        
        :return: The new epoch
        """
        self.image_payload = image_payload
        self.is_sample = False
        self.progress = 0
        epoch = self._epoch.advance()
        logger.info(f"Image attached, epoch advanced to {epoch}")
        return epoch

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            status=self.status,
            image_payload=self.image_payload,
            poem_text=self.poem_text,
            style=self.style,
            is_sample=self.is_sample,
            progress=self.progress,
            epoch=self.epoch,
            history=self.history.list(),
        )
