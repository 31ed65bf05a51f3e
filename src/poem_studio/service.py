import logging
from typing import Optional, Tuple

from .adapters.clipboard import Clipboard, SystemClipboard
from .adapters.download import PoemDownloader
from .adapters.ingestion import ImageIngestor
from .adapters.notifications import (
    CLIPBOARD_UNAVAILABLE,
    COPIED,
    DOWNLOADED,
    LoggingNotifier,
    Notifier,
)
from .config import PoemStudioConfig
from .exceptions import ClipboardUnavailable
from .models import UploadedFile
from .orchestration import GenerationCoordinator, StyleAdjustmentCoordinator, UploadController
from .security import FileValidator
from .services.poem_services import PoemAdjustmentService, PoemGenerationService
from .session import CreationSession, HistoryEntry, SessionSnapshot

logger = logging.getLogger(__name__)


class PoemStudioService:
    """
    Facade over the creation session.
    The ONLY entry point for the UI layers.
    """

    def __init__(
        self,
        config: PoemStudioConfig,
        generation_service: PoemGenerationService,
        adjustment_service: PoemAdjustmentService,
        notifier: Optional[Notifier] = None,
        ingestor: Optional[ImageIngestor] = None,
        clipboard: Optional[Clipboard] = None,
        downloader: Optional[PoemDownloader] = None,
    ):
        """
        Composition root for one interaction.
        The session and its controllers are created and wired here.
        """
        self.config = config
        self._generation_service = generation_service
        self._adjustment_service = adjustment_service
        self._notifier = notifier or LoggingNotifier()
        self._ingestor = ingestor or ImageIngestor()
        self._clipboard = clipboard or SystemClipboard()
        self._downloader = downloader or PoemDownloader(config.download_dir)

        self._session: Optional[CreationSession] = None
        self._uploads: Optional[UploadController] = None
        self._styles: Optional[StyleAdjustmentCoordinator] = None
        self.reset()

    # ----------------------------
    # Session lifecycle
    # ----------------------------
    def reset(self) -> None:
        """
        Discard the current session and start a fresh one in sample mode.
        Results of requests still in flight land on the discarded session.
        """
        config = self.config
        self._session = CreationSession(
            default_style=config.default_style,
            history_capacity=config.history_capacity,
        )
        generation = GenerationCoordinator(
            session=self._session,
            service=self._generation_service,
            notifier=self._notifier,
            timeout_seconds=config.request_timeout_seconds,
            restore_poem_on_failure=config.restore_poem_on_failure,
        )
        self._uploads = UploadController(
            session=self._session,
            generation=generation,
            notifier=self._notifier,
            validator=FileValidator(max_file_size=config.max_upload_bytes),
            ingestor=self._ingestor,
            progress_tick_seconds=config.progress_tick_seconds,
        )
        self._styles = StyleAdjustmentCoordinator(
            session=self._session,
            service=self._adjustment_service,
            notifier=self._notifier,
            timeout_seconds=config.request_timeout_seconds,
        )

    @property
    def state(self) -> SessionSnapshot:
        return self._session.snapshot()

    def history(self, k: Optional[int] = None) -> Tuple[HistoryEntry, ...]:
        """Generated poems, newest first (all of them, or the k newest)."""
        if k is None:
            return self._session.history.list()
        return self._session.history.recent(k)

    # ----------------------------
    # Creation
    # ----------------------------
    async def submit(self, upload: UploadedFile) -> Optional[int]:
        """Upload an image and generate a poem for it. See UploadController.submit."""
        return await self._uploads.submit(upload)

    async def submit_path(self, image_path: str) -> Optional[int]:
        """Upload an image file from disk."""
        return await self.submit(UploadedFile.from_path(image_path))

    async def change_style(self, style: str) -> bool:
        """Select a style and restyle the current poem when possible."""
        return await self._styles.change_style(style)

    # ----------------------------
    # Export
    # ----------------------------
    def copy_poem(self) -> bool:
        """
        Copy the current poem to the system clipboard.
        Falls back to a warning notification when no clipboard is available.
        """
        if not self._can_export():
            return False

        try:
            self._clipboard.copy(self._session.poem_text)
        except ClipboardUnavailable as e:
            logger.warning(f"Copy failed: {e}")
            self._notifier.notify(CLIPBOARD_UNAVAILABLE)
            return False

        self._notifier.notify(COPIED)
        return True

    def download_poem(self) -> Optional[str]:
        """
        Save the current poem as my-poem.txt.

        :return: Path of the written file, or None if there was nothing to save
        """
        if not self._can_export():
            return None

        path = self._downloader.download(self._session.poem_text)
        self._notifier.notify(DOWNLOADED)
        return str(path)

    def _can_export(self) -> bool:
        session = self._session
        if not session.poem_text or session.is_busy:
            logger.debug(f"Nothing to export (status={session.status.value})")
            return False
        return True
