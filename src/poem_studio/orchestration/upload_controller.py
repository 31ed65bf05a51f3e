"""
Upload controller - validates and ingests an image, then hands off to generation.
"""
import asyncio
import logging
from typing import Optional

from ..adapters.ingestion import ImageIngestor
from ..adapters.notifications import FILE_TOO_LARGE, INVALID_FILE_TYPE, Notifier
from ..exceptions import ImageDecodeError
from ..models import UploadedFile
from ..security import FileTooLarge, FileValidator, InvalidFileType
from ..session.session_state import CreationSession, SessionStatus
from .generation_coordinator import GenerationCoordinator

logger = logging.getLogger(__name__)


class UploadController:
    """
    Entry point for new images.

    Validation happens before anything else, so a rejected file leaves the
    session untouched. Accepted files show a simulated progress bar while
    they decode; the bar is cosmetic and not tied to the decode itself.
    """

    PROGRESS_STEP = 10

    def __init__(
        self,
        session: CreationSession,
        generation: GenerationCoordinator,
        notifier: Notifier,
        validator: Optional[FileValidator] = None,
        ingestor: Optional[ImageIngestor] = None,
        progress_tick_seconds: float = 0.1,
    ):
        """
        :param session: Session to write to
        :param generation: Coordinator that receives the decoded image
        :param notifier: Channel for rejection notifications
        :param validator: File validator (defaults to the 10 MiB image check)
        :param ingestor: Decoder producing data-URI payloads
        :param progress_tick_seconds: Delay between simulated progress steps
        """
        self._session = session
        self._generation = generation
        self._notifier = notifier
        self._validator = validator or FileValidator()
        self._ingestor = ingestor or ImageIngestor()
        self._tick = progress_tick_seconds
        self._upload_seq = 0
        self._ticker: Optional[asyncio.Task] = None

    async def submit(self, upload: UploadedFile) -> Optional[int]:
        """
        Validate, decode and generate a poem for an uploaded file.

        :param upload: Candidate file
        :return: Epoch of the generation started for this upload, or None if a
            newer upload superseded it while it was decoding
        :raises InvalidFileType: If the file is not an image
        :raises FileTooLarge: If the file exceeds the size limit
        :raises ImageDecodeError: If a valid-looking file cannot be decoded
        """
        self._validate(upload)

        self._upload_seq += 1
        seq = self._upload_seq
        logger.info(f"Upload #{seq} accepted: {upload.filename} ({upload.size} bytes)")

        self._session.begin_upload()
        self._start_ticker()

        try:
            image_payload = await self._ingestor.decode(upload)
        except ImageDecodeError:
            if seq == self._upload_seq:
                self._session.progress = 0
                self._session.transition(SessionStatus.FAILED)
            raise
        finally:
            if seq == self._upload_seq:
                self._stop_ticker()

        if seq != self._upload_seq:
            logger.info(f"Upload #{seq} superseded by upload #{self._upload_seq}, dropping it")
            return None

        epoch = self._session.attach_image(image_payload)
        await self._generation.generate(image_payload, self._session.style, epoch)
        return epoch

    def _validate(self, upload: UploadedFile) -> None:
        try:
            self._validator.validate(upload)
        except InvalidFileType as e:
            logger.warning(f"Upload rejected: {e}")
            self._notifier.notify(INVALID_FILE_TYPE)
            raise
        except FileTooLarge as e:
            logger.warning(f"Upload rejected: {e}")
            self._notifier.notify(FILE_TOO_LARGE)
            raise

    def _start_ticker(self) -> None:
        self._stop_ticker()
        self._ticker = asyncio.create_task(self._run_progress())

    def _stop_ticker(self) -> None:
        if self._ticker is not None and not self._ticker.done():
            self._ticker.cancel()
        self._ticker = None

    async def _run_progress(self) -> None:
        session = self._session
        while session.status is SessionStatus.UPLOADING and session.progress < 100:
            await asyncio.sleep(self._tick)
            if session.status is not SessionStatus.UPLOADING:
                break
            session.advance_progress(self.PROGRESS_STEP)
