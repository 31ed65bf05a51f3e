"""
Generation coordinator - image to poem.

Write path: image payload → generation service → CreationSession + history,
applied only while the request's epoch is still current.
"""
import asyncio
import logging

from ..adapters.notifications import GENERATION_FAILED, Notifier
from ..exceptions import GenerationError
from ..services.poem_services import PoemGenerationService
from ..session.session_state import CreationSession, SessionStatus

logger = logging.getLogger(__name__)


class GenerationCoordinator:
    """
    Drives one generation request per epoch and applies its result.

    A slow response for an older upload never overwrites a newer one:
    results whose epoch has been superseded are dropped without touching
    the session.
    """

    def __init__(
        self,
        session: CreationSession,
        service: PoemGenerationService,
        notifier: Notifier,
        timeout_seconds: float = 60.0,
        restore_poem_on_failure: bool = False,
    ):
        """
        :param session: Session to write to
        :param service: Generation service
        :param notifier: Channel for failure notifications
        :param timeout_seconds: Per-request timeout, expiry counts as GenerationError
        :param restore_poem_on_failure: Put the previous poem back on failure instead of leaving it blank
        """
        self._session = session
        self._service = service
        self._notifier = notifier
        self._timeout = timeout_seconds
        self._restore_poem_on_failure = restore_poem_on_failure

    async def generate(self, image_payload: str, style: str, epoch: int) -> bool:
        """
        Generate a poem for image_payload and store it if epoch is still current.

        :return: True if the result was applied to the session
        """
        session = self._session
        previous_poem = session.poem_text

        session.transition(SessionStatus.GENERATING)
        session.poem_text = ""

        try:
            poem = await self._request(image_payload, style)
        except GenerationError as e:
            self._handle_failure(e, epoch, previous_poem)
            return False
        finally:
            self._reset_progress()

        if not session.is_current(epoch):
            logger.info(
                f"Discarding generation result for epoch {epoch} "
                f"(current epoch {session.epoch})"
            )
            return False

        session.poem_text = poem
        session.history.record(poem, epoch)
        session.settle(SessionStatus.READY)
        logger.info(f"Generation applied for epoch {epoch} ({len(session.history)} in history)")
        return True

    async def _request(self, image_payload: str, style: str) -> str:
        try:
            result = await asyncio.wait_for(
                self._service.generate(image_payload, style),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise GenerationError(f"Poem generation timed out after {self._timeout}s") from e
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Poem generation failed: {str(e)}") from e

        return result.poem

    def _handle_failure(self, error: GenerationError, epoch: int, previous_poem: str) -> None:
        session = self._session

        if not session.is_current(epoch):
            logger.info(f"Ignoring generation failure for stale epoch {epoch}: {error}")
            return

        logger.error(f"Poem generation failed for epoch {epoch}: {error}", exc_info=error)
        if self._restore_poem_on_failure:
            session.poem_text = previous_poem
        session.settle(SessionStatus.FAILED)
        self._notifier.notify(GENERATION_FAILED)

    def _reset_progress(self) -> None:
        # Progress belongs to a newer upload while one is decoding.
        if self._session.status is not SessionStatus.UPLOADING:
            self._session.progress = 0
