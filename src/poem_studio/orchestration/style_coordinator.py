"""
Style adjustment coordinator - restyles the current poem.

Never writes to history; failures are non-fatal and fall back to the last good poem.
"""
import asyncio
import logging
from typing import Optional

from ..adapters.notifications import ADJUSTMENT_FAILED, Notifier
from ..exceptions import AdjustmentError
from ..services.poem_services import PoemAdjustmentService
from ..session.session_state import CreationSession, SessionStatus

logger = logging.getLogger(__name__)


class StyleAdjustmentCoordinator:
    """
    Updates the selected style and, when the session can accept it,
    asks the adjustment service to rewrite the poem in that style.

    A style chosen while an adjustment is running is held back and
    dispatched once that adjustment settles, so the poem ends up in the
    most recently selected style.
    """

    # Statuses in which a restyle request may be dispatched.
    ACCEPTING_STATUSES = frozenset({SessionStatus.READY, SessionStatus.FAILED})

    def __init__(
        self,
        session: CreationSession,
        service: PoemAdjustmentService,
        notifier: Notifier,
        timeout_seconds: float = 60.0,
    ):
        self._session = session
        self._service = service
        self._notifier = notifier
        self._timeout = timeout_seconds
        self._pending_style: Optional[str] = None

    @property
    def pending_style(self) -> Optional[str]:
        """Style waiting for the running adjustment to settle, if any."""
        return self._pending_style

    async def change_style(self, new_style: str) -> bool:
        """
        Select new_style and restyle the current poem if possible.

        The style is stored even when no request is made or the request fails.
        While another adjustment is running the style is queued (latest wins).

        :return: True if an adjusted poem was applied
        """
        session = self._session
        session.style = new_style

        if session.is_sample or not session.poem_text:
            logger.debug(f"Style set to '{new_style}' without adjustment (no generated poem)")
            return False

        if session.status is SessionStatus.ADJUSTING:
            self._pending_style = new_style
            logger.info(f"Style '{new_style}' queued until the running adjustment settles")
            return False

        if session.status not in self.ACCEPTING_STATUSES:
            logger.info(
                f"Style set to '{new_style}' without adjustment "
                f"(session is {session.status.value})"
            )
            return False

        epoch = session.epoch
        poem = session.poem_text
        session.transition(SessionStatus.ADJUSTING)

        try:
            adjusted = await self._request(poem, new_style)
        except AdjustmentError as e:
            if not session.is_current(epoch):
                logger.info(f"Ignoring adjustment failure for stale epoch {epoch}: {e}")
                self._pending_style = None
                return False
            logger.error(f"Style adjustment to '{new_style}' failed: {e}", exc_info=e)
            session.settle(SessionStatus.READY)
            self._notifier.notify(ADJUSTMENT_FAILED)
            await self._dispatch_pending(new_style)
            return False

        if not session.is_current(epoch):
            logger.info(
                f"Discarding adjustment result for epoch {epoch} "
                f"(current epoch {session.epoch})"
            )
            self._pending_style = None
            return False

        session.poem_text = adjusted
        session.settle(SessionStatus.READY)
        logger.info(f"Poem adjusted to '{new_style}' for epoch {epoch}")
        await self._dispatch_pending(new_style)
        return True

    async def _dispatch_pending(self, settled_style: str) -> None:
        pending, self._pending_style = self._pending_style, None
        if pending is None or pending == settled_style:
            return
        logger.info(f"Dispatching queued style '{pending}'")
        await self.change_style(pending)

    async def _request(self, poem: str, style: str) -> str:
        try:
            result = await asyncio.wait_for(
                self._service.adjust(poem, style),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise AdjustmentError(f"Style adjustment timed out after {self._timeout}s") from e
        except AdjustmentError:
            raise
        except Exception as e:
            raise AdjustmentError(f"Style adjustment failed: {str(e)}") from e

        return result.adjusted_poem
