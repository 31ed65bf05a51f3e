"""
Public application facade for Poem Studio.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import logging
from typing import Optional, Tuple

from .adapters.clipboard import Clipboard
from .adapters.notifications import LoggingNotifier, Notifier
from .config import PoemStudioConfig
from .models import UploadedFile
from .service import PoemStudioService
from .service_factory import create_adjustment_service, create_generation_service
from .session import HistoryEntry, SessionSnapshot

logger = logging.getLogger(__name__)


class PoemStudioApp:
    """
    Public application facade for Poem Studio.

    All dependency wiring and factory usage is encapsulated here.

    Usage:
        config = load_config_from_env()
        app = PoemStudioApp(config)
        app.initialize()
        await app.submit_path("beach.jpg")
        await app.change_style("haiku")
    """

    def __init__(
        self,
        config: PoemStudioConfig,
        notifier: Optional[Notifier] = None,
        clipboard: Optional[Clipboard] = None,
    ):
        """
        :param config: PoemStudioConfig instance
        :param notifier: Notification channel (defaults to logging)
        :param clipboard: Clipboard adapter (defaults to the system clipboard)
        """
        self._config = config
        self._notifier = notifier or LoggingNotifier()
        self._clipboard = clipboard
        self._service: Optional[PoemStudioService] = None

    def initialize(self) -> None:
        """
        Build the LLM-backed services and the session service.

        Call this once before any other method.
        """
        if self._service:
            return

        generation_service = create_generation_service(self._config)
        adjustment_service = create_adjustment_service(self._config)

        self._service = PoemStudioService(
            self._config,
            generation_service=generation_service,
            adjustment_service=adjustment_service,
            notifier=self._notifier,
            clipboard=self._clipboard,
        )
        logger.info(
            f"Poem studio initialized ({self._config.llm_provider}/{self._config.llm_model})"
        )

    @property
    def service(self) -> PoemStudioService:
        if not self._service:
            raise RuntimeError("App not initialized. Call initialize() first.")
        return self._service

    @property
    def state(self) -> SessionSnapshot:
        return self.service.state

    def history(self, k: Optional[int] = None) -> Tuple[HistoryEntry, ...]:
        return self.service.history(k)

    async def submit(self, upload: UploadedFile) -> Optional[int]:
        return await self.service.submit(upload)

    async def submit_path(self, image_path: str) -> Optional[int]:
        return await self.service.submit_path(image_path)

    async def change_style(self, style: str) -> bool:
        return await self.service.change_style(style)

    def copy_poem(self) -> bool:
        return self.service.copy_poem()

    def download_poem(self) -> Optional[str]:
        return self.service.download_poem()

    def reset(self) -> None:
        self.service.reset()
