from typing import Any, Optional

from .config import PoemStudioConfig
from .llm_factory import get_llm_instance
from .services import LLMPoemAdjuster, LLMPoemGenerator


def _resolve_llm(config: PoemStudioConfig, llm: Optional[Any]) -> Any:
    if llm is not None:
        return llm
    if config.llm is None:
        config.llm = get_llm_instance(
            provider=config.llm_provider,
            model=config.llm_model,
            temperature=config.llm_temperature,
        )
    return config.llm


def create_generation_service(
    config: PoemStudioConfig,
    llm: Optional[Any] = None,
) -> LLMPoemGenerator:
    """
    Create the image-to-poem service.

    :param config: PoemStudioConfig instance
    :param llm: Optional pre-built chat model (defaults to config.llm, then the LLM factory)
    """
    return LLMPoemGenerator(llm=_resolve_llm(config, llm))


def create_adjustment_service(
    config: PoemStudioConfig,
    llm: Optional[Any] = None,
) -> LLMPoemAdjuster:
    """Create the poem restyle service, sharing the chat model with generation."""
    return LLMPoemAdjuster(llm=_resolve_llm(config, llm))
