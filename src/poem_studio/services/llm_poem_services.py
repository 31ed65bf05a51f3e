"""
LangChain-backed poem services.

Both services make exactly one chat model call per request and either
return the full text or raise. There are no partial results.
"""
import logging
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_core.prompts import PromptTemplate
from pydantic import ValidationError

from ..exceptions import AdjustmentError, GenerationError
from ..schemas import (
    AdjustedPoem,
    AdjustmentRequest,
    GeneratedPoem,
    GenerationRequest,
)
from .poem_services import PoemAdjustmentService, PoemGenerationService
from .prompts import POEM_ADJUSTMENT_PROMPT, POEM_GENERATION_PROMPT

logger = logging.getLogger(__name__)


def message_text(response: Any) -> str:
    """
    Extract plain text from a chat model response.

    Handles string content and multimodal content part lists.
    """
    content = getattr(response, "content", response)

    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        content = "".join(parts)

    if content is None:
        return ""

    return str(content).strip()


class LLMPoemGenerator(PoemGenerationService):
    """
    Generates a poem from a data-URI image with a multimodal chat model.
    """

    def __init__(self, llm: BaseChatModel, prompt: Optional[PromptTemplate] = None):
        """
        :param llm: LangChain chat model with vision support
        :param prompt: Optional prompt override (expects a {style} variable)
        """
        self._llm = llm
        self._prompt = prompt or POEM_GENERATION_PROMPT

    async def generate(self, image_payload: str, style: str) -> GeneratedPoem:
        try:
            request = GenerationRequest(image_payload=image_payload, style=style)
        except ValidationError as e:
            raise GenerationError(f"Invalid generation request: {e}") from e

        message = HumanMessage(content=[
            {"type": "text", "text": self._prompt.format(style=request.style)},
            {"type": "image_url", "image_url": {"url": request.image_payload}},
        ])

        try:
            response = await self._llm.ainvoke([message])
        except Exception as e:
            raise GenerationError(f"Generation model call failed: {e}") from e

        poem = message_text(response)
        if not poem:
            raise GenerationError("Generation model returned an empty poem")

        logger.debug(f"Generated {len(poem.splitlines())}-line poem in style '{request.style}'")
        return GeneratedPoem(poem=poem)


class LLMPoemAdjuster(PoemAdjustmentService):
    """
    Rewrites an existing poem in a new style with a chat model.
    """

    def __init__(self, llm: BaseChatModel, prompt: Optional[PromptTemplate] = None):
        self._llm = llm
        self._prompt = prompt or POEM_ADJUSTMENT_PROMPT

    async def adjust(self, poem: str, style: str) -> AdjustedPoem:
        try:
            request = AdjustmentRequest(poem=poem, style=style)
        except ValidationError as e:
            raise AdjustmentError(f"Invalid adjustment request: {e}") from e

        prompt_text = self._prompt.format(poem=request.poem, style=request.style)

        try:
            response = await self._llm.ainvoke([HumanMessage(content=prompt_text)])
        except Exception as e:
            raise AdjustmentError(f"Adjustment model call failed: {e}") from e

        adjusted = message_text(response)
        if not adjusted:
            raise AdjustmentError("Adjustment model returned an empty poem")

        return AdjustedPoem(adjusted_poem=adjusted)
