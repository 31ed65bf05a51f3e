from .poem_services import PoemGenerationService, PoemAdjustmentService
from .llm_poem_services import LLMPoemGenerator, LLMPoemAdjuster, message_text
from .prompts import POEM_GENERATION_PROMPT, POEM_ADJUSTMENT_PROMPT

__all__ = [
    "PoemGenerationService",
    "PoemAdjustmentService",
    "LLMPoemGenerator",
    "LLMPoemAdjuster",
    "message_text",
    "POEM_GENERATION_PROMPT",
    "POEM_ADJUSTMENT_PROMPT",
]
