import logging
from typing import Any

from .config_validator import get_required_env

logger = logging.getLogger(__name__)

# Chat models with image input, used for poem generation
KNOWN_VISION_MODELS = {
    "openai": ["gpt-4o", "gpt-4o-mini", "gpt-4.1", "gpt-4.1-mini"],
    "groq": [
        "meta-llama/llama-4-scout-17b-16e-instruct",
        "meta-llama/llama-4-maverick-17b-128e-instruct",
    ],
}


def get_llm_instance(provider: str, model: str, temperature: float = 0.8) -> Any:
    """
    Factory to return a ready-to-use chat model based on provider name.

    :param provider: 'openai' or 'groq'
    :param model: Chat model name (must accept image input for generation)
    :param temperature: Sampling temperature
    :return: LangChain chat model
    """
    provider = provider.lower()

    if provider in KNOWN_VISION_MODELS and model not in KNOWN_VISION_MODELS[provider]:
        # Warn but don't fail - providers add models often
        logger.warning(
            f"Model '{model}' not in known {provider} vision models: "
            f"{KNOWN_VISION_MODELS[provider]}"
        )

    if provider == "openai":
        from langchain_openai import ChatOpenAI

        api_key = get_required_env(
            "OPENAI_API_KEY",
            description="OpenAI API key for poem generation (get from https://platform.openai.com/api-keys)"
        )
        return ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=temperature,
            streaming=False,
        )

    elif provider == "groq":
        from langchain_groq import ChatGroq

        api_key = get_required_env(
            "GROQ_API_KEY",
            description="Groq API key for poem generation (get from https://console.groq.com/keys)"
        )
        return ChatGroq(
            model=model,
            api_key=api_key,
            temperature=temperature,
            streaming=False,
        )

    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
