"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import PoemStudioConfig
from .config_validator import get_optional_env, get_bool_env, get_number_env
from .styles import DEFAULT_STYLE


def load_config_from_env(use_dotenv: bool = True) -> PoemStudioConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = PoemStudioApp(config)
        app.initialize()
    
    :param use_dotenv: Load a local .env file first (disable in production)
    :return: Validated PoemStudioConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    if use_dotenv:
        load_dotenv()

    return PoemStudioConfig(
        llm_provider=get_optional_env("LLM_PROVIDER", default="openai").lower(),
        llm_model=get_optional_env("LLM_MODEL", default="gpt-4o-mini"),
        llm_temperature=get_number_env("LLM_TEMPERATURE", 0.8),
        request_timeout_seconds=get_number_env("REQUEST_TIMEOUT_SECONDS", 60.0, minimum=0.001),
        progress_tick_seconds=get_number_env("PROGRESS_TICK_SECONDS", 0.1),
        max_upload_bytes=get_number_env("MAX_UPLOAD_BYTES", 10 * 1024 * 1024, minimum=1, cast=int),
        history_capacity=get_number_env("HISTORY_CAPACITY", 5, minimum=1, cast=int),
        default_style=get_optional_env("DEFAULT_STYLE", default=DEFAULT_STYLE),
        download_dir=get_optional_env("DOWNLOAD_DIR", default="."),
        restore_poem_on_failure=get_bool_env("RESTORE_POEM_ON_FAILURE", False),
    )


def create_config_for_production() -> PoemStudioConfig:
    """
    Create configuration for production deployment.
    
    Environment variables only, no .env file.
    """
    return load_config_from_env(use_dotenv=False)
