from dataclasses import dataclass
from typing import Optional, Any

from .styles import DEFAULT_STYLE


@dataclass
class PoemStudioConfig:
    # LLM
    llm_provider: str = "openai"
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.8
    llm: Optional[Any] = None

    # Requests
    request_timeout_seconds: float = 60.0

    # Upload
    max_upload_bytes: int = 10 * 1024 * 1024
    progress_tick_seconds: float = 0.1

    # Session
    history_capacity: int = 5
    default_style: str = DEFAULT_STYLE
    restore_poem_on_failure: bool = False

    # Export
    download_dir: str = "."
