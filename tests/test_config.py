"""
Tests for configuration loading and validation.
"""
import pytest

from poem_studio.config import PoemStudioConfig
from poem_studio.config_loader import load_config_from_env
from poem_studio.config_validator import get_optional_env, get_required_env
from poem_studio.exceptions import ConfigurationError

ENV_KEYS = [
    "LLM_PROVIDER", "LLM_MODEL", "LLM_TEMPERATURE", "REQUEST_TIMEOUT_SECONDS",
    "PROGRESS_TICK_SECONDS", "MAX_UPLOAD_BYTES", "HISTORY_CAPACITY",
    "DEFAULT_STYLE", "DOWNLOAD_DIR", "RESTORE_POEM_ON_FAILURE",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestLoadConfig:

    def test_defaults(self, clean_env):
        config = load_config_from_env(use_dotenv=False)
        assert config == PoemStudioConfig()
        assert config.max_upload_bytes == 10 * 1024 * 1024
        assert config.history_capacity == 5
        assert config.default_style == "free verse"
        assert not config.restore_poem_on_failure

    def test_overrides(self, clean_env):
        clean_env.setenv("LLM_PROVIDER", "Groq")
        clean_env.setenv("LLM_MODEL", "meta-llama/llama-4-scout-17b-16e-instruct")
        clean_env.setenv("REQUEST_TIMEOUT_SECONDS", "15")
        clean_env.setenv("HISTORY_CAPACITY", "3")
        clean_env.setenv("RESTORE_POEM_ON_FAILURE", "true")
        clean_env.setenv("DEFAULT_STYLE", "haiku")

        config = load_config_from_env(use_dotenv=False)

        assert config.llm_provider == "groq"
        assert config.request_timeout_seconds == 15.0
        assert config.history_capacity == 3
        assert config.restore_poem_on_failure
        assert config.default_style == "haiku"

    @pytest.mark.parametrize("key,value", [
        ("REQUEST_TIMEOUT_SECONDS", "soon"),
        ("HISTORY_CAPACITY", "0"),
        ("MAX_UPLOAD_BYTES", "-1"),
    ])
    def test_invalid_numbers(self, clean_env, key, value):
        clean_env.setenv(key, value)
        with pytest.raises(ConfigurationError, match=key):
            load_config_from_env(use_dotenv=False)

    def test_unparseable_number_keeps_cause(self, clean_env):
        clean_env.setenv("LLM_TEMPERATURE", "warm")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_env(use_dotenv=False)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestEnvValidation:

    def test_required_missing(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY is required"):
            get_required_env("OPENAI_API_KEY")

    def test_required_placeholder(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "your_openai_key_here")
        with pytest.raises(ConfigurationError, match="placeholder"):
            get_required_env("OPENAI_API_KEY")

    def test_optional_placeholder_falls_back(self, monkeypatch):
        monkeypatch.setenv("LLM_MODEL", "replace-me")
        with pytest.warns(UserWarning):
            assert get_optional_env("LLM_MODEL", "gpt-4o-mini") == "gpt-4o-mini"
