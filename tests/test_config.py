"""Unit tests for configuration loading."""
from pathlib import Path

import pytest

from chatcli.config import DEFAULT_HISTORY_FILE, ChatConfig, LogLevel, load_config
from chatcli.errors import ConfigError


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_credential_raises_config_error(self):
        with pytest.raises(ConfigError) as exc_info:
            load_config({})

        message = str(exc_info.value)
        assert "OPENAI_API_KEY environment variable is not set." in message
        assert 'export OPENAI_API_KEY="your-api-key-here"' in message

    def test_empty_credential_is_missing(self):
        with pytest.raises(ConfigError, match="OPENAI_API_KEY"):
            load_config({"OPENAI_API_KEY": ""})

    def test_defaults(self):
        config = load_config({"OPENAI_API_KEY": "sk-test"})

        assert config.provider == "openai"
        assert config.api_key == "sk-test"
        assert config.base_url is None
        assert config.model is None
        assert config.max_tokens == 1000
        assert config.temperature == 0.7
        assert config.history_file == DEFAULT_HISTORY_FILE
        assert config.log_level == LogLevel.WARNING

    def test_overrides(self, tmp_path):
        config = load_config({
            "OPENAI_API_KEY": "sk-test",
            "OPENAI_BASE_URL": "http://localhost:8080/v1",
            "CHAT_MODEL": "gpt-4o-mini",
            "CHAT_MAX_TOKENS": "256",
            "CHAT_TEMPERATURE": "0.2",
            "CHAT_HISTORY_FILE": str(tmp_path / "history.json"),
            "CHAT_LOG_LEVEL": "debug",
        })

        assert config.base_url == "http://localhost:8080/v1"
        assert config.model == "gpt-4o-mini"
        assert config.max_tokens == 256
        assert config.temperature == 0.2
        assert config.history_file == tmp_path / "history.json"
        assert config.log_level == LogLevel.DEBUG

    def test_history_file_expands_home(self):
        config = load_config({"OPENAI_API_KEY": "sk-test", "CHAT_HISTORY_FILE": "~/chat.json"})

        assert config.history_file == Path.home() / "chat.json"

    @pytest.mark.parametrize("variable,value", [
        ("CHAT_MAX_TOKENS", "lots"),
        ("CHAT_MAX_TOKENS", "0"),
        ("CHAT_TEMPERATURE", "hot"),
        ("CHAT_TEMPERATURE", "3.5"),
        ("CHAT_LOG_LEVEL", "chatty"),
    ])
    def test_invalid_values_raise_config_error(self, variable, value):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config({"OPENAI_API_KEY": "sk-test", variable: value})

    def test_deepseek_uses_its_own_credential(self):
        with pytest.raises(ConfigError, match="DEEPSEEK_API_KEY"):
            load_config({"LLM_PROVIDER": "deepseek", "OPENAI_API_KEY": "sk-test"})

        config = load_config({"LLM_PROVIDER": "DeepSeek", "DEEPSEEK_API_KEY": "ds-test"})
        assert config.provider == "deepseek"
        assert config.api_key == "ds-test"

    def test_unknown_provider_raises_config_error(self):
        with pytest.raises(ConfigError, match="Unknown LLM provider"):
            load_config({"LLM_PROVIDER": "mystery", "OPENAI_API_KEY": "sk-test"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.delenv("LLM_PROVIDER", raising=False)

        assert load_config().api_key == "sk-env"


class TestChatConfig:
    """Tests for ChatConfig."""

    def test_provider_kwargs_only_include_set_values(self):
        config = ChatConfig(api_key="sk-test")

        assert config.provider_kwargs() == {"api_key": "sk-test"}

    def test_provider_kwargs_with_overrides(self):
        config = ChatConfig(api_key="sk-test", model="gpt-4o", base_url="http://proxy/v1")

        assert config.provider_kwargs() == {
            "api_key": "sk-test",
            "model": "gpt-4o",
            "base_url": "http://proxy/v1",
        }
