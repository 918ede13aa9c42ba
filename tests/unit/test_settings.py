"""Unit tests for settings loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from diff_agents.config.settings import AgentSettings, load_settings

ENV_VARS = (
    "DIFF_AGENTS_TARGET_DIR",
    "DIFF_AGENTS_MAX_STEPS",
    "LLM_PROVIDER",
    "DIFF_AGENTS_MODEL",
    "DIFF_AGENTS_SYSTEM_PROMPT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("diff_agents.config.settings.load_dotenv"):
        yield


class TestLoadSettings:
    """Test cases for load_settings."""

    def test_defaults(self):
        settings = load_settings()

        assert settings == AgentSettings(target_directory=Path("."))
        assert settings.max_steps == 10
        assert settings.provider == "anthropic"
        assert settings.model_name is None

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("DIFF_AGENTS_TARGET_DIR", "../my-agent")
        monkeypatch.setenv("DIFF_AGENTS_MAX_STEPS", "4")
        monkeypatch.setenv("LLM_PROVIDER", "openai")
        monkeypatch.setenv("DIFF_AGENTS_MODEL", "gpt-4o")
        monkeypatch.setenv("DIFF_AGENTS_SYSTEM_PROMPT", "prompt.md")

        settings = load_settings()

        assert settings.target_directory == Path("../my-agent")
        assert settings.max_steps == 4
        assert settings.provider == "openai"
        assert settings.model_name == "gpt-4o"
        assert settings.system_prompt_path == Path("prompt.md")

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("DIFF_AGENTS_MAX_STEPS", "4")
        monkeypatch.setenv("LLM_PROVIDER", "openai")

        settings = load_settings(target_directory=Path("/repo"), max_steps=7, provider="anthropic")

        assert settings.target_directory == Path("/repo")
        assert settings.max_steps == 7
        assert settings.provider == "anthropic"

    @pytest.mark.parametrize("value", ["abc", "2.5", ""])
    def test_non_integer_max_steps(self, monkeypatch, value):
        monkeypatch.setenv("DIFF_AGENTS_MAX_STEPS", value)

        with pytest.raises(ValueError, match="DIFF_AGENTS_MAX_STEPS"):
            load_settings()

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_non_positive_max_steps(self, monkeypatch, value):
        monkeypatch.setenv("DIFF_AGENTS_MAX_STEPS", value)

        with pytest.raises(ValueError, match="positive integer"):
            load_settings()

    def test_invalid_override(self):
        with pytest.raises(ValueError, match="positive integer"):
            load_settings(max_steps=0)

    def test_override_skips_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("DIFF_AGENTS_MAX_STEPS", "abc")

        settings = load_settings(max_steps=3)

        assert settings.max_steps == 3
