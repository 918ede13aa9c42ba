"""Settings loaded from the environment and command-line overrides."""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_MAX_STEPS = 10
DEFAULT_PROVIDER = "anthropic"


@dataclass(frozen=True)
class AgentSettings:
    """Configuration shared by every agent run."""

    target_directory: Path
    max_steps: int = DEFAULT_MAX_STEPS
    provider: str = DEFAULT_PROVIDER
    model_name: str | None = None
    system_prompt_path: Path | None = None

    def __post_init__(self) -> None:
        if self.max_steps < 1:
            raise ValueError(f"max_steps must be a positive integer, got {self.max_steps}")


def _load_env_file() -> None:
    """Load environment variables from .env file."""
    # Try to find .env file in project root (parent of diff_agents package)
    project_root = Path(__file__).parent.parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Fallback: try current directory
        load_dotenv()


def _parse_max_steps(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(
            f"DIFF_AGENTS_MAX_STEPS must be a positive integer, got {value!r}"
        ) from None


def load_settings(
    target_directory: Path | None = None,
    max_steps: int | None = None,
    provider: str | None = None,
    model_name: str | None = None,
    system_prompt_path: Path | None = None,
) -> AgentSettings:
    """
    Build settings from the environment, letting explicit arguments win.

    Environment variables:
        DIFF_AGENTS_TARGET_DIR: Directory to analyse (default: current directory)
        DIFF_AGENTS_MAX_STEPS: Step limit per agent (default: 10)
        LLM_PROVIDER: 'anthropic' or 'openai' (default: anthropic)
        DIFF_AGENTS_MODEL: Model name override
        DIFF_AGENTS_SYSTEM_PROMPT: Path to a custom system prompt

    Raises:
        ValueError: If a value is invalid
    """
    _load_env_file()

    system_prompt_env = os.getenv("DIFF_AGENTS_SYSTEM_PROMPT")
    settings = AgentSettings(
        target_directory=Path(os.getenv("DIFF_AGENTS_TARGET_DIR", ".")),
        max_steps=(
            max_steps
            if max_steps is not None
            else _parse_max_steps(os.getenv("DIFF_AGENTS_MAX_STEPS", str(DEFAULT_MAX_STEPS)))
        ),
        provider=os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER),
        model_name=os.getenv("DIFF_AGENTS_MODEL") or None,
        system_prompt_path=Path(system_prompt_env) if system_prompt_env else None,
    )

    overrides = {
        "target_directory": target_directory,
        "max_steps": max_steps,
        "provider": provider,
        "model_name": model_name,
        "system_prompt_path": system_prompt_path,
    }
    return replace(settings, **{k: v for k, v in overrides.items() if v is not None})
