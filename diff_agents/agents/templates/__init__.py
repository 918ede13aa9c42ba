"""Prompt templates shipped with the package."""

from pathlib import Path

TEMPLATES_DIR = Path(__file__).parent
DEFAULT_SYSTEM_PROMPT_PATH = TEMPLATES_DIR / "system_prompt.md"
