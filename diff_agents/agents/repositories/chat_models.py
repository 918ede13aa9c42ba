"""LangChain chat model construction for the supported providers."""

import os

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
TEMPERATURE = 0.3


def create_claude_model(model_name: str | None = None) -> BaseChatModel:
    """
    Create a Claude chat model with the API key from the environment.

    Args:
        model_name: Optional model name override. Defaults to ANTHROPIC_MODEL or
                    claude-3-5-sonnet-20241022

    Raises:
        ValueError: If ANTHROPIC_API_KEY is not set
    """
    api_key = os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        raise ValueError(
            "ANTHROPIC_API_KEY environment variable is required. "
            "Please set it in a .env file or as an environment variable. "
            "See .env.example for reference."
        )

    model = model_name or os.getenv("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL)

    return ChatAnthropic(  # type: ignore[call-arg]
        model_name=model,
        temperature=TEMPERATURE,
    )


def create_openai_model(model_name: str | None = None) -> BaseChatModel:
    """
    Create an OpenAI chat model with the API key from the environment.

    Args:
        model_name: Optional model name override. Defaults to OPENAI_MODEL or gpt-4o-mini

    Raises:
        ValueError: If OPENAI_API_KEY is not set
    """
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError(
            "OPENAI_API_KEY environment variable is required. "
            "Please set it in a .env file or as an environment variable. "
            "See .env.example for reference."
        )

    model = model_name or os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)

    return ChatOpenAI(  # type: ignore[call-arg]
        model_name=model,
        temperature=TEMPERATURE,
    )
