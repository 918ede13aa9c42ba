"""Factory for creating chat models and agents."""

from pathlib import Path

from langchain_core.language_models.chat_models import BaseChatModel

from diff_agents.agents.domain.value_objects import AgentTask
from diff_agents.agents.repositories.base_langchain_agent import BaseLangChainAgent
from diff_agents.agents.repositories.chat_models import (
    create_claude_model,
    create_openai_model,
)
from diff_agents.agents.repositories.implementations import (
    CodeReviewAgent,
    CommitMessageAgent,
    DocumentationAgent,
)
from diff_agents.agents.services.tool_registry import ToolRegistry

AGENT_CLASSES: dict[AgentTask, type[BaseLangChainAgent]] = {
    AgentTask.REVIEW: CodeReviewAgent,
    AgentTask.COMMIT: CommitMessageAgent,
    AgentTask.DOCS: DocumentationAgent,
}


def create_chat_model(provider: str, model_name: str | None = None) -> BaseChatModel:
    """
    Create a chat model for the given provider.

    Args:
        provider: 'anthropic'/'claude' or 'openai'/'gpt'
        model_name: Optional model name override

    Returns:
        Chat model instance (Claude or OpenAI)

    Raises:
        ValueError: If the provider is invalid or its API key is missing
    """
    provider = provider.lower()

    if provider == "anthropic" or provider == "claude":
        return create_claude_model(model_name=model_name)
    elif provider == "openai" or provider == "gpt":
        return create_openai_model(model_name=model_name)
    else:
        raise ValueError(
            f"Invalid LLM_PROVIDER: {provider}. "
            "Supported values: 'anthropic', 'claude', 'openai', 'gpt'"
        )


def create_agents(
    llm: BaseChatModel,
    tool_registry: ToolRegistry,
    max_steps: int,
    system_prompt_path: Path | None = None,
) -> dict[AgentTask, BaseLangChainAgent]:
    """
    Create one agent per task sharing the same model and step limit.

    Args:
        llm: Chat model used by every agent
        tool_registry: Registry the agents pick their tools from
        max_steps: Step limit applied to every agent
        system_prompt_path: Optional custom system prompt file

    Returns:
        Mapping from task to agent
    """
    return {
        task: agent_class(
            llm,
            tool_registry,
            max_steps=max_steps,
            system_prompt_path=system_prompt_path,
        )
        for task, agent_class in AGENT_CLASSES.items()
    }
