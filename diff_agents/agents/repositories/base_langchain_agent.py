"""Base class for LangChain-based tool-calling agents."""

import logging
from abc import ABC
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

from langchain_core.messages import (
    AIMessageChunk,
    BaseMessage,
    HumanMessage,
    SystemMessage,
    ToolMessage,
)
from langchain_core.messages.tool import ToolCall

from diff_agents.agents.repositories.interfaces import LLMAgentRepository
from diff_agents.agents.services.tool_registry import ToolRegistry
from diff_agents.agents.templates import DEFAULT_SYSTEM_PROMPT_PATH

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10


class BaseLangChainAgent(LLMAgentRepository, ABC):
    """Base class for agents that stream a chat model bound to a subset of tools."""

    name: str = "agent"
    tool_names: tuple[str, ...] = ()

    def __init__(
        self,
        llm: "BaseChatModel",
        tool_registry: ToolRegistry,
        max_steps: int = DEFAULT_MAX_STEPS,
        system_prompt_path: Path | None = None,
    ) -> None:
        """Initialize the agent.

        Args:
            llm: Chat model supporting tool binding and streaming
            tool_registry: Registry the agent's tools are looked up in
            max_steps: Maximum number of model calls per run
            system_prompt_path: Path to a custom system prompt file.
                                Defaults to the built-in prompt.

        Raises:
            ValueError: If max_steps is smaller than 1
            KeyError: If one of the agent's tools is not registered
        """
        if max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {max_steps}")

        self._llm = llm
        self._tools = tool_registry.select(self.tool_names)
        self._tools_by_name = {tool.name: tool for tool in self._tools}
        self._max_steps = max_steps
        self._system_prompt_path = system_prompt_path or DEFAULT_SYSTEM_PROMPT_PATH
        self._system_prompt = self._load_system_prompt()

    @property
    def max_steps(self) -> int:
        return self._max_steps

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    def _load_system_prompt(self) -> str:
        """Load the system prompt from file.

        Raises:
            FileNotFoundError: If the prompt file does not exist.
            RuntimeError: If the prompt file cannot be read.
        """
        try:
            return self._system_prompt_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise FileNotFoundError(
                f"System prompt file not found: {self._system_prompt_path}"
            ) from None
        except Exception as e:
            raise RuntimeError(
                f"Failed to read system prompt file: {self._system_prompt_path}: {e}"
            ) from e

    def stream(self, prompt: str) -> Iterator[str]:
        """
        Run the tool-calling loop and yield the model's text as it streams.

        Each step is one streamed model call. Tool calls requested in a step are
        executed and their results fed into the next step. The run ends when a
        step requests no tools or after max_steps steps.

        Args:
            prompt: Free-text task description

        Returns:
            Iterator over text chunks

        Raises:
            RuntimeError: If the model or a tool fails
        """
        llm_with_tools = self._llm.bind_tools(self._tools)
        messages: list[BaseMessage] = [
            SystemMessage(content=self._system_prompt),
            HumanMessage(content=prompt),
        ]

        for step in range(1, self._max_steps + 1):
            logger.debug("%s agent: step %d of %d", self.name, step, self._max_steps)
            response: AIMessageChunk | None = None
            try:
                for chunk in llm_with_tools.stream(messages):
                    response = chunk if response is None else response + chunk
                    text = self._extract_text(chunk.content)
                    if text:
                        yield text
            except Exception as e:
                raise RuntimeError(
                    f"{self.name} agent failed during step {step}: {str(e)}"
                ) from e

            if response is None:
                return

            messages.append(response)
            if not response.tool_calls and not response.invalid_tool_calls:
                return

            for tool_call in response.tool_calls:
                messages.append(self._execute_tool_call(tool_call))
            for invalid_call in response.invalid_tool_calls:
                messages.append(
                    ToolMessage(
                        content=f"Invalid tool call {invalid_call.get('name')}: "
                        f"{invalid_call.get('error') or 'arguments could not be parsed'}",
                        tool_call_id=invalid_call.get("id") or "",
                        status="error",
                    )
                )

        logger.info("%s agent stopped after reaching %d steps", self.name, self._max_steps)

    def _execute_tool_call(self, tool_call: ToolCall) -> ToolMessage:
        """Run one requested tool and wrap its result for the model."""
        tool_name = tool_call["name"]
        tool_call_id = tool_call.get("id") or ""

        tool = self._tools_by_name.get(tool_name)
        if tool is None:
            return ToolMessage(
                content=f"Unknown tool: {tool_name}",
                tool_call_id=tool_call_id,
                status="error",
            )

        logger.debug("%s agent: calling %s with %s", self.name, tool_name, tool_call["args"])
        try:
            result: Any = tool.invoke(
                ToolCall(
                    name=tool_name,
                    args=tool_call["args"],
                    id=tool_call_id,
                    type="tool_call",
                )
            )
        except Exception as e:
            raise RuntimeError(f"Tool {tool_name} failed: {str(e)}") from e

        if isinstance(result, ToolMessage):
            return result
        return ToolMessage(content=str(result), tool_call_id=tool_call_id, name=tool_name)

    @staticmethod
    def _extract_text(content: str | list[Any]) -> str:
        """Return the plain text carried by a message chunk."""
        if isinstance(content, str):
            return content
        return "".join(
            item if isinstance(item, str) else str(item.get("text", ""))
            for item in content
            if isinstance(item, str) or item.get("type") == "text"
        )
