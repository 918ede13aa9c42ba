"""Repository interfaces for LLM agents."""

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TextIO


class LLMAgentRepository(ABC):
    """Interface for an agent that answers a prompt with streamed text."""

    @abstractmethod
    def stream(self, prompt: str) -> Iterator[str]:
        """
        Run the agent on a prompt.

        Args:
            prompt: Free-text task description

        Returns:
            Iterator over text chunks in the order the model produces them
        """
        ...

    def run(self, prompt: str, output: TextIO | None = None) -> str:
        """
        Run the agent and write every chunk to output as soon as it arrives.

        Args:
            prompt: Free-text task description
            output: Stream to write to. Defaults to sys.stdout

        Returns:
            The full text that was written
        """
        if output is None:
            output = sys.stdout

        parts: list[str] = []
        for chunk in self.stream(prompt):
            output.write(chunk)
            output.flush()
            parts.append(chunk)
        return "".join(parts)
