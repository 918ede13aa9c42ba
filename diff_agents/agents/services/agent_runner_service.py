"""Service for running the task agents one after another."""

import logging
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TextIO

from diff_agents.agents.domain.value_objects import AgentTask, TaskRequest
from diff_agents.agents.repositories.interfaces import LLMAgentRepository

logger = logging.getLogger(__name__)

TASK_PROMPTS: dict[AgentTask, str] = {
    AgentTask.REVIEW: (
        "Review the code changes in '{directory}' directory, "
        "make your reviews and suggestions file by file"
    ),
    AgentTask.COMMIT: (
        "Generate a conventional commit message for the changes in '{directory}' directory"
    ),
    AgentTask.DOCS: (
        "Generate a markdown file documenting the new features at '{directory}' directory. "
        "It should include an overview, installation instructions, usage examples, "
        "and configuration options from the root directory."
    ),
}


class AgentRunnerService:
    """Service for running agents sequentially against one directory."""

    def __init__(self, agents: Mapping[AgentTask, LLMAgentRepository]) -> None:
        """
        Initialize AgentRunnerService.

        Args:
            agents: Agent to use for each task
        """
        self._agents = dict(agents)

    @staticmethod
    def build_requests(
        tasks: Iterable[AgentTask | str], directory: Path
    ) -> tuple[TaskRequest, ...]:
        """
        Render the prompt of each task for a directory.

        Raises:
            ValueError: If a task name is unknown
        """
        requests: list[TaskRequest] = []
        for task in tasks:
            try:
                agent_task = AgentTask(task)
            except ValueError:
                raise ValueError(
                    f"Unknown task: {task}. "
                    f"Supported values: {', '.join(t.value for t in AgentTask)}"
                ) from None
            prompt = TASK_PROMPTS[agent_task].format(directory=directory)
            requests.append(TaskRequest(task=agent_task, prompt=prompt))
        return tuple(requests)

    def run_tasks(
        self,
        tasks: Iterable[AgentTask | str],
        directory: Path,
        output: TextIO | None = None,
    ) -> dict[AgentTask, str]:
        """
        Run each task to completion before starting the next.

        Args:
            tasks: Tasks to run, in order
            directory: Directory the prompts point the agents at
            output: Stream the agents write to. Defaults to sys.stdout

        Returns:
            Text produced by each task

        Raises:
            ValueError: If a task is unknown or has no agent
            RuntimeError: If an agent fails
        """
        if output is None:
            output = sys.stdout

        requests = self.build_requests(tasks, directory)
        missing = [request.task.value for request in requests if request.task not in self._agents]
        if missing:
            raise ValueError(f"No agent configured for task(s): {', '.join(missing)}")

        results: dict[AgentTask, str] = {}
        for request in requests:
            logger.info("Running %s task on %s", request.task.value, directory)
            results[request.task] = self._agents[request.task].run(request.prompt, output)
            output.write("\n")
            output.flush()
        return results
