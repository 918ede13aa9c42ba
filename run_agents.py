#!/usr/bin/env python3
"""
Script to run the diff agents against a git working tree:
- Code review of the uncommitted changes, file by file
- Conventional commit message proposal
- Markdown documentation of the changes

Arguments:
- Repository path (optional, defaults to DIFF_AGENTS_TARGET_DIR or the current directory)
- --tasks: Subset of review, commit, docs to run (default: all, in that order)
- --max-steps: Maximum model calls per agent (default: 10)
- --provider / --model: Chat model selection
"""

import argparse
import logging
import subprocess
import sys
from pathlib import Path

from diff_agents.agents.domain.value_objects import AgentTask
from diff_agents.agents.repositories.factory import create_agents, create_chat_model
from diff_agents.agents.services.agent_runner_service import AgentRunnerService
from diff_agents.agents.services.tool_registry import create_tool_registry
from diff_agents.config.settings import load_settings
from diff_agents.docs.services.markdown_service import MarkdownService
from diff_agents.git.repositories.implementations import GitRepositoryImpl
from diff_agents.git.services.git_service import GitService

TASK_HEADERS = {
    AgentTask.REVIEW: "🔍 Reviewing changes",
    AgentTask.COMMIT: "📝 Generating commit message",
    AgentTask.DOCS: "📄 Writing documentation",
}


def is_git_repository(repo_path: Path) -> bool:
    """Check if the given path is inside a git working tree."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--is-inside-work-tree"],
            cwd=repo_path,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0 and result.stdout.strip() == "true"


def validate_repository(repo_path: Path) -> tuple[bool, str]:
    """
    Validate the repository path and return (is_valid, message).

    Args:
        repo_path: Path to the git working tree

    Returns:
        Tuple of (is_valid, message)
    """
    if not repo_path.exists():
        return False, f"Repository path does not exist: {repo_path}"

    if not repo_path.is_dir():
        return False, f"Repository path is not a directory: {repo_path}"

    if not is_git_repository(repo_path):
        return False, f"Path is not a git repository: {repo_path}"

    return True, "Repository is valid"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Review uncommitted changes, propose a commit message and write "
            "documentation using AI agents"
        )
    )
    parser.add_argument(
        "repo_path",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the git repository directory (default: DIFF_AGENTS_TARGET_DIR or .)",
    )
    parser.add_argument(
        "--tasks",
        nargs="+",
        choices=[task.value for task in AgentTask],
        default=[task.value for task in AgentTask],
        help="Tasks to run, in order (default: review commit docs)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Maximum number of model calls per agent (default: 10)",
    )
    parser.add_argument(
        "--provider",
        type=str,
        default=None,
        help="Chat model provider: anthropic or openai (default: LLM_PROVIDER or anthropic)",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model name override",
    )
    parser.add_argument(
        "--system-prompt",
        type=Path,
        default=None,
        help="Path to a custom system prompt file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log git commands, tool calls and agent steps to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main function to parse arguments, validate the repository, and run the agents."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(
            target_directory=args.repo_path,
            max_steps=args.max_steps,
            provider=args.provider,
            model_name=args.model,
            system_prompt_path=args.system_prompt,
        )
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    is_valid, message = validate_repository(settings.target_directory)
    if not is_valid:
        print(f"✗ Validation failed: {message}", file=sys.stderr)
        sys.exit(1)

    try:
        llm = create_chat_model(settings.provider, settings.model_name)
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        print(
            "  Hint: Set ANTHROPIC_API_KEY or OPENAI_API_KEY in .env file or environment",
            file=sys.stderr,
        )
        sys.exit(1)

    try:
        # Initialize services
        git_service = GitService(GitRepositoryImpl())
        tool_registry = create_tool_registry(git_service, MarkdownService())
        agents = create_agents(
            llm,
            tool_registry,
            max_steps=settings.max_steps,
            system_prompt_path=settings.system_prompt_path,
        )
        runner = AgentRunnerService(agents)

        for task in args.tasks:
            print(f"\n{TASK_HEADERS[AgentTask(task)]} in {settings.target_directory}...\n")
            runner.run_tasks([task], settings.target_directory)

        print("\n✓ Done!")
        sys.exit(0)

    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"✗ Agent run failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
