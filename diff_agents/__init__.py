"""Command-line agents that review diffs, draft commit messages and write docs."""

__version__ = "0.1.0"
