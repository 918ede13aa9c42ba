"""Git diff collection and commit heuristics."""
