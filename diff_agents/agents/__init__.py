"""LangChain agents and their tools."""
