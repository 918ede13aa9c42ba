"""Markdown documentation output."""
