"""Scaffold community-health files for a repository using an LLM provider."""

__version__ = "0.1.0"
