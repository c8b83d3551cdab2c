"""Quiz generation API backed by a structured-output LLM provider."""

__version__ = "0.1.0"
