"""LLM service interface."""

from typing import Protocol


class InsightError(Exception):
    """Base class for text-generation failures."""

    pass


class MissingCredentialsError(InsightError):
    """Raised when no API key is configured."""

    pass


class InsightRequestError(InsightError):
    """Raised when the generation request fails or returns garbage."""

    pass


class LLMService(Protocol):
    """Interface for LLM text generation."""

    def generate(self, prompt: str) -> str:
        """Generate text from a prompt. Returns complete response."""
        ...
