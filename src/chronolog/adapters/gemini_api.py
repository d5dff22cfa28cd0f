"""Gemini API adapter - HTTP client for text generation."""

import logging

import requests

from chronolog.config import DEFAULT_GEMINI_MODEL
from chronolog.ports.llm_service import InsightRequestError, MissingCredentialsError

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class GeminiAPIService:
    """
    Gemini generateContent adapter.

    Implements LLMService protocol. One blocking request per prompt, no
    streaming and no retry.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        timeout: int = 60,
        session: requests.Session | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._session = session or requests.Session()

    def _request_body(self, prompt: str) -> dict:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                # Flash doesn't need thinking for a short reflection
                "thinkingConfig": {"thinkingBudget": 0},
            },
        }

    def generate(self, prompt: str) -> str:
        """Generate text from a prompt. Returns complete response."""
        if not self.api_key:
            raise MissingCredentialsError("API Key is missing. Please provide a valid API key.")

        url = f"{API_BASE}/models/{self.model}:generateContent"
        try:
            resp = self._session.post(
                url,
                headers={"x-goog-api-key": self.api_key},
                json=self._request_body(prompt),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.Timeout as e:
            logger.error(f"Gemini API timed out after {self.timeout}s")
            raise InsightRequestError(f"Gemini request timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            logger.error(f"Gemini API error: {e}")
            raise InsightRequestError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Gemini API returned invalid JSON: {e}")
            raise InsightRequestError(f"Gemini returned invalid JSON: {e}") from e

        return self._extract_text(data)

    @staticmethod
    def _extract_text(data: dict) -> str:
        """Concatenate the text parts of the first candidate."""
        try:
            candidates = data.get("candidates") or []
            if not candidates:
                return ""
            parts = candidates[0].get("content", {}).get("parts") or []
            return "".join(p.get("text", "") for p in parts)
        except (AttributeError, TypeError) as e:
            raise InsightRequestError(f"Unexpected Gemini response shape: {e}") from e
