"""Ports - interfaces/protocols for external dependencies."""

from .blob_store import BlobStore
from .diary_store import DiaryRepository
from .llm_service import LLMService, InsightError, MissingCredentialsError, InsightRequestError

__all__ = [
    "BlobStore",
    "DiaryRepository",
    "LLMService",
    "InsightError",
    "MissingCredentialsError",
    "InsightRequestError",
]
