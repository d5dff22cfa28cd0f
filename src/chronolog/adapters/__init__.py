"""Adapters - I/O implementations of ports."""

from .file_blob import FileBlobStore
from .memory_blob import MemoryBlobStore
from .gemini_api import GeminiAPIService

__all__ = [
    "FileBlobStore",
    "MemoryBlobStore",
    "GeminiAPIService",
]
