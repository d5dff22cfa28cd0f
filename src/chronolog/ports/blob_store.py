"""Backing blob storage interface."""

from typing import Protocol


class BlobStore(Protocol):
    """Interface for a string key/value store holding whole serialized values."""

    def get(self, key: str) -> str | None:
        """Read the value stored under key. Returns None if not found."""
        ...

    def set(self, key: str, value: str) -> None:
        """Write/overwrite the value stored under key."""
        ...

    def remove(self, key: str) -> None:
        """Remove key if present."""
        ...
