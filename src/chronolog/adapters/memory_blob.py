"""In-memory blob storage adapter."""


class MemoryBlobStore:
    """
    Process-local blob storage.

    Implements BlobStore protocol. Nothing survives the process; useful for
    dry runs and tests.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes += 1

    def remove(self, key: str) -> None:
        self.values.pop(key, None)
