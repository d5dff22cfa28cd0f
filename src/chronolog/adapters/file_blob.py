"""File-based blob storage adapter."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class FileBlobStore:
    """
    File-based blob storage.

    Implements BlobStore protocol. Each key gets a JSON file in data_dir.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def _path_for_key(self, key: str) -> Path:
        """Get the file path for a given key."""
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Read the value stored under key. Returns None if not found."""
        path = self._path_for_key(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        """
        Write/overwrite the value stored under key.

        Writes a sibling temp file and renames it over the target, so a failed
        write leaves the previous value intact. The data directory is created
        on first write.
        """
        path = self._path_for_key(key)
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise
        logger.debug(f"Wrote {len(value)} chars to {path}")

    def remove(self, key: str) -> None:
        """Remove key if present."""
        self._path_for_key(key).unlink(missing_ok=True)
