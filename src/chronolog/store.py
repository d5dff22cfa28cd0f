"""Date-indexed diary storage.

The whole database is one JSON blob shaped like::

    {"MM-DD": {"<year>": {"id": ..., "dayMonth": "MM-DD", "year": 2024, ...}}}

Every operation reads the full blob; every mutation writes the full blob back.
Storage errors never escape: an unreadable blob reads as an empty database and
a failed write is logged.
"""

import json
import logging

from .config import STORAGE_KEY
from .core.entry import Entry, date_key
from .ports.blob_store import BlobStore

logger = logging.getLogger(__name__)

Database = dict[str, dict[int, Entry]]


class DiaryStore:
    """
    Entries keyed by calendar day (MM-DD) and then by year.

    Implements DiaryRepository protocol.
    """

    def __init__(self, blob: BlobStore, storage_key: str = STORAGE_KEY):
        self.blob = blob
        self.storage_key = storage_key

    # ============== Persistence ==============

    def _load(self) -> Database:
        """Read the full database. Unreadable state reads as empty."""
        try:
            raw = self.blob.get(self.storage_key)
            if not raw:
                return {}
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load diary data: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Failed to load diary data: expected an object, got {type(data).__name__}")
            return {}

        db: Database = {}
        for key, year_map in data.items():
            if not isinstance(year_map, dict):
                logger.warning(f"Skipping malformed bucket {key!r}")
                continue
            bucket = db.setdefault(key, {})
            for year_key, entry_data in year_map.items():
                try:
                    entry = Entry.from_dict(entry_data)
                    year = int(year_key)
                except (KeyError, ValueError, TypeError, AttributeError) as e:
                    logger.warning(f"Skipping malformed entry {key}/{year_key}: {e}")
                    continue
                if entry.date_key != key or entry.year != year:
                    logger.warning(
                        f"Skipping entry {entry.id} filed under {key}/{year} "
                        f"but dated {entry.date_key}/{entry.year}"
                    )
                    continue
                bucket[year] = entry
        return db

    def _save(self, db: Database) -> None:
        """Write the full database. Failures are logged, not raised."""
        data = {
            key: {str(year): entry.to_dict() for year, entry in bucket.items()}
            for key, bucket in db.items()
        }
        try:
            self.blob.set(self.storage_key, json.dumps(data, ensure_ascii=False))
        except OSError as e:
            logger.error(f"Failed to save diary data: {e}")

    # ============== Queries ==============

    def get_entry(self, month: int, day: int, year: int) -> Entry | None:
        """Read the entry for one year of a calendar day. Returns None if not found."""
        db = self._load()
        return db.get(date_key(month, day), {}).get(year)

    def get_entries_for_day(self, month: int, day: int) -> list[Entry]:
        """All entries for a calendar day, most recent year first."""
        db = self._load()
        bucket = db.get(date_key(month, day))
        if not bucket:
            return []
        return sorted(bucket.values(), key=lambda e: e.year, reverse=True)

    def get_entry_counts_for_month(self, month: int) -> dict[int, int]:
        """Day number -> number of years with an entry. Days with none are omitted."""
        db = self._load()
        prefix = f"{month:02d}"
        counts = {}

        for key, bucket in db.items():
            month_part, _, day_part = key.partition("-")
            if month_part != prefix:
                continue
            try:
                day = int(day_part)
            except ValueError:
                continue
            if len(bucket) > 0:
                counts[day] = len(bucket)

        return counts

    # ============== Mutations ==============

    def save_entry(self, entry: Entry) -> None:
        """Write/overwrite the entry under (entry.date_key, entry.year). Last write wins."""
        db = self._load()
        db.setdefault(entry.date_key, {})[entry.year] = entry
        self._save(db)

    def delete_entry(self, month: int, day: int, year: int) -> None:
        """
        Delete the entry for one year of a calendar day.

        Only writes when something was removed. An emptied bucket stays in the
        database; it counts as zero entries everywhere.
        """
        db = self._load()
        bucket = db.get(date_key(month, day))
        if bucket is None or year not in bucket:
            return
        del bucket[year]
        self._save(db)
