"""Diary storage interface."""

from typing import Protocol

from chronolog.core.entry import Entry


class DiaryRepository(Protocol):
    """Interface for reading and writing entries keyed by calendar day and year."""

    def get_entry(self, month: int, day: int, year: int) -> Entry | None:
        """Read the entry for one year of a calendar day. Returns None if not found."""
        ...

    def get_entries_for_day(self, month: int, day: int) -> list[Entry]:
        """All entries for a calendar day, most recent year first."""
        ...

    def save_entry(self, entry: Entry) -> None:
        """Write/overwrite the entry for its (date_key, year)."""
        ...

    def delete_entry(self, month: int, day: int, year: int) -> None:
        """Delete the entry for one year of a calendar day, if present."""
        ...

    def get_entry_counts_for_month(self, month: int) -> dict[int, int]:
        """Day number -> number of entries, for days that have any."""
        ...
