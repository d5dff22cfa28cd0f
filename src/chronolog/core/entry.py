"""Diary entry model and date-key helpers - pure functions, no I/O."""

import time
import uuid
from dataclasses import dataclass
from typing import Iterable


def date_key(month: int, day: int) -> str:
    """
    Canonical MM-DD key for a calendar day.

    No calendar validation: 04-31 is a perfectly good key.
    """
    return f"{month:02d}-{day:02d}"


def parse_date_key(key: str) -> tuple[int, int]:
    """Split an MM-DD key into (month, day). Raises ValueError if malformed."""
    month_str, sep, day_str = key.partition("-")
    if not sep:
        raise ValueError(f"Invalid date key {key!r}: expected MM-DD")
    return int(month_str), int(day_str)


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class Entry:
    """One year's journal record for a calendar day."""

    id: str
    date_key: str
    year: int
    content: str = ""
    mood: str | None = None
    last_edited: int = 0

    @property
    def is_persisted(self) -> bool:
        """Whether this entry has been written at least once."""
        return self.last_edited != 0

    @classmethod
    def new(cls, month: int, day: int, year: int) -> "Entry":
        """Fresh, unsaved entry with a random id."""
        return cls(id=str(uuid.uuid4()), date_key=date_key(month, day), year=year)

    def to_dict(self) -> dict:
        """Serialize to the persisted JSON shape."""
        data = {
            "id": self.id,
            "dayMonth": self.date_key,
            "year": self.year,
            "content": self.content,
        }
        if self.mood is not None:
            data["mood"] = self.mood
        data["lastEdited"] = self.last_edited
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """Parse the persisted JSON shape. Raises KeyError/ValueError/TypeError if malformed."""
        return cls(
            id=str(data["id"]),
            date_key=data["dayMonth"],
            year=int(data["year"]),
            content=data.get("content") or "",
            mood=data.get("mood"),
            last_edited=int(data.get("lastEdited") or 0),
        )


def suggest_year(existing_years: Iterable[int], current_year: int) -> int:
    """Most recent year, starting from current_year, that has no entry yet."""
    taken = set(existing_years)
    year = current_year
    while year in taken:
        year -= 1
    return year
