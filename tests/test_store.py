"""Tests for the date-indexed diary store."""

import json
from unittest.mock import MagicMock

import pytest

from chronolog.adapters.file_blob import FileBlobStore
from chronolog.adapters.memory_blob import MemoryBlobStore
from chronolog.config import STORAGE_KEY
from chronolog.core.entry import Entry
from chronolog.store import DiaryStore


@pytest.fixture
def blob():
    return MemoryBlobStore()


@pytest.fixture
def store(blob):
    return DiaryStore(blob)


def make_entry(key: str, year: int, content: str = "", mood: str | None = None, id: str | None = None) -> Entry:
    return Entry(
        id=id or f"{key}-{year}",
        date_key=key,
        year=year,
        content=content,
        mood=mood,
        last_edited=1700000000000,
    )


class TestGetEntry:
    def test_round_trip(self, store):
        entry = make_entry("07-04", 2022, "Beach day", "☀️")
        store.save_entry(entry)

        assert store.get_entry(7, 4, 2022) == entry

    def test_round_trip_keeps_empty_mood(self, store):
        entry = make_entry("07-04", 2022, "hi", "")
        store.save_entry(entry)

        loaded = store.get_entry(7, 4, 2022)
        assert loaded == entry
        assert loaded.mood == ""

    def test_missing_year_returns_none(self, store):
        store.save_entry(make_entry("07-04", 2022))

        assert store.get_entry(7, 4, 2021) is None

    def test_missing_day_returns_none(self, store):
        assert store.get_entry(1, 1, 2024) is None

    def test_does_not_write(self, store, blob):
        store.get_entry(1, 1, 2024)
        assert blob.writes == 0

    def test_key_is_zero_padded(self, store, blob):
        store.save_entry(make_entry("03-05", 2020))

        data = json.loads(blob.get(STORAGE_KEY))
        assert "03-05" in data
        assert store.get_entry(3, 5, 2020) is not None


class TestSaveEntry:
    def test_last_write_wins(self, store):
        store.save_entry(make_entry("01-02", 2023, "first", id="a"))
        store.save_entry(make_entry("01-02", 2023, "second", id="b"))

        entries = store.get_entries_for_day(1, 2)
        assert len(entries) == 1
        assert entries[0].content == "second"
        assert entries[0].id == "b"

    def test_idempotent(self, store, blob):
        entry = make_entry("01-02", 2023, "same")
        store.save_entry(entry)
        first = blob.get(STORAGE_KEY)
        store.save_entry(entry)

        assert blob.get(STORAGE_KEY) == first

    def test_accepts_empty_content_and_no_mood(self, store):
        entry = Entry(id="x", date_key="12-25", year=2020)
        store.save_entry(entry)

        assert store.get_entry(12, 25, 2020) == entry

    def test_rewrites_whole_blob(self, store, blob):
        store.save_entry(make_entry("01-01", 2020))
        store.save_entry(make_entry("02-02", 2021))

        data = json.loads(blob.get(STORAGE_KEY))
        assert set(data) == {"01-01", "02-02"}
        assert blob.writes == 2

    def test_serialized_layout(self, store, blob):
        store.save_entry(make_entry("07-04", 2022, "Beach day", "☀️", id="a"))

        data = json.loads(blob.get(STORAGE_KEY))
        assert data == {
            "07-04": {
                "2022": {
                    "id": "a",
                    "dayMonth": "07-04",
                    "year": 2022,
                    "content": "Beach day",
                    "mood": "☀️",
                    "lastEdited": 1700000000000,
                }
            }
        }

    def test_mood_omitted_when_absent(self, store, blob):
        store.save_entry(make_entry("07-04", 2019, "Rainy indoors"))

        data = json.loads(blob.get(STORAGE_KEY))
        assert "mood" not in data["07-04"]["2019"]

    def test_invalid_calendar_day_stored_faithfully(self, store):
        store.save_entry(make_entry("04-31", 2022, "no such day"))

        assert store.get_entry(4, 31, 2022).content == "no such day"
        assert store.get_entry_counts_for_month(4) == {31: 1}


class TestGetEntriesForDay:
    def test_sorted_newest_first(self, store):
        for year in [2021, 2023, 2020]:
            store.save_entry(make_entry("05-05", year))

        assert [e.year for e in store.get_entries_for_day(5, 5)] == [2023, 2021, 2020]

    def test_empty_day(self, store):
        assert store.get_entries_for_day(2, 29) == []

    def test_other_days_not_included(self, store):
        store.save_entry(make_entry("05-05", 2020))
        store.save_entry(make_entry("05-06", 2021))

        assert [e.date_key for e in store.get_entries_for_day(5, 5)] == ["05-05"]

    def test_same_day_scenario(self, store):
        a = Entry(id="a", date_key="07-04", year=2022, content="Beach day", mood="☀️")
        b = Entry(id="b", date_key="07-04", year=2019, content="Rainy indoors")
        store.save_entry(a)
        store.save_entry(b)

        assert store.get_entries_for_day(7, 4) == [a, b]


class TestDeleteEntry:
    def test_removes_entry(self, store):
        store.save_entry(make_entry("09-09", 2020))
        store.save_entry(make_entry("09-09", 2021))

        store.delete_entry(9, 9, 2020)

        assert store.get_entry(9, 9, 2020) is None
        assert store.get_entry(9, 9, 2021) is not None

    def test_second_delete_does_not_write(self, store, blob):
        store.save_entry(make_entry("09-09", 2020))
        store.delete_entry(9, 9, 2020)
        writes = blob.writes

        store.delete_entry(9, 9, 2020)

        assert blob.writes == writes
        assert store.get_entries_for_day(9, 9) == []

    def test_missing_day_does_not_write(self, store, blob):
        store.delete_entry(1, 1, 2020)
        assert blob.writes == 0

    def test_empty_bucket_kept(self, store, blob):
        store.save_entry(make_entry("09-09", 2020))
        store.delete_entry(9, 9, 2020)

        data = json.loads(blob.get(STORAGE_KEY))
        assert data == {"09-09": {}}
        assert store.get_entries_for_day(9, 9) == []
        assert store.get_entry_counts_for_month(9) == {}


class TestGetEntryCountsForMonth:
    def test_counts_years_per_day(self, store):
        store.save_entry(make_entry("03-05", 2019))
        store.save_entry(make_entry("03-05", 2020))
        store.save_entry(make_entry("03-12", 2021))
        store.save_entry(make_entry("04-05", 2021))

        assert store.get_entry_counts_for_month(3) == {5: 2, 12: 1}

    def test_empty_month(self, store):
        store.save_entry(make_entry("03-05", 2019))
        assert store.get_entry_counts_for_month(11) == {}

    def test_two_digit_month(self, store):
        store.save_entry(make_entry("12-01", 2019))
        store.save_entry(make_entry("01-12", 2019))

        assert store.get_entry_counts_for_month(12) == {1: 1}
        assert store.get_entry_counts_for_month(1) == {12: 1}


class TestResilience:
    def test_corrupt_blob_reads_as_empty(self, blob, store):
        blob.set(STORAGE_KEY, "{not json")

        assert store.get_entries_for_day(1, 1) == []
        assert store.get_entry(1, 1, 2020) is None
        assert store.get_entry_counts_for_month(1) == {}

    def test_save_reinitializes_corrupt_blob(self, blob, store):
        blob.set(STORAGE_KEY, "{not json")
        entry = make_entry("01-01", 2024, "fresh start")

        store.save_entry(entry)

        assert store.get_entries_for_day(1, 1) == [entry]

    def test_wrong_top_level_shape(self, blob, store):
        blob.set(STORAGE_KEY, "[1, 2, 3]")
        assert store.get_entries_for_day(1, 1) == []

    def test_cleared_blob(self, blob, store):
        store.save_entry(make_entry("01-01", 2024))
        blob.remove(STORAGE_KEY)

        assert store.get_entries_for_day(1, 1) == []

    def test_malformed_entry_skipped(self, blob, store):
        good = make_entry("06-01", 2020, "ok").to_dict()
        blob.set(
            STORAGE_KEY,
            json.dumps({"06-01": {"2020": good, "2021": {"content": "no id"}}, "06-02": "junk"}),
        )

        entries = store.get_entries_for_day(6, 1)
        assert [e.year for e in entries] == [2020]
        assert store.get_entry_counts_for_month(6) == {1: 1}

    def test_misfiled_entry_skipped(self, blob, store):
        misfiled = make_entry("06-02", 2020).to_dict()
        blob.set(STORAGE_KEY, json.dumps({"06-01": {"2020": misfiled}}))

        assert store.get_entries_for_day(6, 1) == []

    def test_read_error_reads_as_empty(self):
        blob = MagicMock()
        blob.get.side_effect = OSError("disk on fire")
        store = DiaryStore(blob)

        assert store.get_entries_for_day(1, 1) == []

    def test_write_error_is_swallowed(self, caplog):
        blob = MagicMock()
        blob.get.return_value = None
        blob.set.side_effect = OSError("quota exceeded")
        store = DiaryStore(blob)

        store.save_entry(make_entry("01-01", 2024))

        blob.set.assert_called_once()
        assert "Failed to save diary data" in caplog.text

    def test_custom_storage_key(self, blob):
        store = DiaryStore(blob, storage_key="other")
        store.save_entry(make_entry("01-01", 2024))

        assert blob.get("other") is not None
        assert blob.get(STORAGE_KEY) is None


class TestFileBackedStore:
    def test_persists_across_instances(self, tmp_path):
        entry = make_entry("10-31", 2023, "Pumpkins", "🔥")
        DiaryStore(FileBlobStore(tmp_path)).save_entry(entry)

        assert DiaryStore(FileBlobStore(tmp_path)).get_entry(10, 31, 2023) == entry

    def test_unusable_data_dir_reads_empty_and_swallows_writes(self, tmp_path, caplog):
        (tmp_path / "blocker").write_text("not a directory")
        store = DiaryStore(FileBlobStore(tmp_path / "blocker" / "data"))

        assert store.get_entries_for_day(7, 4) == []
        assert store.get_entry_counts_for_month(7) == {}
        store.save_entry(make_entry("07-04", 2022))

        assert "Failed to save diary data" in caplog.text
        assert store.get_entries_for_day(7, 4) == []

    def test_unicode_written_as_text(self, tmp_path):
        DiaryStore(FileBlobStore(tmp_path)).save_entry(make_entry("10-31", 2023, "café", "🍵"))

        raw = (tmp_path / f"{STORAGE_KEY}.json").read_text(encoding="utf-8")
        assert "café" in raw
        assert "🍵" in raw
