"""Shared workflow layer between the CLI and the core.

Store and LLM construction, entry creation and editing, and insight generation
live here so the CLI stays thin.
"""

import logging
from dataclasses import replace
from datetime import date
from pathlib import Path

from .adapters.file_blob import FileBlobStore
from .adapters.gemini_api import GeminiAPIService
from .config import DATA_DIR, Config
from .core.entry import Entry, date_key, now_millis, parse_date_key, suggest_year
from .core.insight import NOT_ENOUGH_ENTRIES, MIN_ENTRIES, build_insight_prompt
from .ports.diary_store import DiaryRepository
from .ports.llm_service import InsightRequestError, LLMService, MissingCredentialsError
from .store import DiaryStore

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "API Key is missing. Add GEMINI_API_KEY to chronolog.conf or the environment."
EMPTY_INSIGHT_MESSAGE = "I couldn't generate an insight at this moment."
FAILED_INSIGHT_MESSAGE = "The stars are a bit cloudy right now. Please try again later."


def get_store(config: Config) -> DiaryStore:
    """Resolve data directory from config."""
    if config.data_dir:
        blob = FileBlobStore(Path(config.data_dir).expanduser())
    else:
        blob = FileBlobStore(DATA_DIR)
    return DiaryStore(blob, storage_key=config.storage_key)


def get_llm(config: Config) -> GeminiAPIService:
    return GeminiAPIService(
        api_key=config.gemini_api_key,
        model=config.gemini_model,
        timeout=config.gemini_timeout,
    )


# ============== Entries ==============


def new_entry(store: DiaryRepository, month: int, day: int, today: date | None = None) -> Entry:
    """
    Unsaved entry for a calendar day, under the most recent free year.

    Nothing is written until the entry is saved.
    """
    today = today or date.today()
    existing = [e.year for e in store.get_entries_for_day(month, day)]
    return Entry.new(month, day, suggest_year(existing, today.year))


def write_entry(
    store: DiaryRepository,
    month: int,
    day: int,
    year: int,
    content: str,
    mood: str | None = None,
) -> Entry:
    """Create or overwrite the entry for a year, keeping the id of an existing one."""
    existing = store.get_entry(month, day, year)
    entry = existing or Entry.new(month, day, year)
    entry = replace(entry, content=content, mood=mood, last_edited=now_millis())
    store.save_entry(entry)
    return entry


def edit_entry(
    store: DiaryRepository,
    original: Entry,
    content: str | None = None,
    mood: str | None = None,
    year: int | None = None,
    clear_mood: bool = False,
) -> Entry:
    """
    Save changes to an existing entry.

    A year change removes the entry from its original year before writing it
    under the new one, so the day never holds a stale duplicate. The id is
    kept.
    """
    month, day = parse_date_key(original.date_key)
    new_year = original.year if year is None else year

    updated = replace(
        original,
        year=new_year,
        content=original.content if content is None else content,
        mood=None if clear_mood else (mood or original.mood),
        last_edited=now_millis(),
    )

    if new_year != original.year:
        logger.info(f"Moving entry {original.id} from {original.year} to {new_year}")
        store.delete_entry(month, day, original.year)

    store.save_entry(updated)
    return updated


# ============== Insight ==============


def generate_insight(date_label: str, entries: list[Entry], llm: LLMService) -> str:
    """
    Reflection across years for one calendar day.

    Always returns a displayable string: too few entries, missing credentials
    and service failures each map to their own message.
    """
    if len(entries) < MIN_ENTRIES:
        return NOT_ENOUGH_ENTRIES

    prompt = build_insight_prompt(date_label, entries)
    try:
        text = llm.generate(prompt).strip()
    except MissingCredentialsError as e:
        logger.warning(f"Insight unavailable: {e}")
        return MISSING_KEY_MESSAGE
    except InsightRequestError as e:
        logger.error(f"Insight generation failed: {e}")
        return FAILED_INSIGHT_MESSAGE

    return text or EMPTY_INSIGHT_MESSAGE


def insight_for_day(config: Config, month: int, day: int, entries: list[Entry] | None = None) -> str:
    """Ask the LLM about a day's entries, fetching them unless the caller already has them."""
    if entries is None:
        entries = get_store(config).get_entries_for_day(month, day)
    return generate_insight(date_key(month, day), entries, get_llm(config))
