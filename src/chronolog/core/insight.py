"""Insight prompt assembly - compare one calendar day across years."""

from .entry import Entry

# Shorter entries are not worth reflecting on
MIN_CONTENT_LENGTH = 5
MIN_ENTRIES = 2

NOT_ENOUGH_ENTRIES = (
    "Not enough entries to generate a comparison pattern. Write more to see your growth!"
)


def can_generate_insight(entries: list[Entry]) -> bool:
    """At least two entries with more than a few characters of content."""
    substantial = [e for e in entries if len(e.content) > MIN_CONTENT_LENGTH]
    return len(substantial) >= MIN_ENTRIES


def format_entry_line(entry: Entry) -> str:
    """One prompt line per entry."""
    return f'[{entry.year}]: Mood: {entry.mood or "None"} - Content: "{entry.content}"'


def build_insight_prompt(date_label: str, entries: list[Entry]) -> str:
    """Build the reflection prompt. Entries are listed oldest first."""
    ordered = sorted(entries, key=lambda e: e.year)
    entries_text = "\n".join(format_entry_line(e) for e in ordered)

    return f"""You are a gentle, insightful personal diarist assistant.
The user is looking at their "5-Year Diary" for the date: {date_label}.

Here are their entries from different years on this exact day:
{entries_text}

Please provide a short, warm, and healing reflection (approx 100-150 words).
Focus on:
1. Common themes or recurring emotions on this day.
2. Signs of growth, maturity, or change in perspective.
3. A gentle encouragement for the future.

Do not use markdown headers like ##. Just use paragraphs.
Tone: Soothing, observant, "Japanese Zakka" style (simple, mindful).
"""
