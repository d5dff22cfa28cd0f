"""Functional core - pure business logic with no I/O."""

from .entry import Entry, date_key, parse_date_key, suggest_year
from .moods import MOODS, INSPIRATION_PROMPTS, Mood, mood_for, random_prompt
from .insight import build_insight_prompt, can_generate_insight
from .calendar import days_in_month, month_grid, month_name, shift_month

__all__ = [
    # Entries
    "Entry",
    "date_key",
    "parse_date_key",
    "suggest_year",
    # Moods
    "MOODS",
    "INSPIRATION_PROMPTS",
    "Mood",
    "mood_for",
    "random_prompt",
    # Insight
    "build_insight_prompt",
    "can_generate_insight",
    # Calendar
    "days_in_month",
    "month_grid",
    "month_name",
    "shift_month",
]
