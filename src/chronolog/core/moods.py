"""Fixed mood tags and writing prompts."""

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Mood:
    """A selectable mood tag."""

    emoji: str
    label: str


MOODS: list[Mood] = [
    Mood("☀️", "Sunny"),
    Mood("☁️", "Cloudy"),
    Mood("🌧️", "Rainy"),
    Mood("🌱", "Growing"),
    Mood("✨", "Inspired"),
    Mood("🍵", "Calm"),
    Mood("🔥", "Active"),
    Mood("🌚", "Tired"),
]

INSPIRATION_PROMPTS: list[str] = [
    "What happened on this day?",
    "What made you smile today?",
    "What was the weather like?",
    "A delicious meal you had?",
    "A song that fits today's mood?",
    "Who did you meet today?",
    "A thought that crossed your mind?",
    "Something you are grateful for?",
    "A challenge you faced?",
    "What are you looking forward to?",
    "Describe the sky today.",
    "A small achievement?",
]


def mood_for(value: str) -> Mood | None:
    """Resolve an emoji or a case-insensitive label to a Mood."""
    value = value.strip()
    for mood in MOODS:
        if value == mood.emoji or value.lower() == mood.label.lower():
            return mood
    return None


def label_for(emoji: str | None) -> str | None:
    """Label of a stored mood emoji, or None for unknown/absent moods."""
    if not emoji:
        return None
    mood = mood_for(emoji)
    return mood.label if mood else None


def random_prompt(rng: random.Random | None = None) -> str:
    """Pick a writing prompt."""
    return (rng or random).choice(INSPIRATION_PROMPTS)
