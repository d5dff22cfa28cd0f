"""Chronolog CLI - one page per calendar day, one entry per year."""

import json
import logging
from datetime import date

import click

from .config import load_config
from .core.calendar import days_in_month, month_grid, month_name, shift_month
from .core.entry import Entry, date_key, parse_date_key
from .core.insight import can_generate_insight
from .core.moods import MOODS, label_for, mood_for, random_prompt
from .workflows import edit_entry, get_store, insight_for_day, new_entry, write_entry


def _parse_day(value: str | None) -> tuple[int, int]:
    """MM-DD option value -> (month, day). Defaults to today."""
    if not value:
        today = date.today()
        return today.month, today.day
    try:
        month, day = parse_date_key(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not MM-DD", param_hint="--date")
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise click.BadParameter(f"{value!r} is out of range", param_hint="--date")
    return month, day


def _parse_mood(value: str | None) -> str | None:
    if value is None:
        return None
    mood = mood_for(value)
    if mood is None:
        choices = ", ".join(m.label for m in MOODS)
        raise click.BadParameter(f"unknown mood {value!r} (choose from {choices})", param_hint="--mood")
    return mood.emoji


def _format_entry(entry: Entry) -> str:
    mood = f" {entry.mood} {label_for(entry.mood) or ''}".rstrip() if entry.mood else ""
    body = entry.content.strip() or "(empty)"
    return f"## {entry.year}{mood}\n\n{body}"


date_option = click.option(
    "--date", "-d", "day_str", default=None, help="Calendar day (MM-DD), defaults to today"
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Chronolog - compare the same day across years."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@date_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(day_str: str | None, as_json: bool):
    """Show every year's entry for a day, newest first."""
    month, day = _parse_day(day_str)
    store = get_store(load_config())
    entries = store.get_entries_for_day(month, day)

    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False))
        return

    label = f"{month_name(month)} {day}"
    if not entries:
        click.echo(f"No memories yet for {label}.")
        click.echo(f"Try: {random_prompt()}")
        return

    click.echo(f"# {label}\n")
    click.echo("\n\n".join(_format_entry(e) for e in entries))


@main.command()
@click.argument("content")
@date_option
@click.option("--year", "-y", type=int, default=None, help="Year (defaults to current year)")
@click.option("--mood", "-m", default=None, help="Mood emoji or label")
def write(content: str, day_str: str | None, year: int | None, mood: str | None):
    """Write (or overwrite) the entry for a year."""
    month, day = _parse_day(day_str)
    year = year if year is not None else date.today().year
    store = get_store(load_config())

    entry = write_entry(store, month, day, year, content, _parse_mood(mood))
    click.echo(f"✓ Saved {entry.date_key} {entry.year}")


@main.command()
@click.argument("content")
@date_option
@click.option("--mood", "-m", default=None, help="Mood emoji or label")
def add(content: str, day_str: str | None, mood: str | None):
    """Add an entry under the most recent year without one."""
    month, day = _parse_day(day_str)
    store = get_store(load_config())

    draft = new_entry(store, month, day)
    entry = write_entry(store, month, day, draft.year, content, _parse_mood(mood))
    click.echo(f"✓ Saved {entry.date_key} {entry.year}")


@main.command()
@date_option
@click.option("--year", "-y", type=int, required=True, help="Year of the entry to edit")
@click.option("--content", "-c", default=None, help="New content")
@click.option("--mood", "-m", default=None, help="New mood emoji or label")
@click.option("--no-mood", is_flag=True, help="Clear the mood")
@click.option("--to-year", type=int, default=None, help="Move the entry to another year")
def edit(
    day_str: str | None,
    year: int,
    content: str | None,
    mood: str | None,
    no_mood: bool,
    to_year: int | None,
):
    """Edit an existing entry."""
    month, day = _parse_day(day_str)
    store = get_store(load_config())

    original = store.get_entry(month, day, year)
    if original is None:
        raise click.ClickException(f"No entry for {date_key(month, day)} in {year}")

    if to_year is not None and to_year != year and store.get_entry(month, day, to_year):
        if not click.confirm(f"{date_key(month, day)} already has an entry for {to_year}. Replace it?"):
            return

    updated = edit_entry(
        store,
        original,
        content=content,
        mood=_parse_mood(mood),
        year=to_year,
        clear_mood=no_mood,
    )
    click.echo(f"✓ Saved {updated.date_key} {updated.year}")


@main.command()
@date_option
@click.option("--year", "-y", type=int, required=True, help="Year of the entry to delete")
def delete(day_str: str | None, year: int):
    """Delete the entry for a year."""
    month, day = _parse_day(day_str)
    store = get_store(load_config())

    if store.get_entry(month, day, year) is None:
        click.echo(f"No entry for {date_key(month, day)} in {year}.")
        return

    store.delete_entry(month, day, year)
    click.echo(f"✓ Deleted {date_key(month, day)} {year}")


@main.command()
@click.argument("month_num", metavar="MONTH", type=click.IntRange(1, 12), required=False)
@click.option("--prev", "prev_month", is_flag=True, help="Show the month before")
@click.option("--next", "next_month", is_flag=True, help="Show the month after")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def month(month_num: int | None, prev_month: bool, next_month: bool, as_json: bool):
    """Show how many years have an entry on each day of a month."""
    month_num = shift_month(month_num or date.today().month, int(next_month) - int(prev_month))
    store = get_store(load_config())
    counts = store.get_entry_counts_for_month(month_num)

    if as_json:
        click.echo(json.dumps({str(d): c for d, c in sorted(counts.items())}, indent=2))
        return

    click.echo(f"# {month_name(month_num)}\n")
    for line in month_grid(month_num, counts):
        click.echo(line)

    filled = len([d for d in counts if d <= days_in_month(month_num)])
    click.echo(f"\n{filled}/{days_in_month(month_num)} days written, {sum(counts.values())} entries")


@main.command()
@date_option
def insight(day_str: str | None):
    """Reflect on a day across years."""
    month, day = _parse_day(day_str)
    config = load_config()

    entries = get_store(config).get_entries_for_day(month, day)
    if not can_generate_insight(entries):
        click.echo("Write at least two entries for this day to find patterns across years.")
        return

    click.echo(insight_for_day(config, month, day, entries=entries))


@main.command()
def moods():
    """List available moods."""
    for mood in MOODS:
        click.echo(f"{mood.emoji}  {mood.label}")


@main.command()
def prompt():
    """Print a random writing prompt."""
    click.echo(random_prompt())


if __name__ == "__main__":
    main()
