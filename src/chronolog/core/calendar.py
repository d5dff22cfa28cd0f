"""Pure month-view logic - no I/O dependencies."""

import calendar

# Leap year, so February always offers the 29th
REFERENCE_YEAR = 2024


def days_in_month(month: int) -> int:
    """Number of days shown for a month, independent of any particular year."""
    return calendar.monthrange(REFERENCE_YEAR, month)[1]


def month_name(month: int) -> str:
    return calendar.month_name[month]


def shift_month(month: int, delta: int) -> int:
    """Move forward/back through months, wrapping December <-> January."""
    return (month - 1 + delta) % 12 + 1


def month_grid(month: int, counts: dict[int, int], columns: int = 7) -> list[str]:
    """
    Render a month as rows of day cells.

    Pure function - no I/O.

    Each cell is the day number followed by a marker for how many years have
    an entry on that day: blank for none, one dot per entry up to three, then
    a plus sign.

    Args:
        month: Month number, 1-12
        counts: Day number -> number of entries (days without entries omitted)
        columns: Cells per row

    Returns:
        Lines of text, one per row
    """
    cells = []
    for day in range(1, days_in_month(month) + 1):
        count = counts.get(day, 0)
        marker = "•" * count if count <= 3 else "•••+"
        cells.append(f"{day:>2} {marker:<4}")

    return [" ".join(cells[i : i + columns]).rstrip() for i in range(0, len(cells), columns)]

