"""Month grids for the calendar view."""

import calendar
from datetime import date


def days_in_month_grid(year: int, month: int, start_of_week: int = 1) -> list[int | None]:
    """Build the day cells of a month, padded to whole weeks.

    Args:
        year: Calendar year
        month: Month number (1-12)
        start_of_week: ISO weekday the week starts on (1 = Monday, 7 = Sunday)

    Returns:
        Day numbers with leading and trailing None cells so the length is a
        multiple of seven
    """
    if not 1 <= start_of_week <= 7:
        raise ValueError(f"start_of_week must be 1-7, got {start_of_week}")

    days_in_month = calendar.monthrange(year, month)[1]
    leading = (date(year, month, 1).isoweekday() - start_of_week) % 7
    rows = -(-(days_in_month + leading) // 7)

    return [
        i - leading + 1 if leading <= i < leading + days_in_month else None
        for i in range(rows * 7)
    ]


def chunk_weeks(days: list[int | None]) -> list[list[int | None]]:
    """Split a month grid into rows of seven."""
    return [days[i : i + 7] for i in range(0, len(days), 7)]


def weekday_names(start_of_week: int = 1) -> list[str]:
    """Short localized weekday names, starting on ``start_of_week``."""
    return [calendar.day_abbr[(start_of_week - 1 + i) % 7] for i in range(7)]


def month_names() -> list[str]:
    """Full localized month names, January first."""
    return list(calendar.month_name)[1:]
