"""Display helpers for dates, durations, distances and colours."""

import re
from datetime import date, timedelta

_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")


def format_number(value: float | int) -> str:
    """Format a measurement without a trailing ".0".

    100.0 -> "100", 102.5 -> "102.5"
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_time(seconds: int) -> str:
    """Format a duration in seconds as HH:MM:SS."""
    seconds = int(seconds)
    hrs = seconds // 3600
    mins = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hrs:02d}:{mins:02d}:{secs:02d}"


def parse_time(value: str) -> int:
    """Parse "HH:MM:SS", "MM:SS" or "SS" into seconds.

    Raises:
        ValueError: If the string is not a valid duration
    """
    parts = value.strip().split(":")
    if not 1 <= len(parts) <= 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid duration: {value!r}")

    numbers = [int(p) for p in parts]
    # Every component after the leading one is a 0-59 clock field
    if any(n >= 60 for n in numbers[1:]):
        raise ValueError(f"Invalid duration: {value!r}")

    total = 0
    for n in numbers:
        total = total * 60 + n
    return total


def distance_display(distance_km: float) -> str:
    """Format a distance in kilometres.

    Distances under one kilometre are shown in metres.
    """
    if distance_km < 1:
        metres = round(distance_km * 1000, 2)
        return f"{format_number(metres)} M"
    return f"{distance_km:.2f} KM"


def get_today() -> str:
    """Return the current local date as YYYY-MM-DD."""
    return date.today().isoformat()


def display_date(day: str, today: str) -> str:
    """Format a YYYY-MM-DD date for a list header.

    Returns "TODAY" or "YESTERDAY" relative to ``today``, otherwise the date
    as a short weekday, short month, day and year, e.g. "MON, JAN 1, 2024".
    """
    if day == today:
        return "TODAY"

    parsed = date.fromisoformat(day)
    if parsed == date.fromisoformat(today) - timedelta(days=1):
        return "YESTERDAY"

    return f"{parsed:%a}, {parsed:%b} {parsed.day}, {parsed.year}".upper()


def hex_to_rgb(hex_colour: str) -> tuple[int, int, int]:
    """Convert "#rrggbb" (the # is optional) to an RGB tuple."""
    stripped = hex_colour.lstrip("#")
    if not _HEX_RE.match(stripped):
        raise ValueError(f"Invalid hex colour: {hex_colour!r}")
    value = int(stripped, 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def hexcode_luminosity(hex_colour: str, magnitude: int) -> str:
    """Lighten (positive magnitude) or darken (negative) a hex colour.

    Each channel is shifted by ``magnitude`` and clamped to 0-255. Input that
    is not a six digit hex colour is returned unchanged.
    """
    if not _HEX_RE.match(hex_colour.lstrip("#")):
        return hex_colour

    r, g, b = (
        max(0, min(255, channel + magnitude)) for channel in hex_to_rgb(hex_colour)
    )
    return f"#{r:02x}{g:02x}{b:02x}"
