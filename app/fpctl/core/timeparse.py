"""Parsing of human-supplied time expressions.

Used by ``fpctl history --since/--until``. Two forms are accepted:

- Absolute: ``HH:MM``, ``HH:MM:SS``, ``YYYY-MM-DD`` or
  ``YYYY-MM-DD HH:MM:SS``, in local time.
- Relative: a duration before now built from ``<number><unit>`` items,
  with units ``d/day/days``, ``h/hour/hours``, ``m/minute/minutes`` and
  ``s/second/seconds``, e.g. ``"2 days 3 hours"`` or ``"1d 12h"``.
"""

import re
from datetime import datetime, timedelta

# Tried in order; first full match wins
_ABSOLUTE_FORMATS: tuple[tuple[str, bool], ...] = (
    # (strptime format, anchored to the reference date)
    ("%H:%M", True),
    ("%H:%M:%S", True),
    ("%Y-%m-%d", False),
    ("%Y-%m-%d %H:%M:%S", False),
)

_UNITS: dict[str, str] = {
    "d": "days",
    "day": "days",
    "days": "days",
    "h": "hours",
    "hour": "hours",
    "hours": "hours",
    "m": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
    "s": "seconds",
    "second": "seconds",
    "seconds": "seconds",
}

_DURATION_ITEM = re.compile(r"\s*([+-]?\d+)\s*([A-Za-z]+)\s*")


class TimeParseError(ValueError):
    """Raised when a time expression cannot be parsed."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Failed to parse time '{text}'")
        self.text = text


def _parse_absolute(text: str, relative_to: datetime) -> datetime | None:
    for fmt, anchored in _ABSOLUTE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if anchored:
            return datetime.combine(relative_to.date(), parsed.time())
        return parsed
    return None


def _parse_relative(text: str) -> timedelta | None:
    amounts: dict[str, int] = {}
    pos = 0
    while pos < len(text):
        match = _DURATION_ITEM.match(text, pos)
        if match is None:
            return None
        category = _UNITS.get(match.group(2))
        if category is None:
            return None
        # Repeating a unit overrides the earlier value
        amounts[category] = int(match.group(1))
        pos = match.end()

    if not amounts:
        return None
    try:
        return timedelta(**amounts)
    except OverflowError:
        return None


def parse_time(text: str, relative_to: datetime | None = None) -> datetime:
    """Parse an absolute or relative time expression.

    Args:
        text: User input, e.g. '2024-01-10', '12:30' or '2 days 3 hours'.
        relative_to: Reference instant (naive local time). Defaults to now.

    Returns:
        The absolute instant, naive local time.

    Raises:
        TimeParseError: If the text matches no supported form.
    """
    if relative_to is None:
        relative_to = datetime.now()

    absolute = _parse_absolute(text, relative_to)
    if absolute is not None:
        return absolute

    delta = _parse_relative(text)
    if delta is None:
        raise TimeParseError(text)
    try:
        return relative_to - delta
    except OverflowError:
        raise TimeParseError(text) from None
