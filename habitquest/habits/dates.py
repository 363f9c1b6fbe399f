"""Calendar-day keys for HabitQuest.

Every day-indexed record (completions, explicit failures, grid cells) is
keyed by a ``YYYY-MM-DD`` string in the *local* calendar.  The fixed-width,
zero-padded format sorts lexicographically in chronological order, so
"is this day before the habit existed" is a plain string comparison.
"""

from __future__ import annotations

from datetime import date, datetime


def date_key(day: date | datetime) -> str:
    """Return the ``YYYY-MM-DD`` key for the local calendar day of *day*.

    Aware datetimes are converted to local time first; the time-of-day
    component never affects the result.
    """
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone()
        day = day.date()
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def today_key(today: date | None = None) -> str:
    return date_key(today if today is not None else date.today())


def parse_date_key(key: str) -> date:
    """Inverse of :func:`date_key`."""
    return date.fromisoformat(key)


def created_date(created_at: str) -> date:
    """Local calendar day of a stored ``created_at`` ISO timestamp.

    Handles the trailing ``Z`` that JavaScript-era records carry.
    """
    stamp = created_at.strip()
    if stamp.endswith("Z"):
        stamp = stamp[:-1] + "+00:00"
    parsed = datetime.fromisoformat(stamp)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def created_date_key(created_at: str) -> str:
    return date_key(created_date(created_at))


def now_iso() -> str:
    """Timestamp used for ``created_at`` on new habits (local, seconds)."""
    return datetime.now().isoformat(timespec="seconds")
