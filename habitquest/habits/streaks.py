"""Consecutive-day streaks from sparse completion records.

A day counts as completed when its progress reached the habit's daily
target.  The streak is the run of completed days ending at the most
recent completion, and that completion must be today or yesterday for
the streak to be alive at all: a habit not done today is still "on" its
streak until the day is over.

The streak is always re-derived from the full completion map; nothing
patches it incrementally.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, timedelta

from .dates import date_key, parse_date_key


def is_day_completed(progress: int, daily_target: int) -> bool:
    return progress >= daily_target


def completed_keys(completions: Mapping[str, int], daily_target: int) -> list[str]:
    """Completed date-keys, most recent first."""
    return sorted(
        (k for k, v in completions.items() if is_day_completed(v, daily_target)),
        reverse=True,
    )


def calculate_streak(
    completions: Mapping[str, int] | None,
    daily_target: int,
    today: date | None = None,
) -> int:
    """Return the current streak for a habit.

    ``0`` when nothing is completed, or when the latest completed day is
    neither *today* nor the day before it.
    """
    if not completions:
        return 0

    keys = completed_keys(completions, daily_target)
    if not keys:
        return 0

    if today is None:
        today = date.today()
    anchor_keys = {date_key(today), date_key(today - timedelta(days=1))}
    if keys[0] not in anchor_keys:
        return 0

    done = set(keys)
    streak = 1
    cursor = parse_date_key(keys[0])
    while True:
        cursor -= timedelta(days=1)
        if date_key(cursor) not in done:
            break
        streak += 1
    return streak
