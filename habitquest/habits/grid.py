"""Calendar / heatmap projection of a habit's history.

``generate_grid_data`` turns a habit into a fixed-length run of
:class:`GridDay` cells, oldest first and ending today.  Cells before the
habit existed are *inactive*; past days that were neither completed nor
explicitly failed are *missed*.  The projection is recomputed on every
call and never cached.
"""

from __future__ import annotations

from datetime import date, timedelta

from .dates import created_date, date_key
from .models import GridDay, Habit

CARD_GRID_DAYS = 13 * 7       # habit card heatmap
CALENDAR_DAYS = 28            # circle calendar, 4 weeks
SHARE_GRID_DAYS = 13 * 7      # share card


def generate_grid_data(
    habit: Habit, total_days: int, today: date | None = None,
) -> list[GridDay]:
    if today is None:
        today = date.today()
    created = created_date(habit.created_at) if habit.created_at else None
    target = habit.daily_target

    days: list[GridDay] = []
    for offset in range(total_days - 1, -1, -1):
        day = today - timedelta(days=offset)
        key = date_key(day)
        progress = habit.progress_on(key)
        is_completed = progress >= target
        is_today = day == today
        is_failed = habit.is_failed_on(key)
        existed = created is None or day >= created

        days.append(GridDay(
            key=key,
            progress=progress,
            daily_target=target,
            is_completed=is_completed,
            is_missed=(
                not is_completed
                and not is_today
                and not is_failed
                and day < today
                and existed
            ),
            is_inactive=not existed,
            is_today=is_today,
            is_explicitly_failed=is_failed,
        ))
    return days
