"""Dashboard numbers derived from the loaded habits."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from .dates import date_key
from .models import Habit
from .streaks import completed_keys, is_day_completed

WEEK_DAYS = 7


@dataclass(frozen=True)
class DaySummary:
    key: str
    weekday: str      # "Mon", "Tue", ...
    completed: int
    total: int

    @property
    def rate(self) -> float:
        return self.completed / self.total if self.total else 0.0


def week_summary(habits: list[Habit], today: date | None = None) -> list[DaySummary]:
    """The last seven days, oldest first, with completed-habit counts."""
    if today is None:
        today = date.today()
    summary = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        key = date_key(day)
        completed = sum(
            1 for h in habits if is_day_completed(h.progress_on(key), h.daily_target)
        )
        summary.append(DaySummary(
            key=key,
            weekday=day.strftime("%a"),
            completed=completed,
            total=len(habits),
        ))
    return summary


def weekly_rate(habits: list[Habit], today: date | None = None) -> int:
    """Percentage of habit-days completed over the last week, rounded."""
    week = week_summary(habits, today)
    possible = sum(d.total for d in week)
    if possible == 0:
        return 0
    return round(100 * sum(d.completed for d in week) / possible)


def best_streak(habits: list[Habit]) -> int:
    return max((h.streak for h in habits), default=0)


def completion_count(habit: Habit) -> int:
    return len(completed_keys(habit.completions, habit.daily_target))


def total_completions(habits: list[Habit]) -> int:
    return sum(completion_count(h) for h in habits)


def top_habits(habits: list[Habit], limit: int = 3) -> list[Habit]:
    """Habits with the longest current streaks."""
    return sorted(habits, key=lambda h: h.streak, reverse=True)[:limit]
