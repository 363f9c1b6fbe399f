"""Shared test helpers for HabitQuest."""

from datetime import date, timedelta

from habitquest.habits.dates import date_key
from habitquest.habits.models import Habit


# Every engine, repository and projection in the tests runs against this
# fixed "today" so results never depend on the wall clock.
TODAY = date(2026, 3, 18)


def day(offset: int = 0) -> date:
    """``TODAY`` shifted by *offset* days (negative is the past)."""
    return TODAY + timedelta(days=offset)


def key(offset: int = 0) -> str:
    return date_key(day(offset))


def make_habit(
    habit_id: str = "h1",
    *,
    daily_target: int = 1,
    created_offset: int = -30,
    completions: dict[str, int] | None = None,
    explicit_failures: dict[str, bool] | None = None,
    streak: int = 0,
) -> Habit:
    """A habit created *created_offset* days before ``TODAY`` at 09:00."""
    return Habit(
        id=habit_id,
        name=f"Habit {habit_id}",
        icon="*",
        daily_target=daily_target,
        created_at=f"{day(created_offset).isoformat()}T09:00:00",
        completions=dict(completions or {}),
        explicit_failures=dict(explicit_failures or {}),
        streak=streak,
    )


def completed_run(length: int, end_offset: int = 0, target: int = 1) -> dict[str, int]:
    """Completion map with *length* consecutive done days ending at *end_offset*."""
    return {key(end_offset - i): target for i in range(length)}


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()
