"""Daily reminder content.

HabitQuest doesn't schedule notifications itself.  The platform layer asks
for a :class:`Reminder` and hands it to whatever notification service it
has; the reminder repeats every day at the configured local time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .habits.dates import date_key
from .habits.models import Habit
from .settings import Settings

REMINDER_TITLE = "Time to build habits! \U0001f3af"
REMINDER_BODY = "Check in and complete your daily habits to maintain your streak."


@dataclass(frozen=True)
class Reminder:
    title: str
    body: str
    hour: int
    minute: int
    repeats: bool = True


def open_habits(habits: list[Habit], today: date | None = None) -> list[Habit]:
    """Habits that are neither completed nor marked failed today."""
    key = date_key(today if today is not None else date.today())
    return [
        h for h in habits
        if h.progress_on(key) < h.daily_target and not h.is_failed_on(key)
    ]


def build_daily_reminder(
    settings: Settings,
    habits: list[Habit] | None = None,
    today: date | None = None,
) -> Reminder | None:
    """Reminder for the configured time, or ``None`` when switched off."""
    if not settings.reminders_enabled:
        return None

    body = REMINDER_BODY
    if habits is not None:
        remaining = len(open_habits(habits, today))
        if remaining == 0:
            body = "All habits done today. Keep the streak going tomorrow!"
        elif remaining == 1:
            body = "1 habit left today. " + REMINDER_BODY
        else:
            body = f"{remaining} habits left today. " + REMINDER_BODY

    return Reminder(
        title=REMINDER_TITLE,
        body=body,
        hour=settings.reminder_hour,
        minute=settings.reminder_minute,
    )
