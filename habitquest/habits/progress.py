"""Per-day progress state machine for HabitQuest habits.

States (per habit, per day)
---------------------------
EMPTY       no progress, no failure mark
PARTIAL     some progress, below the daily target (counts as EMPTY
            for the toggle cycle)
COMPLETED   progress reached the daily target
FAILED      explicitly marked as failed ("X"), progress is zero

Toggle cycle
------------
EMPTY → COMPLETED      progress = target          +25 XP (+ streak bonus)
COMPLETED → FAILED     progress = 0, flag set     -25 XP
FAILED → EMPTY         progress = 0, flag cleared   0 XP

Increments
----------
``increment_progress`` nudges the count up or down inside
``[0, daily_target]``.  Crossing the target awards +25, dropping back
below it costs 25.  Increments never earn a streak bonus.

Every mutation re-derives the habit's streak from the full completion
map, saves the whole habit list, then applies the XP delta to the user's
stats.  Operations that cannot apply (unknown habit, day before the
habit existed, incrementing a day already at target) return ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..gamification.xp import XP_PER_COMPLETION, calculate_level, streak_bonus
from .dates import date_key
from .models import DayState, Habit, ToggleResult, XpChange
from .repository import HabitRepository
from .streaks import calculate_streak

logger = logging.getLogger(__name__)


class ProgressEngine:
    """Applies toggles, increments and XP changes through a repository."""

    def __init__(
        self,
        repository: HabitRepository,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._repo = repository
        self._clock = clock

    # ── helpers ──────────────────────────────────────────────────────────

    def _find(self, habits: list[Habit], habit_id: str) -> int | None:
        for index, habit in enumerate(habits):
            if habit.id == habit_id:
                return index
        return None

    def _load_target(
        self, habit_id: str, key: str | None,
    ) -> tuple[list[Habit], int, str] | None:
        """Return ``(habits, index, key)`` or ``None`` if the day is off-limits."""
        habits = self._repo.get_habits()
        index = self._find(habits, habit_id)
        if index is None:
            logger.debug("No habit with id %s", habit_id)
            return None
        key = key or date_key(self._clock())
        if not habits[index].accepts(key):
            logger.debug("Day %s predates habit %s", key, habit_id)
            return None
        return habits, index, key

    def _commit(self, habits: list[Habit], habit: Habit, xp: int) -> ToggleResult:
        habit.streak = calculate_streak(
            habit.completions, habit.daily_target, self._clock(),
        )
        self._repo.save_habits(habits)

        if xp == 0:
            return ToggleResult(habit=habit, xp_gained=0)
        change = self.apply_xp_delta(xp)
        return ToggleResult(
            habit=habit,
            xp_gained=xp,
            leveled_up=change.leveled_up,
            new_level=change.new_level,
            total_xp=change.total_xp,
        )

    # ── operations ───────────────────────────────────────────────────────

    def toggle_completion(
        self, habit_id: str, key: str | None = None,
    ) -> ToggleResult | None:
        """Advance one day (default today) one step around the toggle cycle."""
        with self._repo.lock:
            loaded = self._load_target(habit_id, key)
            if loaded is None:
                return None
            habits, index, key = loaded
            habit = habits[index]

            state = habit.state_on(key)
            if state in (DayState.EMPTY, DayState.PARTIAL):
                habit.set_day(key, progress=habit.daily_target)
                xp = XP_PER_COMPLETION
            elif state is DayState.COMPLETED:
                habit.set_day(key, failed=True)
                xp = -XP_PER_COMPLETION
            else:
                habit.set_day(key, progress=0)
                xp = 0

            if xp > 0:
                xp += streak_bonus(
                    calculate_streak(habit.completions, habit.daily_target, self._clock())
                )
            return self._commit(habits, habit, xp)

    def increment_progress(
        self, habit_id: str, amount: int, key: str | None = None,
    ) -> ToggleResult | None:
        """Add *amount* (may be negative) to one day's progress count."""
        with self._repo.lock:
            loaded = self._load_target(habit_id, key)
            if loaded is None:
                return None
            habits, index, key = loaded
            habit = habits[index]

            target = habit.daily_target
            old = habit.progress_on(key)
            if old >= target and amount > 0:
                return None

            new = max(0, min(target, old + amount))
            if amount > 0 or not habit.is_failed_on(key):
                habit.set_day(key, progress=new)

            xp = 0
            if old < target <= new:
                xp = XP_PER_COMPLETION
            elif new < target <= old:
                xp = -XP_PER_COMPLETION
            return self._commit(habits, habit, xp)

    def apply_xp_delta(self, delta: int) -> XpChange:
        """Add *delta* to the user's total XP (never below zero).

        Only level-ups are reported; losing a level is silent.
        """
        with self._repo.lock:
            stats = self._repo.get_user_stats()
            before = calculate_level(stats.total_xp)
            stats.total_xp = max(0, stats.total_xp + delta)
            after = calculate_level(stats.total_xp)
            self._repo.save_user_stats(stats)

        leveled_up = after.level > before.level
        if leveled_up:
            logger.info("Level up: %d -> %d", before.level, after.level)
        return XpChange(
            total_xp=stats.total_xp,
            level_info=after,
            leveled_up=leveled_up,
            new_level=after.level if leveled_up else None,
        )
