"""Habit and user-stats persistence for HabitQuest.

Records
-------
Three keys live in the key-value store:

    @habits       JSON array of every habit
    @user_stats   JSON object ``{totalXp, achievements}``
    @initialized  sentinel; present once the default habits were seeded

Every write is a read-modify-write of the whole collection.  Mutating
operations hold :attr:`HabitRepository.lock` for their full cycle so two
callers can never interleave their reads and writes.

Failure handling
----------------
Storage errors (:class:`~sqlalchemy.exc.SQLAlchemyError`) are logged and
absorbed here: reads fall back to an empty list or zeroed stats, writes
become no-ops.  A record that is not valid JSON is *not* absorbed; the
:class:`json.JSONDecodeError` reaches the caller.
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import fields, replace
from datetime import date

from sqlalchemy.exc import SQLAlchemyError

from ..database.kv import KeyValueStore
from .catalog import default_habits
from .dates import now_iso
from .models import Frequency, Habit, UserStats
from .streaks import calculate_streak

logger = logging.getLogger(__name__)

HABITS_KEY = "@habits"
USER_STATS_KEY = "@user_stats"
INITIALIZED_KEY = "@initialized"
ALL_KEYS = (HABITS_KEY, USER_STATS_KEY, INITIALIZED_KEY)

_HABIT_FIELDS = {f.name for f in fields(Habit)}


def generate_id() -> str:
    return uuid.uuid4().hex


class HabitRepository:
    """CRUD over the habit list and the global :class:`UserStats` record."""

    def __init__(
        self,
        store: KeyValueStore | None = None,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._store = store if store is not None else KeyValueStore()
        self._clock = clock
        self.lock = threading.RLock()

    # ── raw storage ──────────────────────────────────────────────────────

    def _write(self, key: str, value: str) -> bool:
        try:
            self._store.set(key, value)
        except SQLAlchemyError:
            logger.exception("Error saving %s", key)
            return False
        return True

    # ── seeding ──────────────────────────────────────────────────────────

    def initialize_default_habits(self) -> bool:
        """Seed the suggested habits on first run.

        Returns ``True`` when seeding happened, ``False`` when the store
        was already initialized (or the store could not be reached).
        """
        with self.lock:
            try:
                if self._store.get(INITIALIZED_KEY):
                    return False
            except SQLAlchemyError:
                logger.exception("Error initializing default habits")
                return False

            created_at = now_iso()
            habits = [
                Habit(
                    id=generate_id(),
                    name=s.name,
                    icon=s.icon,
                    color_index=s.color_index,
                    frequency=Frequency.DAILY,
                    daily_target=s.daily_target,
                    goal=s.goal,
                    created_at=created_at,
                )
                for s in default_habits()
            ]
            if not self.save_habits(habits):
                return False
            if not self._write(INITIALIZED_KEY, "true"):
                return False
            logger.info("Seeded %d default habits", len(habits))
            return True

    # ── habits ───────────────────────────────────────────────────────────

    def get_habits(self) -> list[Habit]:
        """All habits, seeding the defaults on the very first call."""
        with self.lock:
            try:
                if not self._store.get(INITIALIZED_KEY):
                    self.initialize_default_habits()
                raw = self._store.get(HABITS_KEY)
            except SQLAlchemyError:
                logger.exception("Error loading habits")
                return []

            records = json.loads(raw) if raw else []
            return [Habit.from_dict(r) for r in records]

    def get_habit(self, habit_id: str) -> Habit | None:
        for habit in self.get_habits():
            if habit.id == habit_id:
                return habit
        return None

    def save_habits(self, habits: list[Habit]) -> bool:
        payload = json.dumps([h.to_dict() for h in habits], ensure_ascii=False)
        with self.lock:
            return self._write(HABITS_KEY, payload)

    def add_habit(
        self,
        name: str,
        icon: str = "",
        color_index: int = 0,
        *,
        daily_target: int = 1,
        frequency: Frequency = Frequency.DAILY,
        goal: int | None = None,
        description: str | None = None,
        target_days: list[int] | None = None,
        created_at: str | None = None,
    ) -> Habit:
        habit = Habit(
            id=generate_id(),
            name=name,
            icon=icon,
            color_index=color_index,
            frequency=frequency,
            daily_target=daily_target,
            goal=goal,
            description=description,
            target_days=target_days,
            created_at=created_at or now_iso(),
        )
        with self.lock:
            habits = self.get_habits()
            habits.append(habit)
            self.save_habits(habits)
        return habit

    def update_habit(self, habit_id: str, **changes) -> Habit | None:
        """Merge *changes* (Habit field names) into one habit.

        Returns the updated habit, or ``None`` if no habit has that id.
        Changing ``daily_target`` or ``completions`` re-clamps the stored
        progress and recomputes the streak.
        """
        if "id" in changes:
            raise ValueError("habit id is immutable")
        unknown = set(changes) - _HABIT_FIELDS
        if unknown:
            raise TypeError(f"unknown habit fields: {sorted(unknown)}")

        with self.lock:
            habits = self.get_habits()
            for index, habit in enumerate(habits):
                if habit.id != habit_id:
                    continue
                updated = replace(habit, **changes)
                if "daily_target" in changes or "completions" in changes:
                    updated.clamp_completions()
                    updated.streak = calculate_streak(
                        updated.completions, updated.daily_target, self._clock(),
                    )
                habits[index] = updated
                self.save_habits(habits)
                return updated
        return None

    def delete_habit(self, habit_id: str) -> None:
        with self.lock:
            habits = self.get_habits()
            self.save_habits([h for h in habits if h.id != habit_id])

    # ── user stats ───────────────────────────────────────────────────────

    def get_user_stats(self) -> UserStats:
        try:
            raw = self._store.get(USER_STATS_KEY)
        except SQLAlchemyError:
            logger.exception("Error loading user stats")
            return UserStats()
        return UserStats.from_dict(json.loads(raw)) if raw else UserStats()

    def save_user_stats(self, stats: UserStats) -> bool:
        with self.lock:
            return self._write(USER_STATS_KEY, json.dumps(stats.to_dict()))

    def unlock_achievement(self, achievement_id: str) -> UserStats:
        """Record *achievement_id* once; unlocking twice changes nothing."""
        with self.lock:
            stats = self.get_user_stats()
            if achievement_id not in stats.achievements:
                stats.achievements.append(achievement_id)
                self.save_user_stats(stats)
            return stats

    # ── reset ────────────────────────────────────────────────────────────

    def reset_app(self) -> None:
        """Forget everything; the next :meth:`get_habits` seeds again."""
        with self.lock:
            try:
                self._store.remove_many(ALL_KEYS)
            except SQLAlchemyError:
                logger.exception("Error resetting app")
                return
            logger.info("App data reset")
