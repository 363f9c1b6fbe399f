"""Habit, user-stats, and result types for HabitQuest.

Persisted records keep the JSON shape the app has always written
(camelCase keys, ``completions`` and ``explicitFailures`` side by side)
so existing data loads unchanged.  In memory, a day's state is read
through :meth:`Habit.state_on` and written only through
:meth:`Habit.set_day`, which keeps failure marks and progress mutually
exclusive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..gamification.xp import LevelInfo
from .dates import created_date, created_date_key

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Frequency(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    CUSTOM = "custom"


class DayState(Enum):
    """What a single (habit, day) cell currently holds."""

    EMPTY = "empty"           # no progress, no failure mark
    PARTIAL = "partial"       # some progress, below the daily target
    COMPLETED = "completed"   # progress reached the daily target
    FAILED = "failed"         # explicitly marked as failed ("X")


def _positive_int(value: Any, default: int = 1) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


# ── habit ─────────────────────────────────────────────────────────────────


@dataclass
class Habit:
    id: str
    name: str
    icon: str = ""
    color_index: int = 0
    frequency: Frequency = Frequency.DAILY
    daily_target: int = 1
    created_at: str = ""
    completions: dict[str, int] = field(default_factory=dict)
    explicit_failures: dict[str, bool] = field(default_factory=dict)
    streak: int = 0
    goal: int | None = None
    description: str | None = None
    target_days: list[int] | None = None

    def __post_init__(self) -> None:
        self.daily_target = _positive_int(self.daily_target)
        if not isinstance(self.frequency, Frequency):
            try:
                self.frequency = Frequency(self.frequency)
            except ValueError:
                self.frequency = Frequency.DAILY

    @property
    def created_key(self) -> str:
        """Date-key of the local day the habit was created.

        Records without a timestamp accept every day.
        """
        if not self.created_at:
            return ""
        return created_date_key(self.created_at)

    def accepts(self, key: str) -> bool:
        """False for days before the habit existed."""
        return key >= self.created_key

    def progress_on(self, key: str) -> int:
        return self.completions.get(key, 0)

    def is_failed_on(self, key: str) -> bool:
        return bool(self.explicit_failures.get(key, False))

    def state_on(self, key: str) -> DayState:
        if self.is_failed_on(key):
            return DayState.FAILED
        progress = self.progress_on(key)
        if progress >= self.daily_target:
            return DayState.COMPLETED
        if progress > 0:
            return DayState.PARTIAL
        return DayState.EMPTY

    def set_day(self, key: str, *, progress: int = 0, failed: bool = False) -> None:
        """Write one day's state, clamping progress into ``[0, daily_target]``.

        A failed day always carries zero progress.
        """
        if failed:
            self.completions[key] = 0
            self.explicit_failures[key] = True
            return
        self.completions[key] = max(0, min(self.daily_target, progress))
        self.explicit_failures.pop(key, None)

    def clamp_completions(self) -> None:
        """Re-apply the ``[0, daily_target]`` bound to every stored day."""
        self.completions = {
            k: max(0, min(self.daily_target, v))
            for k, v in self.completions.items()
        }

    # ── persistence ──────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "colorIndex": self.color_index,
            "frequency": self.frequency.value,
            "dailyTarget": self.daily_target,
            "createdAt": self.created_at,
            "completions": dict(self.completions),
            "explicitFailures": dict(self.explicit_failures),
            "streak": self.streak,
        }
        if self.goal is not None:
            data["goal"] = self.goal
        if self.description is not None:
            data["description"] = self.description
        if self.target_days is not None:
            data["targetDays"] = list(self.target_days)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Habit:
        """Build a habit from a stored record, backfilling missing fields.

        Unreadable ``createdAt`` values are dropped (the habit then accepts
        every day), non-numeric progress entries are skipped, progress is
        clamped into ``[0, dailyTarget]`` and failed days carry zero.
        """
        habit_id = str(data["id"])
        habit = cls(
            id=habit_id,
            name=data.get("name", ""),
            icon=data.get("icon", ""),
            color_index=_int_or(data.get("colorIndex"), 0),
            frequency=data.get("frequency") or Frequency.DAILY.value,
            daily_target=data.get("dailyTarget") or 1,
            created_at=_valid_created_at(data.get("createdAt"), habit_id),
            completions=_progress_map(data.get("completions"), habit_id),
            explicit_failures={
                k: True
                for k, v in (data.get("explicitFailures") or {}).items()
                if v
            },
            streak=max(0, _int_or(data.get("streak"), 0)),
            goal=data.get("goal"),
            description=data.get("description"),
            target_days=data.get("targetDays"),
        )
        habit.clamp_completions()
        for key in habit.explicit_failures:
            habit.completions[key] = 0
        return habit


def _int_or(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _valid_created_at(value: Any, habit_id: str) -> str:
    if not value:
        return ""
    try:
        created_date(value)
    except (TypeError, ValueError, AttributeError):
        logger.warning("Ignoring unreadable createdAt %r on habit %s", value, habit_id)
        return ""
    return value


def _progress_map(raw: Any, habit_id: str) -> dict[str, int]:
    progress: dict[str, int] = {}
    for key, value in (raw or {}).items():
        try:
            progress[key] = int(value)
        except (TypeError, ValueError):
            logger.warning("Skipping progress %r for %s on habit %s", value, key, habit_id)
    return progress


# ── user stats ────────────────────────────────────────────────────────────


@dataclass
class UserStats:
    """Single global record: total XP and unlocked achievement ids."""

    total_xp: int = 0
    achievements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"totalXp": self.total_xp, "achievements": list(self.achievements)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserStats:
        achievements: list[str] = []
        for item in data.get("achievements") or []:
            if item not in achievements:
                achievements.append(item)
        return cls(
            total_xp=max(0, int(data.get("totalXp") or 0)),
            achievements=achievements,
        )


# ── transient results ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class XpChange:
    """Outcome of applying an XP delta to the user's stats."""

    total_xp: int
    level_info: LevelInfo
    leveled_up: bool = False
    new_level: int | None = None


@dataclass(frozen=True)
class ToggleResult:
    """What a toggle/increment did, for the caller's reward UI.

    ``total_xp`` is the stored total after the delta was applied, or
    ``None`` when the action moved no XP.
    """

    habit: Habit
    xp_gained: int
    leveled_up: bool = False
    new_level: int | None = None
    total_xp: int | None = None


@dataclass(frozen=True)
class GridDay:
    """One cell of the calendar/heatmap projection."""

    key: str
    progress: int
    daily_target: int
    is_completed: bool
    is_missed: bool
    is_inactive: bool
    is_today: bool
    is_explicitly_failed: bool
