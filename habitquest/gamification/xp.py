"""XP and leveling logic for HabitQuest.

XP Awards
---------
- Completing a habit for the day:     +25 XP
- Un-completing a day (or dropping
  below the daily target):             -25 XP
- Streak bonus (toggle only):          streak_days x 5 XP (cap 50),
                                       only when the streak is above 1

Leveling Curve
--------------
Level 1 takes 100 XP to clear.  Each level after that needs 50% more
than the one before, rounded down: 100, 150, 225, 337, ...  The curve
lives in :func:`xp_for_level` so it's trivial to re-tune.

Levels are never stored.  :func:`calculate_level` re-derives the
``(level, xp into level, xp needed)`` breakdown from the user's total XP
every time it is asked.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# ── leveling constants (easy to adjust) ──────────────────────────────────

BASE_XP_PER_LEVEL = 100   # XP to clear level 1
LEVEL_SCALING = 1.5       # each level needs 50% more than the last

# ── award constants ──────────────────────────────────────────────────────

XP_PER_COMPLETION = 25
STREAK_BONUS_PER_DAY = 5
STREAK_BONUS_CAP = 50


@dataclass(frozen=True)
class LevelInfo:
    """Where a total XP figure sits on the leveling curve."""

    level: int
    current_xp: int
    xp_needed: int

    @property
    def xp_to_next(self) -> int:
        return self.xp_needed - self.current_xp

    @property
    def progress(self) -> float:
        """0.0 → 1.0 progress through the current level."""
        return self.current_xp / self.xp_needed


# ── level math ───────────────────────────────────────────────────────────


def xp_for_level(level: int) -> int:
    """XP needed to clear *level* and move on to *level + 1*."""
    return math.floor(BASE_XP_PER_LEVEL * LEVEL_SCALING ** (level - 1))


def total_xp_for_level(level: int) -> int:
    """Cumulative XP required to *reach* the given level.

    ``total_xp_for_level(1)`` is 0 (you start at level 1 with zero XP).
    """
    return sum(xp_for_level(l) for l in range(1, level))


def calculate_level(total_xp: int) -> LevelInfo:
    """Break *total_xp* down into level, XP into that level, and XP needed.

    Negative totals are treated as zero.  The loop always terminates
    because each threshold is larger than the last.
    """
    level = 1
    remaining = max(0, int(total_xp))
    needed = xp_for_level(level)
    while remaining >= needed:
        remaining -= needed
        level += 1
        needed = xp_for_level(level)
    return LevelInfo(level=level, current_xp=remaining, xp_needed=needed)


def streak_bonus(streak: int) -> int:
    """Extra XP for completing a day while on a streak of *streak* days."""
    if streak <= 1:
        return 0
    return min(streak * STREAK_BONUS_PER_DAY, STREAK_BONUS_CAP)
