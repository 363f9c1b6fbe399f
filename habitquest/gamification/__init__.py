"""Gamification package."""

from .xp import (
    LevelInfo,
    calculate_level,
    xp_for_level,
    total_xp_for_level,
    streak_bonus,
    XP_PER_COMPLETION,
    STREAK_BONUS_PER_DAY,
    STREAK_BONUS_CAP,
)

__all__ = [
    "LevelInfo",
    "calculate_level",
    "xp_for_level",
    "total_xp_for_level",
    "streak_bonus",
    "XP_PER_COMPLETION",
    "STREAK_BONUS_PER_DAY",
    "STREAK_BONUS_CAP",
]
