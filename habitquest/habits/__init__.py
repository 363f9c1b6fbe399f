"""Habits package."""

from .dates import date_key, today_key, parse_date_key, created_date_key
from .models import (
    DayState,
    Frequency,
    GridDay,
    Habit,
    ToggleResult,
    UserStats,
    XpChange,
)
from .streaks import calculate_streak
from .repository import HabitRepository
from .progress import ProgressEngine
from .grid import generate_grid_data, CARD_GRID_DAYS, CALENDAR_DAYS, SHARE_GRID_DAYS

__all__ = [
    "date_key",
    "today_key",
    "parse_date_key",
    "created_date_key",
    "DayState",
    "Frequency",
    "GridDay",
    "Habit",
    "ToggleResult",
    "UserStats",
    "XpChange",
    "calculate_streak",
    "HabitRepository",
    "ProgressEngine",
    "generate_grid_data",
    "CARD_GRID_DAYS",
    "CALENDAR_DAYS",
    "SHARE_GRID_DAYS",
]
