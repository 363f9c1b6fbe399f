"""In-memory application state for HabitQuest.

``HabitStore`` is the single mutable state container the UI reads from.
It is owned by the composition root, changes only through repository and
engine results, and tells views to re-render through Qt signals.

Signals
-------
habits_changed(habits: list)
    Emitted whenever the habit list changes (load, add, edit, delete,
    toggle, increment, reset).
stats_changed(stats: UserStats)
    Emitted when total XP or achievements change.
habit_toggled(result: ToggleResult)
    Emitted after every successful toggle/increment, so reward UI
    (confetti, haptics) can react to ``xp_gained``.
level_up(data: dict)
    Emitted when an action crosses a level threshold.  Keys:
    ``old_level``, ``new_level``.
loading_changed(is_loading: bool)
"""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import QObject, pyqtSignal

from .gamification.xp import LevelInfo, calculate_level
from .habits.grid import CARD_GRID_DAYS, generate_grid_data
from .habits.models import GridDay, Habit, ToggleResult, UserStats
from .habits.progress import ProgressEngine
from .habits.repository import HabitRepository


@dataclass(frozen=True)
class LastAction:
    """The most recent change, kept until the UI acknowledges it."""

    type: str                     # add | update | delete | toggle
    habit: Habit | None = None
    habit_id: str | None = None
    xp_gained: int = 0
    leveled_up: bool = False
    new_level: int | None = None


class HabitStore(QObject):
    """Qt-side state container wrapping the repository and engine."""

    habits_changed = pyqtSignal(object)
    stats_changed = pyqtSignal(object)
    habit_toggled = pyqtSignal(object)
    level_up = pyqtSignal(object)
    loading_changed = pyqtSignal(bool)

    def __init__(
        self,
        repository: HabitRepository,
        engine: ProgressEngine,
        parent: QObject | None = None,
        *,
        grid_days: int = CARD_GRID_DAYS,
    ) -> None:
        super().__init__(parent)
        self._repo = repository
        self._engine = engine
        self._grid_days = grid_days

        self._habits: list[Habit] = []
        self._user_stats = UserStats()
        self._level_info = calculate_level(0)
        self._is_loading = True
        self._last_action: LastAction | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def habits(self) -> list[Habit]:
        return list(self._habits)

    @property
    def user_stats(self) -> UserStats:
        return self._user_stats

    @property
    def level_info(self) -> LevelInfo:
        return self._level_info

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_action(self) -> LastAction | None:
        return self._last_action

    def habit(self, habit_id: str) -> Habit | None:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def grid_for(self, habit_id: str, total_days: int | None = None) -> list[GridDay]:
        """Fresh grid projection for one habit (empty if unknown).

        Without *total_days* the store's configured ``grid_days`` is used.
        """
        habit = self.habit(habit_id)
        if habit is None:
            return []
        return generate_grid_data(habit, total_days or self._grid_days)

    # ══════════════════════════════════════════════════════════════════
    #  OPERATIONS
    # ══════════════════════════════════════════════════════════════════

    def load(self) -> None:
        """(Re)load habits and stats from storage."""
        self._set_loading(True)
        self._habits = self._repo.get_habits()
        self._set_stats(self._repo.get_user_stats())
        self._set_loading(False)
        self.habits_changed.emit(self.habits)

    def add_habit(self, name: str, icon: str = "", color_index: int = 0, **kwargs) -> Habit:
        habit = self._repo.add_habit(name, icon, color_index, **kwargs)
        self._habits.append(habit)
        self._last_action = LastAction(type="add", habit=habit)
        self.habits_changed.emit(self.habits)
        return habit

    def update_habit(self, habit_id: str, **changes) -> Habit | None:
        updated = self._repo.update_habit(habit_id, **changes)
        if updated is not None:
            self._replace(updated)
            self._last_action = LastAction(type="update", habit=updated)
            self.habits_changed.emit(self.habits)
        return updated

    def delete_habit(self, habit_id: str) -> None:
        self._repo.delete_habit(habit_id)
        self._habits = [h for h in self._habits if h.id != habit_id]
        self._last_action = LastAction(type="delete", habit_id=habit_id)
        self.habits_changed.emit(self.habits)

    def toggle_completion(self, habit_id: str, key: str | None = None) -> ToggleResult | None:
        result = self._engine.toggle_completion(habit_id, key)
        if result is not None:
            self._apply_result(result)
        return result

    def increment_progress(
        self, habit_id: str, amount: int, key: str | None = None,
    ) -> ToggleResult | None:
        result = self._engine.increment_progress(habit_id, amount, key)
        if result is not None:
            self._apply_result(result)
        return result

    def clear_last_action(self) -> None:
        self._last_action = None

    def reset_app(self) -> None:
        self._repo.reset_app()
        self._last_action = None
        self.load()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _replace(self, habit: Habit) -> None:
        self._habits = [habit if h.id == habit.id else h for h in self._habits]

    def _set_loading(self, value: bool) -> None:
        self._is_loading = value
        self.loading_changed.emit(value)

    def _set_stats(self, stats: UserStats) -> None:
        self._user_stats = stats
        self._level_info = calculate_level(stats.total_xp)
        self.stats_changed.emit(stats)

    def _apply_result(self, result: ToggleResult) -> None:
        old_level = self._level_info.level
        self._replace(result.habit)
        self._last_action = LastAction(
            type="toggle",
            habit=result.habit,
            xp_gained=result.xp_gained,
            leveled_up=result.leveled_up,
            new_level=result.new_level,
        )
        self.habits_changed.emit(self.habits)

        if result.total_xp is not None:
            self._set_stats(UserStats(
                total_xp=result.total_xp,
                achievements=list(self._user_stats.achievements),
            ))
        self.habit_toggled.emit(result)

        if result.leveled_up:
            self.level_up.emit({
                "old_level": old_level,
                "new_level": result.new_level,
            })
