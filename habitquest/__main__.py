"""Allow running HabitQuest as a module: python -m habitquest."""

import json
import logging
import sys

from PyQt6.QtCore import QCoreApplication

from .database.db import init_db
from .habits.progress import ProgressEngine
from .habits.repository import HabitRepository
from .habits.stats import best_streak
from .reminders import build_daily_reminder
from .settings import load_settings
from .state import HabitStore

logger = logging.getLogger("habitquest")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    init_db()

    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    app.setApplicationName("HabitQuest")
    app.setOrganizationName("HabitQuest")

    repository = HabitRepository()
    store = HabitStore(
        repository, ProgressEngine(repository), grid_days=settings.grid_days,
    )
    try:
        store.load()
    except json.JSONDecodeError:
        logger.exception("Stored habit data is corrupt")
        sys.exit(1)

    level = store.level_info
    print("HabitQuest ready!")
    print(f"  habits:      {len(store.habits)}")
    print(f"  level:       {level.level} ({level.xp_to_next} XP to next)")
    print(f"  best streak: {best_streak(store.habits)}")

    reminder = build_daily_reminder(settings, store.habits)
    if reminder is not None:
        print(f"  reminder:    {reminder.hour:02d}:{reminder.minute:02d} daily")


if __name__ == "__main__":
    main()
