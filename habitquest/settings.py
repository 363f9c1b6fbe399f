"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/HabitQuest/settings.json

Set ``HABITQUEST_HOME`` to keep the settings file and the database
somewhere else (handy for a second profile or a throwaway run).

Usage::

    settings = load_settings()
    settings.reminder_hour = 21
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)


APP_SUPPORT_DIR = Path(
    os.environ.get("HABITQUEST_HOME")
    or Path.home() / "Library" / "Application Support" / "HabitQuest"
)
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── reminders ─────────────────────────────────────────────────────
    reminders_enabled: bool = True
    reminder_hour: int = 20                # 8 PM local
    reminder_minute: int = 0

    # ── display ───────────────────────────────────────────────────────
    grid_days: int = 91                    # 13 weeks on a habit card

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "WARNING"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError):
        logger.warning("Could not read settings from %s, using defaults", path, exc_info=True)
    return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
