"""Suggested habits and the habit colour palette.

Default Catalog
---------------
First-run users get the full suggested list seeded as real habits:

    morning       wake early, brush teeth, morning exercise
    productivity  two deep-work blocks, reading, language learning
    fitness       100 pushups (target 100), 30 min HIIT
    evening       brush teeth, sleep before 11, no phone after 10
    health        8 glasses of water (target 8), vitamins, meditation

Palette
-------
``HABIT_COLORS`` holds eight ``(start, end)`` gradient pairs.  A habit's
``color_index`` picks one; out-of-range indices wrap so every habit has a
colour.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SuggestedHabit:
    name: str
    icon: str
    color_index: int
    category: str           # morning | evening | health | productivity | fitness
    daily_target: int = 1
    goal: int | None = None


SUGGESTED_HABITS: list[SuggestedHabit] = [
    # ── morning routine ─────────────────────────────────────────────────
    SuggestedHabit("Wake up before 7:00 AM", "☀️", 6, "morning"),
    SuggestedHabit("Brush teeth (morning)", "\U0001faa5", 3, "morning"),
    SuggestedHabit("Morning exercise", "\U0001f3c3", 1, "morning"),

    # ── deep work ───────────────────────────────────────────────────────
    SuggestedHabit("1st Deep Work Session (4h)", "\U0001f9e0", 0, "productivity"),
    SuggestedHabit("2nd Deep Work Session (4h)", "\U0001f4bb", 0, "productivity"),

    # ── fitness ─────────────────────────────────────────────────────────
    SuggestedHabit("100 Pushups", "\U0001f4aa", 2, "fitness", daily_target=100),
    SuggestedHabit("30 min HIIT", "\U0001f525", 5, "fitness"),

    # ── evening routine ─────────────────────────────────────────────────
    SuggestedHabit("Brush teeth (evening)", "\U0001faa5", 3, "evening"),
    SuggestedHabit("Go to sleep before 11:00 PM", "\U0001f319", 5, "evening"),

    # ── health ──────────────────────────────────────────────────────────
    SuggestedHabit("Drink 8 glasses of water", "\U0001f4a7", 5, "health", daily_target=8),
    SuggestedHabit("Take vitamins", "\U0001f48a", 4, "health"),
    SuggestedHabit("Meditation (10 min)", "\U0001f9d8", 7, "health"),
    SuggestedHabit("Read for 30 minutes", "\U0001f4da", 6, "productivity"),
    SuggestedHabit("Language Learning (3h)", "\U0001f3a7", 0, "productivity", daily_target=3),
    SuggestedHabit("No phone after 10 PM", "\U0001f4f1", 4, "evening"),
]


def default_habits() -> list[SuggestedHabit]:
    """Seed definitions for a first run (a fresh copy each call)."""
    return list(SUGGESTED_HABITS)


# ── palette ──────────────────────────────────────────────────────────────

HABIT_COLORS: list[tuple[str, str]] = [
    ("#06B6D4", "#0891B2"),   # cyan
    ("#10B981", "#059669"),   # emerald
    ("#F59E0B", "#D97706"),   # amber
    ("#3B82F6", "#1D4ED8"),   # blue
    ("#EC4899", "#BE185D"),   # pink
    ("#F97316", "#C2410C"),   # orange
    ("#84CC16", "#4D7C0F"),   # lime
    ("#0EA5E9", "#0284C7"),   # sky
]


def habit_color(color_index: int) -> tuple[str, str]:
    """Gradient pair for *color_index*, wrapping around the palette."""
    return HABIT_COLORS[color_index % len(HABIT_COLORS)]
