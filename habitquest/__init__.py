"""HabitQuest: habit tracking with streaks, XP and levels."""
