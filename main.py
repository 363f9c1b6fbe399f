#!/usr/bin/env python3
"""HabitQuest entry point.

Run with:
    python main.py
    python -m habitquest
"""

from habitquest.__main__ import main


if __name__ == "__main__":
    main()
