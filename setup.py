"""Packaging for HabitQuest.

Install for development:
    pip install -e ".[test]"
    python -m habitquest
"""

from setuptools import setup, find_packages

setup(
    name="HabitQuest",
    version="0.1.0",
    packages=find_packages(include=["habitquest", "habitquest.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["habitquest=habitquest.__main__:main"],
    },
)
