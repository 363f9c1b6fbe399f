"""Tests for the dashboard statistics helpers."""

from habitquest.habits.stats import (
    week_summary,
    weekly_rate,
    best_streak,
    total_completions,
    completion_count,
    top_habits,
)

from helpers import TODAY, key, make_habit, completed_run


def _habits():
    return [
        make_habit("a", completions=completed_run(7), streak=7),
        make_habit("b", daily_target=8, completions={key(0): 8, key(-1): 4}, streak=1),
        make_habit("c", completions={key(-20): 1}, streak=0),
    ]


class TestWeekSummary:

    def test_seven_days_oldest_first(self):
        week = week_summary(_habits(), TODAY)
        assert [d.key for d in week] == [key(o) for o in range(-6, 1)]

    def test_counts(self):
        week = week_summary(_habits(), TODAY)
        assert week[-1].completed == 2      # a and b today
        assert week[-2].completed == 1      # a only, b is partial yesterday
        assert all(d.total == 3 for d in week)

    def test_weekday_names(self):
        week = week_summary([], TODAY)
        assert week[-1].weekday == TODAY.strftime("%a")

    def test_rate_with_no_habits(self):
        assert week_summary([], TODAY)[0].rate == 0.0


class TestAggregates:

    def test_weekly_rate(self):
        # a: 7 days, b: 1 day, c: 0 → 8 of 21
        assert weekly_rate(_habits(), TODAY) == round(100 * 8 / 21)

    def test_weekly_rate_empty(self):
        assert weekly_rate([], TODAY) == 0

    def test_best_streak(self):
        assert best_streak(_habits()) == 7
        assert best_streak([]) == 0

    def test_total_completions(self):
        assert completion_count(_habits()[1]) == 1
        assert total_completions(_habits()) == 7 + 1 + 1

    def test_top_habits(self):
        assert [h.id for h in top_habits(_habits(), limit=2)] == ["a", "b"]
