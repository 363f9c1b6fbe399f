"""Tests for the streak calculator."""

from habitquest.habits.streaks import calculate_streak, completed_keys

from helpers import TODAY, key, completed_run


class TestCalculateStreak:

    def test_empty_map(self):
        assert calculate_streak({}, 1, TODAY) == 0

    def test_none_map(self):
        assert calculate_streak(None, 1, TODAY) == 0

    def test_only_partial_progress(self):
        assert calculate_streak({key(0): 3, key(-1): 7}, 8, TODAY) == 0

    def test_completed_today_only(self):
        assert calculate_streak({key(0): 1}, 1, TODAY) == 1

    def test_completed_yesterday_anchors_streak(self):
        """Five days ending yesterday still count while today is open."""
        assert calculate_streak(completed_run(5, end_offset=-1), 1, TODAY) == 5

    def test_broken_when_latest_is_two_days_ago(self):
        assert calculate_streak(completed_run(10, end_offset=-2), 1, TODAY) == 0

    def test_long_history_without_recent_completion(self):
        history = completed_run(30, end_offset=-40)
        assert calculate_streak(history, 1, TODAY) == 0

    def test_stops_at_first_gap(self):
        completions = {**completed_run(3, end_offset=0), **completed_run(4, end_offset=-4)}
        assert calculate_streak(completions, 1, TODAY) == 3

    def test_zero_entries_break_the_run(self):
        completions = completed_run(6, end_offset=0)
        completions[key(-2)] = 0
        assert calculate_streak(completions, 1, TODAY) == 2

    def test_respects_daily_target(self):
        completions = {key(0): 8, key(-1): 8, key(-2): 7, key(-3): 8}
        assert calculate_streak(completions, 8, TODAY) == 2

    def test_run_across_month_boundary(self):
        # TODAY is 2026-03-18; 20 days back crosses into February
        assert calculate_streak(completed_run(20), 1, TODAY) == 20

    def test_future_dated_completion_breaks_anchor(self):
        completions = {key(1): 1, key(0): 1}
        assert calculate_streak(completions, 1, TODAY) == 0


class TestCompletedKeys:

    def test_sorted_most_recent_first(self):
        completions = {key(-3): 1, key(0): 1, key(-1): 0, key(-7): 2}
        assert completed_keys(completions, 1) == [key(0), key(-3), key(-7)]
