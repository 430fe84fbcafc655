"""Tests for pixelhabits.core.progress – habit completion, XP and level-ups."""

from __future__ import annotations

import pytest

from pixelhabits.core.feedback import ImpactStyle, NotificationKind
from pixelhabits.core.habits import Habit, HabitList, HabitNotFoundError
from pixelhabits.core.progress import LEVEL_THRESHOLD, HabitTracker, ProgressState


# ---------------------------------------------------------------------------
# ProgressState
# ---------------------------------------------------------------------------

class TestProgressState:
    def test_defaults(self):
        p = ProgressState()
        assert p.level == 1
        assert p.xp == 0

    def test_threshold_is_500(self):
        assert LEVEL_THRESHOLD == 500

    def test_level_fraction(self):
        assert ProgressState(level=3, xp=250).level_fraction() == 0.5

    def test_level_fraction_clamped(self):
        assert ProgressState(level=3, xp=900).level_fraction() == 1.0
        assert ProgressState(level=3, xp=0).level_fraction() == 0.0


# ---------------------------------------------------------------------------
# toggle_completion – completing
# ---------------------------------------------------------------------------

class TestCompleteHabit:
    def test_adds_exact_xp(self, tracker: HabitTracker):
        result = tracker.toggle_completion(2)
        assert tracker.progress.xp == 265
        assert tracker.progress.level == 3
        assert result.completed is True
        assert result.xp_gained == 20
        assert result.leveled_up is False

    def test_marks_habit_completed(self, tracker: HabitTracker):
        tracker.toggle_completion(1)
        assert tracker.habits.get(1).completed is True

    def test_success_feedback(self, tracker: HabitTracker, audio, haptics):
        tracker.toggle_completion(1)
        assert audio.effects == ["success"]
        assert haptics.calls == [NotificationKind.SUCCESS]

    def test_change_listener_called(self, tracker: HabitTracker):
        calls = []
        tracker.on_change(lambda: calls.append(True))
        tracker.toggle_completion(1)
        assert calls == [True]


# ---------------------------------------------------------------------------
# toggle_completion – un-completing
# ---------------------------------------------------------------------------

class TestUncompleteHabit:
    def test_no_xp_refund(self, tracker: HabitTracker):
        tracker.toggle_completion(3)  # seeded as completed
        assert tracker.habits.get(3).completed is False
        assert tracker.progress.xp == 245

    def test_on_then_off_keeps_xp(self, tracker: HabitTracker):
        tracker.toggle_completion(4)
        tracker.toggle_completion(4)
        assert tracker.progress.xp == 270
        assert tracker.habits.get(4).completed is False

    def test_result(self, tracker: HabitTracker):
        result = tracker.toggle_completion(3)
        assert result.completed is False
        assert result.xp_gained == 0
        assert result.leveled_up is False

    def test_light_tap_feedback(self, tracker: HabitTracker, audio, haptics):
        tracker.toggle_completion(3)
        assert audio.effects == ["button_tap"]
        assert haptics.calls == [ImpactStyle.LIGHT]


# ---------------------------------------------------------------------------
# Level-up
# ---------------------------------------------------------------------------

class TestLevelUp:
    @pytest.fixture()
    def near_threshold(self, audio, haptics) -> HabitTracker:
        habits = HabitList(
            [
                Habit(id=1, name="A", icon="a", xp=20),
                Habit(id=2, name="B", icon="b", xp=25),
                Habit(id=3, name="C", icon="c", xp=200),
            ]
        )
        return HabitTracker(habits, ProgressState(level=3, xp=490), audio=audio, haptics=haptics)

    def test_below_threshold_no_level_up(self, audio, haptics):
        habits = HabitList([Habit(id=1, name="A", icon="a", xp=9)])
        t = HabitTracker(habits, ProgressState(level=3, xp=490), audio=audio, haptics=haptics)
        t.toggle_completion(1)
        assert (t.progress.level, t.progress.xp) == (3, 499)

    def test_crossing_threshold_levels_up(self, near_threshold: HabitTracker):
        result = near_threshold.toggle_completion(1)  # 490 + 20 = 510
        assert result.leveled_up is True
        assert near_threshold.progress.level == 4
        assert near_threshold.progress.xp == 0

    def test_exact_threshold_levels_up(self, audio, haptics):
        habits = HabitList([Habit(id=1, name="A", icon="a", xp=10)])
        t = HabitTracker(habits, ProgressState(level=1, xp=490), audio=audio, haptics=haptics)
        t.toggle_completion(1)
        assert (t.progress.level, t.progress.xp) == (2, 0)

    def test_xp_below_threshold_after_check(self, near_threshold: HabitTracker):
        near_threshold.toggle_completion(3)
        assert near_threshold.progress.xp < LEVEL_THRESHOLD

    def test_level_up_listener(self, near_threshold: HabitTracker):
        levels = []
        near_threshold.on_level_up(levels.append)
        near_threshold.toggle_completion(2)
        assert levels == [4]

    def test_level_up_feedback(self, near_threshold: HabitTracker, audio, haptics):
        near_threshold.toggle_completion(1)
        assert audio.effects == ["success", "level_up"]
        assert haptics.calls == [NotificationKind.SUCCESS, NotificationKind.SUCCESS]

    def test_cumulative_scenario(self, tracker: HabitTracker):
        # 245 -> 265 (Exercise) -> 290 (Meditate) -> 300 (Drink Water)
        tracker.toggle_completion(2)
        assert (tracker.progress.level, tracker.progress.xp) == (3, 265)
        tracker.toggle_completion(4)
        tracker.toggle_completion(1)
        assert tracker.progress.xp == 300
        # Keep cycling one habit off and on until the threshold is crossed.
        leveled = False
        while not leveled:
            tracker.toggle_completion(4)
            leveled = tracker.toggle_completion(4).leveled_up
        assert (tracker.progress.level, tracker.progress.xp) == (4, 0)


# ---------------------------------------------------------------------------
# Unknown habit id
# ---------------------------------------------------------------------------

class TestNotFound:
    def test_raises(self, tracker: HabitTracker):
        with pytest.raises(HabitNotFoundError):
            tracker.toggle_completion(99)

    def test_is_key_error(self, tracker: HabitTracker):
        with pytest.raises(KeyError):
            tracker.toggle_completion(99)

    def test_state_unmodified(self, tracker: HabitTracker, audio, haptics):
        before = [(h.id, h.completed) for h in tracker.habits]
        with pytest.raises(HabitNotFoundError):
            tracker.toggle_completion(42)
        assert [(h.id, h.completed) for h in tracker.habits] == before
        assert (tracker.progress.level, tracker.progress.xp) == (3, 245)
        assert audio.calls == []
        assert haptics.calls == []
