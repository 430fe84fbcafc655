from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from pixelhabits.core.feedback import AudioSink, HapticSink, ImpactStyle, NotificationKind
from pixelhabits.core.habits import LEVEL_THRESHOLD, Habit, HabitList

logger = logging.getLogger(__name__)


@dataclass
class ProgressState:
    level: int = 1
    xp: int = 0

    def level_fraction(self) -> float:
        """How far the XP bar is filled toward the next level (0.0 - 1.0)."""
        return max(0.0, min(1.0, self.xp / float(LEVEL_THRESHOLD)))


@dataclass(frozen=True)
class ToggleResult:
    habit: Habit
    completed: bool
    xp_gained: int
    leveled_up: bool


LevelUpListener = Callable[[int], None]
ChangeListener = Callable[[], None]


class HabitTracker:
    """Owns the habit list and level/XP counters.

    Completing a habit adds its XP reward and levels up once the total reaches
    ``LEVEL_THRESHOLD``. Un-completing does not refund the XP.
    """

    def __init__(
        self,
        habits: HabitList,
        progress: ProgressState,
        *,
        audio: AudioSink,
        haptics: HapticSink,
    ) -> None:
        self._habits = habits
        self._progress = progress
        self._audio = audio
        self._haptics = haptics
        self._level_up_listeners: List[LevelUpListener] = []
        self._change_listeners: List[ChangeListener] = []

    @property
    def habits(self) -> HabitList:
        return self._habits

    @property
    def progress(self) -> ProgressState:
        return self._progress

    def on_level_up(self, listener: LevelUpListener) -> None:
        """Register *listener*, called with the new level after each level-up."""
        self._level_up_listeners.append(listener)

    def on_change(self, listener: ChangeListener) -> None:
        self._change_listeners.append(listener)

    def toggle_completion(self, habit_id: int) -> ToggleResult:
        habit = self._habits.get(habit_id)
        habit.completed = not habit.completed

        if not habit.completed:
            self._haptics.impact(ImpactStyle.LIGHT)
            self._audio.play_effect("button_tap")
            self._notify_change()
            return ToggleResult(habit=habit, completed=False, xp_gained=0, leveled_up=False)

        self._haptics.notify(NotificationKind.SUCCESS)
        self._audio.play_effect("success")
        self._progress.xp += habit.xp
        leveled_up = False
        if self._progress.xp >= LEVEL_THRESHOLD:
            self._level_up()
            leveled_up = True
        self._notify_change()
        return ToggleResult(habit=habit, completed=True, xp_gained=habit.xp, leveled_up=leveled_up)

    def _level_up(self) -> None:
        self._progress.level += 1
        self._progress.xp = 0
        logger.info("Level up! Now level %d", self._progress.level)
        self._haptics.notify(NotificationKind.SUCCESS)
        self._audio.play_effect("level_up")
        for listener in list(self._level_up_listeners):
            listener(self._progress.level)

    def _notify_change(self) -> None:
        for listener in list(self._change_listeners):
            listener()
