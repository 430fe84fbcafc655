"""Shared fixtures: recording stand-ins for the audio and haptic collaborators."""

from __future__ import annotations

from typing import List, Tuple

import pytest

from pixelhabits.core.feedback import ImpactStyle, NotificationKind
from pixelhabits.core.habits import Habit, HabitList
from pixelhabits.core.progress import HabitTracker, ProgressState


class RecordingAudio:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def play_effect(self, name: str) -> None:
        self.calls.append(("effect", name))

    def play_music(self, name: str) -> None:
        self.calls.append(("music", name))

    @property
    def effects(self) -> List[str]:
        return [name for kind, name in self.calls if kind == "effect"]


class RecordingHaptics:
    def __init__(self) -> None:
        self.calls: List[object] = []

    def impact(self, style: ImpactStyle) -> None:
        self.calls.append(style)

    def notify(self, kind: NotificationKind) -> None:
        self.calls.append(kind)

    def selection(self) -> None:
        self.calls.append("selection")


@pytest.fixture()
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture()
def haptics() -> RecordingHaptics:
    return RecordingHaptics()


@pytest.fixture()
def sample_habits() -> HabitList:
    return HabitList(
        [
            Habit(id=1, name="Drink Water", icon="💧", completed=False, streak=5, xp=10),
            Habit(id=2, name="Exercise", icon="🏃", completed=False, streak=3, xp=20),
            Habit(id=3, name="Read Book", icon="📚", completed=True, streak=10, xp=15),
            Habit(id=4, name="Meditate", icon="🧘", completed=False, streak=2, xp=25),
        ]
    )


@pytest.fixture()
def tracker(sample_habits: HabitList, audio: RecordingAudio, haptics: RecordingHaptics) -> HabitTracker:
    return HabitTracker(sample_habits, ProgressState(level=3, xp=245), audio=audio, haptics=haptics)
