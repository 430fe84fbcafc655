from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import yaml


DATA_DIR = Path(__file__).resolve().parent.parent / "data"

LEVEL_THRESHOLD = 500


class HabitNotFoundError(KeyError):
    """Raised when an operation references a habit id that is not in the list."""

    def __init__(self, habit_id: int) -> None:
        super().__init__(habit_id)
        self.habit_id = habit_id

    def __str__(self) -> str:
        return f"No habit with id {self.habit_id}"


@dataclass
class Habit:
    id: int
    name: str
    icon: str
    completed: bool = False
    streak: int = 0
    xp: int = 0


@dataclass(frozen=True)
class Achievement:
    key: str
    icon: str
    title: str
    description: str
    unlocked: bool


@dataclass
class SeedData:
    """Everything the app starts with: habits, awards and starting progress."""

    habits: List[Habit]
    achievements: List[Achievement]
    level: int
    xp: int
    username: str


class HabitList:
    """Ordered, id-unique list of habits mutated in place."""

    def __init__(self, habits: List[Habit]) -> None:
        seen: Dict[int, Habit] = {}
        for habit in habits:
            if habit.id in seen:
                raise ValueError(f"Duplicate habit id: {habit.id}")
            seen[habit.id] = habit
        self._habits = list(habits)
        self._by_id = seen

    def __iter__(self) -> Iterator[Habit]:
        return iter(self._habits)

    def __len__(self) -> int:
        return len(self._habits)

    def all(self) -> List[Habit]:
        return list(self._habits)

    def get(self, habit_id: int) -> Habit:
        try:
            return self._by_id[habit_id]
        except KeyError:
            raise HabitNotFoundError(habit_id) from None

    def completed_count(self) -> int:
        return sum(1 for h in self._habits if h.completed)

    def best_streak(self) -> int:
        return max((h.streak for h in self._habits), default=0)

    def points(self) -> int:
        """Total XP reward of the habits currently checked off."""
        return sum(h.xp for h in self._habits if h.completed)

    def success_rate(self) -> float:
        """Share of habits completed, as a percentage."""
        if not self._habits:
            return 0.0
        return self.completed_count() / len(self._habits) * 100.0

    def weekly_marks(self, weekday: int) -> List[bool]:
        """Which days of the current week (Monday=0) count as done.

        Earlier days are covered by the best running streak, today is done once
        any habit is checked off, and later days are never done.
        """
        streak = self.best_streak()
        marks = []
        for day in range(7):
            if day < weekday:
                marks.append(weekday - day <= streak)
            elif day == weekday:
                marks.append(self.completed_count() > 0)
            else:
                marks.append(False)
        return marks


def _parse_habit(raw: dict, source: str) -> Habit:
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: each habit must be a mapping")
    for field in ("id", "name", "icon"):
        if raw.get(field) in (None, ""):
            raise ValueError(f"{source}: habit missing '{field}'")
    streak = int(raw.get("streak", 0))
    xp = int(raw.get("xp", 0))
    if streak < 0 or xp < 0:
        raise ValueError(f"{source}: habit {raw['id']} has negative streak or xp")
    return Habit(
        id=int(raw["id"]),
        name=str(raw["name"]).strip(),
        icon=str(raw["icon"]),
        completed=bool(raw.get("completed", False)),
        streak=streak,
        xp=xp,
    )


def _parse_achievement(raw: dict, source: str) -> Achievement:
    if not isinstance(raw, dict) or not raw.get("key") or not raw.get("title"):
        raise ValueError(f"{source}: achievement needs 'key' and 'title'")
    return Achievement(
        key=str(raw["key"]),
        icon=str(raw.get("icon", "")),
        title=str(raw["title"]).strip(),
        description=str(raw.get("description", "")).strip(),
        unlocked=bool(raw.get("unlocked", False)),
    )


def load_seed(path: Optional[Path] = None) -> SeedData:
    """Load the sample habits, achievements and starting progress from YAML."""
    seed_path = path or DATA_DIR / "seed.yaml"
    if not seed_path.exists():
        raise FileNotFoundError(f"Seed data not found: {seed_path}")

    raw = yaml.safe_load(seed_path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{seed_path.name}: expected a YAML mapping")

    habits_raw = raw.get("habits")
    if not isinstance(habits_raw, list) or not habits_raw:
        raise ValueError(f"{seed_path.name}: 'habits' must be a non-empty list")
    habits = [_parse_habit(item, seed_path.name) for item in habits_raw]
    try:
        HabitList(habits)
    except ValueError as e:
        raise ValueError(f"{seed_path.name}: {e}") from None

    achievements = [
        _parse_achievement(item, seed_path.name) for item in raw.get("achievements") or []
    ]

    progress = raw.get("progress") or {}
    level = int(progress.get("level", 1))
    xp = int(progress.get("xp", 0))
    if level < 1 or not 0 <= xp < LEVEL_THRESHOLD:
        raise ValueError(
            f"{seed_path.name}: 'progress' needs level >= 1 and 0 <= xp < {LEVEL_THRESHOLD}"
        )

    profile = raw.get("profile") or {}
    username = str(profile.get("username", "Player")).strip() or "Player"

    return SeedData(
        habits=habits,
        achievements=achievements,
        level=level,
        xp=xp,
        username=username,
    )
