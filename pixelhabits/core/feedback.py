"""Audio and haptic feedback collaborators.

State owners receive these as plain objects instead of reaching for global
managers; anything with the right methods can stand in (tests use recorders).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

SOUND_EFFECTS = (
    "button_tap",
    "success",
    "level_up",
    "coin_collect",
    "page_turn",
    "error",
    "notification",
    "achievement_unlock",
)


class ImpactStyle(Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class NotificationKind(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class AudioSink(Protocol):
    def play_effect(self, name: str) -> None: ...

    def play_music(self, name: str) -> None: ...


class HapticSink(Protocol):
    def impact(self, style: ImpactStyle) -> None: ...

    def notify(self, kind: NotificationKind) -> None: ...

    def selection(self) -> None: ...


class AudioBackend(Protocol):
    def play_effect(self, name: str, volume: float) -> None: ...

    def play_music(self, name: str, volume: float) -> None: ...

    def set_music_volume(self, volume: float) -> None: ...

    def pause_music(self) -> None: ...

    def resume_music(self) -> None: ...

    def stop_music(self) -> None: ...


def _clamp_volume(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class AudioController:
    """Mute and volume gate in front of an audio backend."""

    def __init__(
        self,
        backend: Optional[AudioBackend] = None,
        *,
        muted: bool = False,
        music_volume: float = 0.7,
        effects_volume: float = 1.0,
    ) -> None:
        self._backend = backend
        self._muted = muted
        self._music_volume = _clamp_volume(music_volume)
        self._effects_volume = _clamp_volume(effects_volume)

    @property
    def muted(self) -> bool:
        return self._muted

    @property
    def music_volume(self) -> float:
        return self._music_volume

    @music_volume.setter
    def music_volume(self, value: float) -> None:
        self._music_volume = _clamp_volume(value)
        if self._backend is not None:
            self._backend.set_music_volume(self._music_volume)

    @property
    def effects_volume(self) -> float:
        return self._effects_volume

    @effects_volume.setter
    def effects_volume(self, value: float) -> None:
        self._effects_volume = _clamp_volume(value)

    def set_muted(self, muted: bool) -> None:
        if muted == self._muted:
            return
        self._muted = muted
        logger.info("Audio %s", "muted" if muted else "unmuted")
        if self._backend is None:
            return
        if muted:
            self._backend.pause_music()
        else:
            self._backend.resume_music()

    def toggle_mute(self) -> None:
        self.set_muted(not self._muted)

    def play_effect(self, name: str) -> None:
        if self._muted:
            return
        if self._backend is None:
            logger.debug("Sound effect (no backend): %s", name)
            return
        self._backend.play_effect(name, self._effects_volume)

    def play_music(self, name: str) -> None:
        if self._muted:
            return
        if self._backend is None:
            logger.debug("Music (no backend): %s", name)
            return
        self._backend.play_music(name, self._music_volume)

    def stop_music(self) -> None:
        if self._backend is not None:
            self._backend.stop_music()


class LoggingHapticBackend:
    """Desktop stand-in for a haptic engine: records each pulse in the log."""

    def impact(self, style: ImpactStyle) -> None:
        logger.debug("Haptic impact: %s", style.value)

    def notify(self, kind: NotificationKind) -> None:
        logger.debug("Haptic notification: %s", kind.value)

    def selection(self) -> None:
        logger.debug("Haptic selection")


class HapticController:
    """Enable switch in front of a haptic backend."""

    def __init__(self, backend: Optional[HapticSink] = None, *, enabled: bool = True) -> None:
        self._backend = backend if backend is not None else LoggingHapticBackend()
        self.enabled = enabled

    def impact(self, style: ImpactStyle) -> None:
        if self.enabled:
            self._backend.impact(style)

    def notify(self, kind: NotificationKind) -> None:
        if self.enabled:
            self._backend.notify(kind)

    def selection(self) -> None:
        if self.enabled:
            self._backend.selection()
