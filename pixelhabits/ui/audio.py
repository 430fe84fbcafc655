"""Qt Multimedia audio backend."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer, QSoundEffect

from pixelhabits.core.feedback import SOUND_EFFECTS

logger = logging.getLogger(__name__)

DEFAULT_SOUNDS_DIR = Path(__file__).resolve().parent.parent / "assets" / "sounds"


class QtAudioBackend(QObject):
    """Plays preloaded WAV effects and looping background music.

    Effects are looked up as ``<name>.wav`` and music as ``<name>.mp3`` (or
    ``.wav``) in *sounds_dir*. Missing files are logged once and skipped.
    """

    def __init__(
        self,
        sounds_dir: Optional[Path] = None,
        effects: Iterable[str] = SOUND_EFFECTS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._sounds_dir = sounds_dir or DEFAULT_SOUNDS_DIR
        self._effects: Dict[str, QSoundEffect] = {}
        self._audio_output = QAudioOutput(self)
        self._music_player = QMediaPlayer(self)
        self._music_player.setAudioOutput(self._audio_output)
        self._music_player.setLoops(QMediaPlayer.Loops.Infinite)
        self._current_music: Optional[str] = None
        self._preload(effects)

    def _preload(self, names: Iterable[str]) -> None:
        for name in names:
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                logger.warning("Sound file not found: %s", path)
                continue
            effect = QSoundEffect(self)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            self._effects[name] = effect
            logger.info("Loaded sound: %s", name)

    def play_effect(self, name: str, volume: float) -> None:
        effect = self._effects.get(name)
        if effect is None:
            logger.debug("Sound not loaded: %s", name)
            return
        effect.stop()
        effect.setVolume(volume)
        effect.play()

    def play_music(self, name: str, volume: float) -> None:
        path = None
        for suffix in (".mp3", ".wav"):
            candidate = self._sounds_dir / f"{name}{suffix}"
            if candidate.exists():
                path = candidate
                break
        if path is None:
            logger.warning("Music file not found: %s", name)
            return
        if self._current_music == name and self._music_player.isPlaying():
            return
        self._music_player.setSource(QUrl.fromLocalFile(str(path)))
        self._audio_output.setVolume(volume)
        self._music_player.play()
        self._current_music = name
        logger.info("Playing background music: %s", name)

    def set_music_volume(self, volume: float) -> None:
        self._audio_output.setVolume(volume)

    def pause_music(self) -> None:
        self._music_player.pause()

    def resume_music(self) -> None:
        if self._current_music is not None:
            self._music_player.play()

    def stop_music(self) -> None:
        self._music_player.stop()
        self._current_music = None
