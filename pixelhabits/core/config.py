from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from pixelhabits.core.navigation import Screen


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name) == "1"


@dataclass(frozen=True)
class AppConfig:
    skip_splash: bool = False
    muted: bool = False
    haptics_enabled: bool = True
    log_level: int = logging.INFO
    assets_dir: Optional[Path] = None

    @property
    def start_screen(self) -> Screen:
        return Screen.TITLE if self.skip_splash else Screen.SPLASH

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if env is None else env
        level_name = env.get("PIXELHABITS_LOG_LEVEL", "INFO").strip().upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            log_level = logging.INFO
        assets = env.get("PIXELHABITS_ASSETS_DIR")
        return cls(
            skip_splash=_flag(env, "PIXELHABITS_SKIP_SPLASH"),
            muted=_flag(env, "PIXELHABITS_MUTED"),
            haptics_enabled=not _flag(env, "PIXELHABITS_NO_HAPTICS"),
            log_level=log_level,
            assets_dir=Path(assets) if assets else None,
        )
