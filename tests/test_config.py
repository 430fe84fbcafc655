"""Tests for pixelhabits.core.config – environment switches."""

from __future__ import annotations

import logging
from pathlib import Path

from pixelhabits.core.config import AppConfig
from pixelhabits.core.navigation import Screen


class TestAppConfig:
    def test_defaults_from_empty_env(self):
        c = AppConfig.from_env({})
        assert c == AppConfig()
        assert c.start_screen is Screen.SPLASH

    def test_skip_splash(self):
        c = AppConfig.from_env({"PIXELHABITS_SKIP_SPLASH": "1"})
        assert c.start_screen is Screen.TITLE

    def test_flags_need_exact_one(self):
        c = AppConfig.from_env({"PIXELHABITS_MUTED": "yes"})
        assert c.muted is False

    def test_muted_and_haptics(self):
        c = AppConfig.from_env({"PIXELHABITS_MUTED": "1", "PIXELHABITS_NO_HAPTICS": "1"})
        assert c.muted is True
        assert c.haptics_enabled is False

    def test_log_level(self):
        assert AppConfig.from_env({"PIXELHABITS_LOG_LEVEL": "debug"}).log_level == logging.DEBUG

    def test_unknown_log_level_falls_back(self):
        assert AppConfig.from_env({"PIXELHABITS_LOG_LEVEL": "chatty"}).log_level == logging.INFO

    def test_assets_dir(self, tmp_path: Path):
        c = AppConfig.from_env({"PIXELHABITS_ASSETS_DIR": str(tmp_path)})
        assert c.assets_dir == tmp_path
