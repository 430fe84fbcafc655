"""Application entry point and setup for Pixel Habits."""

import logging
import sys

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication

from pixelhabits.core.config import AppConfig
from pixelhabits.core.feedback import AudioController, HapticController, LoggingHapticBackend
from pixelhabits.core.habits import HabitList, load_seed
from pixelhabits.core.navigation import NavigationState
from pixelhabits.core.progress import HabitTracker, ProgressState
from pixelhabits.core.session import Profile
from pixelhabits.ui.audio import QtAudioBackend
from pixelhabits.ui.colors import PIXEL_FONT
from pixelhabits.ui.main_window import MainWindow


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_application_font(app: QApplication) -> None:
    """Use a monospaced pixel-style face with emoji fonts as fallbacks."""
    app_font = QFont(PIXEL_FONT)
    app_font.setStyleHint(QFont.StyleHint.Monospace)
    app_font.setFamilies(
        [
            PIXEL_FONT,
            "Noto Color Emoji",  # Linux (common)
            "Segoe UI Emoji",  # Windows
            "Apple Color Emoji",  # macOS
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)
    logging.info("Default font: %s", PIXEL_FONT)


def run() -> None:
    """Build the state model, wire the collaborators and start the main window."""
    config = AppConfig.from_env()
    configure_logging(config.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("PixelHabits")
    app.setApplicationDisplayName("Pixel Habits")
    load_application_font(app)

    seed = load_seed()
    audio = AudioController(QtAudioBackend(config.assets_dir), muted=config.muted)
    haptics = HapticController(LoggingHapticBackend(), enabled=config.haptics_enabled)
    tracker = HabitTracker(
        HabitList(seed.habits),
        ProgressState(level=seed.level, xp=seed.xp),
        audio=audio,
        haptics=haptics,
    )
    navigation = NavigationState(config.start_screen)

    window = MainWindow(
        navigation=navigation,
        tracker=tracker,
        achievements=seed.achievements,
        profile=Profile(username=seed.username),
        audio=audio,
        haptics=haptics,
    )
    window.show()

    sys.exit(app.exec())
