from __future__ import annotations

import logging
from typing import Dict, List

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from pixelhabits.core.feedback import AudioController, HapticController
from pixelhabits.core.habits import Achievement
from pixelhabits.core.navigation import NavigationState, Screen
from pixelhabits.core.progress import HabitTracker
from pixelhabits.core.session import Profile
from pixelhabits.ui.colors import PixelColors
from pixelhabits.ui.home_screen import HomeScreen
from pixelhabits.ui.models import ONBOARDING_PAGES
from pixelhabits.ui.screens import (
    BaseScreen,
    LoginScreen,
    OnboardingScreen,
    SettingsScreen,
    SplashScreen,
    TitleScreen,
)

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 420
WINDOW_HEIGHT = 860


class MainWindow(QMainWindow):
    """Phone-sized window that shows the page for the current navigation screen.

    Each ``Screen`` maps to one page in a stacked widget; the window follows
    ``NavigationState`` and calls ``on_enter`` on the page it switches to.
    """

    def __init__(
        self,
        navigation: NavigationState,
        tracker: HabitTracker,
        achievements: List[Achievement],
        profile: Profile,
        audio: AudioController,
        haptics: HapticController,
    ) -> None:
        super().__init__()
        self._navigation = navigation
        self._audio = audio
        self.setWindowTitle("Pixel Habits")
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self._stack = QStackedWidget()
        self._stack.setObjectName("screenStack")
        self._stack.setStyleSheet(
            f"""
            QStackedWidget#screenStack {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {PixelColors.BG_TOP}, stop:1 {PixelColors.BG_BOTTOM});
            }}
            """
        )
        self.setCentralWidget(self._stack)

        common = (navigation, audio, haptics)
        self._screens: Dict[Screen, BaseScreen] = {
            Screen.SPLASH: SplashScreen(*common),
            Screen.TITLE: TitleScreen(*common),
            Screen.LOGIN: LoginScreen(*common),
            Screen.HOME: HomeScreen(tracker, achievements, profile, *common),
            Screen.SETTINGS: SettingsScreen(*common),
        }
        for page in ONBOARDING_PAGES:
            self._screens[page.screen] = OnboardingScreen(page, len(ONBOARDING_PAGES), *common)
        for screen in Screen:
            self._stack.addWidget(self._screens[screen])

        navigation.subscribe(self._on_navigate)
        # Defer the first page's on_enter until the event loop runs.
        QTimer.singleShot(0, lambda: self._show(navigation.current))

    def screen_widget(self, screen: Screen) -> QWidget:
        return self._screens[screen]

    def current_widget(self) -> QWidget:
        return self._stack.currentWidget()

    def _on_navigate(self, navigation: NavigationState) -> None:
        self._show(navigation.current)

    def _show(self, screen: Screen) -> None:
        widget = self._screens[screen]
        self._stack.setCurrentWidget(widget)
        widget.on_enter()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._audio.stop_music()
        super().closeEvent(event)
