"""Tests for the Qt screens – timers, navigation hooks and level-up wiring.

Timer callbacks are invoked directly so no event loop is needed.
"""

from __future__ import annotations

import os

import pytest
from PySide6.QtWidgets import QApplication

from pixelhabits.core.feedback import AudioController, HapticController
from pixelhabits.core.habits import HabitList
from pixelhabits.core.navigation import NavigationState, Screen
from pixelhabits.core.progress import HabitTracker, ProgressState
from pixelhabits.core.session import MISSING_FIELDS_MESSAGE, Profile
from pixelhabits.ui.colors import PixelColors, blend_hex
from pixelhabits.ui.home_screen import HomeScreen
from pixelhabits.ui.main_window import MainWindow
from pixelhabits.ui.models import HomeTab
from pixelhabits.ui.overlays import LEVEL_UP_DISPLAY_MS, LevelUpOverlay
from pixelhabits.ui.screens import LoginScreen, SettingsScreen, SplashScreen
from pixelhabits.ui.widgets import PRESS_DARKEN, PixelButton


@pytest.fixture(scope="session", autouse=True)
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def common(haptics):
    return NavigationState(), AudioController(), HapticController(haptics)


def _home(tracker: HabitTracker, nav: NavigationState, haptics) -> HomeScreen:
    return HomeScreen(tracker, [], Profile("PixelMaster"), nav, AudioController(), HapticController(haptics))


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------

class TestPixelButton:
    def test_pressed_look_darkens_fill(self):
        button = PixelButton("GO")
        darker = blend_hex(PixelColors.PRIMARY, "#000000", PRESS_DARKEN)
        assert darker not in button.styleSheet()

        button.click()
        assert button.pressed_look
        assert darker in button.styleSheet()

        button._release()
        assert not button.pressed_look
        assert darker not in button.styleSheet()

    def test_outlined_ignores_press_shade(self):
        button = PixelButton("BACK", outlined=True)
        button.click()
        assert button.pressed_look
        assert blend_hex(PixelColors.PRIMARY, "#000000", PRESS_DARKEN) not in button.styleSheet()


class TestLevelUpOverlay:
    def test_shows_message_and_arms_timer(self):
        overlay = LevelUpOverlay()
        overlay.show_level(4)
        assert overlay.message() == "You reached Level 4"
        assert not overlay.isHidden()
        assert overlay._hide_timer.isActive()
        assert overlay._hide_timer.interval() == LEVEL_UP_DISPLAY_MS == 3000

    def test_hides_when_timer_fires(self):
        overlay = LevelUpOverlay()
        closed = []
        overlay.closed.connect(lambda: closed.append(True))
        overlay.show_level(2)

        overlay._hide_timer.timeout.emit()

        assert overlay.isHidden()
        assert closed == [True]
        assert not overlay._hide_timer.isActive()


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------

class TestSplashScreen:
    def test_advances_to_title(self, common):
        nav = common[0]
        splash = SplashScreen(*common)
        splash._advance()
        assert nav.current is Screen.TITLE

    def test_no_advance_after_leaving(self, common):
        nav = common[0]
        splash = SplashScreen(*common)
        nav.navigate(Screen.SETTINGS)
        splash._advance()
        assert nav.current is Screen.SETTINGS


class TestLoginScreen:
    @pytest.fixture()
    def login(self, common):
        common[0].navigate(Screen.LOGIN)
        screen = LoginScreen(*common)
        screen.on_enter()
        return screen

    def test_empty_fields_show_error(self, login):
        login.login_button.click()
        assert not login.error_label.isHidden()
        assert login.error_label.text() == MISSING_FIELDS_MESSAGE
        assert not login.loading

    def test_filled_fields_start_loading(self, login, common):
        login.username_field.setText("pixel")
        login.password_field.setText("secret")
        login.login_button.click()
        assert login.loading
        assert not login.login_button.isEnabled()
        assert common[0].current is Screen.LOGIN

        login._finish_login()
        assert common[0].current is Screen.ONBOARDING1

    def test_finish_ignored_after_leaving(self, login, common):
        nav = common[0]
        login.username_field.setText("pixel")
        login.password_field.setText("secret")
        login.login_button.click()
        nav.navigate(Screen.TITLE)

        login._finish_login()
        assert nav.current is Screen.TITLE

    def test_on_enter_resets_loading(self, login):
        login.username_field.setText("pixel")
        login.password_field.setText("secret")
        login.login_button.click()
        login.on_enter()
        assert not login.loading
        assert login.login_button.isEnabled()


class TestSettingsScreen:
    def test_back_returns_to_previous_screen(self, common):
        nav = common[0]
        nav.navigate(Screen.HOME)
        nav.navigate(Screen.SETTINGS)
        settings = SettingsScreen(*common)
        settings.back_button.click()
        assert nav.current is Screen.HOME


class TestHomeScreen:
    @pytest.fixture()
    def near_level_up(self, sample_habits: HabitList, audio, haptics) -> HabitTracker:
        return HabitTracker(sample_habits, ProgressState(level=3, xp=490), audio=audio, haptics=haptics)

    def test_completing_habit_shows_xp_burst(self, tracker, haptics):
        home = _home(tracker, NavigationState(Screen.HOME), haptics)
        row = home.quests_tab.row(1)
        assert not row.xp_burst_visible()

        row._check.click()

        assert tracker.habits.get(1).completed
        assert row.xp_burst_visible()
        assert home.stats_tab.completed_row.value() == "2/4"

    def test_level_up_shows_overlay(self, near_level_up, haptics):
        home = _home(near_level_up, NavigationState(Screen.HOME), haptics)
        assert home.level_up_overlay.isHidden()

        home.quests_tab.row(1)._check.click()

        assert near_level_up.progress.level == 4
        assert not home.level_up_overlay.isHidden()
        assert home.level_up_overlay.message() == "You reached Level 4"
        assert home.stats_tab.xp_row.value() == "500"

    def test_tab_bar_switches_tab(self, tracker, haptics):
        home = _home(tracker, NavigationState(Screen.HOME), haptics)
        assert home.current_tab() is HomeTab.HOME
        home.tab_bar.button(HomeTab.STATS).click()
        assert home.current_tab() is HomeTab.STATS

    def test_settings_button_navigates(self, tracker, haptics):
        nav = NavigationState(Screen.HOME)
        home = _home(tracker, nav, haptics)
        home.header.settings_button.click()
        assert nav.current is Screen.SETTINGS
        assert nav.previous is Screen.HOME


# ---------------------------------------------------------------------------
# MainWindow
# ---------------------------------------------------------------------------

class TestMainWindow:
    def test_follows_navigation(self, tracker, haptics):
        nav = NavigationState()
        window = MainWindow(nav, tracker, [], Profile("PixelMaster"), AudioController(), HapticController(haptics))
        nav.navigate(Screen.TITLE)
        assert window.current_widget() is window.screen_widget(Screen.TITLE)

        nav.navigate(Screen.SETTINGS)
        nav.go_back()
        assert window.current_widget() is window.screen_widget(Screen.TITLE)
