"""Home area: header, quest list, stats, awards, profile and the tab bar."""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional, Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pixelhabits.core.habits import Achievement
from pixelhabits.core.navigation import Screen
from pixelhabits.core.progress import LEVEL_THRESHOLD, HabitTracker
from pixelhabits.core.session import Profile
from pixelhabits.ui.colors import PixelColors
from pixelhabits.ui.models import TAB_ITEMS, HomeTab, TabItem
from pixelhabits.ui.overlays import LevelUpOverlay
from pixelhabits.ui.screens import BaseScreen
from pixelhabits.ui.widgets import (
    AchievementCard,
    HabitRow,
    PixelText,
    StatItem,
    StatRow,
    ToggleRow,
    XpBar,
    card_style,
    pixel_font,
)

logger = logging.getLogger(__name__)

WEEK_DAYS = ("M", "T", "W", "T", "F", "S", "S")


def _scrolling(content: QWidget) -> QScrollArea:
    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    scroll.setFrameShape(QFrame.NoFrame)
    scroll.setStyleSheet("QScrollArea { background: transparent; }")
    content.setStyleSheet("background: transparent;")
    scroll.setWidget(content)
    return scroll


class HomeHeader(QFrame):
    settings_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("homeHeader")
        self.setStyleSheet(
            f"QFrame#homeHeader {{ background: #FFFFFF; border-bottom: 2px solid {PixelColors.CARD_BORDER}; }}"
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(8)

        top = QHBoxLayout()
        col = QVBoxLayout()
        col.setSpacing(4)
        col.addWidget(PixelText("PIXEL HABITS", 20, PixelColors.PRIMARY_DARK))
        info = QHBoxLayout()
        info.setSpacing(8)
        self.level_label = PixelText("", 14, PixelColors.AMBER)
        self.xp_label = PixelText("", 14, PixelColors.PRIMARY_SOFT)
        info.addWidget(self.level_label)
        info.addWidget(self.xp_label)
        info.addStretch(1)
        col.addLayout(info)
        top.addLayout(col, 1)

        self.settings_button = QPushButton("⚙️")
        self.settings_button.setFixedSize(44, 44)
        self.settings_button.setCursor(Qt.PointingHandCursor)
        self.settings_button.setStyleSheet(
            f"QPushButton {{ background: {PixelColors.BG_TOP}; border: none; border-radius: 8px; font-size: 22px; }}"
        )
        self.settings_button.clicked.connect(lambda _checked=False: self.settings_requested.emit())
        top.addWidget(self.settings_button, 0, Qt.AlignTop)
        layout.addLayout(top)

        self.xp_bar = XpBar()
        layout.addWidget(self.xp_bar)

    def set_progress(self, level: int, xp: int, fraction: float) -> None:
        self.level_label.setText(f"★ Level {level}")
        self.xp_label.setText(f"• {xp}/{LEVEL_THRESHOLD} XP")
        self.xp_bar.set_fraction(fraction)


class QuestsTab(QWidget):
    """Stat strip plus one row per habit."""

    def __init__(self, tracker: HabitTracker, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._tracker = tracker
        self._rows: Dict[int, HabitRow] = {}
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        strip = QFrame()
        strip.setObjectName("statStrip")
        strip.setStyleSheet(f"QFrame#statStrip {{ background: {PixelColors.BG_TOP}; }}")
        strip_layout = QHBoxLayout(strip)
        strip_layout.setContentsMargins(16, 16, 16, 16)
        strip_layout.setSpacing(30)
        self.streak_item = StatItem("🔥", "Streak")
        self.points_item = StatItem("⭐", "Points")
        self.level_item = StatItem("🎮", "Level")
        for item in (self.streak_item, self.points_item, self.level_item):
            strip_layout.addWidget(item, 1)
        layout.addWidget(strip)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(20, 20, 20, 20)
        content_layout.setSpacing(16)
        content_layout.addWidget(PixelText("TODAY'S QUESTS", 18, PixelColors.PRIMARY_DARK))
        for habit in tracker.habits:
            row = HabitRow(habit)
            row.toggled.connect(self._toggle)
            self._rows[habit.id] = row
            content_layout.addWidget(row)
        content_layout.addStretch(1)
        layout.addWidget(_scrolling(content), 1)
        self.refresh()

    def row(self, habit_id: int) -> HabitRow:
        return self._rows[habit_id]

    def _toggle(self, habit_id: int) -> None:
        result = self._tracker.toggle_completion(habit_id)
        if result.completed:
            self._rows[habit_id].show_xp_burst()

    def refresh(self) -> None:
        habits = self._tracker.habits
        self.streak_item.set_value(str(habits.best_streak()))
        self.points_item.set_value(str(habits.points()))
        self.level_item.set_value(str(self._tracker.progress.level))
        for habit in habits:
            row = self._rows.get(habit.id)
            if row is not None:
                row.set_habit(habit)


class StatsTab(QWidget):
    def __init__(self, tracker: HabitTracker, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._tracker = tracker
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(24)

        week_card = QFrame()
        week_card.setObjectName("weekCard")
        week_card.setStyleSheet(card_style("weekCard"))
        week_layout = QVBoxLayout(week_card)
        week_layout.setContentsMargins(16, 16, 16, 16)
        week_layout.setSpacing(12)
        week_layout.addWidget(PixelText("WEEKLY PROGRESS", 18, PixelColors.PRIMARY_DARK))
        days = QHBoxLayout()
        days.setSpacing(12)
        self._day_cells: List[QLabel] = []
        for day in WEEK_DAYS:
            col = QVBoxLayout()
            col.setSpacing(8)
            cell = QLabel()
            cell.setFixedSize(32, 32)
            self._day_cells.append(cell)
            col.addWidget(cell, 0, Qt.AlignHCenter)
            name = PixelText(day, 12, PixelColors.PRIMARY_SOFT)
            name.setAlignment(Qt.AlignCenter)
            col.addWidget(name)
            days.addLayout(col)
        week_layout.addLayout(days)
        layout.addWidget(week_card)

        stats_card = QFrame()
        stats_card.setObjectName("statsCard")
        stats_card.setStyleSheet(card_style("statsCard"))
        stats_layout = QVBoxLayout(stats_card)
        stats_layout.setContentsMargins(16, 16, 16, 16)
        stats_layout.setSpacing(16)
        stats_layout.addWidget(PixelText("STATISTICS", 18, PixelColors.PRIMARY_DARK))
        self.completed_row = StatRow("✅", "Completed Today")
        self.rate_row = StatRow("🎯", "Success Rate")
        self.streak_row = StatRow("🏆", "Best Streak")
        self.xp_row = StatRow("⚡", "XP To Next Level")
        for row in (self.completed_row, self.rate_row, self.streak_row, self.xp_row):
            stats_layout.addWidget(row)
        layout.addWidget(stats_card)
        layout.addStretch(1)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(_scrolling(content))
        self.refresh()

    def refresh(self, today: Optional[date] = None) -> None:
        habits = self._tracker.habits
        weekday = (today or date.today()).weekday()
        for cell, done in zip(self._day_cells, habits.weekly_marks(weekday)):
            color = PixelColors.PRIMARY if done else PixelColors.GREY_LIGHT
            cell.setStyleSheet(f"background: {color}; border-radius: 4px;")
        self.completed_row.set_value(f"{habits.completed_count()}/{len(habits)}")
        self.rate_row.set_value(f"{habits.success_rate():.0f}%")
        self.streak_row.set_value(str(habits.best_streak()))
        self.xp_row.set_value(str(LEVEL_THRESHOLD - self._tracker.progress.xp))


class AwardsTab(QWidget):
    def __init__(self, achievements: List[Achievement], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)
        title = PixelText("ACHIEVEMENTS", 20, PixelColors.PRIMARY_DARK)
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        grid = QGridLayout()
        grid.setSpacing(16)
        for index, achievement in enumerate(achievements):
            grid.addWidget(AchievementCard(achievement), index // 2, index % 2)
        layout.addLayout(grid)
        layout.addStretch(1)
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(_scrolling(content))


class ProfileTab(QWidget):
    def __init__(self, tracker: HabitTracker, profile: Profile, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._tracker = tracker
        self._profile = profile
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        avatar = QLabel("👤")
        avatar.setAlignment(Qt.AlignCenter)
        avatar.setFixedSize(100, 100)
        avatar.setStyleSheet(
            f"background: {PixelColors.BG_TOP}; border: 4px solid {PixelColors.PRIMARY}; border-radius: 50px; font-size: 50px;"
        )
        layout.addWidget(avatar, 0, Qt.AlignHCenter)
        name = PixelText(profile.username, 24, PixelColors.PRIMARY_DARK)
        name.setAlignment(Qt.AlignCenter)
        layout.addWidget(name)
        self.summary_label = PixelText("", 14, PixelColors.PRIMARY_SOFT)
        self.summary_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.summary_label)

        layout.addSpacing(8)
        layout.addWidget(PixelText("SETTINGS", 18, PixelColors.PRIMARY_DARK))
        self.notifications_row = ToggleRow("🔔", "Notifications", profile.notifications_on)
        self.notifications_row.toggled.connect(self._set_notifications)
        layout.addWidget(self.notifications_row)
        self.sounds_row = ToggleRow("🔊", "Sound Effects", profile.sounds_on)
        self.sounds_row.toggled.connect(self._set_sounds)
        layout.addWidget(self.sounds_row)

        edit = QPushButton("📝  Edit Profile")
        edit.setFont(pixel_font(16))
        edit.setCursor(Qt.PointingHandCursor)
        edit.setStyleSheet(
            f"""
            QPushButton {{
                text-align: left;
                padding: 14px 16px;
                color: {PixelColors.PRIMARY};
                background: {PixelColors.CARD_BG};
                border: 2px solid {PixelColors.CARD_BORDER};
                border-radius: 8px;
            }}
            """
        )
        layout.addWidget(edit)
        layout.addStretch(1)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(_scrolling(content))
        self.refresh()

    def _set_notifications(self, on: bool) -> None:
        self._profile.notifications_on = on

    def _set_sounds(self, on: bool) -> None:
        self._profile.sounds_on = on

    def refresh(self) -> None:
        level = self._tracker.progress.level
        points = self._tracker.habits.points()
        self.summary_label.setText(f"Level {level} • {points} Points")


class TabBar(QFrame):
    tab_selected = Signal(int)

    def __init__(self, items: Tuple[TabItem, ...] = TAB_ITEMS, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("tabBar")
        self.setStyleSheet(
            f"QFrame#tabBar {{ background: #FFFFFF; border-top: 2px solid {PixelColors.CARD_BORDER}; }}"
        )
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 8)
        layout.setSpacing(40)
        self._buttons: Dict[HomeTab, QPushButton] = {}
        for item in items:
            button = QPushButton(f"{item.icon}\n{item.label}")
            button.setFont(pixel_font(10))
            button.setCursor(Qt.PointingHandCursor)
            button.setMinimumHeight(56)
            button.clicked.connect(lambda _checked=False, tab=item.tab: self.tab_selected.emit(int(tab)))
            self._buttons[item.tab] = button
            layout.addWidget(button, 1)
        self.set_active(HomeTab.HOME)

    def button(self, tab: HomeTab) -> QPushButton:
        return self._buttons[tab]

    def set_active(self, active: HomeTab) -> None:
        for tab, button in self._buttons.items():
            color = PixelColors.PRIMARY if tab == active else PixelColors.GREY_CHEVRON
            button.setStyleSheet(f"QPushButton {{ background: transparent; border: none; color: {color}; }}")


class HomeScreen(BaseScreen):
    def __init__(
        self,
        tracker: HabitTracker,
        achievements: List[Achievement],
        profile: Profile,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._tracker = tracker
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = HomeHeader()
        self.header.settings_requested.connect(self._open_settings)
        layout.addWidget(self.header)

        self.quests_tab = QuestsTab(tracker)
        self.stats_tab = StatsTab(tracker)
        self.awards_tab = AwardsTab(achievements)
        self.profile_tab = ProfileTab(tracker, profile)
        self.tabs = QStackedWidget()
        for tab in (self.quests_tab, self.stats_tab, self.awards_tab, self.profile_tab):
            self.tabs.addWidget(tab)
        layout.addWidget(self.tabs, 1)

        self.tab_bar = TabBar()
        self.tab_bar.tab_selected.connect(self.select_tab)
        layout.addWidget(self.tab_bar)

        self.level_up_overlay = LevelUpOverlay(self)
        tracker.on_change(self.refresh)
        tracker.on_level_up(self.level_up_overlay.show_level)
        self.refresh()

    def current_tab(self) -> HomeTab:
        return HomeTab(self.tabs.currentIndex())

    def select_tab(self, index: int) -> None:
        tab = HomeTab(index)
        self._haptics.selection()
        self._audio.play_effect("button_tap")
        self.tabs.setCurrentIndex(int(tab))
        self.tab_bar.set_active(tab)
        self.refresh()

    def refresh(self) -> None:
        progress = self._tracker.progress
        self.header.set_progress(progress.level, progress.xp, progress.level_fraction())
        self.quests_tab.refresh()
        self.stats_tab.refresh()
        self.profile_tab.refresh()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        if self.level_up_overlay.isVisible():
            self.level_up_overlay.setGeometry(self.rect())

    def _open_settings(self) -> None:
        self._haptics.selection()
        self._audio.play_effect("button_tap")
        self._navigation.navigate(Screen.SETTINGS)
