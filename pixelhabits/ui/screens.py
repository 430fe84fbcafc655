"""Splash, title, login, onboarding and settings screens."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPropertyAnimation, Qt, QTimer
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QScrollArea,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from pixelhabits.core.feedback import (
    AudioController,
    HapticController,
    ImpactStyle,
    NotificationKind,
)
from pixelhabits.core.navigation import NavigationState, Screen
from pixelhabits.core.session import LoginError, validate_credentials
from pixelhabits.ui.colors import PixelColors
from pixelhabits.ui.models import OnboardingPage, swipe_target
from pixelhabits.ui.widgets import (
    Divider,
    PixelButton,
    PixelIcon,
    PixelText,
    PixelTextField,
    ProgressDots,
    ToggleRow,
    card_style,
)

logger = logging.getLogger(__name__)

SPLASH_LOAD_MS = 2000
SPLASH_ADVANCE_MS = 2500
LOGIN_DELAY_MS = 500
APP_VERSION = "v1.0"


class BaseScreen(QWidget):
    """A full-window page. ``on_enter`` runs each time the page becomes current."""

    def __init__(
        self,
        navigation: NavigationState,
        audio: AudioController,
        haptics: HapticController,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._navigation = navigation
        self._audio = audio
        self._haptics = haptics

    def on_enter(self) -> None:
        pass

    def _tap(self, style: ImpactStyle = ImpactStyle.LIGHT) -> None:
        self._haptics.impact(style)
        self._audio.play_effect("button_tap")


class SplashScreen(BaseScreen):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        layout = QVBoxLayout(self)
        layout.setSpacing(40)
        layout.addStretch(1)

        logo = QLabel("👾")
        logo.setAlignment(Qt.AlignCenter)
        logo.setStyleSheet("font-size: 96px; background: transparent;")
        layout.addWidget(logo)

        title = PixelText("PIXEL HABITS", 36, PixelColors.PRIMARY_DARK)
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        tagline = PixelText("Level Up Your Life", 16, PixelColors.PRIMARY_SOFT)
        tagline.setAlignment(Qt.AlignCenter)
        layout.addWidget(tagline)
        layout.addStretch(1)

        self._loading_bar = QProgressBar()
        self._loading_bar.setRange(0, 100)
        self._loading_bar.setTextVisible(False)
        self._loading_bar.setFixedSize(200, 8)
        self._loading_bar.setStyleSheet(
            f"""
            QProgressBar {{ background: {PixelColors.GREY_LIGHT}; border: none; border-radius: 4px; }}
            QProgressBar::chunk {{ background: {PixelColors.PRIMARY}; border-radius: 4px; }}
            """
        )
        layout.addWidget(self._loading_bar, 0, Qt.AlignHCenter)
        loading = PixelText("Loading...", 12, PixelColors.PRIMARY_MUTED)
        loading.setAlignment(Qt.AlignCenter)
        layout.addWidget(loading)
        layout.addSpacing(60)

        self._load_anim = QPropertyAnimation(self._loading_bar, b"value", self)
        self._load_anim.setDuration(SPLASH_LOAD_MS)
        self._load_anim.setStartValue(0)
        self._load_anim.setEndValue(100)

        self._advance_timer = QTimer(self)
        self._advance_timer.setSingleShot(True)
        self._advance_timer.timeout.connect(self._advance)

    def on_enter(self) -> None:
        self._load_anim.start()
        self._advance_timer.start(SPLASH_ADVANCE_MS)

    def _advance(self) -> None:
        if self._navigation.current is not Screen.SPLASH:
            return
        self._audio.play_effect("page_turn")
        self._navigation.navigate(Screen.TITLE)


class TitleScreen(BaseScreen):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        layout = QVBoxLayout(self)
        layout.setSpacing(24)
        layout.addStretch(1)

        character = QLabel("👾")
        character.setAlignment(Qt.AlignCenter)
        character.setStyleSheet("font-size: 96px; background: transparent;")
        layout.addWidget(character)

        for word, color in (("PIXEL", PixelColors.PRIMARY_DARK), ("HABITS", PixelColors.PRIMARY_DEEP)):
            label = PixelText(word, 48, color)
            label.setAlignment(Qt.AlignCenter)
            layout.addWidget(label)

        tagline = PixelText("Track your daily wins", 16, PixelColors.PRIMARY_SOFT)
        tagline.setAlignment(Qt.AlignCenter)
        layout.addWidget(tagline)
        layout.addStretch(1)

        self.start_button = PixelButton("START", on_click=self._start)
        layout.addWidget(self.start_button, 0, Qt.AlignHCenter)

        icons = QHBoxLayout()
        icons.setSpacing(20)
        icons.addStretch(1)
        self.settings_button = PixelButton(
            "⚙", background=PixelColors.GREY, width=56, on_click=self._open_settings
        )
        icons.addWidget(self.settings_button)
        self.mute_button = PixelButton(
            "", background=PixelColors.PURPLE, width=56, on_click=self._toggle_mute
        )
        icons.addWidget(self.mute_button)
        icons.addStretch(1)
        layout.addLayout(icons)

        version = PixelText(APP_VERSION, 12, PixelColors.PRIMARY_MUTED)
        version.setAlignment(Qt.AlignCenter)
        layout.addWidget(version)
        layout.addSpacing(40)
        self._refresh_mute_icon()

    def on_enter(self) -> None:
        self._refresh_mute_icon()
        self._audio.play_music("menu_bgm")

    def _refresh_mute_icon(self) -> None:
        self.mute_button.setText("🔇" if self._audio.muted else "🔊")

    def _start(self) -> None:
        self._tap(ImpactStyle.MEDIUM)
        self._navigation.navigate(Screen.LOGIN)

    def _open_settings(self) -> None:
        self._haptics.selection()
        self._audio.play_effect("button_tap")
        self._navigation.navigate(Screen.SETTINGS)

    def _toggle_mute(self) -> None:
        self._haptics.selection()
        self._audio.play_effect("button_tap")
        self._audio.toggle_mute()
        self._refresh_mute_icon()


class LoginScreen(BaseScreen):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._loading = False
        layout = QVBoxLayout(self)
        layout.setSpacing(24)

        top = QHBoxLayout()
        self.back_button = PixelButton(
            "←", background=PixelColors.PRIMARY_SOFT, width=50, on_click=self._back
        )
        top.addWidget(self.back_button)
        top.addStretch(1)
        layout.addLayout(top)
        layout.addStretch(1)

        self._avatar = QLabel("👾")
        self._avatar.setAlignment(Qt.AlignCenter)
        self._avatar.setStyleSheet("font-size: 80px; background: transparent;")
        layout.addWidget(self._avatar)

        welcome = PixelText("WELCOME BACK", 24, PixelColors.PRIMARY_DARK)
        welcome.setAlignment(Qt.AlignCenter)
        layout.addWidget(welcome)

        self.username_field = PixelTextField("Username", "👤")
        self.password_field = PixelTextField("Password", "🔒", secure=True)
        for field in (self.username_field, self.password_field):
            field.textChanged.connect(lambda _text: self._haptics.selection())
            layout.addWidget(field, 0, Qt.AlignHCenter)

        self.error_label = PixelText("", 12, PixelColors.ERROR)
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        self.login_button = PixelButton("LOG IN", on_click=self._submit)
        layout.addWidget(self.login_button, 0, Qt.AlignHCenter)
        self.create_account_button = PixelButton(
            "Create Account",
            background=PixelColors.PRIMARY_SOFT,
            text_color=PixelColors.PRIMARY_SOFT,
            outlined=True,
            on_click=self._tap,
        )
        layout.addWidget(self.create_account_button, 0, Qt.AlignHCenter)
        layout.addStretch(2)

    @property
    def loading(self) -> bool:
        return self._loading

    def on_enter(self) -> None:
        self._set_loading(False)
        self.error_label.setVisible(False)

    def _back(self) -> None:
        self._tap()
        self._navigation.navigate(Screen.TITLE)

    def _submit(self) -> None:
        try:
            validate_credentials(self.username_field.text(), self.password_field.text())
        except LoginError as e:
            self._haptics.notify(NotificationKind.ERROR)
            self._audio.play_effect("error")
            self.error_label.setText(str(e))
            self.error_label.setVisible(True)
            return
        self._haptics.notify(NotificationKind.SUCCESS)
        self._audio.play_effect("success")
        self.error_label.setVisible(False)
        self._set_loading(True)
        QTimer.singleShot(LOGIN_DELAY_MS, self._finish_login)

    def _finish_login(self) -> None:
        if self._navigation.current is Screen.LOGIN:
            self._navigation.navigate(Screen.ONBOARDING1)

    def _set_loading(self, loading: bool) -> None:
        self._loading = loading
        self.login_button.setText("LOADING..." if loading else "LOG IN")
        self.login_button.setEnabled(not loading)
        self._avatar.setText("⏳" if loading else "👾")


class OnboardingScreen(BaseScreen):
    """One of the three onboarding pages; swipe left/right to move between them."""

    def __init__(self, page: OnboardingPage, total_pages: int, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._page = page
        self._press_x: Optional[float] = None
        layout = QVBoxLayout(self)
        layout.setSpacing(30)
        layout.addWidget(ProgressDots(page.number, total_pages))
        layout.addStretch(1)
        layout.addWidget(PixelIcon(page.icon, 100, page.icon_color), 0, Qt.AlignHCenter)
        title = PixelText(page.title, 28, PixelColors.PRIMARY_DARK)
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        for line in page.lines:
            caption = PixelText(line, 14, PixelColors.PRIMARY_SOFT)
            caption.setAlignment(Qt.AlignCenter)
            layout.addWidget(caption)
        layout.addStretch(1)

        buttons = QHBoxLayout()
        buttons.setSpacing(20)
        buttons.addStretch(1)
        if page.previous is None:
            self.secondary_button = PixelButton(
                "Skip",
                background="transparent",
                text_color=PixelColors.PRIMARY_MUTED,
                width=100,
                on_click=self._skip,
            )
        else:
            self.secondary_button = PixelButton(
                "← Back",
                background="transparent",
                text_color=PixelColors.PRIMARY_MUTED,
                width=100,
                on_click=self._back,
            )
        buttons.addWidget(self.secondary_button)
        self.primary_button = PixelButton(
            "Start!" if page.is_last else "Next →",
            width=100,
            on_click=self._finish if page.is_last else self._next,
        )
        buttons.addWidget(self.primary_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)
        layout.addSpacing(40)

    @property
    def page(self) -> OnboardingPage:
        return self._page

    def on_enter(self) -> None:
        self._audio.play_effect("page_turn")

    def _skip(self) -> None:
        self._tap()
        self._navigation.navigate(Screen.HOME)

    def _back(self) -> None:
        self._tap()
        self._navigation.navigate(self._page.previous)

    def _next(self) -> None:
        self._tap(ImpactStyle.MEDIUM)
        self._navigation.navigate(self._page.next)

    def _finish(self) -> None:
        self._haptics.notify(NotificationKind.SUCCESS)
        self._audio.play_effect("success")
        self._audio.play_music("main_bgm")
        self._navigation.navigate(Screen.HOME)

    def handle_swipe(self, dx: float) -> None:
        target = swipe_target(self._page, dx)
        if target is None:
            return
        self._haptics.selection()
        self._audio.play_effect("page_turn")
        self._navigation.navigate(target)

    def mousePressEvent(self, event) -> None:
        self._press_x = event.position().x()
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if self._press_x is not None:
            self.handle_swipe(event.position().x() - self._press_x)
            self._press_x = None
        super().mouseReleaseEvent(event)


class SettingsScreen(BaseScreen):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._syncing = False
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        header = QFrame()
        header.setObjectName("settingsHeader")
        header.setStyleSheet(
            f"QFrame#settingsHeader {{ background: #FFFFFF; border-bottom: 2px solid {PixelColors.CARD_BORDER}; }}"
        )
        header_row = QHBoxLayout(header)
        header_row.setContentsMargins(16, 12, 16, 12)
        self.back_button = PixelButton(
            "← Back",
            background="transparent",
            text_color=PixelColors.PRIMARY,
            width=100,
            on_click=self._navigation.go_back,
        )
        header_row.addWidget(self.back_button)
        header_row.addStretch(1)
        header_row.addWidget(PixelText("SETTINGS", 20, PixelColors.PRIMARY_DARK))
        header_row.addStretch(1)
        header_row.addSpacing(100)
        layout.addWidget(header)

        body = QWidget()
        body_layout = QVBoxLayout(body)
        body_layout.setContentsMargins(20, 20, 20, 20)
        body_layout.setSpacing(24)

        body_layout.addWidget(PixelText("AUDIO", 16, PixelColors.GREY))
        audio_card = QFrame()
        audio_card.setObjectName("audioCard")
        audio_card.setStyleSheet(card_style("audioCard"))
        audio_layout = QVBoxLayout(audio_card)
        audio_layout.setContentsMargins(16, 8, 16, 8)
        self.music_slider = self._slider_row(audio_layout, "🎵", "Music Volume")
        audio_layout.addWidget(Divider())
        self.effects_slider = self._slider_row(audio_layout, "🔊", "Sound Effects")
        audio_layout.addWidget(Divider())
        self.mute_row = ToggleRow("🔇", "Mute All", self._audio.muted)
        self.mute_row.setStyleSheet("QFrame#toggleRow { border: none; }")
        audio_layout.addWidget(self.mute_row)
        body_layout.addWidget(audio_card)

        body_layout.addWidget(PixelText("HAPTICS", 16, PixelColors.GREY))
        self.haptics_row = ToggleRow("📳", "Haptic Feedback", self._haptics.enabled)
        body_layout.addWidget(self.haptics_row)

        body_layout.addWidget(PixelText("NOTIFICATIONS", 16, PixelColors.GREY))
        self.reminders_row = ToggleRow("🔔", "Daily Reminders", True)
        body_layout.addWidget(self.reminders_row)
        body_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        scroll.setWidget(body)
        layout.addWidget(scroll, 1)

        self.music_slider.valueChanged.connect(self._on_music_volume)
        self.effects_slider.valueChanged.connect(self._on_effects_volume)
        self.mute_row.toggled.connect(self._on_mute)
        self.haptics_row.toggled.connect(self._on_haptics)
        self.on_enter()

    def _slider_row(self, parent_layout: QVBoxLayout, icon: str, title: str) -> QSlider:
        row = QHBoxLayout()
        row.setSpacing(12)
        icon_label = QLabel(icon)
        icon_label.setStyleSheet("font-size: 20px; border: none;")
        row.addWidget(icon_label)
        row.addWidget(PixelText(title, 14, PixelColors.PRIMARY_DARK), 1)
        slider = QSlider(Qt.Horizontal)
        slider.setRange(0, 100)
        slider.setFixedWidth(140)
        row.addWidget(slider)
        parent_layout.addLayout(row)
        return slider

    def on_enter(self) -> None:
        self._syncing = True
        self.music_slider.setValue(round(self._audio.music_volume * 100))
        self.effects_slider.setValue(round(self._audio.effects_volume * 100))
        self.mute_row.set_checked(self._audio.muted)
        self.haptics_row.set_checked(self._haptics.enabled)
        self._syncing = False

    def _on_music_volume(self, value: int) -> None:
        if not self._syncing:
            self._audio.music_volume = value / 100.0

    def _on_effects_volume(self, value: int) -> None:
        if not self._syncing:
            self._audio.effects_volume = value / 100.0

    def _on_mute(self, checked: bool) -> None:
        if not self._syncing:
            self._audio.set_muted(checked)

    def _on_haptics(self, checked: bool) -> None:
        if self._syncing:
            return
        self._haptics.enabled = checked
        self._haptics.impact(ImpactStyle.MEDIUM)
