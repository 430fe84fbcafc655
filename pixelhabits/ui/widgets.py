"""Reusable pixel-theme widgets: text, buttons, fields, rows and cards."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QColor, QFont, QPainter
from PySide6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pixelhabits.core.habits import Achievement, Habit
from pixelhabits.ui.colors import PIXEL_FONT, PixelColors, blend_hex, with_alpha

PRESS_RESET_MS = 100
PRESS_DARKEN = 0.15
XP_BURST_MS = 1000


def pixel_font(size: int, bold: bool = True) -> QFont:
    font = QFont(PIXEL_FONT)
    font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPixelSize(size)
    font.setBold(bold)
    return font


def card_style(object_name: str, radius: int = 8) -> str:
    return f"""
        QFrame#{object_name} {{
            background: {PixelColors.CARD_BG};
            border: 2px solid {PixelColors.CARD_BORDER};
            border-radius: {radius}px;
        }}
    """


class PixelText(QLabel):
    """Bold monospaced label in a single color."""

    def __init__(
        self,
        text: str = "",
        size: int = 16,
        color: str = "#000000",
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(text, parent)
        self.setFont(pixel_font(size))
        self.set_color(color)

    def set_color(self, color: str) -> None:
        self.setStyleSheet(f"color: {color}; background: transparent;")


class PixelButton(QPushButton):
    """Square-cornered button with a hard drop edge that shrinks while pressed."""

    def __init__(
        self,
        text: str,
        *,
        background: str = PixelColors.PRIMARY,
        text_color: str = "#FFFFFF",
        width: int = 200,
        outlined: bool = False,
        on_click: Optional[Callable[[], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(text, parent)
        self._background = background
        self._text_color = text_color
        self._outlined = outlined
        self._pressed_look = False
        self.setFont(pixel_font(16))
        self.setFixedWidth(width)
        self.setMinimumHeight(48)
        self.setCursor(Qt.PointingHandCursor)
        self._apply_styles()
        self.clicked.connect(self._on_clicked)
        if on_click is not None:
            self.clicked.connect(lambda _checked=False: on_click())

    @property
    def pressed_look(self) -> bool:
        return self._pressed_look

    def _on_clicked(self) -> None:
        self._pressed_look = True
        self._apply_styles()
        QTimer.singleShot(PRESS_RESET_MS, self._release)

    def _release(self) -> None:
        self._pressed_look = False
        self._apply_styles()

    def _apply_styles(self) -> None:
        # The pressed look drops the bottom edge and nudges the text down.
        edge = 0 if self._pressed_look else 4
        top_pad = 4 if self._pressed_look else 0
        if self._outlined:
            fill = "transparent"
            border = f"3px solid {self._background}"
        elif self._background == "transparent":
            fill = "transparent"
            border = "none"
        else:
            fill = self._background
            if self._pressed_look:
                fill = blend_hex(self._background, "#000000", PRESS_DARKEN)
            border = f"none; border-bottom: {edge}px solid {with_alpha(self._background, 0.3)}"
        self.setStyleSheet(
            f"""
            QPushButton {{
                background: {fill};
                color: {self._text_color};
                border: {border};
                border-radius: 8px;
                padding: {top_pad}px 12px 0px 12px;
            }}
            QPushButton:disabled {{
                color: {with_alpha(self._text_color, 0.5)};
            }}
            """
        )


class PixelTextField(QFrame):
    """Icon plus line edit inside a thick green border."""

    textChanged = Signal(str)

    def __init__(
        self,
        placeholder: str,
        icon: str,
        secure: bool = False,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("pixelTextField")
        self.setFixedWidth(300)
        self.setStyleSheet(
            f"""
            QFrame#pixelTextField {{
                background: #FFFFFF;
                border: 3px solid {PixelColors.PRIMARY};
                border-radius: 8px;
            }}
            QLineEdit {{
                border: none;
                background: transparent;
                color: {PixelColors.PRIMARY_DARK};
            }}
            """
        )
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(12)
        icon_label = QLabel(icon)
        icon_label.setStyleSheet("font-size: 20px; border: none;")
        layout.addWidget(icon_label, 0)
        self._edit = QLineEdit()
        self._edit.setPlaceholderText(placeholder)
        self._edit.setFont(pixel_font(16, bold=False))
        if secure:
            self._edit.setEchoMode(QLineEdit.EchoMode.Password)
        self._edit.textChanged.connect(self.textChanged.emit)
        layout.addWidget(self._edit, 1)

    def text(self) -> str:
        return self._edit.text()

    def setText(self, text: str) -> None:
        self._edit.setText(text)


class PixelIcon(QLabel):
    """Large emoji on a tinted rounded square."""

    def __init__(self, icon: str, size: int, color: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(icon, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedSize(size + 40, size + 40)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {with_alpha(color, 0.2)};
                border-radius: 20px;
                font-size: {int(size * 0.6)}px;
            }}
            """
        )


class ProgressDots(QWidget):
    """Row of square page markers; the current page is filled green."""

    def __init__(self, current_page: int, total_pages: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._current = current_page
        self._total = total_pages
        self.setFixedHeight(24)
        self.setMinimumWidth(total_pages * 36)

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        spacing = 12
        active_w, idle_w, height = 24, 12, 12
        widths = [active_w if page == self._current else idle_w for page in range(1, self._total + 1)]
        total_width = sum(widths) + spacing * (self._total - 1)
        x = max(0, (self.width() - total_width) // 2)
        y = (self.height() - height) // 2
        painter.setPen(Qt.NoPen)
        for page, w in zip(range(1, self._total + 1), widths):
            color = PixelColors.PRIMARY if page == self._current else PixelColors.PRIMARY_PALE
            painter.setBrush(QColor(color))
            painter.drawRect(x, y, w, height)
            x += w + spacing


class StatItem(QWidget):
    """Icon, big value and small caption stacked vertically."""

    def __init__(self, icon: str, label: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        icon_label = QLabel(icon)
        icon_label.setAlignment(Qt.AlignCenter)
        icon_label.setStyleSheet("font-size: 24px;")
        self._value = PixelText("", 20, PixelColors.PRIMARY_DARK)
        self._value.setAlignment(Qt.AlignCenter)
        caption = PixelText(label, 12, PixelColors.PRIMARY_SOFT)
        caption.setAlignment(Qt.AlignCenter)
        layout.addWidget(icon_label)
        layout.addWidget(self._value)
        layout.addWidget(caption)

    def set_value(self, value: str) -> None:
        self._value.setText(value)


class XpBar(QProgressBar):
    """Thin amber bar showing progress toward the next level."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setRange(0, 1000)
        self.setTextVisible(False)
        self.setFixedHeight(8)
        self.setStyleSheet(
            f"""
            QProgressBar {{
                background: {PixelColors.BG_TOP};
                border: none;
                border-radius: 2px;
            }}
            QProgressBar::chunk {{
                background: {PixelColors.AMBER};
                border-radius: 2px;
            }}
            """
        )

    def set_fraction(self, fraction: float) -> None:
        self.setValue(int(max(0.0, min(1.0, fraction)) * 1000))


class HabitRow(QFrame):
    """One quest: icon, name, streak, XP reward and a completion check box."""

    toggled = Signal(int)

    def __init__(self, habit: Habit, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._habit_id = habit.id
        self.setObjectName("habitRow")
        self.setStyleSheet(card_style("habitRow"))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)

        icon = QLabel(habit.icon)
        icon.setStyleSheet("font-size: 32px; border: none;")
        layout.addWidget(icon, 0)

        text_col = QVBoxLayout()
        text_col.setSpacing(4)
        text_col.addWidget(PixelText(habit.name, 16, PixelColors.PRIMARY_DARK))
        meta = QHBoxLayout()
        meta.setSpacing(8)
        self._streak = PixelText("", 12, PixelColors.PRIMARY_SOFT)
        meta.addWidget(self._streak)
        meta.addWidget(PixelText(f"⚡ +{habit.xp} XP", 12, PixelColors.AMBER))
        meta.addStretch(1)
        text_col.addLayout(meta)
        layout.addLayout(text_col, 1)

        self._xp_burst = PixelText(f"+{habit.xp} XP", 14, PixelColors.AMBER)
        self._xp_burst.setVisible(False)
        layout.addWidget(self._xp_burst, 0)

        self._check = QPushButton()
        self._check.setFixedSize(40, 40)
        self._check.setCursor(Qt.PointingHandCursor)
        self._check.setFont(pixel_font(20))
        self._check.clicked.connect(lambda _checked=False: self.toggled.emit(self._habit_id))
        layout.addWidget(self._check, 0)

        self.set_habit(habit)

    @property
    def habit_id(self) -> int:
        return self._habit_id

    def set_habit(self, habit: Habit) -> None:
        self._streak.setText(f"🔥 {habit.streak} days")
        fill = PixelColors.PRIMARY if habit.completed else "#FFFFFF"
        border = PixelColors.PRIMARY if habit.completed else PixelColors.PRIMARY_PALE
        self._check.setText("✓" if habit.completed else "")
        self._check.setStyleSheet(
            f"""
            QPushButton {{
                background: {fill};
                color: white;
                border: 3px solid {border};
                border-radius: 4px;
            }}
            """
        )

    def show_xp_burst(self) -> None:
        self._xp_burst.setVisible(True)
        QTimer.singleShot(XP_BURST_MS, lambda: self._xp_burst.setVisible(False))

    def xp_burst_visible(self) -> bool:
        return not self._xp_burst.isHidden()


class StatRow(QWidget):
    def __init__(self, icon: str, label: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        icon_label = QLabel(icon)
        icon_label.setStyleSheet("font-size: 20px;")
        layout.addWidget(icon_label)
        layout.addWidget(PixelText(label, 14, PixelColors.PRIMARY_DARK), 1)
        self._value = PixelText("", 16, PixelColors.PRIMARY)
        layout.addWidget(self._value)

    def set_value(self, value: str) -> None:
        self._value.setText(value)

    def value(self) -> str:
        return self._value.text()


class AchievementCard(QFrame):
    """Award tile; locked awards are drawn faded."""

    def __init__(self, achievement: Achievement, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("achievementCard")
        border = PixelColors.AMBER if achievement.unlocked else PixelColors.CARD_BORDER
        self.setStyleSheet(
            f"""
            QFrame#achievementCard {{
                background: {PixelColors.CARD_BG if achievement.unlocked else '#F5F5F5'};
                border: 3px solid {border};
                border-radius: 8px;
            }}
            """
        )
        text_color = PixelColors.PRIMARY_DARK if achievement.unlocked else PixelColors.GREY_CHEVRON
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 16, 12, 16)
        layout.setSpacing(8)
        icon = QLabel(achievement.icon if achievement.unlocked else "🔒")
        icon.setAlignment(Qt.AlignCenter)
        icon.setStyleSheet("font-size: 36px; border: none;")
        layout.addWidget(icon)
        title = PixelText(achievement.title, 14, text_color)
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        desc = PixelText(achievement.description, 11, PixelColors.PRIMARY_SOFT if achievement.unlocked else PixelColors.GREY_CHEVRON)
        desc.setAlignment(Qt.AlignCenter)
        desc.setWordWrap(True)
        layout.addWidget(desc)


class ToggleRow(QFrame):
    """Icon, title and an on/off switch styled as a pixel check box."""

    toggled = Signal(bool)

    def __init__(self, icon: str, title: str, checked: bool, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("toggleRow")
        self.setStyleSheet(card_style("toggleRow"))
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)
        icon_label = QLabel(icon)
        icon_label.setStyleSheet("font-size: 20px; border: none;")
        layout.addWidget(icon_label)
        layout.addWidget(PixelText(title, 14, PixelColors.PRIMARY_DARK), 1)
        self._switch = QCheckBox()
        self._switch.setChecked(checked)
        self._switch.setCursor(Qt.PointingHandCursor)
        self._switch.setStyleSheet(
            f"""
            QCheckBox::indicator {{
                width: 36px;
                height: 20px;
                border: 2px solid {PixelColors.PRIMARY};
                border-radius: 4px;
                background: #FFFFFF;
            }}
            QCheckBox::indicator:checked {{
                background: {PixelColors.PRIMARY};
            }}
            """
        )
        self._switch.toggled.connect(self.toggled.emit)
        layout.addWidget(self._switch)

    def is_checked(self) -> bool:
        return self._switch.isChecked()

    def set_checked(self, checked: bool) -> None:
        self._switch.setChecked(checked)


class Divider(QFrame):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(2)
        self.setStyleSheet(f"background: {PixelColors.GREY_LIGHT}; border: none;")

