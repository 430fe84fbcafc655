"""In-window level-up celebration overlay."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QPropertyAnimation, QTimer, Signal
from PySide6.QtWidgets import QGraphicsOpacityEffect, QLabel, QVBoxLayout, QWidget

from pixelhabits.ui.colors import PixelColors
from pixelhabits.ui.widgets import PixelText

LEVEL_UP_DISPLAY_MS = 3000


class LevelUpOverlay(QWidget):
    """Dark full-window overlay announcing the new level; hides itself after 3 s."""

    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setObjectName("levelUpOverlay")
        self.setStyleSheet(f"QWidget#levelUpOverlay {{ background: {PixelColors.OVERLAY_BG}; }}")

        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.addStretch(1)

        party = QLabel("🎉")
        party.setAlignment(Qt.AlignCenter)
        party.setStyleSheet("font-size: 80px; background: transparent;")
        layout.addWidget(party)

        title = PixelText("LEVEL UP!", 36, PixelColors.AMBER)
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self._message = PixelText("", 20, "#FFFFFF")
        self._message.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._message)
        layout.addStretch(1)

        self._opacity = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self._opacity)
        self._fade = QPropertyAnimation(self._opacity, b"opacity", self)
        self._fade.setDuration(300)

        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self.dismiss)
        self.hide()

    def message(self) -> str:
        return self._message.text()

    def show_level(self, level: int) -> None:
        self._message.setText(f"You reached Level {level}")
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())
        self.raise_()
        self.show()
        self._fade.stop()
        self._fade.setStartValue(0.0)
        self._fade.setEndValue(1.0)
        self._fade.start()
        self._hide_timer.start(LEVEL_UP_DISPLAY_MS)

    def dismiss(self) -> None:
        self._hide_timer.stop()
        self.hide()
        self.closed.emit()

    def mousePressEvent(self, event) -> None:
        self.dismiss()
