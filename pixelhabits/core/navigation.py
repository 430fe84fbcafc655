from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List

logger = logging.getLogger(__name__)


class Screen(Enum):
    SPLASH = "splash"
    TITLE = "title"
    LOGIN = "login"
    ONBOARDING1 = "onboarding1"
    ONBOARDING2 = "onboarding2"
    ONBOARDING3 = "onboarding3"
    HOME = "home"
    SETTINGS = "settings"


NavigationListener = Callable[["NavigationState"], None]


class NavigationState:
    """Active screen plus a single remembered previous screen.

    This is a one-level history, not a stack: ``go_back`` does not touch
    ``previous``, so a second consecutive ``go_back`` lands on the same screen.
    """

    def __init__(self, start: Screen = Screen.SPLASH) -> None:
        self._current = start
        self._previous = start
        self._listeners: List[NavigationListener] = []

    @property
    def current(self) -> Screen:
        return self._current

    @property
    def previous(self) -> Screen:
        return self._previous

    def subscribe(self, listener: NavigationListener) -> None:
        """Call *listener* with this state after every transition."""
        self._listeners.append(listener)

    def navigate(self, to: Screen) -> None:
        self._previous = self._current
        self._current = to
        logger.info("Navigate %s -> %s", self._previous.value, to.value)
        self._notify()

    def go_back(self) -> None:
        logger.info("Back %s -> %s", self._current.value, self._previous.value)
        self._current = self._previous
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
