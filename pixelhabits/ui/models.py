"""Static view data used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from pixelhabits.core.navigation import Screen
from pixelhabits.ui.colors import PixelColors


class HomeTab(IntEnum):
    HOME = 0
    STATS = 1
    AWARDS = 2
    PROFILE = 3


@dataclass(frozen=True)
class TabItem:
    tab: HomeTab
    icon: str
    label: str


TAB_ITEMS: Tuple[TabItem, ...] = (
    TabItem(HomeTab.HOME, "🏠", "Home"),
    TabItem(HomeTab.STATS, "📊", "Stats"),
    TabItem(HomeTab.AWARDS, "🏆", "Awards"),
    TabItem(HomeTab.PROFILE, "👤", "Profile"),
)


@dataclass(frozen=True)
class OnboardingPage:
    """Content and neighbours of one onboarding page."""

    screen: Screen
    number: int
    icon: str
    icon_color: str
    title: str
    lines: Tuple[str, str]
    previous: Optional[Screen]
    next: Optional[Screen]

    @property
    def is_last(self) -> bool:
        return self.next is None


ONBOARDING_PAGES: Tuple[OnboardingPage, ...] = (
    OnboardingPage(
        screen=Screen.ONBOARDING1,
        number=1,
        icon="📊",
        icon_color=PixelColors.PRIMARY,
        title="TRACK PROGRESS",
        lines=("Build lasting habits with", "our pixel-perfect tracker"),
        previous=None,
        next=Screen.ONBOARDING2,
    ),
    OnboardingPage(
        screen=Screen.ONBOARDING2,
        number=2,
        icon="🎯",
        icon_color=PixelColors.ORANGE,
        title="SET GOALS",
        lines=("Create daily missions", "and achieve your dreams"),
        previous=Screen.ONBOARDING1,
        next=Screen.ONBOARDING3,
    ),
    OnboardingPage(
        screen=Screen.ONBOARDING3,
        number=3,
        icon="⭐",
        icon_color=PixelColors.AMBER,
        title="EARN REWARDS",
        lines=("Unlock achievements", "as you level up"),
        previous=Screen.ONBOARDING2,
        next=None,
    ),
)

SWIPE_THRESHOLD_PX = 50


def swipe_target(page: OnboardingPage, dx: float) -> Optional[Screen]:
    """Screen a horizontal drag of *dx* pixels should move to, if any.

    Dragging left goes forward; dragging right goes back. The last page has
    no forward swipe and the first page no backward one.
    """
    if dx < -SWIPE_THRESHOLD_PX:
        return page.next
    if dx > SWIPE_THRESHOLD_PX:
        return page.previous
    return None
