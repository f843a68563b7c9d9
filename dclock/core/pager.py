"""Two-page selector driven by horizontal swipes."""

from enum import Enum
from dclock.common.logger import log

DEFAULT_SWIPE_THRESHOLD = 50


class Page(Enum):
    CLOCK = 0
    FOCUS_TIMER = 1


class SwipeDirection(Enum):
    LEFT = "left"
    RIGHT = "right"

    @staticmethod
    def from_displacement(dx):
        """Split a signed horizontal drag into (direction, magnitude). Negative dx is leftward."""
        if dx < 0:
            return SwipeDirection.LEFT, -dx
        return SwipeDirection.RIGHT, dx


class PageSelector:

    def __init__(self, threshold=DEFAULT_SWIPE_THRESHOLD):
        self.threshold = threshold
        self.page = Page.CLOCK

    def swipe(self, direction, magnitude):
        """Apply a swipe gesture. Returns True if the page changed."""
        if magnitude <= self.threshold:
            return False
        if direction is SwipeDirection.LEFT and self.page is Page.CLOCK:
            target = Page.FOCUS_TIMER
        elif direction is SwipeDirection.RIGHT and self.page is Page.FOCUS_TIMER:
            target = Page.CLOCK
        else:
            return False
        log.debug(f"Swiped {direction.value} ({magnitude}) from {self.page.name} to {target.name}")
        self.page = target
        return True
