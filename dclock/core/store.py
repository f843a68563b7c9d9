"""Owned application state: the focus timer, the page selector and the last clock face.

The UI gets a store instance, subscribes to it, and only ever talks back through
``tick``, ``toggle_focus`` and ``swipe``.  Subscribers receive frozen
``DisplaySnapshot`` objects, never the live state.
"""

from dataclasses import dataclass
from datetime import datetime
from dclock.common.logger import log
from dclock.core.clock import clock_face
from dclock.core.focus import FocusTimer
from dclock.core.pager import Page, PageSelector, DEFAULT_SWIPE_THRESHOLD


@dataclass(frozen=True)
class DisplaySnapshot:
    hour: str
    minute: str
    weekday: str
    day_month: str
    total_elapsed_formatted: str
    running: bool
    page: Page

    @property
    def button_label(self):
        return "Stop Focus" if self.running else "Start Focus"


class AppStore:

    def __init__(self, timer=None, pager=None, wall_clock=datetime.now,
                 swipe_threshold=DEFAULT_SWIPE_THRESHOLD):
        self.timer = timer or FocusTimer()
        self.pager = pager or PageSelector(threshold=swipe_threshold)
        self._wall_clock = wall_clock
        self._face = clock_face(self._wall_clock())
        self._subscribers = []

    def subscribe(self, callback):
        """Register ``callback(snapshot)``. Returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return unsubscribe

    def snapshot(self):
        face = self._face
        return DisplaySnapshot(
            hour=face.hour,
            minute=face.minute,
            weekday=face.weekday,
            day_month=face.day_month,
            total_elapsed_formatted=self.timer.formatted(),
            running=self.timer.running,
            page=self.pager.page,
        )

    # -- Intents -- #

    def tick(self, now=None, wall=None):
        self._face = clock_face(wall or self._wall_clock())
        self.timer.tick(now)
        self._notify()

    def toggle_focus(self, now=None):
        running = self.timer.toggle(now)
        log.info(f"Focus {'started' if running else 'stopped'}, total today {self.timer.formatted()}")
        self._notify()

    def swipe(self, direction, magnitude):
        if self.pager.swipe(direction, magnitude):
            self._notify()

    def _notify(self):
        snap = self.snapshot()
        for callback in list(self._subscribers):
            try:
                callback(snap)
            except Exception:
                log.exception(f"Display subscriber {callback!r} failed")
