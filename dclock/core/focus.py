"""Focus-session timer: pure logic, no UI."""

import math
import time
from enum import Enum
from dclock.common.logger import log


class TimerState(Enum):
    IDLE = "idle"
    ACTIVE = "active"


def format_elapsed(accumulated, current=0.0):
    """Format a focus total as HH:MM:SS. Hours never wrap; negatives clamp to zero."""
    seconds = max(0, math.floor(accumulated + current))
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


class FocusTimer:
    """Tracks today's focus time as a sequence of manually started/stopped sessions.

    Instants come from ``clock`` (``time.monotonic`` by default, so wall-clock
    changes don't corrupt durations).  Every mutator also takes an explicit
    ``now`` so the machine can be driven deterministically.

    ``toggle()`` is the only public mutator; the UI has exactly one button.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self.running = False
        self.session_start = None
        self.accumulated_today = 0.0
        self.current_session_elapsed = 0.0

    @property
    def state(self):
        return TimerState.ACTIVE if self.running else TimerState.IDLE

    @property
    def total_elapsed(self):
        return self.accumulated_today + self.current_session_elapsed

    def formatted(self):
        return format_elapsed(self.accumulated_today, self.current_session_elapsed)

    def toggle(self, now=None):
        """Start a session when idle, stop it when active. Returns the new running flag."""
        now = self._now(now)
        if self.running:
            self._stop(now)
        else:
            self._start(now)
        return self.running

    def tick(self, now=None):
        # Idle ticks leave current_session_elapsed at 0.
        if not self.running or self.session_start is None:
            return
        self.current_session_elapsed = max(0.0, self._now(now) - self.session_start)

    def _start(self, now):
        if self.running:
            return
        self.running = True
        self.session_start = now
        self.current_session_elapsed = 0.0
        log.debug(f"Started focus session at {now}")

    def _stop(self, now=None):
        # Reachable only through a double intent; must leave everything untouched.
        if self.session_start is None:
            return
        now = self._now(now)
        elapsed = max(0.0, now - self.session_start)
        self.accumulated_today += elapsed
        self.running = False
        self.session_start = None
        self.current_session_elapsed = 0.0
        log.debug(f"Stopped focus session after {elapsed:.3f}s, total today {self.accumulated_today:.3f}s")

    def _now(self, now):
        return self._clock() if now is None else now
