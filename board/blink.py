"""
GridPick — board/blink.py
Cursor Blink Timer: cancellable repeating tick on a monotonic clock.
======================================================================
Version:     0.1
Stack:       Python 3.11 | stdlib
Status:      Owned by GridInputController. No rendering here.

Architecture notes
------------------
- Two states: STOPPED and RUNNING. At most one pending deadline exists;
  restart() replaces it instead of stacking a second timer.
- The timer never sleeps or spawns threads. The owner asks how long it may
  block (seconds_until_tick) and then polls tick_due() once it wakes up.
- A stall longer than one period yields one flip, not a burst.
- Every restart() forces visible=True and schedules the next flip one full
  period later, so each key press restarts the blink cycle in phase.
- Clock is injected (seconds, monotonic). Tests pass a fake clock.
"""

from __future__ import annotations

import enum
import time
from typing import Callable, Optional


class BlinkPhase(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class BlinkTimer:
    def __init__(self, period_ms: int, clock: Callable[[], float] = time.monotonic):
        self.period_ms = period_ms
        self.clock = clock
        self.visible = True
        self.phase = BlinkPhase.STOPPED
        self._deadline: Optional[float] = None

    @property
    def period(self) -> float:
        """Period in seconds."""
        return self.period_ms / 1000.0

    def restart(self) -> None:
        """Cancel any pending tick, show the cursor, and start a fresh cycle."""
        self.visible = True
        self.phase = BlinkPhase.RUNNING
        self._deadline = self.clock() + self.period

    def stop(self) -> None:
        self.phase = BlinkPhase.STOPPED
        self._deadline = None

    def seconds_until_tick(self) -> Optional[float]:
        """How long the owner may block before the next flip. None when stopped."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self.clock())

    def tick_due(self) -> bool:
        """Flip visibility once if a tick is due. True means redraw.

        Periods missed during a stall are coalesced into that single flip;
        the next deadline stays on the original period grid.
        """
        now = self.clock()
        if self._deadline is None or now < self._deadline:
            return False
        missed = int((now - self._deadline) // self.period) + 1
        self._deadline += missed * self.period
        self.visible = not self.visible
        return True
