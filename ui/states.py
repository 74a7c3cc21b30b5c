"""
GridPick — ui/states.py
Session lifecycle and event routing for the grid widget.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Any, Callable, List
import tcod


class SessionError(RuntimeError):
    """Raised on lifecycle misuse, e.g. start() while a session is running."""


class SessionState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class SessionCompletion:
    """
    One-shot signal fulfilled when a session ends normally.
    Carries no value. wait() keeps the owner's event loop turning until
    the signal fires.
    """
    def __init__(self, pump: Callable[[], None]):
        self._pump = pump
        self._done = False
        self._callbacks: List[Callable[[], None]] = []

    @property
    def done(self) -> bool:
        return self._done

    def add_done_callback(self, fn: Callable[[], None]) -> None:
        if self._done:
            fn()
        else:
            self._callbacks.append(fn)

    def wait(self) -> None:
        while not self._done:
            self._pump()

    def fire(self) -> None:
        if self._done:
            raise SessionError("Session completion already fired")
        self._done = True
        callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            fn()


@dataclass
class Session:
    message: str
    completion: SessionCompletion
    key_presses: int = 0
    selections: int = 0


class BaseState:
    """
    Routes tcod events to ev_* handlers.
    Unhandled event types are ignored.
    """
    def dispatch(self, event: Any) -> None:
        if isinstance(event, tcod.event.KeyDown):
            self.ev_keydown(event)
        elif isinstance(event, tcod.event.Quit):
            self.ev_quit(event)

    def ev_keydown(self, event: tcod.event.KeyDown) -> None:
        pass

    def ev_quit(self, event: tcod.event.Quit) -> None:
        pass

    def on_render(self) -> None:
        """Called after every state change to repaint the screen."""
        pass
