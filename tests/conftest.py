import logging
from collections import deque

import pytest
import tcod.event

from board.config import build_config
from board.logging_config import NAMESPACES
from ui.controller import GridInputController


class FakeClock:
    """Monotonic seconds that only move when a test says so."""
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ScriptedTerminal:
    """
    Stands in for the tcod window. Each feed() call queues one batch of
    events; wait() hands out one batch per call, or lets the fake clock run
    out the timeout when nothing is queued.
    """
    def __init__(self, clock):
        self.clock = clock
        self.batches = deque()
        self.frames = []
        self.acquired = 0
        self.released = 0
        self.active = False

    def feed(self, *events):
        self.batches.append(list(events))

    def acquire(self, lines):
        self.acquired += 1
        self.active = True

    def release(self):
        if self.active:
            self.released += 1
            self.active = False

    def show(self, lines):
        if self.active:
            self.frames.append(list(lines))

    def wait(self, timeout):
        if self.batches:
            return iter(self.batches.popleft())
        if timeout is None:
            raise AssertionError("event loop would block forever")
        self.clock.advance(timeout)
        return iter([])


def key(sym, mod=tcod.event.Modifier.NONE):
    return tcod.event.KeyDown(scancode=0, sym=sym, mod=mod)


def flip(x, y, value):
    return "1" if value == "0" else "0"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def terminal(clock):
    return ScriptedTerminal(clock)


@pytest.fixture
def make_controller(terminal, clock):
    def _make(**options):
        options.setdefault("width", 3)
        options.setdefault("height", 3)
        options.setdefault("initial_value", "0")
        options.setdefault("callback", flip)
        return GridInputController(build_config(**options), terminal=terminal, clock=clock)
    return _make


@pytest.fixture
def restore_loggers():
    saved = {name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers)) for name in NAMESPACES}
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
