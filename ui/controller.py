"""
GridPick — ui/controller.py
Grid Input Controller: keypress dispatch, toroidal cursor, blink, redraw.
========================================================================
Version:     0.1
Stack:       Python 3.11 | tcod | Pydantic v2
Status:      Core widget. Game rules belong to the caller's cell callback.

Architecture notes
------------------
- Single thread. pump() blocks on the terminal until a key arrives or the
  blink timer is due, then handles events and ticks strictly in order.
- Every handled key restarts the blink cycle, applies its effect and
  repaints the full screen. RETURN is the one exception: it shuts the
  session down and nothing is drawn afterwards.
- Shutdown order: stop blink timer, release terminal, fire completion.
- Once a session is DONE every further event is dropped.
- Ctrl+C and window close exit the process without firing completion.
- An exception escaping a handler (usually the cell callback) aborts the
  session: timer stopped, terminal released, state DONE, then re-raised.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Tuple, Union

import tcod

from board.blink import BlinkTimer
from board.config import ControllerConfig, build_config
from board.cursor import Cursor
from board.grid import Grid, T
from ui.renderer import compose_frame
from ui.states import BaseState, Session, SessionCompletion, SessionError, SessionState
from ui.terminal import Terminal

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[tcod.event.KeySym, str] = {
    tcod.event.KeySym.UP: "up",
    tcod.event.KeySym.DOWN: "down",
    tcod.event.KeySym.LEFT: "left",
    tcod.event.KeySym.RIGHT: "right",
}
SELECT_KEYS = (tcod.event.KeySym.SPACE,)
CONFIRM_KEYS = (tcod.event.KeySym.RETURN, tcod.event.KeySym.KP_ENTER)
INTERRUPT_EXIT_CODE = 130  # 128 + SIGINT


class GridInputController(BaseState, Generic[T]):
    """
    Shows a board, moves a blinking cursor over it and hands the selected
    cell to the caller's callback.

    Construct with a ControllerConfig (or a mapping of its fields), or use
    GridInputController.create(width=..., height=..., ...).
    """
    def __init__(
        self,
        config: Union[ControllerConfig, Mapping[str, Any]],
        terminal: Optional[Terminal] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__()
        if not isinstance(config, ControllerConfig):
            config = build_config(**config)
        self.config = config

        self.grid: Grid[T] = Grid(config.width, config.height, config.initial_value)
        self.cursor_pos = Cursor(config.width, config.height)
        self.callback = config.callback
        self.cursor_character = config.cursor_character
        self.how_to_use_message = config.how_to_use_message
        self.blink = BlinkTimer(config.cursor_interval, clock=clock)

        self.terminal = terminal if terminal is not None else Terminal()
        self.state = SessionState.IDLE
        self.session: Optional[Session] = None

    @classmethod
    def create(
        cls,
        terminal: Optional[Terminal] = None,
        clock: Callable[[], float] = time.monotonic,
        **options: Any,
    ) -> "GridInputController":
        """Keyword-style constructor: create(width=3, height=3, initial_value="0", callback=fn)."""
        return cls(build_config(**options), terminal=terminal, clock=clock)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def message(self) -> str:
        return self.session.message if self.session else ""

    @property
    def board(self) -> List[List[T]]:
        """Snapshot of the board, indexed [row][col]."""
        return self.grid.to_lists()

    def cell(self, x: int, y: int) -> T:
        return self.grid[x, y]

    @property
    def cursor(self) -> Tuple[int, int]:
        return self.cursor_pos.position

    @property
    def cursor_visible(self) -> bool:
        return self.blink.visible

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, message: str) -> SessionCompletion:
        """Open a session and return its completion signal.

        Call completion.wait() to run the event loop until RETURN is pressed.
        """
        if self.state is SessionState.RUNNING:
            raise SessionError("start() called while a session is already running")

        self.session = Session(message=message, completion=SessionCompletion(self.pump))
        self.state = SessionState.RUNNING

        try:
            self.terminal.acquire(self.render())
            self.blink.restart()
            self.on_render()
        except BaseException:
            self.abort()
            raise
        logger.info("Session started on %dx%d board", self.grid.width, self.grid.height)
        return self.session.completion

    def finish(self) -> None:
        """Ends the running session. Ignored when nothing is running."""
        if self.state is not SessionState.RUNNING:
            return
        self.state = SessionState.DONE
        self.blink.stop()
        self.terminal.release()
        logger.info(
            "Session finished after %d key presses, %d selections",
            self.session.key_presses,
            self.session.selections,
        )
        self.session.completion.fire()

    def abort(self) -> None:
        """Tears a running session down without firing its completion.
        Used when an exception escapes the loop."""
        if self.state is not SessionState.RUNNING:
            return
        self.state = SessionState.DONE
        self.blink.stop()
        self.terminal.release()
        logger.warning("Session aborted")

    def interrupt(self) -> None:
        """Hard abort: leave the process without completing the session."""
        logger.warning("Interrupted, exiting")
        sys.exit(INTERRUPT_EXIT_CODE)

    # ------------------------------------------------------------------
    # Event loop
    # ------------------------------------------------------------------

    def pump(self, timeout: Optional[float] = None) -> None:
        """Run one loop iteration: wait for input or the next blink tick,
        handle what arrived, then flip the cursor if a blink tick is due."""
        if self.state is not SessionState.RUNNING:
            return

        wait_for = self.blink.seconds_until_tick()
        if timeout is not None:
            wait_for = timeout if wait_for is None else min(wait_for, timeout)

        try:
            for event in self.terminal.wait(wait_for):
                self.dispatch(event)

            if self.state is SessionState.RUNNING and self.blink.tick_due():
                self.on_render()
        except BaseException:
            # callback errors and SystemExit still release the terminal
            self.abort()
            raise

    def dispatch(self, event: Any) -> None:
        if self.state is not SessionState.RUNNING:
            return
        super().dispatch(event)

    def ev_quit(self, event: tcod.event.Quit) -> None:
        self.interrupt()

    def ev_keydown(self, event: tcod.event.KeyDown) -> None:
        self.session.key_presses += 1
        self.blink.restart()

        if event.sym == tcod.event.KeySym.C and event.mod & tcod.event.Modifier.CTRL:
            self.interrupt()

        if event.sym in KEY_DIRECTIONS:
            self.move_cursor(KEY_DIRECTIONS[event.sym])
        elif event.sym in SELECT_KEYS:
            self.handle_selection()
        elif event.sym in CONFIRM_KEYS:
            self.finish()
            return

        self.on_render()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def move_cursor(self, direction: str) -> None:
        self.cursor_pos.step(direction)
        logger.debug("Cursor %s -> %s", direction, self.cursor_pos.position)

    def handle_selection(self) -> None:
        x, y = self.cursor_pos.position
        current = self.grid[x, y]
        result = self.callback(x, y, current)
        self.grid[x, y] = result
        if self.session is not None:
            self.session.selections += 1
        logger.debug("Cell (%d, %d): %r -> %r", x, y, current, result)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> List[str]:
        """The current screen as text lines."""
        return compose_frame(
            self.message,
            self.how_to_use_message,
            self.grid,
            self.cursor_pos,
            self.cursor_character,
            self.blink.visible,
        )

    def on_render(self) -> None:
        self.terminal.show(self.render())
