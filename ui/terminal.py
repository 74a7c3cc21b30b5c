"""
GridPick — ui/terminal.py
Host terminal: a tcod context held as a scoped input/output resource.
"""

from __future__ import annotations
import logging
from typing import Iterator, Optional, Sequence
import tcod

from ui.renderer import Renderer, frame_size

logger = logging.getLogger(__name__)


class Terminal:
    """
    Owns the tcod terminal context. Key presses arrive one event at a time,
    there is no line buffering to switch off.

    acquire() opens the window, release() closes it. release() is safe to
    call more than once and only closes an open context.
    """
    def __init__(self, title: str = "GridPick"):
        self.title = title
        self.renderer: Optional[Renderer] = None
        self.context: Optional[tcod.context.Context] = None

    @property
    def active(self) -> bool:
        return self.context is not None

    def acquire(self, lines: Sequence[str]) -> None:
        """Open the context sized for the first frame."""
        if self.context is not None:
            return
        columns, rows = frame_size(lines)
        self.renderer = Renderer(width=columns, height=rows, title=self.title)
        self.context = tcod.context.new(
            columns=columns,
            rows=rows,
            title=self.title,
            vsync=True,
        )
        self.renderer.context = self.context
        logger.debug("Terminal acquired (%dx%d)", columns, rows)

    def release(self) -> None:
        if self.context is None:
            return
        self.context.close()
        self.context = None
        if self.renderer is not None:
            self.renderer.context = None
        logger.debug("Terminal released")

    def show(self, lines: Sequence[str]) -> None:
        """Clear the screen and print every line."""
        if self.context is None or self.renderer is None:
            return
        self.renderer.draw_lines(lines)
        self.renderer.present(self.context)

    def wait(self, timeout: Optional[float]) -> Iterator[tcod.event.Event]:
        """Block until events exist or `timeout` seconds pass."""
        for event in tcod.event.wait(timeout):
            if self.context is not None:
                event = self.context.convert_event(event)
            yield event
