"""
GridPick — ui/renderer.py
TCOD Renderer: frame composition and console drawing.
===============================================
Version:     0.1
Stack:       Python 3.11 | tcod
Status:      Full-screen repaint only, no diffing.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import tcod

from board.cursor import Cursor
from board.grid import Grid


def compose_frame(
    message: str,
    how_to_use_message: str,
    grid: Grid,
    cursor: Cursor,
    cursor_character: str,
    cursor_visible: bool,
) -> List[str]:
    """
    Builds the full screen as text lines: the prompt, the help text, a blank
    spacer, then one line per board row. Pure function of its inputs.
    """
    lines = message.splitlines() or [""]
    lines.extend(how_to_use_message.splitlines() or [""])
    lines.append("")

    for y in range(grid.height):
        parts = []
        for x in range(grid.width):
            if x == cursor.x and y == cursor.y and cursor_visible:
                parts.append(cursor_character)
            else:
                parts.append(grid.cell_text(x, y))
        lines.append("".join(parts))
    return lines


def frame_size(lines: Sequence[str]) -> Tuple[int, int]:
    """(columns, rows) needed to show every line, never smaller than 1x1."""
    columns = max((len(line) for line in lines), default=0)
    return max(columns, 1), max(len(lines), 1)


class Renderer:
    """
    Manages the tcod root console that frames are drawn into.
    """
    def __init__(self, width: int, height: int, title: str = "GridPick"):
        self.width = width
        self.height = height
        self.title = title
        self.root_console = tcod.console.Console(width, height)
        self.context: Optional[tcod.context.Context] = None

    def clear(self) -> None:
        """Clear the console with black."""
        self.root_console.clear()

    def fit(self, lines: Sequence[str]) -> None:
        """Grow the console when a frame no longer fits. Never shrinks."""
        columns, rows = frame_size(lines)
        if columns > self.width or rows > self.height:
            self.width = max(self.width, columns)
            self.height = max(self.height, rows)
            self.root_console = tcod.console.Console(self.width, self.height)

    def draw_lines(self, lines: Sequence[str]) -> None:
        """Clear, then print each line at the left edge, top to bottom."""
        self.fit(lines)
        self.clear()
        for y, line in enumerate(lines):
            if line:
                self.root_console.print(0, y, line)

    def present(self, context: tcod.context.Context) -> None:
        """Present the current console to the screen."""
        context.present(self.root_console)
