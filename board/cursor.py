"""
GridPick — board/cursor.py
Toroidal cursor over a fixed-size board.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

# Direction name -> (dx, dy). y grows downward.
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


@dataclass
class Cursor:
    width: int
    height: int
    x: int = 0
    y: int = 0

    def move(self, dx: int, dy: int) -> None:
        """Steps the cursor, wrapping at every edge in both axes."""
        self.x = (self.x + dx + self.width) % self.width
        self.y = (self.y + dy + self.height) % self.height

    def step(self, direction: str) -> None:
        dx, dy = DIRECTIONS[direction]
        self.move(dx, dy)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)
