"""
GridPick — board/grid.py
Rectangular board of generic cell values.
"""

from __future__ import annotations
from typing import Callable, Generic, List, Protocol, Tuple, TypeVar


class Displayable(Protocol):
    """Anything with a deterministic, single-line text form."""
    def __str__(self) -> str: ...


T = TypeVar("T", bound=Displayable)

# (x, y, current_value) -> new_value
CellCallback = Callable[[int, int, T], T]


class Grid(Generic[T]):
    """
    Fixed-size board addressed as grid[x, y].
    Storage is row-major: row y, column x.
    """
    def __init__(self, width: int, height: int, initial_value: T):
        self.width = width
        self.height = height
        self._cells: List[List[T]] = [[initial_value] * width for _ in range(height)]

    def __getitem__(self, pos: Tuple[int, int]) -> T:
        x, y = pos
        return self._cells[y][x]

    def __setitem__(self, pos: Tuple[int, int], value: T) -> None:
        x, y = pos
        self._cells[y][x] = value

    def to_lists(self) -> List[List[T]]:
        """Snapshot copy, indexed [row][col]."""
        return [list(row) for row in self._cells]

    def cell_text(self, x: int, y: int) -> str:
        return str(self._cells[y][x])
