from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Selection(Enum):
    NO_SELECTION = "no_selection"
    ONE_SELECTED = "one_selected"


class ClickOutcome(Enum):
    SELECTED = "selected"
    DESELECTED = "deselected"
    SWAPPED = "swapped"
    SOLVED = "solved"


@dataclass(frozen=True)
class Tile:
    """One rendered cell: the value it holds and where its image crop sits."""
    index: int
    value: int
    row: int  # home row of ``value``
    col: int
    offset_x: float  # background-position percentages
    offset_y: float
    image: str
    selected: bool = False


class Board:
    """An N x N swap puzzle. ``grid[i]`` is the tile value at position ``i``."""

    def __init__(self, size: int, grid: Optional[List[int]] = None):
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self.grid = list(grid) if grid is not None else list(range(1, size * size + 1))
        if sorted(self.grid) != list(range(1, size * size + 1)):
            raise ValueError(f"grid is not a permutation of 1..{size * size}")
        self.moves = 0
        self.selection = Selection.NO_SELECTION
        self.selected_index: Optional[int] = None

    @classmethod
    def build(cls, n: int) -> "Board":
        return cls(n)

    def __len__(self) -> int:
        return len(self.grid)

    def is_solved(self) -> bool:
        return all(v == i + 1 for i, v in enumerate(self.grid))

    def correct_tiles(self) -> int:
        return sum(1 for i, v in enumerate(self.grid) if v == i + 1)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Fisher-Yates shuffle, re-rolled until the board is not solved."""
        if len(self.grid) < 2:
            raise ValueError("a board needs at least two tiles to be shuffled")
        rng = rng or random
        while True:
            for i in range(len(self.grid) - 1, 0, -1):
                j = rng.randint(0, i)
                self.grid[i], self.grid[j] = self.grid[j], self.grid[i]
            if not self.is_solved():
                break
        self.moves = 0
        self._clear_selection()

    def swap(self, i: int, j: int) -> None:
        self._check_index(i)
        self._check_index(j)
        self.grid[i], self.grid[j] = self.grid[j], self.grid[i]

    def click(self, index: int) -> ClickOutcome:
        """Two-phase selection: pick a tile, then pick another to swap with it."""
        self._check_index(index)
        if self.selection is Selection.NO_SELECTION:
            self.selection = Selection.ONE_SELECTED
            self.selected_index = index
            return ClickOutcome.SELECTED
        first = self.selected_index
        self._clear_selection()
        if first == index:
            return ClickOutcome.DESELECTED
        self.swap(first, index)
        self.moves += 1
        return ClickOutcome.SOLVED if self.is_solved() else ClickOutcome.SWAPPED

    def tiles(self, image: str = "") -> List[Tile]:
        n = self.size
        out: List[Tile] = []
        for i, value in enumerate(self.grid):
            r, c = divmod(value - 1, n)
            x = 0.0 if n == 1 else c / (n - 1) * 100
            y = 0.0 if n == 1 else r / (n - 1) * 100
            out.append(Tile(i, value, r, c, x, y, image, i == self.selected_index))
        return out

    def rows(self) -> List[List[int]]:
        n = self.size
        return [self.grid[r * n:(r + 1) * n] for r in range(n)]

    def _clear_selection(self) -> None:
        self.selection = Selection.NO_SELECTION
        self.selected_index = None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.grid):
            raise IndexError(f"tile index {index} out of range for {len(self.grid)} tiles")
