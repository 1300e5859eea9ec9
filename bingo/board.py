# AoC 2021 - Bingo Solver for Day 4 (boards)
# Created:      2026-10-18
# Modified:     2026-10-18

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Board:
    """A square grid of numbers. Never mutated; marks live in a BoardSession."""

    rows: Tuple[Tuple[int, ...], ...]
    positions: Dict[int, List[Cell]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        positions = {}
        for r_idx, row in enumerate(self.rows):
            for c_idx, value in enumerate(row):
                positions.setdefault(value, []).append((r_idx, c_idx))
        object.__setattr__(self, "positions", positions)

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def columns(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(zip(*self.rows))

    @property
    def lines(self) -> Tuple[Tuple[int, ...], ...]:
        # rows first, then columns; diagonals don't count
        return self.rows + self.columns

    def cells(self):
        for r_idx, row in enumerate(self.rows):
            for c_idx, value in enumerate(row):
                yield (r_idx, c_idx), value

    def __contains__(self, number):
        return number in self.positions


class BoardSession:
    """Marking state for one board during one simulation run."""

    def __init__(self, board: Board):
        self.board = board
        self.marked = set()
        self.row_marks = [0] * board.size
        self.col_marks = [0] * board.size

    def call(self, number: int) -> bool:
        """Mark `number` if present. Returns True if any line is complete."""
        for cell in self.board.positions.get(number, ()):
            if cell in self.marked:
                continue
            self.marked.add(cell)
            r_idx, c_idx = cell
            self.row_marks[r_idx] += 1
            self.col_marks[c_idx] += 1
        return self.has_won()

    def has_won(self) -> bool:
        size = self.board.size
        return size in self.row_marks or size in self.col_marks

    def unmarked_sum(self) -> int:
        return sum(value for cell, value in self.board.cells() if cell not in self.marked)
