from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

SIZE = 3

Cell = tuple[int, int]
Snapshot = tuple[tuple[bool, ...], ...]

# Self first, then up/down/left/right. No diagonals, no wraparound.
NEIGHBOR_OFFSETS: tuple[Cell, ...] = ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1))

INITIAL_LAYOUT: Snapshot = (
    (True, True, False),
    (True, True, False),
    (True, False, False),
)


def selection_to_cell(selection: int) -> Cell:
    """Map a 1-based window number (row-major) to zero-based (row, col)."""

    if not 1 <= selection <= SIZE * SIZE:
        raise ValueError(f"Window selection out of range: {selection}")
    return (selection - 1) // SIZE, (selection - 1) % SIZE


def cross_cells(row: int, col: int) -> list[Cell]:
    return [
        (row + dr, col + dc)
        for dr, dc in NEIGHBOR_OFFSETS
        if 0 <= row + dr < SIZE and 0 <= col + dc < SIZE
    ]


@dataclass(slots=True)
class GridState:
    """The 3x3 light grid. Single owner of puzzle state."""

    cells: list[list[bool]] = field(default_factory=lambda: [list(r) for r in INITIAL_LAYOUT])

    def __post_init__(self) -> None:
        self.initialize(self.cells)

    @classmethod
    def initial(cls) -> "GridState":
        return cls([list(r) for r in INITIAL_LAYOUT])

    @classmethod
    def from_layout(cls, layout: str) -> "GridState":
        """Build a grid from nine row-major `0`/`1` characters, e.g. "110110100"."""

        if len(layout) != SIZE * SIZE or set(layout) - {"0", "1"}:
            raise ValueError(f"Layout must be {SIZE * SIZE} characters of '0'/'1', got {layout!r}")
        bits = [ch == "1" for ch in layout]
        return cls([bits[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)])

    def initialize(self, initial: Sequence[Sequence[bool | int]]) -> None:
        if len(initial) != SIZE or any(len(row) != SIZE for row in initial):
            raise ValueError(f"Grid must be {SIZE}x{SIZE}")
        self.cells = [[bool(v) for v in row] for row in initial]

    def toggle_cell(self, row: int, col: int) -> None:
        self.cells[row][col] = not self.cells[row][col]

    def apply_move(self, selection: int) -> list[Cell]:
        """Toggle the selected window and every in-bounds orthogonal neighbour.

        Returns the toggled cells, selected cell first.
        """

        row, col = selection_to_cell(selection)
        toggled = cross_cells(row, col)
        for r, c in toggled:
            self.toggle_cell(r, c)
        return toggled

    def is_solved(self) -> bool:
        return not any(cell for row in self.cells for cell in row)

    def lit_count(self) -> int:
        return sum(cell for row in self.cells for cell in row)

    def snapshot(self) -> Snapshot:
        return tuple(tuple(row) for row in self.cells)

    def scramble(self, *, rng: random.Random, moves: int) -> list[int]:
        """Start from all-dark and apply `moves` random selections.

        Any layout reached this way is solvable by replaying the same selections.
        Moves can cancel out, so draws that land on all-dark are redrawn
        whenever `moves` > 0.
        """

        while True:
            self.initialize([[False] * SIZE for _ in range(SIZE)])
            applied = [rng.randint(1, SIZE * SIZE) for _ in range(moves)]
            for selection in applied:
                self.apply_move(selection)
            if moves == 0 or not self.is_solved():
                return applied
