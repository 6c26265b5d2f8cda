from __future__ import annotations

from collections.abc import Sequence

HOUSE_WIDTH = 69
HOUSE_HEIGHT = 26
WINDOW_WIDTH = 11
WINDOW_HEIGHT = 3

LIT = "#"
DARK = " "

# Interior of window (row 0, col 0); other windows are offset by the pitch.
_FIRST_WINDOW_TOP = 8
_FIRST_WINDOW_LEFT = 11
_ROW_PITCH = 6
_COL_PITCH = 18

HOUSE_TEMPLATE: tuple[str, ...] = (
    "                                             ______________          ",
    "                                            |______________|         ",
    "      _______________________________________|            |_____     ",
    "     '                                       |____________|     `    ",
    "    |                                                           |    ",
    "    '-----------------------------------------------------------'    ",
    "    |           1                 2                 3           |    ",
    "    |     +-----------+     +-----------+     +-----------+     |    ",
    "    |     |           |     |           |     |           |     |    ",
    "    |     |           |     |           |     |           |     |    ",
    "    |     |           |     |           |     |           |     |    ",
    "    |     +-----------+     +-----------+     +-----------+     |    ",
    "    |           4                 5                 6           |    ",
    "    |     +-----------+     +-----------+     +-----------+     |    ",
    "    |     |           |     |           |     |           |     |    ",
    "    |     |           |     |           |     |           |     |    ",
    "  _ |     |           |     |           |     |           |     |    ",
    " |#||     +-----------+     +-----------+     +-----------+     |    ",
    " |_||           7                 8                 9           |    ",
    "  `-|     +-----------+     +-----------+     +-----------+     |    ",
    "    -     |           |     |           |     |           |     |    ",
    "    '     |           |     |           |     |           |     |    ",
    "    '     |           |     |           |     |           |     |    ",
    "   o'     +-----------+     +-----------+     +-----------+     |    ",
    "    '                                                           |    ",
    "____'___________________________________________________________'____",
)


def window_origin(row: int, col: int) -> tuple[int, int]:
    """Top-left (line, column) of a window interior in the house art."""

    return _FIRST_WINDOW_TOP + row * _ROW_PITCH, _FIRST_WINDOW_LEFT + col * _COL_PITCH


def render_house(grid: Sequence[Sequence[bool]]) -> str:
    """Project a 3x3 grid snapshot onto the house; lit windows are filled with '#'."""

    lines = [list(line) for line in HOUSE_TEMPLATE]
    for r, row in enumerate(grid):
        for c, lit in enumerate(row):
            top, left = window_origin(r, c)
            fill = LIT if lit else DARK
            for line in lines[top : top + WINDOW_HEIGHT]:
                line[left : left + WINDOW_WIDTH] = fill * WINDOW_WIDTH
    return "\n".join("".join(line) for line in lines)
