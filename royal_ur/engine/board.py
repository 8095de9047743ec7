"""Text rendering of the board.

The board is drawn in three rows, the shared lane in the middle::

    ....00..
    ........
    ....00..

The top player's tiles are 'T', the bottom player's 'B'. The two blank cells in
each outer row hold that player's pile count and finished count. An
in-progress game might look like::

    .TT.31..
    ...T..B.
    B...50..
"""

from __future__ import annotations

from .config import config
from .side import Side, SideView

_TEMPLATE = "....00..\n........\n....00.."

# Character offsets of positions 0..15 along each player's path.
TOP_PATH = (4, 3, 2, 1, 0, 9, 10, 11, 12, 13, 14, 15, 16, 7, 6, 5)
BOTTOM_PATH = (22, 21, 20, 19, 18, 9, 10, 11, 12, 13, 14, 15, 16, 25, 24, 23)


def render(top: Side | SideView, bottom: Side | SideView) -> str:
    cells = list(_TEMPLATE)
    for side, path, mark in ((top, TOP_PATH, "T"), (bottom, BOTTOM_PATH, "B")):
        cells[path[0]] = str(side.remaining)
        cells[path[config.FINISH]] = str(side.finished)
        for position in side.occupied:
            cells[path[position]] = mark
    return "".join(cells)
