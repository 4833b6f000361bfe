"""Neighbourhoods on a seam-aware cell graph.

A ``neighbors4(idx)`` callable returns the four cells adjacent to ``idx`` in
the fixed order east (+x), west (-x), north (+y), south (-y), each expressed
in the local frame of the cell it is called on.
"""

from collections.abc import Callable, Sequence

EAST = 0
WEST = 1
NORTH = 2
SOUTH = 3

Neighbors = Callable[[int], Sequence[int]]


def _step4(neighbors4: Neighbors, idx: int) -> Sequence[int]:
    nbs = list(neighbors4(idx))
    if len(nbs) != 4:
        raise ValueError(f"neighbors4({idx}) must return 4 cells, got {len(nbs)}")
    return nbs


def neighbors8(neighbors4: Neighbors, idx: int) -> list[int]:
    """The eight cells around ``idx``.

    Diagonals are reached by a horizontal step followed by a vertical step
    taken in the frame of the intermediate cell, which keeps the walk correct
    across cube seams. Cells are ordered row by row from ``dy = -1`` to
    ``dy = +1`` and, within a row, from ``dx = -1`` to ``dx = +1``.
    """
    around = _step4(neighbors4, idx)
    out: list[int] = []
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            cell = idx
            if dx != 0:
                cell = around[EAST if dx > 0 else WEST]
            if dy != 0:
                cell = _step4(neighbors4, cell)[NORTH if dy > 0 else SOUTH]
            out.append(cell)
    return out