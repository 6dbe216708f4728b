# -*- coding: utf-8 -*-
"""
Builds display text and result payloads from grids and boards.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..config import DISPLAY_CELL_WIDTH
from ..csp.domains import Board
from ..grid.parser import grid_chars, grid_to_array
from ..grid.topology import get_topology
from ..types import Topology


def _box_rows(cells: Sequence[str], width: int) -> List[str]:
    """Lay out 81 cell strings as 9 rows plus separators every 3 rows."""
    sep = "+".join(["-" * (3 * width)] * 3)
    lines: List[str] = []
    for band in range(3):
        for r in range(band * 3, band * 3 + 3):
            row = cells[r * 9:(r + 1) * 9]
            lines.append(
                "|".join(
                    "".join(f"{c:^{width}}" for c in row[b * 3:(b + 1) * 3])
                    for b in range(3)
                )
            )
        lines.append(sep)
    lines.pop()  # no separator after the last band
    return lines


def display(grid: str, width: int = DISPLAY_CELL_WIDTH) -> List[str]:
    """
    Render a grid string as a 9x9 box.

    Example (first lines, width 2)::

        4 8 3 |9 2 1 |6 5 7
        ...
        ------+------+------

    Raises
    ------
    InvalidGrid
        If the text does not hold 81 significant characters.
    """
    return _box_rows(grid_chars(grid), width)


def display_board(board: Board, topo: Optional[Topology] = None) -> List[str]:
    """
    Render the candidate sets of every square.

    Cells are as wide as the longest candidate string plus one.
    """
    if topo is None:
        topo = get_topology()
    cells = [board.candidates(s) for s in topo.squares]
    width = 1 + max(len(c) for c in cells)
    return _box_rows(cells, width)


def build_result(grid: str, solution: str) -> Dict[str, Any]:
    """
    Payload describing a solved puzzle.

    Returns
    -------
    dict
        ``puzzle`` and ``solution`` as 81-character strings, ``board`` as a
        9x9 list of ints and ``display`` as the rendered lines.
    """
    return {
        "puzzle": "".join(grid_chars(grid)),
        "solution": solution,
        "board": grid_to_array(solution).tolist(),
        "display": display(solution),
    }
