# -*- coding: utf-8 -*-
"""
Converts grid text into the solver's internal representation.

Main roles:
- pick the 81 significant characters out of free-form grid text
- map each square to its given digit or to a blank
- seed a candidate Board and propagate every given digit into it
- offer a 9x9 numpy view of a grid for callers that want a matrix
"""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from ..config import BLANKS, DIGITS
from ..csp.domains import Board, digit_value
from ..csp.propagation import assign
from ..errors import Contradiction, InvalidGrid
from ..types import CellId, Topology
from .topology import get_topology

# Characters that count towards the 81; everything else is ignored.
SIGNIFICANT = frozenset(DIGITS + BLANKS)


def grid_chars(grid: str) -> List[str]:
    """
    Significant characters of ``grid``, in order.

    Raises
    ------
    InvalidGrid
        Unless exactly 81 characters among ``1-9``, ``0`` and ``.`` remain.
    """
    chars = [ch for ch in grid if ch in SIGNIFICANT]
    if len(chars) != 81:
        raise InvalidGrid(
            f"Invalid Grid. Expected 81 digits with 0 or . for empties, "
            f"found {len(chars)}."
        )
    return chars


def grid_values(grid: str, topo: Optional[Topology] = None) -> Dict[CellId, str]:
    """
    Map every square to its character: a digit, or ``0`` / ``.`` for empty.

    Parameters
    ----------
    grid : str
        Grid text. Newlines, spaces and other characters are ignored.
    topo : Topology, optional
        Defaults to the shared topology.

    Returns
    -------
    dict[int, str]
        81 entries keyed by CellId.
    """
    if topo is None:
        topo = get_topology()
    return dict(zip(topo.squares, grid_chars(grid)))


def parse_grid(grid: str, topo: Optional[Topology] = None) -> Board:
    """
    Build the candidate Board for ``grid`` and propagate its givens.

    Every square starts with all nine digits; each given digit is then
    assigned in square order.

    Raises
    ------
    InvalidGrid
        If the text does not hold 81 significant characters.
    Contradiction
        If the givens are inconsistent (e.g. two 5s in one row).
    """
    if topo is None:
        topo = get_topology()

    board = Board.full()
    for s, ch in grid_values(grid, topo).items():
        if ch in DIGITS and not assign(board, topo, s, digit_value(ch)):
            raise Contradiction(
                f"A contradiction occurred placing {ch} at {topo.names[s]}. "
                f"The puzzle is unsolvable."
            )
    return board


def grid_to_array(grid: str) -> np.ndarray:
    """
    9x9 integer matrix of ``grid`` with 0 for empty squares.

    Raises
    ------
    InvalidGrid
        If the text does not hold 81 significant characters.
    """
    values = [int(ch) if ch in DIGITS else 0 for ch in grid_chars(grid)]
    return np.array(values, dtype=np.int8).reshape(9, 9)
