# -*- coding: utf-8 -*-
"""
Main data structures shared by the solver modules.

dataclass is used so that the fields each structure carries are visible at a
glance. The candidate-set Board lives in :mod:`sudoku_solver.csp.domains`
because it is tied to the bitmask helpers defined there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# A square on the board: row-major index 0..80 (A1=0, A2=1, ..., I9=80).
CellId = int

# Nine squares that must hold each digit exactly once.
Unit = Tuple[CellId, ...]


@dataclass(frozen=True)
class Topology:
    """
    Puzzle-independent structure of the 9x9 board.

    Attributes
    ----------
    squares : tuple of CellId
        The 81 squares in row-major order.
    names : tuple of str
        Letter-digit name of every square ("A1" .. "I9"), indexed by CellId.
    unitlist : tuple of Unit
        27 units: 9 columns, then 9 rows, then 9 boxes.
    units : tuple of tuple of Unit
        ``units[c]`` is the column, row and box unit containing ``c``.
    peers : tuple of tuple of CellId
        ``peers[c]`` is the sorted 20 other squares sharing a unit with ``c``.
    """

    squares: Tuple[CellId, ...]
    names: Tuple[str, ...]
    unitlist: Tuple[Unit, ...]
    units: Tuple[Tuple[Unit, ...], ...]
    peers: Tuple[Tuple[CellId, ...], ...]

    def index_of(self, name: str) -> CellId:
        """Return the CellId of a square name such as ``"C2"``."""
        return self.names.index(name.upper())


@dataclass
class TimedResult:
    """
    Outcome of one timed solve in a batch run.

    Attributes
    ----------
    grid : str
        The puzzle text as given.
    seconds : float
        Wall-clock time spent in :func:`sudoku_solver.solve`.
    solved : bool
        True when a verified solution was produced.
    solution : str or None
        The 81-digit solution, or None when solving failed.
    error : str or None
        Name of the PuzzleError subclass when solving failed.
    """

    grid: str
    seconds: float
    solved: bool
    solution: Optional[str] = None
    error: Optional[str] = None

    def as_row(self) -> Dict[str, object]:
        return {
            "grid": self.grid,
            "seconds": self.seconds,
            "solved": self.solved,
            "solution": self.solution,
            "error": self.error,
        }
