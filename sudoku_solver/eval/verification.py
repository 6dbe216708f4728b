# -*- coding: utf-8 -*-
"""
Checks whether a board is a valid, complete solution.

A puzzle is solved when every unit is a permutation of the digits 1 to 9.
This is independent of propagation, so it also catches a board that looks
fully determined but violates a unit.
"""

from __future__ import annotations

from ..config import DIGITS
from ..csp.domains import Board
from ..types import Topology, Unit

_SORTED_DIGITS = sorted(DIGITS)


def unit_solved(board: Board, unit: Unit) -> bool:
    """True if the nine squares of ``unit`` hold each digit exactly once."""
    return sorted(board.candidates(s) for s in unit) == _SORTED_DIGITS


def solved(board: Board, topo: Topology) -> bool:
    """True iff every one of the 27 units is a permutation of 1..9."""
    return all(unit_solved(board, unit) for unit in topo.unitlist)
