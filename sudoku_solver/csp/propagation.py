# -*- coding: utf-8 -*-
"""
Constraint propagation (assign / eliminate).

Two deduction rules are applied after every elimination:

1. Naked single: if a square is reduced to one digit, that digit is removed
   from all of its peers.
2. Hidden single: if a unit has only one square left that can hold a digit,
   the digit is assigned there.

The two functions call each other recursively until nothing changes. Each
step either removes a candidate or is a no-op, so the recursion always ends.

Both functions mutate ``board`` in place and return False as soon as a
contradiction shows up (a square or a unit left with no place for a digit).
After a False return the board is in an unspecified, partially propagated
state and must be discarded; callers that need the prior state copy the board
first.
"""

from __future__ import annotations

from ..types import CellId, Topology
from .domains import BIT, MASK_DIGITS, POPCOUNT, Board


def assign(board: Board, topo: Topology, cell: CellId, digit: int) -> bool:
    """
    Commit ``digit`` to ``cell`` by eliminating every other candidate.

    Parameters
    ----------
    board : Board
        Candidate sets, modified in place.
    topo : Topology
        Shared board structure.
    cell : CellId
        Square to fill.
    digit : int
        Digit 1..9.

    Returns
    -------
    bool
        False if a contradiction was detected.
    """
    others = board.masks[cell] & ~BIT[digit]
    return all(eliminate(board, topo, cell, d2) for d2 in MASK_DIGITS[others])


def eliminate(board: Board, topo: Topology, cell: CellId, digit: int) -> bool:
    """
    Remove ``digit`` from the candidates of ``cell`` and propagate.

    Removing a digit that is already gone is a no-op that returns True.

    Returns
    -------
    bool
        False if a contradiction was detected.
    """
    bit = BIT[digit]
    masks = board.masks
    if not masks[cell] & bit:
        return True  # already eliminated
    masks[cell] &= ~bit

    # (rule 1) a square reduced to one digit d2: remove d2 from the peers
    remaining = masks[cell]
    if remaining == 0:
        return False  # removed the last candidate
    if POPCOUNT[remaining] == 1:
        (d2,) = MASK_DIGITS[remaining]
        if not all(eliminate(board, topo, s2, d2) for s2 in topo.peers[cell]):
            return False

    # (rule 2) a unit with only one place left for digit: put it there
    for unit in topo.units[cell]:
        places = [s for s in unit if masks[s] & bit]
        if not places:
            return False  # no place for this digit
        if len(places) == 1 and not assign(board, topo, places[0], digit):
            return False

    return True
