# -*- coding: utf-8 -*-
"""
Random puzzle generation.

Squares are visited in random order and each gets a random digit from its
remaining candidates via :func:`assign`, so every placement is propagated.
Generation stops as soon as at least ``n`` squares are determined and they
use enough distinct digits. On a contradiction, or if the squares run out
first, it starts over from an empty board.

The result is not guaranteed to be solvable (empirically about 99.8% are)
and some puzzles have several solutions.
"""

from __future__ import annotations

import random
from typing import Optional

from ..config import DEFAULT_MIN_GIVENS, DIGITS, MIN_DISTINCT_DIGITS
from ..grid.topology import get_topology
from ..logging_utils import get_logger
from ..types import Topology
from .domains import Board
from .propagation import assign

logger = get_logger()


def _try_random_fill(board: Board, topo: Topology, n: int, rng: random.Random) -> Optional[str]:
    squares = list(topo.squares)
    rng.shuffle(squares)

    for s in squares:
        if not assign(board, topo, s, rng.choice(board.digits(s))):
            return None
        ds = board.singles()
        if len(ds) >= n and len(set(ds)) >= MIN_DISTINCT_DIGITS:
            return board.to_grid()

    return None


def random_puzzle(
    n: int = DEFAULT_MIN_GIVENS,
    topo: Optional[Topology] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Make a random puzzle with ``n`` or more assignments.

    Parameters
    ----------
    n : int
        Minimum number of determined squares.
    topo : Topology, optional
        Defaults to the shared topology.
    rng : random.Random, optional
        Source of randomness; pass a seeded instance for reproducible output.

    Returns
    -------
    str
        81-character grid with ``.`` for empty squares.
    """
    if not 1 <= n <= len(DIGITS) ** 2:
        raise ValueError(f"n must be between 1 and 81, got {n}")
    if topo is None:
        topo = get_topology()
    if rng is None:
        rng = random.Random()

    attempts = 0
    while True:
        attempts += 1
        puzzle = _try_random_fill(Board.full(), topo, n, rng)
        if puzzle is not None:
            logger.debug("random_puzzle: n=%d, attempts=%d", n, attempts)
            return puzzle
        logger.debug("random_puzzle: restart after attempt %d", attempts)
