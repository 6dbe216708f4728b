# -*- coding: utf-8 -*-
"""
Depth-first search over the squares propagation could not settle.

Rough flow
----------
1. If every square has exactly one candidate, the board is solved.
2. Otherwise pick the open square with the fewest candidates (MRV).
3. For each of its candidates, in ascending order, copy the board, assign the
   digit and recurse on the copy.
4. Return the first branch that solves; if none does, this branch fails.

Sibling branches never share a Board, so there is nothing to undo on
backtrack: a failed copy is simply dropped.

An optional node or wall-clock budget can be imposed through SearchContext;
it is checked each time a branching square is chosen.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from ..config import MAX_SEARCH_NODES, SEARCH_LOG_INTERVAL, SEARCH_TIMEOUT_SECONDS
from ..errors import SearchLimitReached
from ..logging_utils import get_logger
from ..types import CellId, Topology
from .domains import POPCOUNT, Board
from .propagation import assign

logger = get_logger()


@dataclass
class SearchContext:
    """
    Bookkeeping shared by every branch of one search.

    Attributes
    ----------
    max_nodes : int or None
        Stop after this many branching squares. None means unbounded.
    deadline : float or None
        ``time.monotonic()`` value after which the search stops.
    nodes_visited : int
        Branching squares chosen so far.
    """

    max_nodes: Optional[int] = MAX_SEARCH_NODES
    deadline: Optional[float] = None
    nodes_visited: int = 0

    @classmethod
    def with_timeout(
        cls,
        timeout: Optional[float] = SEARCH_TIMEOUT_SECONDS,
        max_nodes: Optional[int] = MAX_SEARCH_NODES,
    ) -> "SearchContext":
        deadline = time.monotonic() + timeout if timeout is not None else None
        return cls(max_nodes=max_nodes, deadline=deadline)

    def visit(self) -> None:
        """Count one branching node; raise if the budget is exhausted."""
        self.nodes_visited += 1

        if self.nodes_visited % SEARCH_LOG_INTERVAL == 0:
            logger.debug("[search] nodes_visited = %d", self.nodes_visited)

        if self.max_nodes is not None and self.nodes_visited > self.max_nodes:
            raise SearchLimitReached(
                f"Search stopped after {self.max_nodes} nodes."
            )
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise SearchLimitReached("Search stopped: time budget exhausted.")


def choose_next_cell(board: Board) -> Optional[CellId]:
    """
    Open square with the fewest candidates (minimum remaining values).

    Ties go to the lowest CellId. Returns None when no square is open.
    """
    best: Optional[CellId] = None
    best_count = 10
    for cell, m in enumerate(board.masks):
        n = POPCOUNT[m]
        if 1 < n < best_count:
            best, best_count = cell, n
            if n == 2:
                break
    return best


def search(
    board: Board,
    topo: Topology,
    ctx: Optional[SearchContext] = None,
) -> Optional[Board]:
    """
    Solve ``board`` by depth-first search and propagation.

    ``board`` itself is never modified; every branch works on a copy.

    Parameters
    ----------
    board : Board
        A propagated, contradiction-free board.
    topo : Topology
        Shared board structure.
    ctx : SearchContext, optional
        Budget and counters. Unbounded when omitted.

    Returns
    -------
    Board or None
        A board with one candidate per square, or None if every branch
        leads to a contradiction.

    Raises
    ------
    SearchLimitReached
        If ``ctx`` carries a budget and it runs out.
    """
    if ctx is None:
        ctx = SearchContext()

    cell = choose_next_cell(board)
    if cell is None:
        return board  # solved

    ctx.visit()

    for d in board.digits(cell):
        branch = board.copy()
        if assign(branch, topo, cell, d):
            result = search(branch, topo, ctx)
            if result is not None:
                return result

    return None
