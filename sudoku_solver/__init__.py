# -*- coding: utf-8 -*-
"""
Entry point of the sudoku_solver package.

Callers are expected to use::

    from sudoku_solver import solve

solve() takes grid text and runs, in order:
1. parsing the 81 significant characters (InvalidGrid on failure)
2. seeding a candidate Board and propagating every given digit
   (Contradiction if the givens clash)
3. depth-first search over the squares that are still open
   (Contradiction if every branch fails)
4. verification that every unit is a permutation of 1..9 (Unsolved otherwise)
"""

from __future__ import annotations

from typing import Optional

from .config import MAX_SEARCH_NODES, SEARCH_TIMEOUT_SECONDS
from .csp.domains import Board
from .csp.generator import random_puzzle
from .csp.propagation import assign, eliminate
from .csp.search import SearchContext, search
from .errors import Contradiction, InvalidGrid, PuzzleError, SearchLimitReached, Unsolved
from .eval.verification import solved
from .grid.parser import grid_values, parse_grid
from .grid.topology import build_topology, get_topology
from .logging_utils import get_logger
from .postprocess.render_result import display, display_board
from .types import CellId, Topology

__all__ = [
    "Board",
    "CellId",
    "Contradiction",
    "InvalidGrid",
    "PuzzleError",
    "SearchContext",
    "SearchLimitReached",
    "Topology",
    "Unsolved",
    "assign",
    "build_topology",
    "display",
    "display_board",
    "eliminate",
    "get_topology",
    "grid_values",
    "parse_grid",
    "random_puzzle",
    "search",
    "solve",
    "solve_board",
    "solved",
]

logger = get_logger()


def solve_board(
    grid: str,
    topology: Optional[Topology] = None,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
    timeout: Optional[float] = SEARCH_TIMEOUT_SECONDS,
) -> Board:
    """
    Solve ``grid`` and return the verified, fully determined Board.

    Parameters
    ----------
    grid : str
        81 significant characters, ``1-9`` for givens and ``0`` / ``.`` for
        empty squares. Other characters are ignored.
    topology : Topology, optional
        Defaults to the shared topology.
    max_nodes : int, optional
        Budget on branching squares visited by search.
    timeout : float, optional
        Budget in seconds for the search.

    Raises
    ------
    InvalidGrid, Contradiction, Unsolved, SearchLimitReached
    """
    topo = topology if topology is not None else get_topology()

    board = parse_grid(grid, topo)
    ctx = SearchContext.with_timeout(timeout=timeout, max_nodes=max_nodes)
    result = search(board, topo, ctx)
    logger.debug("solve: search visited %d nodes", ctx.nodes_visited)

    if result is None:
        raise Contradiction()
    if not solved(result, topo):
        raise Unsolved()
    return result


def solve(
    grid: str,
    topology: Optional[Topology] = None,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
    timeout: Optional[float] = SEARCH_TIMEOUT_SECONDS,
) -> str:
    """
    Solve ``grid`` and return its 81-digit solution in square order.

    See :func:`solve_board` for the parameters and the errors raised.
    """
    return solve_board(grid, topology, max_nodes=max_nodes, timeout=timeout).to_grid()
