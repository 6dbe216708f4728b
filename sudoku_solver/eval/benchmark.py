# -*- coding: utf-8 -*-
"""
Times the solver over a batch of puzzles and reports the results.

Each puzzle is solved independently; failures (invalid grid, contradiction,
exhausted budget) are recorded as unsolved rather than raised, so one bad
line does not stop a whole corpus run.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, Optional

import pandas as pd

from ..config import SHOW_IF_SECONDS
from ..errors import PuzzleError
from ..grid.topology import get_topology
from ..logging_utils import get_logger
from ..postprocess.render_result import display
from ..types import TimedResult, Topology

logger = get_logger()

COLUMNS = ["grid", "seconds", "solved", "solution", "error"]


def time_solve(grid: str, topo: Optional[Topology] = None) -> TimedResult:
    """Solve one grid and measure how long it took."""
    from .. import solve

    start = time.perf_counter()
    try:
        solution = solve(grid, topology=topo)
    except PuzzleError as e:
        seconds = time.perf_counter() - start
        return TimedResult(grid=grid, seconds=seconds, solved=False, error=type(e).__name__)
    seconds = time.perf_counter() - start
    return TimedResult(grid=grid, seconds=seconds, solved=True, solution=solution)


def _show(result: TimedResult) -> None:
    try:
        puzzle_lines = display(result.grid)
    except PuzzleError:
        puzzle_lines = [result.grid]
    for line in puzzle_lines:
        logger.info(line)
    logger.info("")
    if result.solution is not None:
        for line in display(result.solution):
            logger.info(line)
        logger.info("")
    logger.info("%.3f seconds", result.seconds)


def solve_all(
    grids: Iterable[str],
    name: str = "",
    showif: Optional[float] = SHOW_IF_SECONDS,
    topo: Optional[Topology] = None,
) -> pd.DataFrame:
    """
    Attempt to solve a sequence of grids and report the results.

    Parameters
    ----------
    grids : iterable of str
        Puzzles to solve.
    name : str
        Label used in the summary line ("easy", "hard", ...).
    showif : float or None
        When a number of seconds, puzzles that take longer are displayed.
        When None, no puzzles are displayed.
    topo : Topology, optional
        Defaults to the shared topology.

    Returns
    -------
    pandas.DataFrame
        One row per puzzle with columns grid, seconds, solved, solution, error.
    """
    if topo is None:
        topo = get_topology()

    rows = []
    for grid in grids:
        result = time_solve(grid, topo)
        if showif is not None and result.seconds > showif:
            _show(result)
        rows.append(result.as_row())

    frame = pd.DataFrame(rows, columns=COLUMNS)
    summarize(frame, name)
    return frame


def summarize(frame: pd.DataFrame, name: str = "") -> Dict[str, float]:
    """
    Aggregate a solve_all() frame.

    The summary line is logged only when more than one puzzle was timed.

    Returns
    -------
    dict
        count, solved, avg (seconds), hz (puzzles per second), max (seconds).
    """
    count = int(len(frame))
    total = float(frame["seconds"].sum()) if count else 0.0
    stats = {
        "count": count,
        "solved": int(frame["solved"].sum()) if count else 0,
        "avg": total / count if count else 0.0,
        "hz": count / total if total > 0 else 0.0,
        "max": float(frame["seconds"].max()) if count else 0.0,
    }

    if count > 1:
        logger.info(
            "Solved %d of %d %s puzzles (avg %.3f secs (%.0f Hz), max %.3f secs).",
            stats["solved"], stats["count"], name,
            stats["avg"], stats["hz"], stats["max"],
        )

    return stats
