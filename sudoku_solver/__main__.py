# -*- coding: utf-8 -*-
"""
Command line interface.

    python -m sudoku_solver solve "003020600900305001..."
    python -m sudoku_solver bench data/examples.txt
    python -m sudoku_solver random --count 99 --seed 1
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from . import solve
from .config import DEFAULT_MIN_GIVENS, DEFAULT_PUZZLE_PATH, RANDOM_BATCH_SIZE, SHOW_IF_SECONDS
from .corpus.loader import load_puzzles
from .csp.generator import random_puzzle
from .errors import PuzzleError
from .eval.benchmark import solve_all
from .grid.topology import check_topology, get_topology
from .logging_utils import get_logger
from .postprocess.render_result import display

logger = get_logger()


def cmd_solve(args: argparse.Namespace) -> int:
    try:
        solution = solve(args.grid, timeout=args.timeout)
    except PuzzleError as e:
        logger.error("%s", e)
        return 1
    print("\n".join(display(solution)))
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    topo = get_topology()
    check_topology(topo)
    for path in args.files:
        solve_all(load_puzzles(path), Path(path).stem, showif=args.showif, topo=topo)
    return 0


def cmd_random(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    grids = [random_puzzle(args.min_givens, rng=rng) for _ in range(args.count)]
    if args.print:
        print("\n".join(grids))
    if args.no_solve:
        return 0
    solve_all(grids, "random", showif=args.showif)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku_solver", description="Constraint-propagation Sudoku solver")
    sub = ap.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="solve one grid and print it")
    p_solve.add_argument("grid", help="81 characters, 1-9 for givens, 0 or . for empties")
    p_solve.add_argument("--timeout", type=float, default=None, help="search budget in seconds")
    p_solve.set_defaults(func=cmd_solve)

    p_bench = sub.add_parser("bench", help="time the solver over puzzle files")
    p_bench.add_argument("files", nargs="*", default=[DEFAULT_PUZZLE_PATH], help="one grid per line")
    p_bench.add_argument("--showif", type=float, default=SHOW_IF_SECONDS,
                         help="display puzzles slower than this many seconds")
    p_bench.set_defaults(func=cmd_bench)

    p_random = sub.add_parser("random", help="generate random puzzles and time solving them")
    p_random.add_argument("--count", type=int, default=RANDOM_BATCH_SIZE)
    p_random.add_argument("--min-givens", type=int, default=DEFAULT_MIN_GIVENS)
    p_random.add_argument("--seed", type=int, default=None)
    p_random.add_argument("--print", action="store_true", help="print the generated grids")
    p_random.add_argument("--no-solve", action="store_true", help="only generate, do not time solving")
    p_random.add_argument("--showif", type=float, default=SHOW_IF_SECONDS)
    p_random.set_defaults(func=cmd_random)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
