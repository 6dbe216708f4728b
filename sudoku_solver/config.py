# -*- coding: utf-8 -*-
"""
Settings shared across the whole sudoku_solver package.

Editing this module changes, for the whole package:
- the digit alphabet and row labels the board topology is built from
- how many givens the random generator aims for
- optional search budgets (node count / wall clock)
- display and benchmark reporting knobs
"""

from __future__ import annotations

from typing import Optional

# ==== Board alphabet =======================================================

# Column labels double as the digit alphabet (1..9).
DIGITS: str = "123456789"

# Row labels (A..I). Square names are row letter + column digit, e.g. "C2".
ROWS: str = "ABCDEFGHI"

# Characters that mark an empty square in grid text.
BLANKS: str = "0."

# Character used for empty squares when a grid string is produced.
BLANK_OUTPUT: str = "."

# ==== Random puzzle generator ==============================================

# Minimum number of givens; 17 is the smallest count with a unique solution.
DEFAULT_MIN_GIVENS: int = 17

# A generated puzzle must use at least this many distinct digits.
MIN_DISTINCT_DIGITS: int = 8

# Number of random puzzles the "random" command solves by default.
RANDOM_BATCH_SIZE: int = 99

# ==== Search ===============================================================

# Upper bound on search nodes. None means unbounded.
MAX_SEARCH_NODES: Optional[int] = None

# Wall-clock budget for one search, in seconds. None means unbounded.
SEARCH_TIMEOUT_SECONDS: Optional[float] = None

# Progress is logged (DEBUG) every this many search nodes.
SEARCH_LOG_INTERVAL: int = 1000

# ==== Display / benchmark ==================================================

# Width of one cell in display(); the digit is centred in it.
DISPLAY_CELL_WIDTH: int = 2

# solve_all() shows puzzles that take longer than this many seconds.
SHOW_IF_SECONDS: Optional[float] = 0.5

# Sample corpus shipped with the repository.
DEFAULT_PUZZLE_PATH: str = "data/examples.txt"
