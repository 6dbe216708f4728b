# -*- coding: utf-8 -*-
"""
Reads puzzle collections from text files.

Format:
- one puzzle per line, 81 significant characters (see the grid parser)
- blank lines are skipped
- lines starting with ``#`` are comments

Grids are returned as written; validation happens when they are solved.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..logging_utils import get_logger

logger = get_logger()


def load_puzzles(path: str | Path) -> List[str]:
    """
    Read newline-delimited grids from ``path``.

    Parameters
    ----------
    path : str or Path
        Text file with one puzzle per line.

    Returns
    -------
    list of str
        The puzzle lines, stripped of surrounding whitespace.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle file not found: {p}")

    grids = []
    for line in p.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        grids.append(line)

    logger.debug("Loaded %d puzzles from %s", len(grids), p)
    return grids
