# -*- coding: utf-8 -*-
"""
Builds the fixed structure of the board: squares, units and peers.

The topology depends only on the digit alphabet and the row labels, so it is
computed once per process and shared by every solve. All containers are
tuples; nothing in a Topology is ever mutated after construction.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Sequence

import numpy as np

from ..config import DIGITS, ROWS
from ..types import CellId, Topology, Unit


def cross(rows: Sequence[str], cols: Sequence[str]) -> List[str]:
    """Cross product of row labels and column labels as square names."""
    return [r + c for r in rows for c in cols]


def _as_unit(cells: np.ndarray) -> Unit:
    return tuple(int(c) for c in cells.ravel())


def build_topology(rows: str = ROWS, cols: str = DIGITS) -> Topology:
    """
    Compute squares, unitlist, units and peers for a 9x9 board.

    Parameters
    ----------
    rows : str
        Row labels, top to bottom.
    cols : str
        Column labels, left to right. These are also the digits.

    Returns
    -------
    Topology
        81 squares, 27 units, 3 units and 20 peers per square.
    """
    n_rows, n_cols = len(rows), len(cols)
    index = np.arange(n_rows * n_cols).reshape(n_rows, n_cols)

    names = tuple(cross(rows, cols))
    squares = tuple(range(index.size))

    # 9 columns, 9 rows, 9 boxes (in this order)
    unitlist: List[Unit] = []
    unitlist.extend(_as_unit(index[:, c]) for c in range(n_cols))
    unitlist.extend(_as_unit(index[r, :]) for r in range(n_rows))
    for r0 in range(0, n_rows, 3):
        for c0 in range(0, n_cols, 3):
            unitlist.append(_as_unit(index[r0:r0 + 3, c0:c0 + 3]))

    units = tuple(
        tuple(u for u in unitlist if s in u)
        for s in squares
    )

    peers = tuple(
        tuple(sorted({p for u in units[s] for p in u} - {s}))
        for s in squares
    )

    return Topology(
        squares=squares,
        names=names,
        unitlist=tuple(unitlist),
        units=units,
        peers=peers,
    )


@lru_cache(maxsize=1)
def get_topology() -> Topology:
    """Return the process-wide topology, building it on first use."""
    return build_topology()


def square_name(cell: CellId) -> str:
    """Name ("A1" .. "I9") of a CellId."""
    return get_topology().names[cell]


def square_index(name: str) -> CellId:
    """CellId of a square name such as ``"C2"``."""
    return get_topology().index_of(name)


def check_topology(topo: Topology) -> None:
    """
    Assert the structural invariants of a topology.

    Checks the counts (81 squares, 27 units, 3 units and 20 peers per square)
    and the exact units and peers of square C2.

    Raises
    ------
    AssertionError
        If any invariant does not hold.
    """
    assert len(topo.squares) == 81
    assert len(topo.unitlist) == 27
    assert all(len(topo.units[s]) == 3 for s in topo.squares)
    assert all(len(topo.peers[s]) == 20 for s in topo.squares)

    c2 = topo.index_of("C2")
    expected_units = [
        cross(ROWS, "2"),
        cross("C", DIGITS),
        cross("ABC", "123"),
    ]
    got_units = [[topo.names[s] for s in u] for u in topo.units[c2]]
    assert got_units == expected_units, got_units

    expected_peers = sorted(
        ["A2", "B2", "D2", "E2", "F2", "G2", "H2", "I2",
         "C1", "C3", "C4", "C5", "C6", "C7", "C8", "C9",
         "A1", "A3", "B1", "B3"]
    )
    assert [topo.names[s] for s in topo.peers[c2]] == expected_peers
