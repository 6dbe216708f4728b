# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_solver" and "api_proto" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_solver.grid.topology import get_topology  # noqa: E402

GRID1 = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
SOLUTION1 = (
    "483921657"
    "967345821"
    "251876493"
    "548132976"
    "729564138"
    "136798245"
    "372689514"
    "814253769"
    "695417382"
)
GRID2 = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"


@pytest.fixture(scope="session")
def topo():
    return get_topology()


@pytest.fixture
def grid1():
    return GRID1


@pytest.fixture
def solution1():
    return SOLUTION1


@pytest.fixture
def grid2():
    return GRID2


@pytest.fixture
def data_dir():
    return ROOT / "data"
