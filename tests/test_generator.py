import random

import pytest

from sudoku_solver.csp.generator import random_puzzle


def test_random_puzzle_properties(topo):
    rng = random.Random(42)
    for _ in range(5):
        puzzle = random_puzzle(17, topo, rng)
        givens = [ch for ch in puzzle if ch != "."]
        assert len(puzzle) == 81
        assert set(puzzle) <= set("123456789.")
        assert len(givens) >= 17
        assert len(set(givens)) >= 8


def test_more_givens_requested():
    puzzle = random_puzzle(30, rng=random.Random(5))
    assert sum(ch != "." for ch in puzzle) >= 30


def test_seeded_generation_is_reproducible():
    assert random_puzzle(rng=random.Random(7)) == random_puzzle(rng=random.Random(7))


@pytest.mark.parametrize("n", [0, 82])
def test_out_of_range_n(n):
    with pytest.raises(ValueError):
        random_puzzle(n)
