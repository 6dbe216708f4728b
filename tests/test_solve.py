import pytest

import sudoku_solver
from sudoku_solver import solve, solve_board
from sudoku_solver.csp.domains import BIT, Board
from sudoku_solver.errors import Contradiction, InvalidGrid, PuzzleError, SearchLimitReached, Unsolved
from sudoku_solver.eval.verification import solved
from sudoku_solver.grid.parser import parse_grid
from sudoku_solver.grid.topology import build_topology, get_topology


def test_known_solution(grid1, solution1):
    assert solve(grid1) == solution1


def test_hard_grid(grid2, topo):
    solution = solve(grid2)
    assert len(solution) == 81
    assert all(ch in "123456789" for ch in solution)
    assert all(g == "." or g == s for g, s in zip(grid2, solution))
    assert solved(parse_grid(solution, topo), topo)


def test_multiline_grid(grid1, solution1):
    text = "\n".join(grid1[i:i + 9] for i in range(0, 81, 9))
    assert solve(text) == solution1


def test_short_grid_is_invalid(grid1):
    with pytest.raises(InvalidGrid):
        solve(grid1[:80])


def test_duplicate_in_row_is_contradiction():
    with pytest.raises(Contradiction) as excinfo:
        solve("55" + "." * 79)
    assert not isinstance(excinfo.value, InvalidGrid)


def test_blank_grid_is_solvable_and_reproducible(topo):
    first = solve("." * 81)
    assert first == solve("0" * 81)
    assert solved(parse_grid(first, topo), topo)


def test_solve_board(grid2):
    board = solve_board(grid2)
    assert board.is_complete()


def test_topology_is_not_mutated(grid1, grid2):
    before = build_topology()
    solve(grid1)
    solve(grid2)
    solve("." * 81)
    assert get_topology() == before


def test_budget_is_reported():
    with pytest.raises(SearchLimitReached):
        solve("." * 81, max_nodes=0)


def test_exhausted_search_is_contradiction(monkeypatch, grid2):
    monkeypatch.setattr(sudoku_solver, "search", lambda board, topo, ctx: None)
    with pytest.raises(Contradiction):
        solve(grid2)


def test_invalid_search_result_is_unsolved(monkeypatch, grid2):
    monkeypatch.setattr(
        sudoku_solver, "search", lambda board, topo, ctx: Board([BIT[1]] * 81)
    )
    with pytest.raises(Unsolved):
        solve(grid2)


def test_error_messages():
    assert "81" in str(InvalidGrid())
    assert "unsolvable" in str(Contradiction())
    assert isinstance(Unsolved(), PuzzleError)
    assert str(PuzzleError("custom")) == "custom"
