import time

import pytest

from sudoku_solver.csp.domains import BIT, Board, mask_of
from sudoku_solver.csp.search import SearchContext, choose_next_cell, search
from sudoku_solver.errors import SearchLimitReached
from sudoku_solver.eval.verification import solved
from sudoku_solver.grid.parser import parse_grid


def board_from(grid):
    return Board([BIT[int(ch)] for ch in grid])


def test_search_solves_hard_grid_without_touching_input(topo, grid2):
    board = parse_grid(grid2, topo)
    before = list(board.masks)
    result = search(board, topo)
    assert result is not None
    assert solved(result, topo)
    assert board.masks == before


def test_choose_next_cell_prefers_fewest_candidates():
    board = Board.full()
    board.masks[10] = mask_of([1, 2, 3])
    board.masks[40] = mask_of([2, 3])
    assert choose_next_cell(board) == 40


def test_choose_next_cell_returns_minimum_count_on_ties():
    board = Board.full()
    board.masks[5] = mask_of([1, 2])
    board.masks[60] = mask_of([4, 9])
    assert board.count(choose_next_cell(board)) == 2


def test_complete_board_is_returned_as_is(topo, solution1):
    board = board_from(solution1)
    assert choose_next_cell(board) is None
    assert search(board, topo) is board


def test_search_returns_none_when_every_branch_fails(topo, solution1):
    board = board_from(solution1)
    for cell in (0, 1, 2):
        board.masks[cell] = mask_of([1, 2])
    assert search(board, topo) is None


def test_node_budget(topo):
    ctx = SearchContext(max_nodes=0)
    with pytest.raises(SearchLimitReached):
        search(Board.full(), topo, ctx)


def test_deadline(topo):
    ctx = SearchContext(deadline=time.monotonic() - 1.0)
    with pytest.raises(SearchLimitReached):
        search(Board.full(), topo, ctx)


def test_nodes_are_counted(topo):
    ctx = SearchContext.with_timeout(timeout=None, max_nodes=None)
    result = search(Board.full(), topo, ctx)
    assert result is not None
    assert ctx.nodes_visited >= 1
