import pytest

from sudoku_solver.errors import Contradiction, InvalidGrid
from sudoku_solver.grid.parser import grid_to_array, grid_values, parse_grid
from sudoku_solver.postprocess.render_result import display


def test_grid_values(topo, grid1):
    values = grid_values(grid1, topo)
    assert len(values) == 81
    assert values[topo.index_of("A3")] == "3"
    assert values[topo.index_of("A1")] == "0"


def test_grid_values_ignores_layout_characters(grid1):
    boxed = "\n".join(display(grid1))
    assert grid_values(boxed) == grid_values(grid1)


@pytest.mark.parametrize("length", [0, 80, 82])
def test_wrong_length_is_invalid(length):
    with pytest.raises(InvalidGrid):
        grid_values("." * length)


def test_easy_grid_is_solved_by_propagation(topo, grid1, solution1):
    board = parse_grid(grid1, topo)
    assert board.is_complete()
    assert board.to_grid() == solution1


def test_duplicate_givens_raise_contradiction():
    with pytest.raises(Contradiction):
        parse_grid("55" + "." * 79)


def test_grid_to_array(grid1):
    arr = grid_to_array(grid1)
    assert arr.shape == (9, 9)
    assert arr[0, 2] == 3
    assert arr[0, 0] == 0
    assert arr[8].tolist() == [0, 0, 5, 0, 1, 0, 3, 0, 0]
