import pytest

from sudoku_solver.corpus.loader import load_puzzles


def test_load_skips_blank_and_comment_lines(tmp_path, grid1, grid2):
    path = tmp_path / "puzzles.txt"
    path.write_text(f"# header\n{grid1}\n\n  {grid2}  \n", encoding="utf-8")
    assert load_puzzles(path) == [grid1, grid2]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(tmp_path / "nope.txt")


def test_sample_corpus(data_dir, grid1, grid2):
    assert load_puzzles(data_dir / "examples.txt") == [grid1, grid2]
