from sudoku_solver.__main__ import main


def test_solve_command(capsys, grid1):
    assert main(["solve", grid1]) == 0
    out = capsys.readouterr().out
    assert "4 8 3 |9 2 1 |6 5 7" in out


def test_solve_command_reports_invalid_grid():
    assert main(["solve", "123"]) == 1


def test_bench_command(data_dir):
    assert main(["bench", str(data_dir / "examples.txt")]) == 0


def test_random_command(capsys):
    assert main(["random", "--count", "2", "--seed", "1", "--print", "--no-solve"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(len(line) == 81 for line in lines)
