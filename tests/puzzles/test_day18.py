import pytest

from puzzles.day18.solution import RamRun, main
from shared.errors import FormatError

BYTES = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0""".splitlines()


def test_empty_grid_is_straight_manhattan():
    ram = RamRun.from_lines(BYTES, grid_size=7)
    assert ram.shortest_path_after(0) == 12


def test_example_after_twelve_bytes():
    ram = RamRun.from_lines(BYTES, grid_size=7)
    assert ram.shortest_path_after(12) == 22
    g = ram.grid_after(12)
    assert g.at((4, 5)) == "#"  # byte 5,4 lands on row 4, column 5


@pytest.mark.parametrize("strategy", ["bisect", "linear"])
def test_first_blocking_byte(strategy):
    ram = RamRun.from_lines(BYTES, grid_size=7)
    assert ram.first_blocking_byte(strategy) == (20, (6, 1))


@pytest.mark.parametrize("strategy", ["bisect", "linear"])
def test_wall_across_the_middle(strategy):
    wall = [f"3,{y}" for y in (6, 0, 5, 1, 4, 2, 3)]
    ram = RamRun.from_lines(wall, grid_size=7)
    assert ram.shortest_path_after(6) == 12  # one gap left at y=3
    assert ram.shortest_path_after(7) is None
    assert ram.first_blocking_byte(strategy) == (6, (3, 3))


def test_never_blocked():
    ram = RamRun.from_lines(["1,1", "2,2"], grid_size=7)
    assert ram.first_blocking_byte() is None
    with pytest.raises(ValueError):
        ram.first_blocking_byte("random")


def test_bad_input():
    with pytest.raises(FormatError):
        RamRun.from_lines(["7,0"], grid_size=7)
    with pytest.raises(FormatError):
        RamRun.from_lines(["1;2"], grid_size=7)


def test_cli(tmp_path, capsys):
    src = tmp_path / "bytes.txt"
    src.write_text("\n".join(BYTES) + "\n")
    assert main([str(src), "--grid-size", "7", "--bytes", "12"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Shortest Path (Full): 22 steps",
        "First Blocking Byte: 6,1",
    ]


def test_cli_format_error(tmp_path, capsys):
    src = tmp_path / "bytes.txt"
    src.write_text("1,2\nnope\n")
    assert main([str(src), "--grid-size", "7"]) == 1
    assert capsys.readouterr().out.startswith("Error: Invalid input format")


@pytest.mark.parametrize("size", ["0", "-3"])
def test_cli_rejects_non_positive_grid_size(tmp_path, capsys, size):
    src = tmp_path / "bytes.txt"
    src.write_text("1,2\n")
    assert main([str(src), "--grid-size", size]) == 1
    assert capsys.readouterr().out == f"Error: Invalid grid size: {size}\n"


def test_cli_unknown_config_key(tmp_path, capsys):
    src = tmp_path / "bytes.txt"
    src.write_text("\n".join(BYTES) + "\n")
    cfg = tmp_path / "c.yaml"
    cfg.write_text("day18:\n  grid_sise: 7\n")
    assert main([str(src), "--config", str(cfg)]) == 1
    assert capsys.readouterr().out == "Error: unknown keys in [day18]: grid_sise\n"
