import pytest

from planners.grid import WALL
from puzzles.day06.solution import GuardPatrol, main
from shared.errors import NotFound

EXAMPLE = [
    "....#.....",
    ".........#",
    "..........",
    "..#.......",
    ".......#..",
    "..........",
    ".#..^.....",
    "........#.",
    "#.........",
    "......#...",
]


def test_example_answers():
    patrol = GuardPatrol.from_lines(EXAMPLE)
    assert patrol.start == (6, 4)
    assert patrol.grid.at((6, 4)) == "."  # glyph replaced by open floor
    assert patrol.patrol_path() == 41
    assert patrol.trap_locations() == 6


def test_trials_leave_grid_untouched():
    patrol = GuardPatrol.from_lines(EXAMPLE)
    before = patrol.grid.copy()
    looping = [p for p in patrol.candidates() if patrol.causes_loop(p)]
    assert patrol.grid == before
    assert (7, 6) in looping  # the obstacle placement beside the starting column
    assert patrol.start not in patrol.candidates()


def test_parallel_scan_matches_serial():
    patrol = GuardPatrol.from_lines(EXAMPLE)
    assert patrol.trap_locations(workers=2) == patrol.trap_locations(workers=1)


def test_looping_baseline_has_no_traps():
    patrol = GuardPatrol.from_lines([".#..", ".^.#", "#...", "..#."])
    assert patrol.baseline().looped
    assert patrol.trap_locations() == 0


def test_missing_guard():
    with pytest.raises(NotFound):
        GuardPatrol.from_lines(["...", ".#."])


def test_cli_prints_labels(tmp_path, capsys):
    src = tmp_path / "input.txt"
    src.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(src)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Patrol Path: 41", "Trap Locations: 6"]


def test_cli_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: File not accessible")


def test_scoped_wall_is_reverted():
    patrol = GuardPatrol.from_lines(EXAMPLE)
    with patrol.grid.scoped_cell((0, 0), WALL):
        assert patrol.grid.at((0, 0)) == WALL
    assert patrol.grid.at((0, 0)) == "."
