import pytest

from puzzles.day20.solution import RaceCondition, main

TRACK = [
    "###############",
    "#...#...#.....#",
    "#.#.#.#.#.###.#",
    "#S#...#.#.#...#",
    "#######.#.#.###",
    "#######.#.#...#",
    "#######.#.###.#",
    "###..E#...#...#",
    "###.#######.###",
    "#...###...#...#",
    "#.#####.#.###.#",
    "#.#...#.#.#...#",
    "#.#.#.#.#.#.###",
    "#...#...#...###",
    "###############",
]

# S..E separated by one wall; (1, 4) is a dead-end spur beside E
SMALL = [
    "######",
    "#S#E.#",
    "#.#.##",
    "#...##",
    "######",
]


def test_normal_race_length():
    assert RaceCondition.from_lines(TRACK).normal == 84


def test_two_step_cheat_histogram():
    race = RaceCondition.from_lines(TRACK)
    assert race.savings_histogram(2) == {
        2: 14, 4: 14, 6: 2, 8: 4, 10: 2, 12: 3, 20: 1, 36: 1, 38: 1, 40: 1, 64: 1,
    }
    assert race.count_cheats(2, 1) == 44
    assert race.count_cheats(2, 64) == 1


def test_extended_cheats():
    race = RaceCondition.from_lines(TRACK)
    assert race.count_cheats(20, 50) == 285
    hist = race.savings_histogram(20)
    assert hist[76] == 3 and hist[74] == 4 and hist[72] == 22


def test_hand_built_track():
    race = RaceCondition.from_lines(SMALL)
    assert race.normal == 6
    assert race.savings_histogram(2) == {2: 1, 4: 1}
    assert race.count_cheats(2, 4) == 1
    assert race.count_cheats(1, 1) == 0  # a single move cannot clear a wall


def test_no_route_means_no_cheats():
    race = RaceCondition.from_lines(["#####", "#S#E#", "#####"])
    assert race.normal is None
    assert race.count_cheats(2, 1) == 0


def test_negative_radius_rejected():
    race = RaceCondition.from_lines(SMALL)
    with pytest.raises(ValueError):
        race.count_cheats(-1, 1)


def test_cli_threshold_override(tmp_path, capsys):
    src = tmp_path / "track.txt"
    src.write_text("\n".join(TRACK))
    assert main([str(src), "--min-saving", "50"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Part 2 - Extended cheats saving >=50 time units: 285"
    assert out[0] == "Part 1 - Cheats saving >=50 time units: 1"


def test_radius_larger_than_grid():
    race = RaceCondition.from_lines(SMALL)
    # no two track cells are more than 5 apart, so larger radii add nothing
    assert race.count_cheats(5, 1) == 5
    assert race.count_cheats(20, 1) == 5
    assert race.savings_histogram(20) == race.savings_histogram(5) == {2: 4, 4: 1}


def test_zero_threshold_skips_single_moves():
    race = RaceCondition.from_lines(SMALL)
    assert race.count_cheats(1, 0) == 0


def test_cli_on_grid_smaller_than_radius(tmp_path, capsys):
    src = tmp_path / "small.txt"
    src.write_text("\n".join(SMALL))
    assert main([str(src), "--min-saving", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Part 1 - Cheats saving >=1 time units: 2",
        "Part 2 - Extended cheats saving >=1 time units: 5",
    ]


def test_cli_reports_bad_config(tmp_path, capsys):
    src = tmp_path / "track.txt"
    src.write_text("\n".join(TRACK))
    cfg = tmp_path / "c.yaml"
    cfg.write_text("day20:\n  cheat_radius: [2]\n")
    assert main([str(src), "--config", str(cfg)]) == 1
    assert capsys.readouterr().out.startswith("Error: [day20] cheat_radius")
