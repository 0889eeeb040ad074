import pytest

from shared.config import DEFAULT_CONFIG, MazeCfg, RamRunCfg, RaceCfg, load_section
from shared.errors import FileNotAccessible, FormatError
from shared.io import parse_int_pairs, read_lines


def test_repo_config_matches_puzzle_defaults():
    assert DEFAULT_CONFIG.exists()
    assert load_section(DEFAULT_CONFIG, "day18", RamRunCfg) == RamRunCfg()
    assert load_section(DEFAULT_CONFIG, "day20", RaceCfg) == RaceCfg()


def test_missing_file_or_section_gives_defaults(tmp_path):
    assert load_section(tmp_path / "nope.yaml", "day16", MazeCfg) == MazeCfg()
    cfg = tmp_path / "c.yaml"
    cfg.write_text("day18:\n  grid_size: 7\n")
    assert load_section(cfg, "day16", MazeCfg) == MazeCfg()


def test_section_overrides_and_coerces(tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("day18:\n  grid_size: '7'\n  byte_count: 12\n")
    ram = load_section(cfg, "day18", RamRunCfg)
    assert ram.grid_size == 7 and ram.byte_count == 12 and ram.strategy == "bisect"


def test_unknown_key_rejected(tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("day16:\n  turn_costs: 5\n")
    with pytest.raises(FormatError, match="turn_costs"):
        load_section(cfg, "day16", MazeCfg)


@pytest.mark.parametrize("raw,expected", [("false", False), ("'false'", False), ("'True'", True), ("true", True)])
def test_boolean_values(tmp_path, raw, expected):
    cfg = tmp_path / "c.yaml"
    cfg.write_text(f"day16:\n  use_heuristic: {raw}\n")
    assert load_section(cfg, "day16", MazeCfg).use_heuristic is expected


def test_bad_values_are_format_errors(tmp_path):
    cfg = tmp_path / "c.yaml"
    cfg.write_text("day16:\n  use_heuristic: 'maybe'\n")
    with pytest.raises(FormatError):
        load_section(cfg, "day16", MazeCfg)
    cfg.write_text("day18:\n  grid_size: seven\n")
    with pytest.raises(FormatError):
        load_section(cfg, "day18", RamRunCfg)
    cfg.write_text("day18: [1, 2\n")
    with pytest.raises(FormatError, match="Invalid config file"):
        load_section(cfg, "day18", RamRunCfg)


def test_read_lines(tmp_path):
    p = tmp_path / "in.txt"
    p.write_text("ab  \n\n cd\n")
    assert read_lines(p) == ["ab", " cd"]
    with pytest.raises(FileNotAccessible):
        read_lines(tmp_path / "missing.txt")
    with pytest.raises(FileNotAccessible):
        read_lines(tmp_path)  # a directory is not an input file


def test_parse_int_pairs():
    assert parse_int_pairs(["1,2", " 3,4 "]) == [(1, 2), (3, 4)]
    with pytest.raises(FormatError):
        parse_int_pairs(["1,2,3"])
    with pytest.raises(FormatError):
        parse_int_pairs(["a,2"])
