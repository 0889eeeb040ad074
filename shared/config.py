from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Type, TypeVar

import yaml

from shared.errors import FormatError

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO_ROOT / "configs" / "puzzles.yaml"

T = TypeVar("T")


@dataclass
class PatrolCfg:
    max_steps_factor: int = 4  # ceiling = rows * cols * factor + 1
    workers: int = 1


@dataclass
class MazeCfg:
    move_cost: int = 1
    turn_cost: int = 1000
    use_heuristic: bool = True


@dataclass
class RamRunCfg:
    grid_size: int = 71
    byte_count: int = 1024
    strategy: str = "bisect"  # bisect | linear


@dataclass
class RaceCfg:
    min_saving: int = 100
    cheat_radius: int = 2
    extended_cheat_radius: int = 20


def load_yaml(path: str | Path) -> dict:
    with open(path, "r") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise FormatError(f"Invalid config file {path}: {e}") from e


def _coerce(default: Any, value: Any, where: str) -> Any:
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise FormatError(f"{where}: expected true/false, got {value!r}")
    try:
        return type(default)(value)
    except (TypeError, ValueError) as e:
        raise FormatError(f"{where}: cannot use {value!r} as {type(default).__name__}") from e


def load_section(path: str | Path | None, section: str, cls: Type[T]) -> T:
    """Build `cls` from one top-level YAML section; missing file/section -> defaults.

    Bad keys or values raise FormatError so the CLIs report them like input errors.
    """
    if path is None or not os.path.exists(path):
        return cls()
    raw = load_yaml(path).get(section) or {}
    if not isinstance(raw, dict):
        raise FormatError(f"[{section}] must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise FormatError(f"unknown keys in [{section}]: {', '.join(unknown)}")
    defaults = cls()
    # coerce to the default's type so "71" and 71 behave the same
    kwargs = {name: _coerce(getattr(defaults, name), v, f"[{section}] {name}") for name, v in raw.items()}
    return cls(**kwargs)
