from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence, Tuple

from shared.config import DEFAULT_CONFIG
from shared.errors import PuzzleError

Answer = Tuple[str, object]


def puzzle_parser(description: str, module_file: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=description)
    ap.add_argument(
        "input",
        nargs="?",
        default=str(Path(module_file).with_name("input.txt")),
        help="puzzle input (default: input.txt next to the solution)",
    )
    ap.add_argument("--config", default=str(DEFAULT_CONFIG), help="YAML tunables")
    ap.add_argument("-v", "--verbose", action="store_true", help="diagnostics on stderr")
    return ap


def note(tag: str, msg: str, verbose: bool = True) -> None:
    if verbose:
        print(f"[{tag}] {msg}", file=sys.stderr)


def fmt(value: object) -> str:
    if value is None:
        return "no path"
    if isinstance(value, tuple):
        return ",".join(str(v) for v in value)
    return str(value)


def report(solve: Callable[[], Sequence[Answer]]) -> int:
    """Run `solve` and print `<label>: <value>` lines; input errors print `Error: ...`.

    Answers are computed before anything is printed so a failure never leaves
    partial output behind.
    """
    try:
        answers = list(solve())
    except PuzzleError as e:
        print(f"Error: {e}")
        return 1
    for label, value in answers:
        print(f"{label}: {fmt(value)}")
    return 0
