from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Tuple

from shared.errors import FileNotAccessible, FormatError


def read_lines(path: str | Path) -> List[str]:
    """Non-empty lines of a text file with trailing whitespace removed."""
    p = Path(path)
    if not p.is_file() or not os.access(p, os.R_OK):
        raise FileNotAccessible(f"File not accessible: {p}")
    try:
        text = p.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise FileNotAccessible(f"Failed to read file: {p} ({e})") from e
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def parse_int_pairs(lines: Iterable[str], sep: str = ",") -> List[Tuple[int, int]]:
    pairs: List[Tuple[int, int]] = []
    for line in lines:
        parts = line.strip().split(sep)
        if len(parts) != 2:
            raise FormatError(f"Invalid input format: {line!r}")
        try:
            pairs.append((int(parts[0]), int(parts[1])))
        except ValueError as e:
            raise FormatError(f"Invalid integer in line: {line!r}") from e
    return pairs
