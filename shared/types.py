from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

# Grid frame: (row, col), row grows downwards. Headings are indices into DELTAS.

Pos = Tuple[int, int]

NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3
DELTAS: Tuple[Pos, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

GLYPH_TO_HEADING: Dict[str, int] = {"^": NORTH, ">": EAST, "v": SOUTH, "<": WEST}


class PoseState(NamedTuple):
    """Position plus facing; hashes and compares structurally."""

    pos: Pos
    heading: int


def turn_right(heading: int) -> int:
    return (heading + 1) & 3


def step(pos: Pos, heading: int) -> Pos:
    dr, dc = DELTAS[heading]
    return pos[0] + dr, pos[1] + dc


def manhattan(a: Pos, b: Pos) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def turns_between(a: int, b: int) -> int:
    """Quarter turns needed to go from heading a to heading b (0, 1 or 2)."""
    diff = (b - a) & 3
    return 2 if diff == 2 else (0 if diff == 0 else 1)
