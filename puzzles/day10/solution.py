#!/usr/bin/env python3
"""Day 10: Hoof It - trailhead scores and ratings on a height map."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np

from planners.grid import Grid
from puzzles.cli import note, puzzle_parser, report
from shared.io import read_lines
from shared.types import DELTAS, Pos

MIN_HEIGHT = 0
MAX_HEIGHT = 9


class HikingTrails:
    """Trails climb exactly one unit per orthogonal step from height 0 to 9."""

    def __init__(self, grid: Grid) -> None:
        digits = np.char.isdigit(grid.cells)
        heights = np.full(grid.shape, -1, dtype=np.int64)  # non-digits never lie on a trail
        heights[digits] = grid.cells[digits].astype(np.int64)
        self.heights = heights

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "HikingTrails":
        return cls(Grid.load(lines))

    @classmethod
    def from_file(cls, path: str | Path) -> "HikingTrails":
        return cls.from_lines(read_lines(path))

    def trailheads(self) -> List[Pos]:
        return [(int(r), int(c)) for r, c in np.argwhere(self.heights == MIN_HEIGHT)]

    def climb(self, head: Pos) -> Tuple[int, int]:
        """(score, rating): distinct summits reached and distinct trails to them."""
        rows, cols = self.heights.shape
        layer: Counter = Counter({head: 1})
        for h in range(MIN_HEIGHT + 1, MAX_HEIGHT + 1):
            nxt: Counter = Counter()
            for (r, c), paths in layer.items():
                for dr, dc in DELTAS:
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < rows and 0 <= nc < cols and self.heights[nr, nc] == h:
                        nxt[(nr, nc)] += paths
            if not nxt:
                return 0, 0
            layer = nxt
        return len(layer), sum(layer.values())

    def scores(self) -> int:
        return sum(self.climb(h)[0] for h in self.trailheads())

    def ratings(self) -> int:
        return sum(self.climb(h)[1] for h in self.trailheads())


def main(argv: list[str] | None = None) -> int:
    ap = puzzle_parser("Day 10: Hoof It", __file__)
    args = ap.parse_args(argv)

    def solve():
        trails = HikingTrails.from_file(args.input)
        note("day10", f"{len(trails.trailheads())} trailheads", args.verbose)
        return [("Total Trailhead Scores", trails.scores()), ("Total Trailhead Ratings", trails.ratings())]

    return report(solve)


if __name__ == "__main__":
    raise SystemExit(main())
