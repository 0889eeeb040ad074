#!/usr/bin/env python3
"""Day 20: Race Condition - count wall-clipping cheats that shorten the race."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple

import numpy as np

from planners.bfs import INF, distance_map
from planners.grid import END, START, Grid
from puzzles.cli import note, puzzle_parser, report
from shared.config import RaceCfg, load_section
from shared.io import read_lines


def _offsets(radius: int) -> Iterator[Tuple[int, int, int]]:
    """(dr, dc, manhattan length) for every offset of length 2..radius.

    A single move cannot pass through a wall, so length 1 is never a cheat.
    """
    for dr in range(-radius, radius + 1):
        span = radius - abs(dr)
        for dc in range(-span, span + 1):
            k = abs(dr) + abs(dc)
            if k >= 2:
                yield dr, dc, k


def _shift(n: int, d: int) -> Tuple[slice, slice]:
    # index ranges for cells i and i + d that both fall inside [0, n); needs |d| < n
    return slice(max(0, -d), n - max(0, d)), slice(max(0, d), n - max(0, -d))


class RaceCondition:
    """A cheat goes from track cell a to track cell b ignoring walls for at most
    `radius` moves. It is identified by the ordered pair (a, b) and saves
    normal - (dist_from_start[a] + |a - b| + dist_to_end[b]).
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.start = grid.find(START)
        self.end = grid.find(END)
        self.from_start = distance_map(grid, self.start)
        self.to_end = distance_map(grid, self.end)
        d = int(self.from_start[self.end])
        self.normal: Optional[int] = None if d == INF else d

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "RaceCondition":
        return cls(Grid.load(lines))

    @classmethod
    def from_file(cls, path: str | Path) -> "RaceCondition":
        return cls.from_lines(read_lines(path))

    def _savings(self, radius: int) -> Iterator[np.ndarray]:
        if radius < 0:
            raise ValueError("radius must be non-negative")
        if self.normal is None:
            return
        rows, cols = self.grid.shape
        for dr, dc, k in _offsets(radius):
            if abs(dr) >= rows or abs(dc) >= cols:
                continue  # lands outside the grid from every cell
            ra, rb = _shift(rows, dr)
            ca, cb = _shift(cols, dc)
            a = self.from_start[ra, ca]
            b = self.to_end[rb, cb]
            ok = (a != INF) & (b != INF)
            yield self.normal - (a[ok] + k + b[ok])

    def count_cheats(self, radius: int, min_saving: int) -> int:
        return sum(int(np.count_nonzero(s >= min_saving)) for s in self._savings(radius))

    def savings_histogram(self, radius: int) -> Dict[int, int]:
        """saving -> number of distinct cheats, positive savings only."""
        hist: Counter = Counter()
        for s in self._savings(radius):
            vals, counts = np.unique(s[s > 0], return_counts=True)
            hist.update(dict(zip(vals.tolist(), counts.tolist())))
        return dict(sorted(hist.items()))


def main(argv: list[str] | None = None) -> int:
    ap = puzzle_parser("Day 20: Race Condition", __file__)
    ap.add_argument("--min-saving", type=int, default=None)
    args = ap.parse_args(argv)

    def solve():
        cfg = load_section(args.config, "day20", RaceCfg)
        threshold = args.min_saving if args.min_saving is not None else cfg.min_saving
        race = RaceCondition.from_file(args.input)
        note("day20", f"normal race takes {race.normal} picoseconds", args.verbose)
        return [
            (f"Part 1 - Cheats saving >={threshold} time units", race.count_cheats(cfg.cheat_radius, threshold)),
            (
                f"Part 2 - Extended cheats saving >={threshold} time units",
                race.count_cheats(cfg.extended_cheat_radius, threshold),
            ),
        ]

    return report(solve)


if __name__ == "__main__":
    raise SystemExit(main())
