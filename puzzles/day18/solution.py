#!/usr/bin/env python3
"""Day 18: RAM Run - shortest escape through a grid of falling bytes."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from planners.bfs import shortest_path_len
from planners.grid import WALL, Grid
from puzzles.cli import fmt, note, puzzle_parser, report
from shared.config import RamRunCfg, load_section
from shared.errors import FormatError
from shared.io import parse_int_pairs, read_lines

XY = Tuple[int, int]  # input order is x,y (column, row)


class RamRun:
    def __init__(self, falling: List[XY], grid_size: int = 71) -> None:
        if grid_size <= 0:
            raise ValueError("grid_size must be positive")
        for x, y in falling:
            if not (0 <= x < grid_size and 0 <= y < grid_size):
                raise FormatError(f"Invalid byte position: {x},{y}")
        self.falling = falling
        self.size = grid_size
        self.start = (0, 0)
        self.exit = (grid_size - 1, grid_size - 1)

    @classmethod
    def from_lines(cls, lines: Iterable[str], **kw) -> "RamRun":
        return cls(parse_int_pairs(lines), **kw)

    @classmethod
    def from_file(cls, path: str | Path, **kw) -> "RamRun":
        return cls.from_lines(read_lines(path), **kw)

    def grid_after(self, n: int) -> Grid:
        """Fresh grid with the first n bytes fallen (corruption is permanent)."""
        grid = Grid.blank(self.size, self.size)
        for x, y in self.falling[: max(0, n)]:
            grid.set_cell((y, x), WALL)
        return grid

    def shortest_path_after(self, n: int) -> Optional[int]:
        return shortest_path_len(self.grid_after(n), self.start, self.exit)

    def first_blocking_byte(self, strategy: str = "bisect") -> Optional[Tuple[int, XY]]:
        """(index, byte) of the first byte that cuts the exit off, or None."""
        if strategy == "linear":
            return self._first_blocking_linear()
        if strategy != "bisect":
            raise ValueError(f"unknown strategy: {strategy!r}")
        # reachability only ever goes from True to False as bytes accumulate
        if self.shortest_path_after(len(self.falling)) is not None:
            return None
        lo, hi = 0, len(self.falling)  # path exists after lo bytes, not after hi
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.shortest_path_after(mid) is None:
                hi = mid
            else:
                lo = mid
        return hi - 1, self.falling[hi - 1]

    def _first_blocking_linear(self) -> Optional[Tuple[int, XY]]:
        grid = Grid.blank(self.size, self.size)
        for i, (x, y) in enumerate(self.falling):
            grid.set_cell((y, x), WALL)
            if shortest_path_len(grid, self.start, self.exit) is None:
                return i, (x, y)
        return None


def main(argv: list[str] | None = None) -> int:
    ap = puzzle_parser("Day 18: RAM Run", __file__)
    ap.add_argument("--grid-size", type=int, default=None)
    ap.add_argument("--bytes", type=int, default=None, help="bytes fallen for the first answer")
    ap.add_argument("--strategy", choices=["bisect", "linear"], default=None)
    args = ap.parse_args(argv)

    def solve():
        cfg = load_section(args.config, "day18", RamRunCfg)
        size = args.grid_size if args.grid_size is not None else cfg.grid_size
        if size <= 0:
            raise FormatError(f"Invalid grid size: {size}")
        n = args.bytes if args.bytes is not None else cfg.byte_count
        ram = RamRun.from_file(args.input, grid_size=size)
        steps = ram.shortest_path_after(n)
        blocking = ram.first_blocking_byte(args.strategy or cfg.strategy)
        if blocking is not None:
            note("day18", f"exit cut off by byte #{blocking[0]}", args.verbose)
        return [
            ("Shortest Path (Full)", f"{steps} steps" if steps is not None else fmt(None)),
            ("First Blocking Byte", "none" if blocking is None else blocking[1]),
        ]

    return report(solve)


if __name__ == "__main__":
    raise SystemExit(main())
