#!/usr/bin/env python3
"""Day 12: Garden Groups - region area, perimeter and side counts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

import numpy as np

from planners.grid import Grid
from puzzles.cli import note, puzzle_parser, report
from shared.io import read_lines
from shared.types import DELTAS, Pos

# (first, second) orthogonal neighbours around each corner of a cell, clockwise
CORNERS = tuple((DELTAS[i], DELTAS[(i + 1) & 3]) for i in range(4))


@dataclass
class Region:
    label: str
    cells: List[Pos]
    perimeter: int
    sides: int

    @property
    def area(self) -> int:
        return len(self.cells)


class GardenRegions:
    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._regions: List[Region] | None = None

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "GardenRegions":
        return cls(Grid.load(lines))

    @classmethod
    def from_file(cls, path: str | Path) -> "GardenRegions":
        return cls.from_lines(read_lines(path))

    def _same(self, label: str, r: int, c: int) -> bool:
        return self.grid.in_bounds((r, c)) and self.grid.cells[r, c] == label

    def _measure(self, start: Pos, seen: np.ndarray) -> Region:
        label = self.grid.at(start)
        cells: List[Pos] = []
        perimeter = 0
        sides = 0
        work = [start]
        seen[start] = True
        while work:
            r, c = work.pop()
            cells.append((r, c))
            for dr, dc in DELTAS:
                nr, nc = r + dr, c + dc
                if not self._same(label, nr, nc):
                    perimeter += 1
                elif not seen[nr, nc]:
                    seen[nr, nc] = True
                    work.append((nr, nc))
            # a polygon has as many sides as corners
            for (ar, ac), (br, bc) in CORNERS:
                a = self._same(label, r + ar, c + ac)
                b = self._same(label, r + br, c + bc)
                diag = self._same(label, r + ar + br, c + ac + bc)
                if (not a and not b) or (a and b and not diag):
                    sides += 1
        return Region(label, cells, perimeter, sides)

    def regions(self) -> List[Region]:
        if self._regions is None:
            seen = np.zeros(self.grid.shape, dtype=bool)
            out = []
            for r in range(self.grid.rows):
                for c in range(self.grid.cols):
                    if not seen[r, c]:
                        out.append(self._measure((r, c), seen))
            self._regions = out
        return self._regions

    def fence_cost(self) -> int:
        return sum(reg.area * reg.perimeter for reg in self.regions())

    def bulk_fence_cost(self) -> int:
        return sum(reg.area * reg.sides for reg in self.regions())


def main(argv: list[str] | None = None) -> int:
    ap = puzzle_parser("Day 12: Garden Groups", __file__)
    args = ap.parse_args(argv)

    def solve():
        garden = GardenRegions.from_file(args.input)
        note("day12", f"{len(garden.regions())} regions", args.verbose)
        return [
            ("Total Fence Cost (Perimeter-based)", garden.fence_cost()),
            ("Bulk Discount Fence Cost (Distinct Sides)", garden.bulk_fence_cost()),
        ]

    return report(solve)


if __name__ == "__main__":
    raise SystemExit(main())
