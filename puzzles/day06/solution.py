#!/usr/bin/env python3
"""Day 6: Guard Gallivant - patrol coverage and loop-inducing obstacle placements."""

from __future__ import annotations

import time
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import numpy as np

from planners.grid import OPEN, WALL, Grid
from puzzles.cli import note, puzzle_parser, report
from shared.config import PatrolCfg, load_section
from shared.io import read_lines
from shared.types import GLYPH_TO_HEADING, Pos, PoseState
from sim.patrol import Trajectory, step_ceiling, walk

Trial = Tuple[Pos, PoseState]


def _count_loops(cells: np.ndarray, trials: List[Trial], max_steps: int) -> int:
    # runs in a worker process; `cells` arrives as a private copy
    grid = Grid(cells)
    loops = 0
    for pos, entry in trials:
        with grid.scoped_cell(pos, WALL):
            loops += walk(grid, entry.pos, entry.heading, max_steps=max_steps).looped
    return loops


class GuardPatrol:
    def __init__(self, grid: Grid, max_steps_factor: int = 4) -> None:
        pos, glyph = grid.find_any(GLYPH_TO_HEADING)
        self.start: Pos = pos
        self.heading: int = GLYPH_TO_HEADING[glyph]
        self.grid = grid.with_cell(pos, OPEN)
        self.max_steps = step_ceiling(self.grid, max_steps_factor)
        self._baseline: Optional[Trajectory] = None

    @classmethod
    def from_lines(cls, lines: Iterable[str], **kw) -> "GuardPatrol":
        return cls(Grid.load(lines), **kw)

    @classmethod
    def from_file(cls, path: str | Path, **kw) -> "GuardPatrol":
        return cls.from_lines(read_lines(path), **kw)

    def baseline(self) -> Trajectory:
        if self._baseline is None:
            self._baseline = walk(
                self.grid, self.start, self.heading, max_steps=self.max_steps, record=True
            )
        return self._baseline

    def patrol_path(self) -> int:
        return len(self.baseline().visited)

    def candidates(self) -> List[Pos]:
        """Open cells on the baseline route, start excluded."""
        return [p for p in self.baseline().visited if p != self.start and self.grid.at(p) == OPEN]

    def causes_loop(self, pos: Pos) -> bool:
        # the route up to the first entry into `pos` cannot see the new wall,
        # so the trial resumes from the state just before that entry
        entry = self.baseline().entries[pos]
        with self.grid.scoped_cell(pos, WALL):
            return walk(self.grid, entry.pos, entry.heading, max_steps=self.max_steps).looped

    def trap_locations(self, workers: int = 1) -> int:
        base = self.baseline()
        if base.looped:
            return 0
        cands = self.candidates()
        if workers <= 1 or len(cands) < 2:
            return sum(self.causes_loop(p) for p in cands)
        trials = [(p, base.entries[p]) for p in cands]
        chunks = [trials[i::workers] for i in range(workers)]
        with ProcessPoolExecutor(max_workers=workers) as ex:
            futs = [ex.submit(_count_loops, self.grid.cells, ch, self.max_steps) for ch in chunks]
            return sum(f.result() for f in futs)


def main(argv: list[str] | None = None) -> int:
    ap = puzzle_parser("Day 6: Guard Gallivant", __file__)
    ap.add_argument("--workers", type=int, default=None, help="processes for the trap scan")
    args = ap.parse_args(argv)

    def solve():
        cfg = load_section(args.config, "day06", PatrolCfg)
        workers = args.workers if args.workers is not None else cfg.workers
        t0 = time.perf_counter()
        patrol = GuardPatrol.from_file(args.input, max_steps_factor=cfg.max_steps_factor)
        visited = patrol.patrol_path()
        note("day06", f"baseline visited {visited} cells, looped={patrol.baseline().looped}", args.verbose)
        traps = patrol.trap_locations(workers=workers)
        note("day06", f"trap scan over {len(patrol.candidates())} cells took {time.perf_counter() - t0:.2f}s", args.verbose)
        return [("Patrol Path", visited), ("Trap Locations", traps)]

    return report(solve)


if __name__ == "__main__":
    raise SystemExit(main())
