#!/usr/bin/env python3
"""Day 16: Reindeer Maze - lowest score and tiles on any best path."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from planners.astar import SearchResult, optimal_states, search
from planners.grid import END, OPEN, START, Grid
from puzzles.cli import note, puzzle_parser, report
from shared.config import MazeCfg, load_section
from shared.io import read_lines
from shared.types import DELTAS, EAST, Pos, PoseState, manhattan, step, turns_between

BEST_TILE = "O"


class ReindeerMaze:
    """Moving one tile costs `move_cost`; each quarter turn costs `turn_cost`.

    A transition turns to a heading and moves one tile in it, so a state is
    (tile, heading it was entered with). The reindeer starts facing east.
    """

    def __init__(self, grid: Grid, move_cost: int = 1, turn_cost: int = 1000, use_heuristic: bool = True) -> None:
        if move_cost <= 0 or turn_cost < 0:
            raise ValueError("move_cost must be positive and turn_cost non-negative")
        self.grid = grid
        self.start = grid.find(START)
        self.end = grid.find(END)
        self.move_cost = move_cost
        self.turn_cost = turn_cost
        self.use_heuristic = use_heuristic
        self._result: Optional[SearchResult[PoseState]] = None

    @classmethod
    def from_lines(cls, lines: Iterable[str], **kw) -> "ReindeerMaze":
        return cls(Grid.load(lines), **kw)

    @classmethod
    def from_file(cls, path: str | Path, **kw) -> "ReindeerMaze":
        return cls.from_lines(read_lines(path), **kw)

    def _cost(self, heading: int, new_heading: int) -> int:
        return self.move_cost + self.turn_cost * turns_between(heading, new_heading)

    def _expand(self, s: PoseState) -> Iterator[Tuple[PoseState, int]]:
        for d in range(4):
            n = step(s.pos, d)
            if self.grid.passable(n):
                yield PoseState(n, d), self._cost(s.heading, d)

    def _expand_reverse(self, s: PoseState) -> Iterator[Tuple[PoseState, int]]:
        # predecessors of (p, d) sit one tile behind p, with any heading
        dr, dc = DELTAS[s.heading]
        prev = (s.pos[0] - dr, s.pos[1] - dc)
        if not self.grid.passable(prev):
            return
        for h in range(4):
            yield PoseState(prev, h), self._cost(h, s.heading)

    def _h(self, s: PoseState) -> int:
        return manhattan(s.pos, self.end) * self.move_cost

    def solve(self) -> SearchResult[PoseState]:
        if self._result is None:
            self._result = search(
                [PoseState(self.start, EAST)],
                self._expand,
                lambda s: s.pos == self.end,
                heuristic=self._h if self.use_heuristic else None,
                track_ties=True,
            )
        return self._result

    def lowest_score(self) -> Optional[int]:
        return self.solve().best_cost

    def best_tiles(self) -> Set[Pos]:
        return {s.pos for s in optimal_states(self.solve())}

    def best_path_tiles(self) -> int:
        return len(self.best_tiles())

    def tiles_within(self, tolerance: int = 0) -> Set[Pos]:
        """Tiles on any start->end route costing at most lowest score + tolerance."""
        if tolerance < 0:
            raise ValueError("tolerance must be non-negative")
        never = lambda _s: False  # noqa: E731 - exhaust both searches
        fwd = search([PoseState(self.start, EAST)], self._expand, never)
        bwd = search([PoseState(self.end, d) for d in range(4)], self._expand_reverse, never)
        best = min((fwd.g[PoseState(self.end, d)] for d in range(4) if PoseState(self.end, d) in fwd.g), default=None)
        if best is None:
            return set()
        limit = best + tolerance
        return {s.pos for s, g in fwd.g.items() if s in bwd.g and g + bwd.g[s] <= limit}

    def render_best_path(self) -> str:
        overlay = {p: BEST_TILE for p in self.best_tiles() if self.grid.at(p) == OPEN}
        return self.grid.render(overlay)


def main(argv: list[str] | None = None) -> int:
    ap = puzzle_parser("Day 16: Reindeer Maze", __file__)
    ap.add_argument("--show", action="store_true", help="print the maze with best tiles marked")
    args = ap.parse_args(argv)
    solved: List[ReindeerMaze] = []

    def solve():
        cfg = load_section(args.config, "day16", MazeCfg)
        maze = ReindeerMaze.from_file(
            args.input, move_cost=cfg.move_cost, turn_cost=cfg.turn_cost, use_heuristic=cfg.use_heuristic
        )
        solved.append(maze)
        answers = [("Lowest Score", maze.lowest_score()), ("Best Path Tiles", maze.best_path_tiles())]
        note("day16", f"expanded {maze.solve().expanded} states", args.verbose)
        return answers

    rc = report(solve)
    if rc == 0 and args.show:
        print(solved[0].render_best_path())
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
