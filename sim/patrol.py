from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from planners.grid import WALL, Grid
from shared.types import DELTAS, Pos, PoseState, turn_right


@dataclass
class Trajectory:
    looped: bool
    steps: int
    repeat_key: Optional[PoseState] = None
    capped: bool = False  # hit the step ceiling without a key repeat
    # filled only when walking with record=True
    visited: List[Pos] = field(default_factory=list)  # distinct cells, first-visit order
    entries: Dict[Pos, PoseState] = field(default_factory=dict)  # state before first entry


def step_ceiling(grid: Grid, factor: int = 4) -> int:
    return grid.rows * grid.cols * factor + 1


def walk(
    grid: Grid,
    start: Pos,
    heading: int,
    *,
    max_steps: Optional[int] = None,
    record: bool = False,
) -> Trajectory:
    """Move forward, turn right in place when the next cell is a wall.

    The walk ends when it would step off the grid (finite) or when a
    (position, heading) state repeats (loop). A ceiling on transitions is a
    backstop only; there are 4 * rows * cols states so a repeat always comes first.
    With `record`, also collect visited cells and the state preceding each first entry.
    """
    if not grid.in_bounds(start):
        raise ValueError(f"start {start} outside grid")
    rows, cols = grid.shape
    blocked = grid.mask(WALL).ravel().tolist()
    limit = step_ceiling(grid) if max_steps is None else max_steps

    r, c = start
    d = heading
    seen = {((r * cols + c) << 2) | d}
    visited: Dict[Pos, None] = {start: None}
    entries: Dict[Pos, PoseState] = {}
    steps = 0

    def done(looped: bool, key: Optional[PoseState] = None, capped: bool = False) -> Trajectory:
        return Trajectory(
            looped=looped,
            steps=steps,
            repeat_key=key,
            capped=capped,
            visited=list(visited),
            entries=entries,
        )

    while steps < limit:
        dr, dc = DELTAS[d]
        nr, nc = r + dr, c + dc
        if not (0 <= nr < rows and 0 <= nc < cols):
            return done(False)
        steps += 1
        if blocked[nr * cols + nc]:
            d = turn_right(d)
        else:
            if record and (nr, nc) not in visited:
                visited[(nr, nc)] = None
                entries[(nr, nc)] = PoseState((r, c), d)
            r, c = nr, nc
        key = ((r * cols + c) << 2) | d
        if key in seen:
            return done(True, PoseState((r, c), d))
        seen.add(key)
    return done(True, capped=True)
