from __future__ import annotations

from collections import deque
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

import numpy as np

from planners.grid import Grid
from shared.types import Pos

S = TypeVar("S", bound=Hashable)

INF = int(np.iinfo(np.int64).max)  # "unreached" in a DistanceMap


def bfs(
    start: S, expand: Callable[[S], Iterable[S]], goal: Optional[S] = None
) -> Tuple[Dict[S, int], Dict[S, Optional[S]]]:
    """Level-order search over any hashable state space.

    Returns (dist, parent). Stops early once `goal` is discovered.
    """
    dist: Dict[S, int] = {start: 0}
    parent: Dict[S, Optional[S]] = {start: None}
    Q = deque([start])
    while Q:
        cur = Q.popleft()
        if cur == goal:
            break
        d = dist[cur]
        for nxt in expand(cur):
            if nxt in dist:
                continue
            dist[nxt] = d + 1
            parent[nxt] = cur
            Q.append(nxt)
    return dist, parent


def distance_map(grid: Grid, source: Pos) -> np.ndarray:
    """Unit-cost distances from `source` to every cell; walls/unreached hold INF."""
    if not grid.passable(source):
        raise ValueError(f"source {source} is not a passable cell")
    dist = np.full(grid.shape, INF, dtype=np.int64)
    dist[source] = 0
    Q = deque([source])
    while Q:
        cur = Q.popleft()
        d = dist[cur] + 1
        for n in grid.neighbors4(cur):
            if dist[n] == INF:
                dist[n] = d
                Q.append(n)
    return dist


def shortest_path(grid: Grid, start: Pos, goal: Pos) -> Optional[List[Pos]]:
    """Cells from start to goal inclusive, or None when the goal is unreachable."""
    if not (grid.passable(start) and grid.passable(goal)):
        return None
    dist, parent = bfs(start, grid.neighbors4, goal)
    if goal not in dist:
        return None
    path: List[Pos] = []
    cur: Optional[Pos] = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


def shortest_path_len(grid: Grid, start: Pos, goal: Pos) -> Optional[int]:
    path = shortest_path(grid, start, goal)
    return None if path is None else len(path) - 1


def reachable_within(grid: Grid, start: Pos, bound: int) -> Dict[Pos, int]:
    """Every passable cell within `bound` steps of start, with its distance."""
    if bound < 0:
        raise ValueError("bound must be non-negative")
    if not grid.passable(start):
        return {}
    out: Dict[Pos, int] = {start: 0}
    Q = deque([start])
    while Q:
        cur = Q.popleft()
        d = out[cur]
        if d == bound:
            continue
        for n in grid.neighbors4(cur):
            if n not in out:
                out[n] = d + 1
                Q.append(n)
    return out
