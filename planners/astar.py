from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

S = TypeVar("S", bound=Hashable)

Expand = Callable[[S], Iterable[Tuple[S, int]]]


@dataclass
class SearchResult(Generic[S]):
    g: Dict[S, int] = field(default_factory=dict)
    preds: Dict[S, List[S]] = field(default_factory=dict)
    goals: List[S] = field(default_factory=list)  # goal states tied at best_cost
    best_cost: Optional[int] = None
    expanded: int = 0

    @property
    def reachable(self) -> bool:
        return self.best_cost is not None


def search(
    starts: Iterable[S],
    expand: Expand,
    is_goal: Callable[[S], bool],
    *,
    heuristic: Optional[Callable[[S], int]] = None,
    track_ties: bool = False,
) -> SearchResult[S]:
    """Cost-ordered search (Dijkstra, or A* when `heuristic` is given).

    `expand(state)` yields (next_state, step_cost) with non-negative integer costs.
    The heuristic must be consistent. Heap key is (g + h, seq): equal priorities pop
    in insertion order. With `track_ties`, every predecessor reaching a state at its
    minimal cost is kept, so all optimal paths can be recovered afterwards.
    """
    h = heuristic or (lambda _s: 0)
    res: SearchResult[S] = SearchResult()
    openq: List[Tuple[int, int, S]] = []
    closed: Set[S] = set()
    seq = 0
    for s in starts:
        if s in res.g:
            continue
        res.g[s] = 0
        res.preds[s] = []
        heapq.heappush(openq, (h(s), seq, s))
        seq += 1

    while openq:
        f, _, cur = heapq.heappop(openq)
        if cur in closed:
            continue
        if res.best_cost is not None and f > res.best_cost:
            break
        closed.add(cur)
        res.expanded += 1
        g_cur = res.g[cur]

        if is_goal(cur):
            # goals are recorded, not expanded; later ties still get collected
            if res.best_cost is None or g_cur < res.best_cost:
                res.best_cost = g_cur
                res.goals = [cur]
            elif g_cur == res.best_cost:
                res.goals.append(cur)
            continue

        for nxt, cost in expand(cur):
            tentative = g_cur + cost
            known = res.g.get(nxt)
            if known is None or tentative < known:
                res.g[nxt] = tentative
                res.preds[nxt] = [cur]
                heapq.heappush(openq, (tentative + h(nxt), seq, nxt))
                seq += 1
            elif track_ties and tentative == known and cur not in res.preds[nxt]:
                res.preds[nxt].append(cur)
    return res


def reconstruct_path(res: SearchResult[S], end: S) -> List[S]:
    """One optimal path to `end`, following first predecessors."""
    if end not in res.g:
        raise KeyError(f"{end!r} was never reached")
    path = [end]
    cur = end
    while res.preds.get(cur):
        cur = res.preds[cur][0]
        path.append(cur)
    path.reverse()
    return path


def optimal_states(res: SearchResult[S]) -> Set[S]:
    """Union of states lying on any cost-minimal path to a tied goal state."""
    seen: Set[S] = set()
    stack = list(res.goals)
    while stack:
        cur = stack.pop()
        if cur in seen:
            continue
        seen.add(cur)
        stack.extend(p for p in res.preds.get(cur, ()) if p not in seen)
    return seen
