from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from shared.errors import FormatError, NotFound
from shared.types import DELTAS, Pos

WALL = "#"
OPEN = "."
START = "S"
END = "E"


class Grid:
    """Rectangular grid of single-character labels backed by a numpy array.

    Treat as immutable. The only sanctioned writes are `scoped_cell` (reverted on
    exit) and `set_cell` (permanent, for monotonic corruption such as falling bytes).
    """

    def __init__(self, cells: np.ndarray) -> None:
        if cells.ndim != 2:
            raise ValueError("grid cells must be a 2D array")
        self.cells = cells

    @classmethod
    def load(cls, lines: Iterable[str]) -> "Grid":
        rows = [line.rstrip("\r\n").rstrip() for line in lines]
        rows = [r for r in rows if r]
        if not rows:
            raise FormatError("Empty grid")
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise FormatError(f"Row {i} has length {len(r)}, expected {width}")
        return cls(np.array([list(r) for r in rows], dtype="<U1"))

    @classmethod
    def blank(cls, rows: int, cols: int, fill: str = OPEN) -> "Grid":
        if rows <= 0 or cols <= 0:
            raise ValueError("grid dimensions must be positive")
        return cls(np.full((rows, cols), fill, dtype="<U1"))

    # -------------------- shape & lookup --------------------

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape  # type: ignore[return-value]

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def cols(self) -> int:
        return self.cells.shape[1]

    def in_bounds(self, pos: Pos) -> bool:
        r, c = pos
        return 0 <= r < self.cells.shape[0] and 0 <= c < self.cells.shape[1]

    def at(self, pos: Pos) -> str:
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} outside {self.rows}x{self.cols} grid")
        return str(self.cells[pos])

    def passable(self, pos: Pos) -> bool:
        return self.in_bounds(pos) and self.cells[pos] != WALL

    def neighbors4(self, pos: Pos) -> Iterator[Pos]:
        r, c = pos
        for dr, dc in DELTAS:
            n = (r + dr, c + dc)
            if self.passable(n):
                yield n

    def mask(self, label: str) -> np.ndarray:
        return self.cells == label

    def find_all(self, label: str) -> List[Pos]:
        return [(int(r), int(c)) for r, c in np.argwhere(self.cells == label)]

    def find(self, label: str) -> Pos:
        hits = self.find_all(label)
        if not hits:
            raise NotFound(f"Tile '{label}' not found")
        if len(hits) > 1:
            raise FormatError(f"Tile '{label}' appears {len(hits)} times, expected once")
        return hits[0]

    def find_any(self, labels: Iterable[str]) -> Tuple[Pos, str]:
        """First cell in row-major order carrying one of `labels`."""
        wanted = list(labels)
        hits = np.argwhere(np.isin(self.cells, wanted))
        if len(hits) == 0:
            raise NotFound(f"None of {''.join(wanted)!r} found in grid")
        r, c = int(hits[0][0]), int(hits[0][1])
        return (r, c), str(self.cells[r, c])

    # -------------------- mutation --------------------

    def copy(self) -> "Grid":
        return Grid(self.cells.copy())

    def with_cell(self, pos: Pos, label: str) -> "Grid":
        g = self.copy()
        g.set_cell(pos, label)
        return g

    def set_cell(self, pos: Pos, label: str) -> None:
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} outside {self.rows}x{self.cols} grid")
        self.cells[pos] = label

    @contextmanager
    def scoped_cell(self, pos: Pos, label: str) -> Iterator["Grid"]:
        """Temporarily relabel one cell; the old label is restored on every exit path."""
        old = self.at(pos)
        self.cells[pos] = label
        try:
            yield self
        finally:
            self.cells[pos] = old

    # -------------------- output --------------------

    def render(self, overlay: Optional[Dict[Pos, str]] = None) -> str:
        out = self.cells.copy()
        for pos, ch in (overlay or {}).items():
            out[pos] = ch
        return "\n".join("".join(row) for row in out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols})"
