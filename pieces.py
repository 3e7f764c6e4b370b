# pieces.py
# -*- coding: utf-8 -*-
"""
Circular board pieces. Two kinds exist and differ only in their default
palette; everything else (hit test, highlight, drawing) is shared.
"""

import math
from dataclasses import dataclass
from typing import Optional

BROWN = "brown"
GREEN = "green"
PIECE_KINDS = (BROWN, GREEN)

# kind -> (outline, fill)
PALETTE = {
    BROWN: ("white", "brown"),
    GREEN: ("blue", "lightgreen"),
}
HIGHLIGHT_OUTLINE = "yellow"
HIGHLIGHT_FILL = "orange"

PIECE_SIZE = 20    # hit-test radius
DRAW_RADIUS = 15   # drawn radius, independent of size

_g_next_pid = 1
def _next_pid() -> int:
    global _g_next_pid
    pid = _g_next_pid
    _g_next_pid += 1
    return pid


def next_kind(kind: str) -> str:
    return GREEN if kind == BROWN else BROWN


@dataclass
class Piece:
    kind: str
    x: float
    y: float
    row: int
    col: int
    tile: int
    size: float = PIECE_SIZE
    outline_color: Optional[str] = None
    fill_color: Optional[str] = None
    highlighted: bool = False
    pid: int = 0

    def __post_init__(self):
        if self.kind not in PALETTE:
            raise ValueError(f"unknown piece kind: {self.kind!r}")
        outline, fill = PALETTE[self.kind]
        if self.outline_color is None:
            self.outline_color = outline
        if self.fill_color is None:
            self.fill_color = fill
        if not self.pid:
            self.pid = _next_pid()

    def __repr__(self):
        return f"{self.kind}#{self.pid}@{self.row},{self.col}"

    def contains(self, px: float, py: float) -> bool:
        """True when (px, py) lies within `size` of the centre, edge included."""
        return math.hypot(px - self.x, py - self.y) <= self.size

    def set_position(self, x: float, y: float):
        self.x = x
        self.y = y

    def set_grid_position(self, row: int, col: int):
        self.row = row
        self.col = col

    def adjusted_outline_color(self) -> str:
        return HIGHLIGHT_OUTLINE if self.highlighted else self.outline_color

    def adjusted_fill_color(self) -> str:
        return HIGHLIGHT_FILL if self.highlighted else self.fill_color

    def draw(self, canvas):
        canvas.create_oval(
            self.x - DRAW_RADIUS,
            self.y - DRAW_RADIUS,
            self.x + DRAW_RADIUS,
            self.y + DRAW_RADIUS,
            fill=self.adjusted_fill_color(),
            outline=self.adjusted_outline_color(),
            tags=("piece", f"pid{self.pid}"),
        )
