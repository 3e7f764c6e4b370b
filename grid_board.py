# grid_board.py
# -*- coding: utf-8 -*-
"""
Grid geometry for the board: square layout, pixel -> square lookup,
per-square accessors and the occupancy check used by the controller.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

# ===== Defaults =====
TOP_X = 75
TOP_Y = 45
SQUARE_WIDTH = 40
NUM_SQUARES = 8
FILL_COLOR_1 = "lightgray"
FILL_COLOR_2 = "darkgray"


@dataclass(frozen=True)
class BoardConfig:
    top_x: float = TOP_X
    top_y: float = TOP_Y
    width: float = SQUARE_WIDTH
    num_squares: int = NUM_SQUARES
    fill_color1: str = FILL_COLOR_1
    fill_color2: str = FILL_COLOR_2


@dataclass
class Square:
    index: int
    row: int
    col: int
    x: float  # top-left
    y: float
    width: float
    fill: str

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.width / 2)

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.width

    def __repr__(self):
        return f"Square({self.index}@{self.row},{self.col})"


class Board:
    """N×N board of equal squares anchored at (top_x, top_y)."""

    def __init__(self, top_x: float, top_y: float, width: float, num_squares: int,
                 fill_color1: str = FILL_COLOR_1, fill_color2: str = FILL_COLOR_2):
        self.top_x = top_x
        self.top_y = top_y
        self.width = width
        self.num_squares = num_squares
        self.fill_color1 = fill_color1
        self.fill_color2 = fill_color2
        self.grid: List[Square] = []
        self.layout()

    @classmethod
    def from_config(cls, cfg: BoardConfig) -> "Board":
        return cls(cfg.top_x, cfg.top_y, cfg.width, cfg.num_squares,
                   cfg.fill_color1, cfg.fill_color2)

    # ---------- layout ----------
    def layout(self) -> List[Square]:
        """
        Rebuild the square list in row-major order.

        The colour counter gets one extra step at the end of each row, so
        colours alternate as row*(N+1)+col rather than row*N+col.
        """
        grid: List[Square] = []
        count = 0
        for row in range(self.num_squares):
            for col in range(self.num_squares):
                fill = self.fill_color1 if count % 2 == 0 else self.fill_color2
                grid.append(Square(
                    index=row * self.num_squares + col,
                    row=row,
                    col=col,
                    x=self.top_x + col * self.width,
                    y=self.top_y + row * self.width,
                    width=self.width,
                    fill=fill,
                ))
                count += 1
            count += 1
        self.grid = grid
        return grid

    def grid_size(self) -> int:
        return len(self.grid)

    # ---------- accessors ----------
    def square(self, index: int) -> Square:
        if not 0 <= index < len(self.grid):
            raise IndexError(f"square index out of range: {index}")
        return self.grid[index]

    def square_top_left(self, index: int) -> Tuple[float, float]:
        sq = self.square(index)
        return (sq.x, sq.y)

    def square_center(self, index: int) -> Tuple[float, float]:
        return self.square(index).center

    def row_of(self, index: int) -> int:
        return self.square(index).row

    def col_of(self, index: int) -> int:
        return self.square(index).col

    # ---------- pixel <-> square ----------
    def square_index_at(self, x: float, y: float) -> Optional[int]:
        """Index of the square containing (x, y), or None outside the board."""
        for sq in self.grid:
            if sq.contains(x, y):
                return sq.index
        return None

    def is_empty_square(self, index: int, pieces: Iterable) -> bool:
        return all(p.tile != index for p in pieces)

    # ---------- drawing ----------
    def draw(self, canvas):
        for sq in self.layout():
            canvas.create_rectangle(
                sq.x,
                sq.y,
                sq.x + sq.width,
                sq.y + sq.width,
                fill=sq.fill,
                outline="",
                tags="square",
            )
