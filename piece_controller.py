# piece_controller.py
# -*- coding: utf-8 -*-
"""
Piece placement / selection / movement on a Board.

State is a single switch: either no piece is selected, or exactly one is.
- no selection, click: select the first piece under the cursor, otherwise
  place a new piece (kinds alternate brown, green, brown, ...)
- selection, click: move the selected piece if the target square is empty;
  an occupied target is ignored and the selection stays
"""

import re
from typing import List, Optional, Tuple

from loguru import logger

from grid_board import Board
from pieces import BROWN, Piece, next_kind

INVALID_CELL_MESSAGE = "Invalid row or column number."
_INT_RE = re.compile(r"[+-]?[0-9]+")

# click outcomes
IGNORED = "ignored"
SELECTED = "selected"
PLACED = "placed"
MOVED = "moved"
BLOCKED = "blocked"


def parse_cell(row_text: str, col_text: str) -> Tuple[int, int]:
    """
    Parse row/column entry text as plain ASCII integers (optional sign, no
    whitespace, no underscores). Raises ValueError on anything else.
    """
    if not all(isinstance(t, str) and _INT_RE.fullmatch(t) for t in (row_text, col_text)):
        raise ValueError(INVALID_CELL_MESSAGE)
    return int(row_text), int(col_text)


class PieceController:
    def __init__(self, board: Board):
        self.board = board
        self.pieces: List[Piece] = []
        self.selected_pid: Optional[int] = None
        self.next_kind: str = BROWN

    # ---------- queries ----------
    @property
    def selected_piece(self) -> Optional[Piece]:
        if self.selected_pid is None:
            return None
        return next((p for p in self.pieces if p.pid == self.selected_pid), None)

    def piece_at_point(self, x: float, y: float) -> Optional[Piece]:
        # first match in insertion order, not the nearest
        return next((p for p in self.pieces if p.contains(x, y)), None)

    def occupant(self, tile: int) -> Optional[Piece]:
        return next((p for p in self.pieces if p.tile == tile), None)

    def is_occupied(self, tile: int) -> bool:
        return not self.board.is_empty_square(tile, self.pieces)

    def status_text(self) -> str:
        return f"Num pieces: {len(self.pieces)}"

    # ---------- clicks ----------
    def click(self, x: float, y: float) -> str:
        i = self.board.square_index_at(x, y)
        if i is None:
            logger.debug(f"click ({x}, {y}) outside the board")
            return IGNORED

        if self.selected_piece is not None:
            if self.is_occupied(i):
                logger.debug(f"square {i} occupied, keeping selection {self.selected_piece}")
                return BLOCKED
            self.move_selected(i)
            return MOVED

        hit = self.piece_at_point(x, y)
        if hit is not None:
            self.select(hit)
            return SELECTED

        self.place_piece(i)
        return PLACED

    def select(self, piece: Piece):
        piece.highlighted = True
        self.selected_pid = piece.pid
        logger.debug(f"selected {piece}")

    def cancel_selection(self):
        piece = self.selected_piece
        if piece is not None:
            piece.highlighted = False
        self.selected_pid = None

    def place_piece(self, tile: int) -> Piece:
        x, y = self.board.square_center(tile)
        piece = Piece(
            self.next_kind,
            x,
            y,
            row=self.board.row_of(tile),
            col=self.board.col_of(tile),
            tile=tile,
        )
        self.pieces.append(piece)
        self.next_kind = next_kind(self.next_kind)
        logger.debug(f"placed {piece} on square {tile}")
        return piece

    def move_selected(self, tile: int):
        piece = self.selected_piece
        if piece is None:
            return
        piece.set_grid_position(self.board.row_of(tile), self.board.col_of(tile))
        piece.tile = tile
        piece.set_position(*self.board.square_center(tile))
        piece.highlighted = False
        self.selected_pid = None
        logger.debug(f"moved {piece} to square {tile}")

    # ---------- removal ----------
    def remove_at(self, row: int, col: int) -> int:
        """Remove every piece on (row, col); returns how many went."""
        keep = [p for p in self.pieces if not (p.row == row and p.col == col)]
        removed = len(self.pieces) - len(keep)
        self.pieces = keep
        if self.selected_pid is not None and self.selected_piece is None:
            self.selected_pid = None
        logger.info(f"removed {removed} piece(s) at ({row}, {col})")
        return removed

    def remove_from_text(self, row_text: str, col_text: str) -> int:
        row, col = parse_cell(row_text, col_text)
        return self.remove_at(row, col)

    def clear(self):
        self.pieces = []
        self.selected_pid = None
        self.next_kind = BROWN
        logger.info("board cleared")
