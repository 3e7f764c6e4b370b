from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")

from board_canvas import BoardCanvas
from grid_board import Board
from grid_gui import GridGameGUI
from piece_controller import INVALID_CELL_MESSAGE, PieceController


class FakeControls:
    """Row/col entries and status line without a Tk display."""

    def __init__(self, row="0", col="0"):
        self.row = row
        self.col = col
        self.status = None

    def cell_text(self):
        return self.row, self.col

    def set_status(self, text):
        self.status = text


@pytest.fixture
def gui(canvas):
    g = GridGameGUI.__new__(GridGameGUI)
    g.board = Board(75, 45, 40, 8)
    g.controller = PieceController(g.board)
    g.controls = FakeControls()
    bc = BoardCanvas.__new__(BoardCanvas)
    bc.gui = g
    bc.canvas = canvas
    g.board_canvas = bc
    return g


def test_click_redraws_and_updates_count(gui, canvas):
    gui.board_canvas._on_click(SimpleNamespace(x=95, y=65))
    assert gui.controls.status == "Num pieces: 1"
    assert len(canvas.items("rectangle")) == 64
    assert len(canvas.items("oval")) == 1
    # pieces are drawn after every square
    assert canvas.calls[-1][0] == "oval"


def test_remove_updates_count_and_redraws(gui, canvas):
    gui.controller.click(95, 65)
    gui.controller.click(215, 145)
    gui.controls.row, gui.controls.col = "2", "3"
    gui.remove_piece()
    assert gui.controls.status == "Num pieces: 1"
    assert len(canvas.items("oval")) == 1
    assert [(p.row, p.col) for p in gui.controller.pieces] == [(0, 0)]


def test_remove_with_bad_input_shows_message_only(gui, canvas):
    gui.controller.click(95, 65)
    gui.controls.row, gui.controls.col = "two", "3"
    gui.remove_piece()
    assert gui.controls.status == INVALID_CELL_MESSAGE
    assert len(gui.controller.pieces) == 1
    # no redraw happened
    assert canvas.calls == []
