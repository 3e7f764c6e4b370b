import tkinter as tk
from tkinter import ttk, messagebox

from loguru import logger

from grid_board import Board
from piece_controller import PieceController
from state_utils import read_settings, write_json, load_board_config, SETTINGS_JSON
from menubar import create_menubar
from board_canvas import BoardCanvas
from controls_panel import ControlsPanel

WINDOW_TITLE = "Grid Game"
WINDOW_GEOMETRY = "500x500"


class GridGameGUI:
    """
    Main window: board canvas on top, row/col controls and status line below.
    """
    def __init__(self, root: tk.Tk):
        self.root = root
        self.root.title(WINDOW_TITLE)
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        _settings = read_settings()
        geom = _settings.get('geometry')
        self.root.geometry(geom if isinstance(geom, str) and geom else WINDOW_GEOMETRY)

        # board + pieces
        self.board = Board.from_config(load_board_config(_settings))
        self.controller = PieceController(self.board)

        # layout
        self.main_frame = ttk.Frame(self.root)
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        self.board_canvas = BoardCanvas(self, self.main_frame)
        self.board_canvas.frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        self.controls = ControlsPanel(self, self.main_frame)
        self.controls.frame.pack(side=tk.BOTTOM, fill=tk.X)

        self.root.config(menu=create_menubar(self))

        self.board_canvas.draw_board()

    # ================= redraw =================
    def refresh(self):
        self.board_canvas.draw_board()
        self.controls.set_status(self.controller.status_text())

    # ================= commands =================
    def remove_piece(self):
        row_text, col_text = self.controls.cell_text()
        try:
            self.controller.remove_from_text(row_text, col_text)
        except ValueError as e:
            logger.debug(f"bad remove input {row_text!r}, {col_text!r}")
            self.controls.set_status(str(e))
            return
        self.refresh()

    def cancel_selection(self):
        self.controller.cancel_selection()
        self.refresh()

    def new_board(self):
        if self.controller.pieces and not messagebox.askyesno(
            "Confirm", "Clear all pieces and start a new board?", parent=self.root
        ):
            return
        self.controller.clear()
        self.refresh()

    def about(self):
        messagebox.showinfo(
            "About",
            "Grid Game\n"
            "- Click an empty square to place a piece (brown and green alternate)\n"
            "- Click a piece to select it, then click an empty square to move it\n"
            "- Enter row and column, then Remove to delete pieces on that square",
        )

    def on_close(self):
        # keep other keys, e.g. "board"
        _s = read_settings()
        self.root.update_idletasks()
        _s['geometry'] = self.root.geometry()
        write_json(SETTINGS_JSON, _s)
        self.root.destroy()
