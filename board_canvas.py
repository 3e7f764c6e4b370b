import tkinter as tk

CANVAS_WIDTH = 500
CANVAS_HEIGHT = 400
CANVAS_BG = "lightblue"


class BoardCanvas:
    """Board canvas: draws squares and pieces and forwards clicks."""

    def __init__(self, gui, parent):
        self.gui = gui
        self.frame = tk.Frame(parent)
        self.canvas = tk.Canvas(
            self.frame,
            width=CANVAS_WIDTH,
            height=CANVAS_HEIGHT,
            bg=CANVAS_BG,
            highlightthickness=0,
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.canvas.bind("<Button-1>", self._on_click)

    # ---------- drawing ----------
    def draw_board(self):
        # squares first, then pieces in insertion order
        self.canvas.delete("all")
        self.gui.board.draw(self.canvas)
        for piece in self.gui.controller.pieces:
            piece.draw(self.canvas)

    # ---------- events ----------
    def _on_click(self, event):
        self.gui.controller.click(event.x, event.y)
        self.gui.refresh()
