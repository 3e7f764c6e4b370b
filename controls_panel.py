import tkinter as tk
from tkinter import ttk


class ControlsPanel:
    """
    Bottom strip: row / column entries, Remove button, status line.
    - Remove button or Enter in the column box: remove pieces on that cell
    - status line shows the piece count, or the input error
    """
    def __init__(self, gui, parent):
        self.gui = gui
        self.frame = ttk.Frame(parent)

        box = ttk.Frame(self.frame)
        box.pack(fill=tk.X, padx=10, pady=(6, 2))

        ttk.Label(box, text="Row").pack(side=tk.LEFT)
        self.row_var = tk.StringVar(value="0")
        self.row_box = ttk.Entry(box, textvariable=self.row_var, width=12)
        self.row_box.pack(side=tk.LEFT, padx=(4, 16))

        ttk.Label(box, text="Col").pack(side=tk.LEFT)
        self.col_var = tk.StringVar(value="0")
        self.col_box = ttk.Entry(box, textvariable=self.col_var, width=12)
        self.col_box.pack(side=tk.LEFT, padx=(4, 16))

        self.remove_button = ttk.Button(box, text="Remove", command=self.gui.remove_piece)
        self.remove_button.pack(side=tk.LEFT)

        self.footer = ttk.Label(self.frame, text="")
        self.footer.pack(anchor=tk.W, padx=10, pady=(2, 6))

        self.col_box.bind("<Return>", lambda e: self.gui.remove_piece())

    def cell_text(self):
        return self.row_var.get(), self.col_var.get()

    def set_status(self, text: str):
        self.footer.configure(text=text)
