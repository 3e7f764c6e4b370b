# -*- coding: utf-8 -*-
"""
Entry point: create the Tk root and the grid game window.
"""
import tkinter as tk
from grid_gui import GridGameGUI



def main():
    root = tk.Tk()
    app = GridGameGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
