import tkinter as tk

def create_menubar(gui):
    menubar = tk.Menu(gui.root)

    # ================= File =================
    file_menu = tk.Menu(menubar, tearoff=False)
    file_menu.add_command(label="New board(N)    Ctrl+N", command=gui.new_board)
    file_menu.add_separator()
    file_menu.add_command(label="Exit(X)", command=gui.on_close)
    menubar.add_cascade(label="File(F)", menu=file_menu)

    # ================= Edit =================
    edit_menu = tk.Menu(menubar, tearoff=False)
    edit_menu.add_command(label="Remove at row/col(R)", command=gui.remove_piece)
    edit_menu.add_command(label="Cancel selection    Esc", command=gui.cancel_selection)
    menubar.add_cascade(label="Edit(E)", menu=edit_menu)

    # ================= Help =================
    help_menu = tk.Menu(menubar, tearoff=False)
    help_menu.add_command(label="About", command=gui.about)
    menubar.add_cascade(label="Help(H)", menu=help_menu)

    gui.root.bind_all('<Control-n>', lambda e: gui.new_board())
    gui.root.bind_all('<Control-N>', lambda e: gui.new_board())
    gui.root.bind_all('<Escape>', lambda e: gui.cancel_selection())

    return menubar
