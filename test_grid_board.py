import pytest

from grid_board import Board, BoardConfig


def make_board(n=8):
    return Board(75, 45, 40, n, "lightgray", "darkgray")


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
def test_layout_covers_every_cell_once(n):
    board = Board(10, 20, 30, n)
    squares = board.layout()
    assert len(squares) == n * n
    cells = [(sq.row, sq.col) for sq in squares]
    assert sorted(cells) == [(r, c) for r in range(n) for c in range(n)]
    assert [sq.index for sq in squares] == list(range(n * n))
    assert all(sq.index == sq.row * n + sq.col for sq in squares)


def test_layout_is_idempotent():
    board = make_board()
    first = [(sq.index, sq.x, sq.y, sq.fill) for sq in board.layout()]
    second = [(sq.index, sq.x, sq.y, sq.fill) for sq in board.layout()]
    assert first == second
    assert board.grid_size() == 64


def test_center_of_each_square_maps_back_to_it():
    board = make_board()
    for i in range(board.grid_size()):
        x, y = board.square_center(i)
        assert board.square_index_at(x, y) == i


def test_square_accessors():
    board = make_board()
    # row 2, col 3
    assert board.square_top_left(19) == (195, 125)
    assert board.square_center(19) == (215, 145)
    assert board.row_of(19) == 2
    assert board.col_of(19) == 3
    assert board.width == 40


def test_containment_uses_directional_bounds():
    board = make_board()
    # right edge of square 0 belongs to square 1
    assert board.square_index_at(115, 65) == 1
    assert board.square_index_at(114.9, 65) == 0
    assert board.square_index_at(75, 45) == 0


@pytest.mark.parametrize("x, y", [(74, 60), (90, 44), (395, 60), (90, 365), (-5, -5)])
def test_square_index_outside_board_is_none(x, y):
    assert make_board().square_index_at(x, y) is None


@pytest.mark.parametrize("index", [64, 100, -1])
def test_bad_square_index_raises(index):
    board = make_board()
    with pytest.raises(IndexError):
        board.square_center(index)


def test_fill_colors_alternate_like_a_checkerboard():
    board = make_board()
    for sq in board.grid:
        expected = "lightgray" if (sq.row + sq.col) % 2 == 0 else "darkgray"
        assert sq.fill == expected


def test_fill_counter_skips_one_per_row_on_odd_boards():
    board = Board(0, 0, 10, 3, "a", "b")
    # counter = row*(N+1)+col
    assert [sq.fill for sq in board.grid] == ["a", "b", "a", "a", "b", "a", "a", "b", "a"]


def test_from_config_uses_defaults():
    board = Board.from_config(BoardConfig())
    assert (board.top_x, board.top_y, board.width, board.num_squares) == (75, 45, 40, 8)


def test_draw_emits_one_rectangle_per_square(canvas):
    board = make_board()
    board.draw(canvas)
    rects = canvas.items("rectangle")
    assert len(rects) == 64
    assert rects[0][1] == (75, 45, 115, 85)
    assert rects[0][2]["fill"] == "lightgray"
