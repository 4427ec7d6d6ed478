import random

import pytest

from cursetris.config import Config, make_key
from cursetris.piece import START_X, START_Y, Piece, rotate_form
from cursetris.screen import (
    Game,
    Stats,
    draw_map,
    draw_next,
    draw_piece,
    draw_score,
    draw_title,
    nb_length,
    terminal_too_small,
)
from cursetris.tetrimino import Tetrimino


class FakeWindow:
    def __init__(self, rows=40, cols=120, keys=()):
        self.cells = {}
        self.size = (rows, cols)
        self.keys = list(keys)
        self.refreshes = 0

    def addstr(self, y, x, text, attr=0):
        for i, char in enumerate(text):
            self.cells[(y, x + i)] = char

    def inch(self, y, x):
        return ord(self.cells.get((y, x), " "))

    def getmaxyx(self):
        return self.size

    def getch(self):
        return self.keys.pop(0)

    def clear(self):
        self.cells.clear()

    def refresh(self):
        self.refreshes += 1

    def keypad(self, flag):
        pass

    def text(self, y, x, length):
        return "".join(self.cells.get((y, x + i), " ") for i in range(length))


def _tetriminos():
    return [
        Tetrimino(1, "square", "square.tetrimino", 2, 2, 1, ["**", "**"], True),
        Tetrimino(2, "bar", "bar.tetrimino", 1, 3, 2, ["*", "*", "*"], True),
    ]


def _game(config=None):
    return Game(config or Config(), _tetriminos(), rng=random.Random(0))


@pytest.mark.parametrize("value", [0, 7, 10, 99, 100, 12345])
def test_nb_length_counts_extra_digits(value):
    assert nb_length(value) == len(str(value)) - 1


def test_terminal_size_limits():
    config = Config()
    assert terminal_too_small(23, 75, config) is False
    assert terminal_too_small(22, 75, config) is True
    assert terminal_too_small(23, 74, config) is True


def test_title_letters():
    window = FakeWindow()
    draw_title(window)
    assert window.text(1, 1, 5) == "* * *"
    assert window.text(4, 27, 5) == "    *"


def test_map_border():
    config = Config()
    window = FakeWindow()
    draw_map(window, config, [])
    right = 33 + config.cols * 2 + 2
    assert window.cells[(1, 33)] == "+"
    assert window.cells[(1, right)] == "+"
    assert window.cells[(2 + config.rows, 33)] == "+"
    walls = [pos for pos, char in window.cells.items() if char == "|"]
    assert len(walls) == 2 * config.rows
    assert set(window.text(1, 34, right - 34)) == {"-"}


def test_map_draws_laid_pieces():
    window = FakeWindow()
    piece = Piece(color=1, form=["**"], pos_x=40, pos_y=5)
    draw_map(window, Config(), [piece])
    assert window.text(5, 40, 3) == "* *"


def test_score_values():
    window = FakeWindow()
    draw_score(window, Stats(score=42, timer=5))
    assert window.text(10, 3, 10) == "High Score"
    assert window.text(11, 25, 2) == "42"
    assert window.text(16, 25, 2) == "05"


def test_piece_cells_are_spaced():
    window = FakeWindow()
    draw_piece(window, Piece(color=1, form=["**", " *"], pos_x=35, pos_y=2))
    assert window.text(2, 35, 3) == "* *"
    assert window.text(3, 35, 3) == "  *"


def test_next_box_moves_piece():
    window = FakeWindow()
    piece = Piece(color=1, form=["*"])
    draw_next(window, Config(), piece)
    left = piece.pos_x - 2
    assert piece.pos_y == 2
    assert window.cells[(1, left)] == "/"
    assert window.text(1, left + 2, 4) == "next"
    assert window.cells[(1, left + 7)] == "\\"


def test_left_key_blocked_by_wall():
    game = _game()
    window = FakeWindow()
    draw_map(window, game.config, [])
    game.handle_key(window, game.config.left.code)
    assert game.current.pos_x == START_X


def test_left_key_moves_without_wall():
    game = _game()
    game.handle_key(FakeWindow(), game.config.left.code)
    assert game.current.pos_x == START_X - 2


def test_right_key_stops_at_wall():
    game = _game()
    window = FakeWindow()
    draw_map(window, game.config, [])
    for _ in range(30):
        game.handle_key(window, game.config.right.code)
    piece = game.current
    assert chr(window.inch(piece.pos_y, piece.pos_x + piece.span() + 2)) == "|"
    assert piece.pos_x > START_X


def test_turn_key_rotates():
    config = Config(turn=make_key(ord("t")))
    game = _game(config)
    before = list(game.current.form)
    game.handle_key(FakeWindow(), ord("t"))
    assert game.current.form == rotate_form(before)


def test_next_piece_lays_current():
    game = _game()
    first = game.current
    upcoming = game.upcoming
    upcoming.pos_x = 90
    assert game.next_piece() is upcoming
    assert game.placed == [first]
    assert (upcoming.pos_x, upcoming.pos_y) == (START_X, START_Y)


def test_run_until_quit():
    game = _game()
    window = FakeWindow(keys=[ord("c"), ord("q")])
    assert game.run(window) is True
    assert len(game.placed) == 1
    assert window.keys == []
    assert window.refreshes == 2


def test_run_refuses_small_terminal():
    game = _game()
    window = FakeWindow(rows=5, keys=[ord("q")])
    assert game.run(window) is False
    assert window.keys == [ord("q")]