"""Drawing the playing field and running the game loop."""

from __future__ import annotations

import curses
import random
from dataclasses import dataclass, field
from typing import Any

from cursetris.config import Config
from cursetris.piece import START_X, START_Y, Piece, random_piece
from cursetris.tetrimino import Tetrimino

FIELD_LEFT = 33
SCORE_RIGHT = 26
NEW_PIECE_KEY = ord("c")

_COLORS = (
    curses.COLOR_RED,
    curses.COLOR_GREEN,
    curses.COLOR_YELLOW,
    curses.COLOR_BLUE,
    curses.COLOR_MAGENTA,
    curses.COLOR_CYAN,
)

# colour pair -> (row, column, text) strokes of one title letter
_TITLE = (
    (1, ((1, 1, "* * *"), (2, 3, "*"), (3, 3, "*"), (4, 3, "*"), (5, 3, "*"))),
    (2, ((1, 7, "* * *"), (2, 7, "*"), (3, 7, "* *"), (4, 7, "*"), (5, 7, "* * *"))),
    (3, ((1, 13, "* * *"), (2, 15, "*"), (3, 15, "*"), (4, 15, "*"), (5, 15, "*"))),
    (4, ((1, 19, "* * *"), (2, 19, "*   *"), (3, 19, "* *"), (4, 19, "*   *"), (5, 19, "*   *"))),
    (5, ((1, 25, "*"), (3, 25, "*"), (4, 25, "*"), (5, 25, "*"))),
    (6, ((1, 27, "* * *"), (2, 27, "*"), (3, 27, "* * *"), (4, 27, "    *"), (5, 27, "* * *"))),
)

_SCORE_LABELS = (
    (10, "High Score"),
    (11, "Score"),
    (13, "Lines"),
    (14, "Level"),
    (16, "Timer"),
)


@dataclass
class Stats:
    """The figures shown in the score box."""

    level: int = 1
    high_score: int = 0
    score: int = 0
    lines: int = 0
    timer: int = 0


def _color(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def _put(window: Any, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        pass


def _char_at(window: Any, y: int, x: int) -> str:
    try:
        return chr(window.inch(y, x) & curses.A_CHARTEXT)
    except (curses.error, ValueError):
        return " "


def nb_length(nb: int) -> int:
    """Return the number of digits of nb less one; zero for nb below 10."""
    count = 0
    while nb // 10 > 0:
        nb //= 10
        count += 1
    return count


def terminal_too_small(rows: int, cols: int, config: Config) -> bool:
    """Tell whether a terminal of rows by cols cannot hold the game."""
    return rows < config.rows + 3 or cols < config.cols * 4 + 35


def draw_title(window: Any) -> None:
    """Draw the coloured title in the top-left corner."""
    for pair, strokes in _TITLE:
        attr = _color(pair)
        for y, x, text in strokes:
            _put(window, y, x, text, attr)


def draw_piece(window: Any, piece: Piece) -> None:
    """Draw a piece, one cell every two columns."""
    attr = _color(piece.color)
    for i, row in enumerate(piece.form):
        if row:
            _put(window, piece.pos_y + i, piece.pos_x, " ".join(row), attr)


def draw_map(window: Any, config: Config, pieces: list[Piece]) -> None:
    """Draw the border of the field and the pieces already laid."""
    right = FIELD_LEFT + config.cols * 2 + 2
    bottom = 2 + config.rows
    for y in (1, bottom):
        _put(window, y, FIELD_LEFT, "+")
        _put(window, y, right, "+")
        _put(window, y, FIELD_LEFT + 1, "-" * (config.cols * 2 + 1))
    for y in range(2, bottom):
        _put(window, y, FIELD_LEFT, "|")
        _put(window, y, right, "|")
    for piece in pieces:
        draw_piece(window, piece)


def draw_score(window: Any, stats: Stats) -> None:
    """Draw the score box with its labels and values."""
    _put(window, 8, 1, "/")
    _put(window, 8, 28, "\\")
    _put(window, 17, 1, "\\")
    _put(window, 17, 28, "/")
    _put(window, 8, 2, "-" * 26)
    _put(window, 17, 2, "-" * 26)
    for y in range(9, 17):
        _put(window, y, 28, "|")
        _put(window, y, 1, "|")
    for y, label in _SCORE_LABELS:
        _put(window, y, 3, label)
    for y, value in (
        (10, stats.high_score),
        (11, stats.score),
        (13, stats.lines),
        (14, stats.level),
    ):
        _put(window, y, SCORE_RIGHT - nb_length(value), str(value))
    offset = nb_length(stats.timer)
    if stats.timer < 10:
        _put(window, 16, SCORE_RIGHT - offset - 1, f"0{stats.timer}")
    else:
        _put(window, 16, SCORE_RIGHT - offset, str(stats.timer))


def _draw_next_border(window: Any, left: int, width: int, height: int) -> None:
    bottom = height + 2
    _put(window, 1, left, "/")
    _put(window, bottom, left, "\\")
    if width > 1:
        right = left + width * 2 + 4
        _put(window, 1, right, "\\")
        _put(window, bottom, right, "/")
    else:
        right = left + 7
        _put(window, 1, right, "\\")
        _put(window, bottom, right, "/")
    for y in range(2, bottom):
        _put(window, y, left, "|")
        _put(window, y, right, "|")
    _put(window, 1, left + 1, "-" * (right - left - 1))
    _put(window, bottom, left + 1, "-" * (right - left - 1))


def draw_next(window: Any, config: Config, piece: Piece) -> None:
    """Draw the box showing the next piece, moving the piece into it."""
    left = FIELD_LEFT + config.cols * 2 + 4
    width = max((len(row) for row in piece.form), default=0)
    _draw_next_border(window, left, width, len(piece.form))
    _put(window, 1, left + 2, "next")
    piece.pos_x = left + 2
    piece.pos_y = 2
    draw_piece(window, piece)


@dataclass
class Game:
    """The state of a game: laid pieces, the falling one and the next one."""

    config: Config
    tetriminos: list[Tetrimino]
    rng: random.Random | None = None
    stats: Stats = field(default_factory=Stats)
    placed: list[Piece] = field(default_factory=list)
    current: Piece = field(init=False)
    upcoming: Piece = field(init=False)

    def __post_init__(self) -> None:
        self.current = random_piece(self.tetriminos, self.rng)
        self.upcoming = random_piece(self.tetriminos, self.rng)

    def handle_key(self, window: Any, key: int) -> int:
        """Move, turn or lay the falling piece according to key."""
        piece = self.current
        span = piece.span()
        if key == self.config.right.code:
            if _char_at(window, piece.pos_y, piece.pos_x + span + 2) != "|":
                piece.pos_x += 2
        if key == self.config.left.code:
            if _char_at(window, piece.pos_y, piece.pos_x - 2) != "|":
                piece.pos_x -= 2
        if key == self.config.turn.code:
            piece.rotate(self.config.cols)
        if key == NEW_PIECE_KEY:
            self.next_piece()
        return key

    def next_piece(self) -> Piece:
        """Lay the falling piece and bring in the next one."""
        self.placed.append(self.current)
        self.current = self.upcoming
        self.current.pos_x = START_X
        self.current.pos_y = START_Y
        self.upcoming = random_piece(self.tetriminos, self.rng)
        return self.current

    def _setup(self, window: Any) -> None:
        try:
            window.keypad(True)
        except (curses.error, AttributeError):
            pass
        try:
            curses.noecho()
            curses.curs_set(0)
            curses.start_color()
            curses.use_default_colors()
            for pair, color in enumerate(_COLORS, start=1):
                curses.init_pair(pair, color, -1)
        except curses.error:
            pass

    def _draw(self, window: Any) -> None:
        window.clear()
        draw_title(window)
        draw_map(window, self.config, self.placed)
        draw_score(window, self.stats)
        draw_piece(window, self.current)
        if self.config.show_next:
            draw_next(window, self.config, self.upcoming)

    def run(self, window: Any) -> bool:
        """Play until the quit key; False if the terminal is too small."""
        self._setup(window)
        key = None
        while key != self.config.quit.code:
            rows, cols = window.getmaxyx()
            if terminal_too_small(rows, cols, self.config):
                return False
            self._draw(window)
            key = self.handle_key(window, window.getch())
            window.refresh()
        return True