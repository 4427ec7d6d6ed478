"""A curses Tetris playing field with configurable keys and tetrimino files."""

__version__ = "0.1.0"