"""Loading and checking tetrimino description files."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from cursetris.config import Config

DEFAULT_DIRECTORY = "./tetriminos/"
EXTENSION = ".tetrimino"
_HEADER_LIMIT = 19


class TetriminoError(Exception):
    """A tetrimino file or directory cannot be used."""


@dataclass
class Tetrimino:
    """One tetrimino read from a file."""

    ident: int
    name: str
    path: str
    width: int = 0
    height: int = 0
    color: int = 0
    form: list[str] | None = None
    valid: bool = False


def check_size_color(line: str) -> bool:
    """Tell whether a header line holds digits and a colour from 1 to 6."""
    if any(c not in "0123456789 " for c in line):
        return False
    fields = line.split()
    if len(fields) < 3:
        return False
    return 1 <= int(fields[2]) <= 6


def parse_header(text: str) -> tuple[int, int, int]:
    """Read width, height and colour from the start of a tetrimino file."""
    head = text[:_HEADER_LIMIT]
    line = head.lstrip("\n").split("\n", 1)[0]
    if not check_size_color(line):
        raise TetriminoError(f"invalid header: {line!r}")
    width, height, color = (int(value) for value in line.split()[:3])
    return width, height, color


def clear_line(line: str) -> str:
    """Drop what follows the last '*' of a row made of spaces and stars.

    A row with another character where a run of spaces begins is kept as is.
    """
    length = 0
    i = 0
    while i < len(line):
        if line[i] not in " *":
            return line
        star = line.find("*", i)
        if star < 0:
            break
        length = star + 1
        i = star + 1
    return line[:length]


def parse_name(filename: str) -> str:
    """Return the tetrimino name: the file name without its extension."""
    return filename[: max(len(filename) - len(EXTENSION), 0)]


def _split_lines(text: str) -> list[str]:
    lines = text.replace("\0", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_tetrimino(path: str | os.PathLike[str], ident: int) -> Tetrimino:
    """Read one tetrimino file; an unreadable header marks it invalid."""
    path = os.fspath(path)
    piece = Tetrimino(ident, parse_name(os.path.basename(path)), path)
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError:
        return piece
    try:
        piece.width, piece.height, piece.color = parse_header(text)
    except TetriminoError:
        return piece
    rows = _split_lines(text)[1:]
    piece.form = [clear_line(row) for row in rows[: piece.height]]
    piece.valid = True
    return piece


def load_tetriminos(directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> list[Tetrimino]:
    """Load every tetrimino file of a directory, numbered from 1."""
    directory = os.fspath(directory)
    try:
        info = os.stat(directory)
    except OSError as error:
        raise TetriminoError("Stat error. Abord.") from error
    if not stat.S_ISDIR(info.st_mode):
        raise TetriminoError(f"{directory} : is not a directory.")
    try:
        names = sorted(os.listdir(directory))
    except OSError as error:
        raise TetriminoError("Error while openning folder") from error

    tetriminos: list[Tetrimino] = []
    for name in names:
        if not name.endswith(EXTENSION):
            continue
        path = os.path.join(directory, name)
        if not os.path.exists(path):
            continue
        tetriminos.append(load_tetrimino(path, len(tetriminos) + 1))
    return tetriminos


def validate_tetriminos(tetriminos: Iterable[Tetrimino], config: Config) -> None:
    """Mark invalid the tetriminos with a bad colour, shape or size."""
    for piece in tetriminos:
        if not piece.valid:
            continue
        form = piece.form or []
        if piece.color == 0 or piece.color > 6:
            piece.valid = False
        if any(c not in " *" for row in form for c in row):
            piece.valid = False
        if len(form) >= config.rows:
            piece.valid = False
        if max((len(row) for row in form), default=0) >= config.cols:
            piece.valid = False


def count_valid(tetriminos: Iterable[Tetrimino]) -> int:
    """Count the valid tetriminos."""
    return sum(1 for piece in tetriminos if piece.valid)