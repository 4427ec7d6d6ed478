"""Falling pieces: creation, rotation and size."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from cursetris.tetrimino import Tetrimino

START_X = 35
START_Y = 2


def form_width(form: Sequence[str]) -> int:
    """Return the length of the longest row of a form."""
    return max((len(row) for row in form), default=0)


def rotate_form(form: Sequence[str]) -> list[str]:
    """Turn a form a quarter turn clockwise; short rows are padded with spaces."""
    height = len(form)
    width = form_width(form)
    grid = [[" "] * height for _ in range(width)]
    for k, row in enumerate(form):
        for col, char in enumerate(row):
            grid[col][height - 1 - k] = char
    return ["".join(line) for line in grid]


@dataclass
class Piece:
    """A tetrimino placed on the screen."""

    color: int
    form: list[str] = field(default_factory=list)
    pos_x: int = START_X
    pos_y: int = START_Y

    def span(self) -> int:
        """Return the screen width of the piece less its last cell."""
        return form_width(self.form) * 2 - 2

    def rotate(self, field_width: int) -> None:
        """Turn the piece clockwise, pulling it back from the right wall."""
        width = form_width(self.form)
        height = len(self.form)
        self.form = rotate_form(self.form)
        if width < height and self.pos_x + 2 * height - 2 >= START_X + field_width * 2:
            self.pos_x -= (height - width) * 2


def random_piece(
    tetriminos: Sequence[Tetrimino], rng: random.Random | None = None
) -> Piece:
    """Pick a random tetrimino and make a piece of it.

    Only the valid tetriminos that come before the first invalid one can be
    picked; ValueError is raised when there is none.
    """
    candidates: list[Tetrimino] = []
    for tetrimino in tetriminos:
        if not tetrimino.valid:
            break
        candidates.append(tetrimino)
    if not candidates:
        raise ValueError("no tetrimino can be picked")
    chooser = rng if rng is not None else random
    chosen = chooser.choice(candidates)
    return Piece(color=chosen.color, form=list(chosen.form or []))