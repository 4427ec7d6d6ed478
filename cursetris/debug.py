"""The debug report shown before a game starts."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from cursetris.config import Config
from cursetris.tetrimino import Tetrimino


def format_keys(config: Config) -> str:
    """Describe the key bindings and whether the next piece is shown."""
    lines = [
        f"Key Left : {config.left.display}",
        f"Key Right : {config.right.display}",
        f"Key Turn : {config.turn.display}",
        f"Key Drop : {config.drop.display}",
        f"Key Quit : {config.quit.display}",
        f"Key Pause : {config.pause.display}",
        f"Next : {'Yes' if config.show_next else 'No'}",
    ]
    return "\n".join(lines)


def format_tetrimino(tetrimino: Tetrimino) -> str:
    """Describe one tetrimino, or report it as an error when invalid."""
    head = f"Tetriminos : Name {tetrimino.name} : "
    if not tetrimino.valid:
        return head + "Error\n"
    body = (
        f"Size {tetrimino.width}*{tetrimino.height} : "
        f"Color {tetrimino.color} :\n"
    )
    body += "".join(f"{row}\n" for row in tetrimino.form or [])
    return head + body


def debug_report(config: Config, tetriminos: Sequence[Tetrimino]) -> str:
    """Build the whole debug report."""
    parts = [
        "*** DEBUG MODE ***\n",
        format_keys(config),
        f"\nLevel : {config.level}",
        f"\nSize : {config.rows}*{config.cols}",
        f"\nTetriminos : {len(tetriminos)}\n",
    ]
    parts.extend(format_tetrimino(piece) for piece in tetriminos if piece.ident >= 0)
    parts.append("Press any key to start Tetris\n")
    return "".join(parts)


def debug_mode(
    config: Config,
    tetriminos: Sequence[Tetrimino],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Print the debug report and wait for a line when debug mode is on.

    Returns whether the report was shown.
    """
    if not config.debug:
        return False
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(debug_report(config, tetriminos))
    stdout.flush()
    stdin.readline()
    return True