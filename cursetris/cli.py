"""Command-line entry point."""

from __future__ import annotations

import curses
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from cursetris.config import HelpRequested, UsageError, parse_arguments
from cursetris.debug import debug_mode
from cursetris.screen import Game
from cursetris.tetrimino import (
    DEFAULT_DIRECTORY,
    TetriminoError,
    count_valid,
    load_tetriminos,
    validate_tetriminos,
)

FAILURE = 84

_OPTIONS_HELP = (
    "Options:\n"
    " --help\t\t\tDisplay this help\n"
    " -L --level={num}\tStart Tetris at level num (def: 1)\n"
    " -l --key-left={K}\tMove the tetrimino LEFT using the K key (def: left arrow)\n"
    " -r --key-right={K}\tMove the tetrimino right using the K key (def: right arrow)\n"
    " -t --key-turn={K}\tTURN the tetrimino clockwise 90d using the K key (def: top arrow)\n"
    " -d --key-drop={K}\tDROP the tetrimino using the K key (def: down arrow)\n"
    " -q --key-quit={K}\tQUIT the game using the K key (def: 'q' key)\n"
    " -p --key-pause={K}\tPAUSE/RESTART the game using the K key (def: space bar)\n"
    " --map-size={row,col}\tSet the numbers of rows and columns of the map (def: 20,10)\n"
    " -w --without-next\tHide next tetrimino (def: false)\n"
    " -D --debug\t\tDebug mode (def: false)\n"
)


def help_text(program: str) -> str:
    """Return the usage text for program."""
    return f"Usage: {program} [options]\n{_OPTIONS_HELP}"


def run(
    argv: Sequence[str] | None = None,
    directory: str | os.PathLike[str] = DEFAULT_DIRECTORY,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Load the tetriminos, read the options and play; return the exit status."""
    args = list(sys.argv if argv is None else argv)
    program = args[0] if args else "cursetris"
    stdout = sys.stdout if stdout is None else stdout

    try:
        tetriminos = load_tetriminos(directory)
    except TetriminoError as error:
        sys.stderr.write(f"{error}\n")
        return FAILURE
    try:
        config = parse_arguments(args[1:])
    except HelpRequested:
        stdout.write(help_text(program))
        return 0
    except UsageError as error:
        sys.stderr.write(f"{error}\n")
        return FAILURE

    validate_tetriminos(tetriminos, config)
    debug_mode(config, tetriminos, stdin, stdout)
    if not tetriminos or count_valid(tetriminos) <= 0:
        stdout.write("no valid tetrimino detected\n")
        return FAILURE
    try:
        game = Game(config, tetriminos)
    except ValueError:
        stdout.write("no valid tetrimino detected\n")
        return FAILURE

    if not curses.wrapper(game.run):
        stdout.write("You need a largest Terminal to play\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game from the command line."""
    if not os.environ:
        return FAILURE
    return run(sys.argv if argv is None else argv, DEFAULT_DIRECTORY, sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())