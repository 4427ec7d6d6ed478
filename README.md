# cursetris

A Tetris playing field for the terminal, drawn with curses. The pieces
(tetriminos) are read from plain text files, so you can define your own
shapes and colours. Keys, level, map size and the "next piece" box are set
on the command line.

## Installing

    pip install .

## Playing

Run the game from a directory that contains a `tetriminos/` folder:

    cursetris

The same entry point can be started with `python -m cursetris.cli`.

Every file in `./tetriminos/` whose name ends in `.tetrimino` is loaded, in
order of file name, and numbered from 1. The file name without that
extension is the piece's name. If `./tetriminos/` is missing or is not a
directory, the program prints an error and exits with status 84; this check
comes before the options are read, so even `--help` needs the folder.

### Tetrimino files

The first line holds three numbers separated by spaces: width, height and
colour (1 to 6). The following `height` lines draw the shape with `*` and
spaces; anything after the last `*` of a row is dropped.

    3 2 4
    ***
     *

A piece is rejected (shown as `Error` in debug mode) when its header holds
anything other than digits and spaces or a colour outside 1 to 6, when its
shape uses characters other than `*` and space, or when it has as many rows
as the map or more, or a row as long as the map is wide or longer. The game
refuses to start, printing `no valid tetrimino detected` and exiting with
status 84, when no valid piece is left. Pieces are drawn at random from the
valid files that come before the first rejected one.

### Options

    --help                  Print the help text and exit with status 0
    -L --level={num}        Start at level num (default: 1)
    -l --key-left={K}       Move left with key K (default: left arrow)
    -r --key-right={K}      Move right with key K (default: right arrow)
    -t --key-turn={K}       Rotate clockwise with key K (default: up arrow)
    -d --key-drop={K}       Drop key (default: down arrow)
    -q --key-quit={K}       Quit with key K (default: q)
    -p --key-pause={K}      Pause key (default: space bar)
    --map-size={row,col}    Map rows and columns (default: 20,10)
    --without-next          Hide the next piece
    -D --debug              Print the settings and pieces before starting

Long options may be shortened to any unambiguous prefix and take their value
either after `=` or as the next argument. Short options may be grouped. Option
parsing stops at `--` or at the first argument that is not an option. The help
text also lists `-w`, but only the long form `--without-next` is accepted.

A key is a single character, or one of `leftk`, `rightk`, `topk` and
`downk` for the arrow keys. An unknown option, a level that is not a number,
a key that is not one character, or a map size that is not two numbers
separated by one comma ends the program with exit status 84.

In debug mode the game prints its key bindings, level, map size and every
piece it loaded, then waits for a line of input before starting.

### In the game

- the left and right keys move the falling piece two columns, stopping at
  the field's border;
- the turn key rotates it a quarter turn clockwise;
- `c` lays the piece where it is and brings in the next one;
- the quit key ends the game.

The terminal needs at least map rows + 3 lines and 4 × map columns + 35
columns; if it is smaller the game stops and prints
`You need a largest Terminal to play`.

## What it does not do

Pieces do not fall on their own and do not collide with each other; the drop
and pause keys can be set but have no effect. No lines are cleared, and the
score box (high score, score, lines, level, timer) is drawn but its figures
never change. Scores are not saved.

## Using it from Python

- `cursetris.config.parse_arguments(argv)` turns the options that follow the
  program name into a `Config`, raising `UsageError` or `HelpRequested`.
- `cursetris.tetrimino.load_tetriminos(directory)` reads a folder of
  `.tetrimino` files; `validate_tetriminos(tetriminos, config)` and
  `count_valid(tetriminos)` apply the checks above.
- `cursetris.debug.debug_report(config, tetriminos)` builds the debug text.
- `cursetris.piece.rotate_form(form)` and `Piece` handle shapes;
  `random_piece(tetriminos, rng)` picks one.
- `cursetris.screen.Game(config, tetriminos).run(window)` plays in a curses
  window.
- `cursetris.cli.run(argv, directory, stdin, stdout)` does all of this and
  returns the exit status.

## Running the tests

    pip install .[test]
    pytest