"""Game settings and command-line parsing."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

KEY_SPACE = 32
KEY_UP = 65
KEY_DOWN = 66
KEY_RIGHT = 67
KEY_LEFT = 68

_SPECIAL_DISPLAY = {
    KEY_LEFT: "^EOD",
    KEY_RIGHT: "^EOC",
    KEY_UP: "^EOA",
    KEY_DOWN: "^EOB",
    KEY_SPACE: "(space)",
}

_MULTITOUCH = {
    "rightk": KEY_RIGHT,
    "leftk": KEY_LEFT,
    "topk": KEY_UP,
    "downk": KEY_DOWN,
}

# short option letter -> whether it takes an argument
_SHORT = {
    "L": True,
    "l": True,
    "r": True,
    "t": True,
    "d": True,
    "q": True,
    "p": True,
    "D": False,
    "h": False,
}

# long option name -> (option id, takes an argument)
_LONG = {
    "without-next": ("without-next", False),
    "level": ("L", True),
    "key-left": ("l", True),
    "key-right": ("r", True),
    "key-turn": ("t", True),
    "key-drop": ("d", True),
    "key-quit": ("q", True),
    "key-pause": ("p", True),
    "debug": ("D", False),
    "help": ("h", False),
    "map-size": ("map-size", True),
}

_KEY_FIELDS = {
    "l": "left",
    "r": "right",
    "t": "turn",
    "d": "drop",
    "q": "quit",
    "p": "pause",
}

_ATOI = re.compile(r"[-+]?[0-9]*")


class UsageError(Exception):
    """The command line holds an option or value that cannot be used."""


class HelpRequested(Exception):
    """The command line asked for the help text."""


@dataclass(frozen=True)
class Key:
    """A key binding: the key code and how it is shown."""

    code: int
    display: str


def key_display_name(code: int) -> str:
    """Return the printable name of a key code."""
    return _SPECIAL_DISPLAY.get(code, chr(code))


def make_key(code: int) -> Key:
    """Build a key binding for a key code."""
    return Key(code, key_display_name(code))


@dataclass
class Config:
    """Settings chosen on the command line."""

    left: Key = field(default_factory=lambda: make_key(KEY_LEFT))
    right: Key = field(default_factory=lambda: make_key(KEY_RIGHT))
    turn: Key = field(default_factory=lambda: make_key(KEY_UP))
    drop: Key = field(default_factory=lambda: make_key(KEY_DOWN))
    quit: Key = field(default_factory=lambda: make_key(ord("q")))
    pause: Key = field(default_factory=lambda: make_key(KEY_SPACE))
    show_next: bool = True
    debug: bool = False
    level: int = 1
    rows: int = 20
    cols: int = 10


def _is_number(value: str) -> bool:
    digits = value[1:] if value.startswith("-") else value
    return all(c in "0123456789" for c in digits)


def _atoi(value: str) -> int:
    match = _ATOI.match(value)
    text = match.group(0) if match else ""
    if text in ("", "-", "+"):
        return 0
    return int(text)


def multitouch_code(value: str) -> int | None:
    """Return the arrow key code named by value, or None."""
    return _MULTITOUCH.get(value)


def parse_level(value: str) -> int:
    """Parse the starting level."""
    if not _is_number(value):
        raise UsageError(f"{value} : is not a number.")
    return _atoi(value)


def parse_map_size(value: str) -> tuple[int, int]:
    """Parse a "rows,cols" map size."""
    if value.count(",") != 1:
        raise UsageError("Invalid map size.")
    parts = [part for part in value.split(",") if part]
    if len(parts) < 2 or not all(_is_number(part) for part in parts):
        raise UsageError("Invalid map size.")
    return _atoi(parts[0]), _atoi(parts[1])


def parse_key(value: str) -> int:
    """Parse a key given on the command line into its code."""
    code = multitouch_code(value)
    if code is not None:
        return code
    if len(value) != 1:
        raise UsageError("Invalid key character.")
    return ord(value)


def _long_option(text: str, args: Iterator[str]) -> tuple[str, str | None]:
    name, sep, value = text.partition("=")
    if name in _LONG:
        matches = [name]
    else:
        matches = [candidate for candidate in _LONG if candidate.startswith(name)]
    if not matches:
        raise UsageError(f"unrecognized option '--{name}'")
    if len(matches) > 1:
        raise UsageError(f"option '--{name}' is ambiguous")
    full = matches[0]
    option, takes_argument = _LONG[full]
    if not takes_argument:
        if sep:
            raise UsageError(f"option '--{full}' doesn't allow an argument")
        return option, None
    if not sep:
        following = next(args, None)
        if following is None:
            raise UsageError(f"option '--{full}' requires an argument")
        value = following
    return option, value


def _short_options(cluster: str, args: Iterator[str]) -> Iterator[tuple[str, str | None]]:
    for pos, letter in enumerate(cluster):
        if letter not in _SHORT:
            raise UsageError(f"invalid option -- '{letter}'")
        if not _SHORT[letter]:
            yield letter, None
            continue
        rest = cluster[pos + 1:]
        if rest:
            yield letter, rest
            return
        following = next(args, None)
        if following is None:
            raise UsageError(f"option requires an argument -- '{letter}'")
        yield letter, following
        return


def _options(argv: Sequence[str]) -> Iterator[tuple[str, str | None]]:
    args = iter(argv)
    for arg in args:
        if arg == "--":
            return
        if arg.startswith("--"):
            yield _long_option(arg[2:], args)
        elif arg.startswith("-") and len(arg) > 1:
            yield from _short_options(arg[1:], args)
        else:
            return


def _apply(config: Config, option: str, value: str | None) -> None:
    if option == "D":
        config.debug = True
    elif option == "without-next":
        config.show_next = False
    elif option == "L":
        config.level = parse_level(value or "")
    elif option == "h":
        raise HelpRequested()
    elif option == "map-size":
        config.rows, config.cols = parse_map_size(value or "")
    else:
        setattr(config, _KEY_FIELDS[option], make_key(parse_key(value or "")))


def parse_arguments(argv: Sequence[str]) -> Config:
    """Build a Config from the arguments that follow the program name.

    Options are handled in order; parsing stops at the first argument
    that is not an option.
    """
    config = Config()
    for option, value in _options(argv):
        _apply(config, option, value)
    return config