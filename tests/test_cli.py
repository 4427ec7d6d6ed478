import io
import os
from unittest import mock

from cursetris.cli import help_text, main, run


def _write(directory, name, text):
    (directory / name).write_text(text)


def test_help_text_frame():
    text = help_text("prog")
    assert text.startswith("Usage: prog [options]\nOptions:\n")
    assert text.endswith(" -D --debug\t\tDebug mode (def: false)\n")
    assert " --help\t\t\tDisplay this help\n" in text


def test_missing_directory_fails(tmp_path, capsys):
    out = io.StringIO()
    assert run(["prog"], tmp_path / "absent", io.StringIO(), out) == 84
    assert "Stat error. Abord." in capsys.readouterr().err
    assert out.getvalue() == ""


def test_help_option(tmp_path):
    out = io.StringIO()
    assert run(["prog", "--help"], tmp_path, io.StringIO(), out) == 0
    assert out.getvalue() == help_text("prog")


def test_empty_directory_has_no_valid_tetrimino(tmp_path):
    out = io.StringIO()
    assert run(["prog"], tmp_path, io.StringIO(), out) == 84
    assert out.getvalue() == "no valid tetrimino detected\n"


def test_unknown_option(tmp_path, capsys):
    assert run(["prog", "-x"], tmp_path, io.StringIO(), io.StringIO()) == 84
    assert "invalid option" in capsys.readouterr().err


def test_bad_level(tmp_path, capsys):
    assert run(["prog", "--level=abc"], tmp_path, io.StringIO(), io.StringIO()) == 84
    assert "abc : is not a number." in capsys.readouterr().err


def test_debug_report_then_failure(tmp_path):
    _write(tmp_path, "bad.tetrimino", "x y z\n**\n")
    out = io.StringIO()
    stdin = io.StringIO("\n")
    assert run(["prog", "-D"], tmp_path, stdin, out) == 84
    text = out.getvalue()
    assert text.startswith("*** DEBUG MODE ***\n")
    assert "Tetriminos : Name bad : Error\n" in text
    assert text.endswith("Press any key to start Tetris\nno valid tetrimino detected\n")


def test_map_size_invalidates_large_pieces(tmp_path):
    _write(tmp_path, "square.tetrimino", "2 2 1\n**\n**\n")
    out = io.StringIO()
    result = run(["prog", "-D", "--map-size=2,2"], tmp_path, io.StringIO("\n"), out)
    assert result == 84
    assert "Size : 2*2" in out.getvalue()
    assert "Tetriminos : Name square : Error\n" in out.getvalue()


def test_main_needs_environment():
    with mock.patch.dict(os.environ, clear=True):
        assert main(["prog"]) == 84