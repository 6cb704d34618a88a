import pytest
import termcolor.termcolor

from matrix_flipper.__main__ import main
from matrix_flipper.args import parse_args
from matrix_flipper.matrix import Matrix
from matrix_flipper.viz import color_map, color_string, format_matrix


def test_format_matrix_plain():
    matrix = Matrix([1, 2, 3, 4, 5, 255], (2, 3))
    assert format_matrix(matrix, color=False) == "  1   2   3\n  4   5 255"
    assert format_matrix(Matrix([], (0, 3)), color=False) == "<empty 0x3>"
    assert color_string([7, 10], color=False) == "  7  10"


@pytest.fixture
def force_color(monkeypatch):
    monkeypatch.delenv("ANSI_COLORS_DISABLED", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    # Newer termcolor releases cache the terminal check
    cache_clear = getattr(termcolor.termcolor._can_do_colour, "cache_clear", None)
    if cache_clear:
        cache_clear()
    yield
    if cache_clear:
        cache_clear()


def test_format_matrix_colored(force_color):
    matrix = Matrix([0, 1, 7, 200], (2, 2))
    assert format_matrix(matrix) == (
        "\x1b[90m  0\x1b[0m \x1b[32m  1\x1b[0m\n"
        "\x1b[91m  7\x1b[0m \x1b[97m200\x1b[0m"
    ), "Values should be painted from the palette, white above 9"
    assert color_string([9]) == "\x1b[94m  9\x1b[0m"


def test_palette_colors_are_distinct():
    assert len(set(color_map.values())) == len(color_map)
    assert "black" not in color_map.values()


def test_parse_args_defaults():
    args = parse_args(["--grid", "[[1, 2], [3, 4]]"])
    assert args["grid"] == Matrix([1, 2, 3, 4], (2, 2))
    assert args["axis"] == "h"
    assert args["color"] is True


def test_parse_args_empty_grids():
    assert parse_args(["--grid", "[]"])["grid"].shape == (0, 0)
    assert parse_args(["--grid", "[[], []]"])["grid"].shape == (2, 0)


@pytest.mark.parametrize(
    "grid",
    [
        "[[1, 2], [3]]",
        "[[1, 256]]",
        "[[-1]]",
        "[[1.5]]",
        "[[true]]",
        "[1, 2, 3]",
        "not json",
    ],
)
def test_parse_args_rejects_bad_grids(grid, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--grid", grid])
    assert excinfo.value.code == 2
    assert "--grid" in capsys.readouterr().err


def test_main_flips_horizontally(capsys):
    main(["--grid", "[[1, 2, 3], [4, 5, 6]]", "--no-color"])
    out = capsys.readouterr().out

    assert "Input (2x3):\n  1   2   3\n  4   5   6\n" in out
    assert "Flip h (2x3):\n  3   2   1\n  6   5   4\n" in out
    assert "Flip v" not in out


def test_main_flips_both_axes(capsys):
    main(["--grid", "[[1, 2, 3], [4, 5, 6]]", "--axis", "both", "--no-color"])
    out = capsys.readouterr().out

    assert "Flip h (2x3):\n  3   2   1\n  6   5   4\n" in out
    assert "Flip v (2x3):\n  4   5   6\n  1   2   3\n" in out
