import io

import pytest

from labkit.factorial_table import Align, digit_count, factorial, main, render_table


def test_factorial_small():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(4) == factorial(3) * 4


def test_factorial_is_reduced():
    assert all(factorial(n) < 2147483647 for n in range(0, 40))


def test_digit_count():
    assert digit_count(0) == 1
    assert digit_count(12345) == 5


def test_single_row_right():
    assert render_table(0, 0, 1) == (
        "+---+----+\n| n | n! |\n+---+----+\n| 0 |  1 |\n+---+----+\n"
    )


@pytest.mark.parametrize("align", [Align.LEFT, Align.CENTER, Align.RIGHT])
def test_lines_have_equal_width(align):
    lines = render_table(3, 15, align).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert len(lines) == 13 + 4


def test_left_alignment_cells():
    lines = render_table(2, 3, -1).splitlines()
    assert lines[1].startswith("| n ")
    assert lines[3].startswith("| 2 ")


def test_wrapping_range_uses_wide_column():
    lines = render_table(65535, 1, 0).splitlines()
    assert len(lines) == 3 + 4
    assert lines[0].startswith("+-------+")


@pytest.mark.parametrize("args", [(-1, 2, 0), (1, -2, 0), (1, 2, 2)])
def test_invalid_input(args):
    with pytest.raises(ValueError):
        render_table(*args)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 4 0"))
    assert main() == 0
    assert capsys.readouterr().out == render_table(1, 4, 0)


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 x"))
    assert main() == 1
    assert capsys.readouterr().err == "Incorrect input data"