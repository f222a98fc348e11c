"""Render a bordered table of factorials modulo 2**31 - 1."""

from __future__ import annotations

import sys
from enum import IntEnum

MODULUS = 2147483647
_COUNTER_WRAP = 1 << 16
_HEADER_N = "n"
_HEADER_FACT = "n!"
_WRAPPED_WIDTH = 5


class Align(IntEnum):
    """Column alignment of the table cells."""

    LEFT = -1
    CENTER = 0
    RIGHT = 1


def factorial(n: int) -> int:
    """Return n! modulo 2**31 - 1."""
    result = 1
    for i in range(1, n + 1):
        result = result * i % MODULUS
    return result


def digit_count(num: int) -> int:
    """Return the number of decimal digits of a non-negative integer."""
    return len(str(num))


def _sequence(start: int, end: int):
    """Yield (counter, factorial) pairs, the counter wrapping at 2**16."""
    counter = start % _COUNTER_WRAP
    stop = end % _COUNTER_WRAP
    value = factorial(counter)
    yield counter, value
    while counter != stop:
        counter = (counter + 1) % _COUNTER_WRAP
        value = value * counter % MODULUS if counter else 1
        yield counter, value


def _separator(col1: int, col2: int) -> str:
    return f"+{'-' * (col1 + 2)}+{'-' * (col2 + 2)}+"


def _center_cell(text: str, width: int) -> str:
    length = len(text)
    indent = ((width - length) >> 1) + ((width & 1) ^ (length & 1))
    return f"{' ' * indent} {text} {' ' * (width - length - indent)}"


def _row(first: str, second: str, col1: int, col2: int, align: Align) -> str:
    if align is Align.LEFT:
        return f"| {first:<{col1}} | {second:<{col2}} |"
    if align is Align.RIGHT:
        return f"| {first:>{col1}} | {second:>{col2}} |"
    return f"|{_center_cell(first, col1)}|{_center_cell(second, col2)}|"


def _header(col1: int, col2: int, align: Align) -> str:
    if align is not Align.CENTER:
        return _row(_HEADER_N, _HEADER_FACT, col1, col2, align)
    indent1 = ((col1 - 1) >> 1) + (0 if col1 & 1 else 1)
    indent2 = ((col2 - 2) >> 1) + (col2 & 1)
    return (
        f"|{' ' * indent1} n {' ' * (col1 - 1 - indent1)}"
        f"|{' ' * indent2} n! {' ' * (col2 - 2 - indent2)}|"
    )


def render_table(start: int, end: int, align: int) -> str:
    """Return the factorial table for the counters from start to end."""
    if start < 0 or end < 0 or align not in (-1, 0, 1):
        raise ValueError("Incorrect input data")
    align = Align(align)
    rows = list(_sequence(start, end))
    col1 = _WRAPPED_WIDTH if start > end else digit_count(end)
    col2 = max([len(_HEADER_FACT)] + [digit_count(v) for _, v in rows])
    sep = _separator(col1, col2)
    lines = [sep, _header(col1, col2, align), sep]
    lines.extend(_row(str(i), str(v), col1, col2, align) for i, v in rows)
    lines.append(sep)
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Read 'start end align' from standard input and print the table."""
    tokens = sys.stdin.read().split()
    try:
        start, end, align = (int(t) for t in tokens[:3])
        if len(tokens) < 3:
            raise ValueError
        table = render_table(start, end, align)
    except ValueError:
        sys.stderr.write("Incorrect input data")
        return 1
    sys.stdout.write(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())