# labkit

A handful of small, self-contained tools:

- `labkit.factorial_table` — a boxed table of `n` and `n!` modulo 2³¹−1,
  with left, centred or right alignment (`Align`).
- `labkit.fparith` — bit-exact half- and single-precision floating-point
  arithmetic (`+ - * /`) on raw bit patterns, with four rounding modes,
  printed in hexadecimal floating-point notation.
- `labkit.quaternion` — a `Quat` type with addition, subtraction,
  multiplication (by a quaternion, a scalar or a 3-vector), conjugation (`~`),
  norm (`abs`), rotation matrices and vector rotation, plus `axis_angle`.
- `labkit.bucket_storage` — `BucketStorage`, a container that keeps values in
  fixed-size blocks, reuses freed slots and gives positions as `Cursor`
  objects that stay valid across other insertions and erasures.
- `labkit.crosscorr` — FFT-based circular cross-correlation of two
  `SampleBuffer`s and the delay between them.
- `labkit.minesweeper` — the rules of minesweeper: mine placement on the first
  press, flood opening, flags, chording, win/lose detection, saving to and
  loading from an INI file.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Factorial table

```
echo "5 10 0" | labkit-factorials
```

Reads three integers from standard input: the first `n`, the last `n` and the
alignment (`-1` left, `0` centre, `1` right), and prints the table. Values are
computed modulo 2147483647 and `n` wraps around to 0 after 65535. Bad input
prints `Incorrect input data` on standard error and exits with status 1.

### Floating-point arithmetic

```
labkit-fparith <h|f> <rounding> <hex-number> [<op> <hex-number>]
```

- `h` selects half precision, `f` single precision.
- Rounding: `0` toward zero, `1` to nearest even, `2` toward +∞, `3` toward −∞.
- `op` is one of `+`, `-`, `*`, `/`.

```
labkit-fparith f 0 0x3F800000 + 0x40000000
0x1.800000p+1
```

With a single operand the number is printed as decoded. Invalid arguments or
an unsupported operation are reported on standard error with exit status 4.

### Bucket storage demo

```
labkit-bucket-demo
```

Inserts the integers 0, 1 and 2 into a `BucketStorage` and prints them in
storage order.

## Library use

```python
from labkit.fparith import compute

print(compute("h", 1, 0x3C00, "/", 0x4200))
```

`compute` raises `InvalidArguments` for a bad precision, rounding mode or
operation. The lower-level `decode`, `add`, `subtract`, `multiply`, `divide`,
`round_num` and `format_num` work on `Num` values.

```python
from labkit.quaternion import Quat, axis_angle

q = axis_angle(90, False, (0.0, 0.0, 1.0))
print(q.apply((1.0, 0.0, 0.0)))   # approximately (0, 1, 0)
print(abs(Quat(1, 2, 3, 4)))
print(q.angle(in_radians=False))  # approximately 90
```

```python
from labkit.bucket_storage import BucketStorage

storage = BucketStorage(4)
first = storage.insert("a")
storage.insert("b")
following = storage.erase(first)   # cursor of the next value
print(following.value(), list(storage), len(storage), storage.capacity())
```

Cursors move with `next()` and `prev()`, compare with `==` and `<`, and
`get_to_distance` moves one several steps. `copy`, `swap`, `clear` and
`shrink_to_fit` work on the whole storage.

```python
import numpy as np
from labkit.crosscorr import SampleBuffer, cross_correlation, find_delay, format_delay, pad_to_same_length

a, b = pad_to_same_length(SampleBuffer(np.array([0, 0, 9, 1]), 8000),
                          SampleBuffer(np.array([9, 1]), 8000))
print(format_delay(find_delay(cross_correlation(a, b), a.sample_rate)))
```

```python
import random
from labkit.minesweeper import Game, load_game, validate_settings

validate_settings(9, 9, 10)
game = Game(9, 9, 10, random.Random(1))
outcome = game.press_left(4, 4)    # Outcome.PLAYING, WON or LOST
game.press_right(0, 0)             # toggle a flag
game.save("save.ini")
restored = load_game("save.ini")
```

Settings outside 1–30 rows or columns, fewer than 2 mines, a field of three
cells or fewer, or more mines than the number of cells minus two raise
`SettingsError`.

## What is not included

- `labkit.crosscorr` works on samples already in memory; it does not read or
  decode audio files, and there is no command for it.
- `labkit.minesweeper` has no window, board display or command; it is the game
  logic only, to be driven by your own interface.