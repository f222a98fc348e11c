"""Factorial tables, soft floating point, quaternions, bucket storage, cross-correlation and minesweeper rules."""

__version__ = "0.1.0"