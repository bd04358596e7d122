"""Classic in-place sorting algorithms on integer sequences, and a command that sorts numbers from standard input."""

__version__ = "0.1.0"