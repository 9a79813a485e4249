"""arrayprint — print a fixed array and a fixed 3x3 matrix."""

__version__ = "0.1.0"
