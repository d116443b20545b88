"""Send text between processes bit by bit over the user signals, with small character and string helpers."""

__version__ = "0.1.0"