"""Typed command-line option analysis with defaults, ranges, value sets and IPv4 addresses."""

__version__ = "0.1.0"
__all__ = ["options", "parser"]