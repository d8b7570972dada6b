"""Mostle: a daily ranking puzzle."""

__version__ = "0.1.0"
