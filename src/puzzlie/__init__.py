"""Puzzlie — tactical puzzle trainer built on positions from your own games."""

__version__ = "0.1.0"
