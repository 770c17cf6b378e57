"""Errors raised while building a position from FEN text."""

from __future__ import annotations


class FenError(ValueError):
    """Base class for FEN construction failures."""


class EmptyFenError(FenError):
    """The FEN string contains no whitespace-delimited token."""

    def __init__(self) -> None:
        super().__init__("Invalid FEN string: no placement field")


class InvalidSymbolError(FenError):
    """A placement character is not '/', a digit or a piece letter."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Invalid character in FEN string: {symbol!r}")
