"""Exceptions raised by the path-data engine."""

from __future__ import annotations


class PathDataError(ValueError):
    """Base class for every path-data failure."""


class PathParseError(PathDataError):
    """Raised when path text cannot be turned into an instruction sequence."""


class MalformedParameterCount(PathParseError):
    """A command group does not hold a whole number of coordinate pairs."""

    def __init__(self, letter: str, index: int, normalized: str = ""):
        self.letter = letter
        self.index = index
        self.normalized = normalized
        message = f"Wrong number of parameters for '{letter}' at number {index} sequence"
        if normalized:
            message += f" in {normalized}"
        super().__init__(message)


class UnsupportedCommand(PathParseError):
    """The command letter is unknown or has no instruction variant yet."""

    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(f"Non supported sequence initializer: {letter}")


class InvalidNumericToken(PathParseError):
    """A parameter token is not a plain decimal literal, or overflows a float."""

    def __init__(self, token: str, letter: str | None = None, index: int | None = None):
        self.token = token
        self.letter = letter
        self.index = index
        where = f" for '{letter}' at number {index} sequence" if letter is not None else ""
        super().__init__(f"Invalid numeric parameter {token!r}{where}")


class UnsupportedConversion(PathDataError, NotImplementedError):
    """The instruction kind has no absolute/relative conversion rule."""

    def __init__(self, letter: str, target: str):
        self.letter = letter
        self.target = target
        super().__init__(f"Cannot convert '{letter}' instruction to {target} form")


__all__ = [
    "InvalidNumericToken",
    "MalformedParameterCount",
    "PathDataError",
    "PathParseError",
    "UnsupportedCommand",
    "UnsupportedConversion",
]
