# noqa: D100
import logging
import math
import re
from typing import NamedTuple

from svg_editor.path_data.errors import InvalidNumericToken

from .defs import COMMAND_LETTERS

logger = logging.getLogger(__name__)

# plain culture-invariant decimal literal; a '-' always starts a new token
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE]\+?\d+)?")
_WHITESPACE_RE = re.compile(r"\s+")


class CommandGroup(NamedTuple):
    letter: str               # e.g. "M", "l"
    parameters: list[float]   # numeric parameters in source order
    index: int                # 1-based position among the command groups
    raw: str                  # "<letter> <params>" as it appeared after normalizing


def normalize(raw: str) -> str:
    """Rewrite path text so that commas only ever separate command groups.

    Value commas become spaces, every '-' starts a fresh token and every
    command letter is prefixed by ", ". Runs of whitespace collapse to one space.
    """
    if not raw:
        return ""
    stripped = raw.replace(",", " ").replace("-", " -")
    for letter in COMMAND_LETTERS:
        stripped = stripped.replace(letter, f",{letter} ")
    return _WHITESPACE_RE.sub(" ", stripped).lstrip(" ")


def parse_number(token: str, letter: str | None = None, index: int | None = None) -> float:
    if not _NUMBER_RE.fullmatch(token):
        raise InvalidNumericToken(token, letter, index)
    value = float(token)
    # "1e999" or a few hundred digits overflow to inf, which cannot be written back
    if not math.isfinite(value):
        raise InvalidNumericToken(token, letter, index)
    return value


def split_parameters(params: str) -> list[str]:
    return params.split(" ") if params else []


def tokenize(raw: str) -> list[CommandGroup]:
    """Break path text into command groups.

    Returns one CommandGroup per command letter, in source order. Text in front
    of the first command letter carries no command and is dropped.
    """
    normalized = normalize(raw)
    if not normalized:
        return []

    pieces = normalized.split(",")
    if pieces[0].strip():
        logger.warning("Dropping text before the first path command: %r", pieces[0].strip())

    groups: list[CommandGroup] = []
    for index, piece in enumerate(pieces[1:], start=1):
        seq = piece.rstrip(" ")
        letter = seq[0]
        parameters = [parse_number(token, letter, index) for token in split_parameters(seq[2:])]
        groups.append(CommandGroup(letter=letter, parameters=parameters, index=index, raw=seq))

    return groups


__all__ = ["CommandGroup", "normalize", "parse_number", "tokenize"]
