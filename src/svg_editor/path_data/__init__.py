"""Path-data engine: parse, edit and serialize letter-prefixed path commands.

Typical use::

    from svg_editor.path_data import parse, serialize

    path = parse("m 0 0 l 5 5 5 5")
    path[2].end_position          # Point(x=10.0, y=10.0)
    serialize(path)               # "m 0 0 l 5 5 5 5"
"""

from .errors import (InvalidNumericToken, MalformedParameterCount,
                     PathDataError, PathParseError, UnsupportedCommand,
                     UnsupportedConversion)
from .path_decoder.converter import to_absolute, to_relative
from .path_decoder.decoder import parse_path as parse
from .path_decoder.defs import InstructionKind
from .path_decoder.instructions import (AbsoluteLineInstruction,
                                        AbsoluteMoveInstruction,
                                        PathInstruction, Point,
                                        RelativeLineInstruction,
                                        RelativeMoveInstruction)
from .path_decoder.renderer import describe, serialize
from .path_decoder.sequence import PathSequence

__all__ = [
    "AbsoluteLineInstruction",
    "AbsoluteMoveInstruction",
    "InstructionKind",
    "InvalidNumericToken",
    "MalformedParameterCount",
    "PathDataError",
    "PathInstruction",
    "PathParseError",
    "PathSequence",
    "Point",
    "RelativeLineInstruction",
    "RelativeMoveInstruction",
    "UnsupportedCommand",
    "UnsupportedConversion",
    "describe",
    "parse",
    "serialize",
    "to_absolute",
    "to_relative",
]
