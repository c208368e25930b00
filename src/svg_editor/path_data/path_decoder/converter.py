"""Absolute/relative conversion of path instructions.

Converted instructions are detached: they carry no `previous`/`next` links.
A relative result only resolves to the original geometry once it takes the
original's place in the chain (see PathSequence.to_relative_at).
"""

from svg_editor.path_data.errors import UnsupportedConversion

from .instructions import (AbsoluteLineInstruction, AbsoluteMoveInstruction,
                           PathInstruction, RelativeLineInstruction,
                           RelativeMoveInstruction)


def to_absolute(instruction: PathInstruction) -> PathInstruction:
    match instruction:
        case AbsoluteMoveInstruction() | AbsoluteLineInstruction():
            return instruction
        case RelativeMoveInstruction():
            end = instruction.end_position
            return AbsoluteMoveInstruction(end.x, end.y, explicit_symbol=instruction.explicit_symbol)
        case RelativeLineInstruction():
            end = instruction.end_position
            return AbsoluteLineInstruction(end.x, end.y, explicit_symbol=instruction.explicit_symbol)
        case _:
            raise UnsupportedConversion(instruction.letter, "absolute")


def to_relative(instruction: PathInstruction) -> PathInstruction:
    """Relative form of `instruction`; the offset is end_position - start_position."""
    match instruction:
        case RelativeMoveInstruction() | RelativeLineInstruction():
            return instruction
        case AbsoluteMoveInstruction():
            dx, dy = _offset(instruction)
            return RelativeMoveInstruction(dx, dy, explicit_symbol=instruction.explicit_symbol)
        case AbsoluteLineInstruction():
            dx, dy = _offset(instruction)
            return RelativeLineInstruction(dx, dy, explicit_symbol=instruction.explicit_symbol)
        case _:
            raise UnsupportedConversion(instruction.letter, "relative")


def _offset(instruction: PathInstruction) -> tuple[float, float]:
    start, end = instruction.start_position, instruction.end_position
    return end.x - start.x, end.y - start.y


__all__ = ["to_absolute", "to_relative"]
