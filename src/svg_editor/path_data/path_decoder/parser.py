# svg_editor/path_data/path_decoder/parser.py

import logging
from collections.abc import Callable

from svg_editor.path_data.errors import MalformedParameterCount, UnsupportedCommand

from .defs import InstructionKind
from .instructions import (AbsoluteLineInstruction, AbsoluteMoveInstruction,
                           PathInstruction, RelativeLineInstruction,
                           RelativeMoveInstruction)
from .sequence import PathSequence
from .tokenizer import CommandGroup

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
def parse(groups: list[CommandGroup], normalized: str = "") -> PathSequence:
    """Main parser dispatcher: turns command groups into one linked PathSequence.

    Args:
      groups: CommandGroup tuples (from tokenize(text)).
      normalized: the normalized input, quoted in error messages.

    Returns:
      PathSequence: every instruction of the path, chained in source order.

    Raises:
      UnsupportedCommand: a letter has no instruction variant.
      MalformedParameterCount: a group does not hold whole coordinate pairs.

    """
    sequence = PathSequence()
    for group in groups:
        parser_func_tuple = dispatch_map.get(group.letter)
        if parser_func_tuple is None:
            raise UnsupportedCommand(group.letter)

        parser_func, instruction_cls = parser_func_tuple
        sequence.extend(parser_func(group, instruction_cls, normalized))

    logger.debug("Parsed %d command group(s) into %d instruction(s)", len(groups), len(sequence))
    return sequence


# ──────────────────────────────────────────────────────────────────────────────
def parse_coordinate_pairs(
    group: CommandGroup,
    instruction_cls: type[PathInstruction],
    normalized: str = "",
) -> list[PathInstruction]:
    """Expand a group of (x, y) pairs into one instruction per pair.

    Only the first instruction of the group prints its letter; the rest rely on
    the implicit repeat of the previous command.
    """
    parameters = group.parameters
    if not parameters or len(parameters) % 2 != 0:
        raise MalformedParameterCount(group.letter, group.index, normalized)

    return [
        instruction_cls(parameters[i], parameters[i + 1], explicit_symbol=i == 0)
        for i in range(0, len(parameters), 2)
    ]


# ──────────────────────────────────────────────────────────────────────────────
# Dispatch map: command letter -> (group parser, instruction variant)
# ──────────────────────────────────────────────────────────────────────────────
dispatch_map: dict[str, tuple[Callable, type[PathInstruction]]] = {
    InstructionKind.ABSOLUTE_MOVE.letter: (parse_coordinate_pairs, AbsoluteMoveInstruction),
    InstructionKind.RELATIVE_MOVE.letter: (parse_coordinate_pairs, RelativeMoveInstruction),
    InstructionKind.ABSOLUTE_LINE.letter: (parse_coordinate_pairs, AbsoluteLineInstruction),
    InstructionKind.RELATIVE_LINE.letter: (parse_coordinate_pairs, RelativeLineInstruction),
    # close, horizontal/vertical, curve and arc kinds have no variant yet
}


__all__ = ["dispatch_map", "parse", "parse_coordinate_pairs"]
