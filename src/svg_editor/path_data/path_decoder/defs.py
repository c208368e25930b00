# -----------------------------------------------------------------------------
# Path command kinds (one per letter of the path-data alphabet)
# -----------------------------------------------------------------------------
# flake8: noqa: E221
from enum import Enum


class CommandFamily(Enum):
    """Geometric family shared by the absolute and relative form of a command."""

    MOVE             = "MOVE"
    CLOSE            = "CLOSE"
    LINE             = "LINE"
    HORIZONTAL       = "HORIZONTAL"
    VERTICAL         = "VERTICAL"
    CUBIC            = "CUBIC"
    SMOOTH_CUBIC     = "SMOOTH_CUBIC"
    QUADRATIC        = "QUADRATIC"
    SMOOTH_QUADRATIC = "SMOOTH_QUADRATIC"
    ARC              = "ARC"


# number of parameters one instruction of the family consumes
FAMILY_ARITY: dict[CommandFamily, int] = {
    CommandFamily.MOVE:             2,
    CommandFamily.CLOSE:            0,
    CommandFamily.LINE:             2,
    CommandFamily.HORIZONTAL:       1,
    CommandFamily.VERTICAL:         1,
    CommandFamily.CUBIC:            6,
    CommandFamily.SMOOTH_CUBIC:     4,
    CommandFamily.QUADRATIC:        4,
    CommandFamily.SMOOTH_QUADRATIC: 2,
    CommandFamily.ARC:              7,
}


class InstructionKind(Enum):
    """Path command kinds, valued by their command letter.

    Upper-case letters store world-space coordinates, lower-case letters store
    an offset from the end of the preceding instruction.
    """

    ABSOLUTE_MOVE             = "M"
    RELATIVE_MOVE             = "m"
    ABSOLUTE_CLOSE            = "Z"
    RELATIVE_CLOSE            = "z"
    ABSOLUTE_LINE             = "L"
    RELATIVE_LINE             = "l"
    ABSOLUTE_HORIZONTAL       = "H"
    RELATIVE_HORIZONTAL       = "h"
    ABSOLUTE_VERTICAL         = "V"
    RELATIVE_VERTICAL         = "v"
    ABSOLUTE_CUBIC            = "C"
    RELATIVE_CUBIC            = "c"
    ABSOLUTE_SMOOTH_CUBIC     = "S"
    RELATIVE_SMOOTH_CUBIC     = "s"
    ABSOLUTE_QUADRATIC        = "Q"
    RELATIVE_QUADRATIC        = "q"
    ABSOLUTE_SMOOTH_QUADRATIC = "T"
    RELATIVE_SMOOTH_QUADRATIC = "t"
    ABSOLUTE_ARC              = "A"
    RELATIVE_ARC              = "a"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def is_relative(self) -> bool:
        return self.value.islower()

    @property
    def family(self) -> CommandFamily:
        return CommandFamily[self.name.split("_", 1)[1]]

    @property
    def arity(self) -> int:
        return FAMILY_ARITY[self.family]


# Every letter that opens a command group, in the order the normalizer visits them.
COMMAND_LETTERS: tuple[str, ...] = tuple(kind.value for kind in InstructionKind)


__all__ = ["COMMAND_LETTERS", "FAMILY_ARITY", "CommandFamily", "InstructionKind"]
