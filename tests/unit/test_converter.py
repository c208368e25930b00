"""Unit tests for absolute/relative instruction conversion."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from svg_editor.path_data import (AbsoluteLineInstruction,
                                  AbsoluteMoveInstruction, InstructionKind,
                                  PathInstruction, RelativeLineInstruction,
                                  RelativeMoveInstruction,
                                  UnsupportedConversion, parse, to_absolute,
                                  to_relative)


@dataclass(eq=False)
class ClosePathStub(PathInstruction):
    """A kind the converter has no rule for."""

    kind: ClassVar[InstructionKind] = InstructionKind.ABSOLUTE_CLOSE


class TestToAbsolute:
    def test_absolute_is_returned_unchanged(self):
        line = parse("M 1 1 L 4 5")[1]

        assert to_absolute(line) is line
        assert to_absolute(to_absolute(line)) is line
        assert line.to_absolute().end_position == (4, 5)

    def test_relative_line_resolves_end(self):
        line = parse("M 1 1 l 2 3")[1]

        converted = line.to_absolute()

        assert isinstance(converted, AbsoluteLineInstruction)
        assert converted.end_position == (3, 4)
        assert converted.explicit_symbol is True
        assert converted.previous is None

    def test_relative_move_becomes_absolute_move(self):
        move = parse("M 1 1 m 2 2")[1]

        converted = to_absolute(move)

        assert isinstance(converted, AbsoluteMoveInstruction)
        assert converted.end_position == (3, 3)

    def test_idempotent_after_conversion(self):
        converted = to_absolute(parse("m 4 4 l 1 1")[1])

        assert to_absolute(converted) is converted
        assert to_absolute(converted).end_position == (5, 5)


class TestToRelative:
    def test_offset_is_end_minus_start(self):
        line = parse("M 1 1 L 4 5")[1]

        converted = to_relative(line)

        assert isinstance(converted, RelativeLineInstruction)
        assert (converted.x, converted.y) == (3, 4)

    def test_absolute_move_mirrors_line(self):
        move = parse("M 1 1 L 4 5 M 10 10")[2]

        converted = move.to_relative()

        assert isinstance(converted, RelativeMoveInstruction)
        assert (converted.x, converted.y) == (6, 5)
        assert converted.explicit_symbol is True

    def test_first_absolute_move_offset_is_from_origin(self):
        converted = parse("M 7 -2")[0].to_relative()

        assert (converted.x, converted.y) == (7, -2)

    def test_relative_is_returned_unchanged(self):
        line = parse("m 1 1 l 1 1")[1]

        assert to_relative(line) is line


class TestUnsupportedConversion:
    def test_kind_without_rule(self):
        close = ClosePathStub(0, 0)

        with pytest.raises(UnsupportedConversion) as excinfo:
            to_absolute(close)
        assert excinfo.value.letter == "Z"

        with pytest.raises(NotImplementedError):
            close.to_relative()
