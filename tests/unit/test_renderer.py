"""Unit tests for serialization, number formatting and descriptions."""

import pytest

from svg_editor.path_data import (AbsoluteLineInstruction, describe, parse,
                                  serialize)
from svg_editor.path_data.path_decoder.helpers.number_format import \
    format_number


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (10.0, "10"),
        (-3, "-3"),
        (0.5, "0.5"),
        (0.1, "0.1"),
        (-0.0, "0"),
        (1e-07, "0.0000001"),
        (1e21, "1000000000000000000000"),
        (-12.25, "-12.25"),
    ])
    def test_shortest_positional_form(self, value, expected):
        assert format_number(value) == expected

    def test_precision_rounds_first(self):
        assert format_number(1.23456, 2) == "1.23"
        assert format_number(2.5, 0) == "2"
        assert format_number(-0.0001, 2) == "0"


class TestSerialize:
    def test_canonical_spacing(self):
        assert serialize(parse("M 0,0 L10-5")) == "M 0 0 L 10 -5"

    def test_implicit_symbols_are_elided(self):
        assert serialize(parse("M 0 0 L 10 10 L 20 20 30 30")) == "M 0 0 L 10 10 L 20 20 30 30"

    def test_relative_instructions_print_offsets(self):
        assert serialize(parse("m 1 1 l 2 2 2 2")) == "m 1 1 l 2 2 2 2"

    def test_empty_sequence(self):
        assert serialize(parse("")) == ""

    def test_no_exponent_notation(self):
        text = serialize(parse("M 0.0000001 1e20"))

        assert "e" not in text.lower()
        assert text == "M 0.0000001 100000000000000000000"

    def test_explicit_precision(self):
        assert serialize(parse("M 0.123 0.456"), precision=1) == "M 0.1 0.5"

    @pytest.mark.parametrize("environment", ["prd", "staging"])
    def test_ignores_runtime_configuration(self, monkeypatch, environment):
        monkeypatch.setenv("ENVIRONMENT", environment)
        monkeypatch.setenv("PATH_DATA_PRECISION", "2")
        text = "M 0.12345678 0 l 1.23456 2"

        assert serialize(parse(text)) == text
        assert serialize(parse(serialize(parse(text)))) == text

    def test_str_of_sequence_and_instruction(self):
        path = parse("M 0 0 L 1 1 2 2")

        assert str(path) == "M 0 0 L 1 1 2 2"
        assert str(path[2]) == "2 2"

    def test_serializes_any_iterable(self):
        assert serialize([AbsoluteLineInstruction(1, 2, explicit_symbol=True)]) == "L 1 2"


class TestDescribe:
    def test_absolute(self):
        assert describe(parse("M 0 0 L 10 10")[1]) == "Line to (10, 10)"

    def test_relative(self):
        assert describe(parse("m 0 0 l 5 5 5 5")[2]) == "Line by (5, 5) to (10, 10)"

    def test_move(self):
        assert describe(parse("M 3 4")[0]) == "Move to (3, 4)"
