"""Parse -> serialize -> parse keeps every instruction's kind, geometry and symbol."""

import pytest

from svg_editor.path_data import parse, serialize

PATHS = [
    "M 0 0 L 10 10 20 20",
    "m 0 0 l 5 5 5 5",
    "M10-5L.5,.25l-3-4-1.5 2",
    "M 1e3 2 L 0.1 0.2",
    "  M 1 1 m 2 2 3 3 l 1 1 L 4 4  ",
    "M 0.0000001 -0.0",
    "l 0.3 -0.7 0.3 -0.7 0.3 -0.7 L 1e2,1e1",
]


def summary(sequence):
    return [(i.kind, tuple(i.end_position), i.explicit_symbol) for i in sequence]


@pytest.mark.parametrize("text", PATHS)
def test_round_trip_preserves_instructions(text):
    first = parse(text)
    second = parse(serialize(first))

    assert summary(second) == summary(first)


@pytest.mark.parametrize("text", PATHS)
def test_canonical_form_is_stable(text):
    canonical = serialize(parse(text))

    assert serialize(parse(canonical)) == canonical


@pytest.mark.slow
def test_long_relative_path_round_trip():
    n = 3000
    text = "m 0 0 l" + " 1 1" * n

    path = parse(text)

    assert path[-1].end_position == (n, n)
    assert summary(parse(serialize(path))) == summary(path)
