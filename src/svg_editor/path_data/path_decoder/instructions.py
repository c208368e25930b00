# svg_editor/path_data/path_decoder/instructions.py

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, ClassVar, NamedTuple

from .defs import InstructionKind


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)

# assigning one of these fields changes where the instruction ends
_COORDINATE_FIELDS = frozenset({"x", "y"})


@dataclass(eq=False)
class PathInstruction:
    """Common fields for _all_ path instructions.
    - x, y           : stored coordinates; the end point for absolute kinds,
                       the offset from the predecessor's end for relative kinds
    - explicit_symbol: whether the command letter is printed on serialization

    Instructions are chained through `previous`/`next`. Both are weak
    references; the PathSequence holding the instructions owns them, and each
    instruction keeps its owning sequence alive through `sequence`, so a node
    taken out of `parse(text)[k]` still resolves through its predecessors.
    """

    kind: ClassVar[InstructionKind]

    x: float
    y: float
    explicit_symbol: bool = field(default=False, kw_only=True)
    _previous: weakref.ref | None = field(default=None, init=False, repr=False)
    _next: weakref.ref | None = field(default=None, init=False, repr=False)
    # owning PathSequence; set and cleared by the sequence only
    _sequence: Any = field(default=None, init=False, repr=False)
    # resolved absolute end position of a relative instruction
    _cached_end: Point | None = field(default=None, init=False, repr=False)

    def __setattr__(self, name, value):
        super().__setattr__(name, value)
        # skip while __init__ is still assigning fields
        if name in _COORDINATE_FIELDS and "_cached_end" in self.__dict__:
            invalidate_positions(self)

    def __str__(self) -> str:
        from .renderer import render_instruction

        return render_instruction(self)

    @property
    def letter(self) -> str:
        return self.kind.letter

    def is_relative(self) -> bool:
        return self.kind.is_relative

    @property
    def sequence(self):
        """The PathSequence holding this instruction, or None when detached."""
        return self._sequence

    @property
    def previous(self) -> PathInstruction | None:
        return self._previous() if self._previous is not None else None

    @previous.setter
    def previous(self, instruction: PathInstruction | None) -> None:
        self._previous = weakref.ref(instruction) if instruction is not None else None
        invalidate_positions(self)

    @property
    def next(self) -> PathInstruction | None:
        return self._next() if self._next is not None else None

    @next.setter
    def next(self, instruction: PathInstruction | None) -> None:
        self._next = weakref.ref(instruction) if instruction is not None else None

    @property
    def start_position(self) -> Point:
        previous = self.previous
        return previous.end_position if previous is not None else ORIGIN

    @property
    def end_position(self) -> Point:
        return resolve_end_position(self)

    @end_position.setter
    def end_position(self, value: tuple[float, float]) -> None:
        x, y = value
        if self.kind.is_relative:
            start = self.start_position
            x, y = x - start.x, y - start.y
        # bypass __setattr__ so the downstream walk runs once
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        invalidate_positions(self)

    def to_absolute(self) -> PathInstruction:
        from .converter import to_absolute

        return to_absolute(self)

    def to_relative(self) -> PathInstruction:
        from .converter import to_relative

        return to_relative(self)


@dataclass(eq=False)
class AbsoluteMoveInstruction(PathInstruction):
    """Start a new subpath at (x, y)."""

    kind: ClassVar[InstructionKind] = InstructionKind.ABSOLUTE_MOVE


@dataclass(eq=False)
class RelativeMoveInstruction(PathInstruction):
    """Start a new subpath offset by (x, y) from the current point."""

    kind: ClassVar[InstructionKind] = InstructionKind.RELATIVE_MOVE


@dataclass(eq=False)
class AbsoluteLineInstruction(PathInstruction):
    """Straight line from the current point to (x, y)."""

    kind: ClassVar[InstructionKind] = InstructionKind.ABSOLUTE_LINE


@dataclass(eq=False)
class RelativeLineInstruction(PathInstruction):
    """Straight line from the current point, offset by (x, y)."""

    kind: ClassVar[InstructionKind] = InstructionKind.RELATIVE_LINE


def resolve_end_position(instruction: PathInstruction) -> Point:
    """Absolute end position of `instruction`.

    Walks back to the nearest absolute (or already resolved) instruction and
    accumulates offsets forward, caching every relative position it passes.
    Iterative, so long relative runs never hit the recursion limit.
    """
    pending: list[PathInstruction] = []
    current: PathInstruction | None = instruction
    while current is not None and current.kind.is_relative and current._cached_end is None:
        pending.append(current)
        current = current.previous

    if current is None:
        base = ORIGIN
    elif current.kind.is_relative:
        base = current._cached_end
    else:
        base = Point(current.x, current.y)

    for item in reversed(pending):
        base = Point(base.x + item.x, base.y + item.y)
        object.__setattr__(item, "_cached_end", base)
    return base


def invalidate_positions(instruction: PathInstruction) -> None:
    """Drop cached positions that depend on `instruction`'s end point.

    Clears the instruction itself and every following instruction up to the
    next absolute one, whose end point does not depend on what precedes it.
    """
    current: PathInstruction | None = instruction
    while current is not None:
        object.__setattr__(current, "_cached_end", None)
        current = current.next
        if current is not None and not current.kind.is_relative:
            break


__all__ = [
    "ORIGIN",
    "AbsoluteLineInstruction",
    "AbsoluteMoveInstruction",
    "PathInstruction",
    "Point",
    "RelativeLineInstruction",
    "RelativeMoveInstruction",
    "invalidate_positions",
    "resolve_end_position",
]
