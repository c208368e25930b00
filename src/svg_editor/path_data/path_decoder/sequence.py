# svg_editor/path_data/path_decoder/sequence.py

from __future__ import annotations

from collections.abc import Iterable, MutableSequence

from .instructions import PathInstruction, Point


class PathSequence(MutableSequence):
    """Ordered, owning container of the instructions of one path.

    Every mutation keeps the chain consistent: `previous`/`next` links are
    rewired around the edit, cached positions downstream of it are dropped and
    explicit symbols are restored where a letter would otherwise be lost.
    An instruction belongs to at most one sequence at a time; inserting one
    that is still held somewhere raises ValueError.
    """

    def __init__(self, instructions: Iterable[PathInstruction] = ()):
        self._items: list[PathInstruction] = []
        self.extend(instructions)

    # ── sequence protocol ───────────────────────────────────────────────────
    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        # slices hand back a plain list; the nodes stay owned by this sequence
        return self._items[index]

    def __setitem__(self, index, instruction: PathInstruction) -> None:
        if isinstance(index, slice):
            raise TypeError("PathSequence does not support slice assignment")
        index = self._normalize_index(index)
        old = self._items[index]
        if instruction is old:
            return
        self._check_detached(instruction)
        self._items[index] = instruction
        self._detach(old)
        self._relink(index)
        self._repair_symbols(index)
        self._repair_symbols(index + 1)

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            raise TypeError("PathSequence does not support slice deletion")
        index = self._normalize_index(index)
        removed = self._items.pop(index)
        self._detach(removed)
        if index > 0:
            self._items[index - 1].next = self._items[index] if index < len(self._items) else None
        if index < len(self._items):
            self._items[index].previous = self._items[index - 1] if index > 0 else None
        self._repair_symbols(index)

    def insert(self, index: int, instruction: PathInstruction) -> None:
        self._check_detached(instruction)
        index = max(0, min(index if index >= 0 else len(self._items) + index, len(self._items)))
        self._items.insert(index, instruction)
        self._relink(index)
        self._repair_symbols(index)
        self._repair_symbols(index + 1)

    def reverse(self) -> None:
        # the inherited pairwise swap would briefly hold one node at two indexes
        instructions = self._items[::-1]
        self.clear()
        self.extend(instructions)

    def __repr__(self) -> str:
        return f"PathSequence({self._items!r})"

    def __str__(self) -> str:
        from .renderer import serialize

        return serialize(self)

    # ── conversions in place ────────────────────────────────────────────────
    def to_absolute_at(self, index: int) -> PathInstruction:
        """Replace the instruction at `index` by its absolute form, keeping its geometry."""
        converted = self._items[index].to_absolute()
        if converted is not self._items[index]:
            self[index] = converted
        return converted

    def to_relative_at(self, index: int) -> PathInstruction:
        """Replace the instruction at `index` by its relative form, keeping its geometry."""
        converted = self._items[index].to_relative()
        if converted is not self._items[index]:
            self[index] = converted
        return converted

    def end_positions(self) -> list[Point]:
        return [instruction.end_position for instruction in self._items]

    # ── helpers ─────────────────────────────────────────────────────────────
    def _normalize_index(self, index: int) -> int:
        if index < 0:
            index += len(self._items)
        if not 0 <= index < len(self._items):
            raise IndexError("PathSequence index out of range")
        return index

    def _relink(self, index: int) -> None:
        """Wire the instruction at `index` to both neighbours."""
        instruction = self._items[index]
        previous = self._items[index - 1] if index > 0 else None
        following = self._items[index + 1] if index + 1 < len(self._items) else None

        instruction._sequence = self
        instruction.next = following
        instruction.previous = previous
        if previous is not None:
            previous.next = instruction
        if following is not None:
            following.previous = instruction

    @staticmethod
    def _check_detached(instruction: PathInstruction) -> None:
        # a node sits at exactly one index of at most one sequence
        if instruction._sequence is not None:
            raise ValueError(
                f"{instruction!r} already belongs to a PathSequence; "
                "remove it first or insert a copy"
            )

    @staticmethod
    def _detach(instruction: PathInstruction) -> None:
        instruction.previous = None
        instruction.next = None
        instruction._sequence = None

    def _repair_symbols(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            return
        instruction = self._items[index]
        if index == 0 or self._items[index - 1].letter != instruction.letter:
            instruction.explicit_symbol = True


__all__ = ["PathSequence"]
