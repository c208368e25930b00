from collections.abc import Iterable
from pathlib import Path

import yaml
from jinja2 import Template

from .helpers.number_format import format_number
from .instructions import PathInstruction

# Load once at module import
with open(Path(__file__).parent / "templates.yml", encoding="utf-8") as f:
    _cfg = yaml.safe_load(f)

# Compile all templates at import time
TEMPLATES: dict[str, Template] = {
    tpl_id: Template(tpl_text)
    for tpl_id, tpl_text in _cfg["templates"].items()
}
DESCRIPTIONS: dict[str, Template] = {
    tpl_id: Template(tpl_text)
    for tpl_id, tpl_text in _cfg["descriptions"].items()
}
LABELS: dict[str, str] = _cfg["labels"]


def render_instruction(instruction: PathInstruction, precision: int | None = None) -> str:
    """Render one instruction as "<Letter >x y".

    The letter is only printed when the instruction carries an explicit symbol;
    relative instructions print their stored offset.
    """
    tpl = TEMPLATES[instruction.kind.family.value]
    return tpl.render(
        explicit=instruction.explicit_symbol,
        letter=instruction.letter,
        x=format_number(instruction.x, precision),
        y=format_number(instruction.y, precision),
    )


def serialize(instructions: Iterable[PathInstruction], precision: int | None = None) -> str:
    """Render a whole instruction sequence back to path text.

    Without `precision` every number is written with the shortest digits that
    parse back to the same float, so the output round-trips exactly whatever
    the runtime configuration. Callers wanting rounded output pass it in.
    """
    return " ".join(render_instruction(instruction, precision) for instruction in instructions)


def describe(instruction: PathInstruction) -> str:
    """Turn a single instruction into a short English description."""
    end = instruction.end_position
    tpl_id = "RELATIVE" if instruction.is_relative() else "ABSOLUTE"
    return DESCRIPTIONS[tpl_id].render(
        label=LABELS.get(instruction.letter, instruction.letter),
        x=format_number(instruction.x),
        y=format_number(instruction.y),
        end_x=format_number(end.x),
        end_y=format_number(end.y),
    )


__all__ = ["describe", "render_instruction", "serialize"]
