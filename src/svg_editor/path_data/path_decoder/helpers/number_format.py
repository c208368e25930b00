from decimal import Decimal


def format_number(value: float, precision: int | None = None) -> str:
    """Render a coordinate in culture-invariant positional notation.

    Uses the shortest digits that read back as the same float, never an
    exponent (the tokenizer splits "1e-07" at the '-') and never "-0".
    """
    value = float(value)
    if precision is not None:
        value = round(value, precision)
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
