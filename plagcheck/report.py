from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP

ROUNDING_MODES = {
    "half-up": ROUND_HALF_UP,
    "half-even": ROUND_HALF_EVEN,
}

_TWO_PLACES = Decimal("0.01")


def format_percentage(score: float, rounding: str = "half-up") -> str:
    """
    Render a similarity score as a percentage with two decimals.

    Rounding is applied to the shortest decimal form of the float
    (repr), so 0.12345 is treated as exactly 12.345% and rounds to
    "12.35%" under half-up or "12.34%" under half-even.

    >>> format_percentage(0.8567)
    '85.67%'
    """
    if rounding not in ROUNDING_MODES:
        raise ValueError(
            f"Unknown rounding mode {rounding!r}; "
            f"expected one of {', '.join(ROUNDING_MODES)}"
        )

    percent = Decimal(repr(float(score))) * 100
    return f"{percent.quantize(_TWO_PLACES, rounding=ROUNDING_MODES[rounding])}%"
