"""Decimal helpers shared by the planning services."""

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
ML_PER_LITER = Decimal("1000")


def to_decimal(value: float | int | str | Decimal | None) -> Decimal:
    """Convert a stored number to Decimal without binary float artefacts."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(value: Decimal, places: int) -> Decimal:
    """Round half-up to a fixed number of decimal places."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
