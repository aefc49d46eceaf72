"""Currency unit conversion between major units (naira, cedis) and the
minor units (kobo, pesewas) the gateway expects.

Pure functions with no external dependencies.
"""

from decimal import ROUND_HALF_UP, Decimal

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: float | int | str | Decimal) -> int:
    """Convert a major-unit amount to integer minor units.

    Rounds half away from zero, so 10.005 -> 1001 and 50 -> 5000.
    Floats go through str() first to avoid binary artefacts (19.99 * 100).
    """
    value = Decimal(str(amount)) * MINOR_UNITS_PER_MAJOR
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_major_units(minor: int) -> Decimal:
    """Convert integer minor units back to a major-unit Decimal (5000 -> 50)."""
    return Decimal(minor) / MINOR_UNITS_PER_MAJOR
