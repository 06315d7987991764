from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

# Prices are whole currency units (COP has no fractional cents in practice)
UNIT = Decimal("1")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def round_units(value: Decimal) -> Decimal:
    """Round half-up to a whole currency unit."""
    return value.quantize(UNIT, rounding=ROUND_HALF_UP)


def ceil_units(value: Decimal) -> Decimal:
    return value.quantize(UNIT, rounding=ROUND_CEILING)


def percent_of(amount: Decimal, rate_percent: Decimal) -> Decimal:
    """Rounded ``rate_percent``% of ``amount``."""
    return round_units(amount * rate_percent / HUNDRED)
