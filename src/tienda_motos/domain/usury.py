from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from tienda_motos.domain.money import HUNDRED


RATE_PRECISION = Decimal("0.0001")


def effective_annual_to_monthly(effective_annual_percent: Decimal) -> Decimal:
    """
    Convert an effective annual rate (E.A.) to a monthly rate (M.V.).

    Both rates are percentages: 12.6825 E.A. -> 1.0000 M.V.
    """
    ea = effective_annual_percent / HUNDRED
    monthly = (Decimal("1") + ea) ** (Decimal("1") / Decimal("12")) - Decimal("1")
    return (monthly * HUNDRED).quantize(RATE_PRECISION, rounding=ROUND_HALF_UP)
