from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from tienda_motos.domain.money import ZERO
from tienda_motos.domain.pricing import RateBand


def resolve_soat_premium(displacement: int, bands: Iterable[RateBand] | None) -> Decimal:
    """
    SOAT premium for a displacement.

    Bands are sorted by lower bound and the first one containing the
    displacement wins. An empty list or no matching band resolves to 0.
    """
    for band in sorted(bands or (), key=lambda b: b.min_displacement):
        if band.contains(displacement):
            return band.premium
    return ZERO
