from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


# Assumed when the catalog has no displacement for a vehicle
DEFAULT_DISPLACEMENT_CC = 150


class VehicleCategory(str, Enum):
    """Official vehicle categories used by the registration matrix."""

    URBAN_WORK = "URBANA Y/O TRABAJO"
    SPORT = "DEPORTIVA"
    OFF_ROAD = "TODOTERRENO"
    ELECTRIC = "ELECTRICA"
    SCOOTER_BOARD = "PATINETA"
    CARGO = "MOTOCARRO Y/O MOTOCARGUERO"
    SEMI_AUTOMATIC = "SEMIAUTOMATICA"
    AUTOMATIC = "AUTOMATICA Y/O SCOOTER"


DEFAULT_CATEGORY = VehicleCategory.URBAN_WORK


def normalize_text(value: str) -> str:
    """Trim, strip accents and uppercase free text for matching."""
    decomposed = unicodedata.normalize("NFKD", value.strip())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.upper()


def normalize_category(value: str | VehicleCategory) -> str:
    if isinstance(value, VehicleCategory):
        return value.value
    return normalize_text(value)


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    brand: str
    reference: str
    price: Decimal
    displacement: int | None = None
    categories: tuple[str, ...] = field(default_factory=tuple)
    # Deprecated single-category field, read when `categories` is empty
    category: str | None = None
    special_adjustment: Decimal = Decimal("0")

    @property
    def effective_displacement(self) -> int:
        return self.displacement or DEFAULT_DISPLACEMENT_CC

    def candidate_categories(self) -> list[str]:
        """
        Normalized categories used for registration lookups.

        Falls back from the category list to the legacy single category,
        and finally to the default urban/work category.
        """
        if self.categories:
            raw: list[str] = list(self.categories)
        elif self.category:
            raw = [self.category]
        else:
            raw = [DEFAULT_CATEGORY.value]

        normalized = [normalize_category(value) for value in raw]
        return [value for value in normalized if value] or [DEFAULT_CATEGORY.value]
