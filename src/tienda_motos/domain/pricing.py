from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentMethod(str, Enum):
    CASH = "cash"
    CREDIT = "credit"


class RegistrationColumn(str, Enum):
    """Registration matrix column selected by payment method and city."""

    CREDIT_GENERAL = "registration_credit_general"
    CREDIT_SANTA_MARTA = "registration_credit_santa_marta"
    CASH_ENVIGADO = "registration_cash_envigado"
    CASH_CIENAGA = "registration_cash_cienaga"
    CASH_ZONA_BANANERA = "registration_cash_zona_bananera"
    CASH_SANTA_MARTA = "registration_cash_santa_marta"


# Open-ended band limits when a rate band leaves them unset
MIN_DISPLACEMENT_CC = 0
MAX_DISPLACEMENT_CC = 99999

# Stamp tax charged on cash sales above this displacement
STAMP_TAX_DISPLACEMENT_CC = 125
STAMP_TAX_ANNUAL_RATE = Decimal("0.015")
STAMP_TAX_FIXED_SURCHARGE = Decimal("75000")


@dataclass(frozen=True, slots=True)
class RateBand:
    """SOAT premium for a closed displacement interval."""

    premium: Decimal
    min_displacement: int = MIN_DISPLACEMENT_CC
    max_displacement: int = MAX_DISPLACEMENT_CC

    def contains(self, displacement: int) -> bool:
        return self.min_displacement <= displacement <= self.max_displacement


@dataclass(frozen=True, slots=True)
class Scenario:
    """City/financing context a quote is requested for."""

    id: str
    name: str
    documentation_fee: Decimal = Decimal("0")
    # Flat registration cost used when the matrix has nothing for a vehicle
    legacy_registration_cost: Decimal = Decimal("0")


@dataclass(frozen=True, slots=True)
class MatrixRow:
    """
    One row of the registration cost matrix.

    A row is either category-specific (``category`` set) or generic, in
    which case it applies to vehicles whose displacement falls inside
    ``[min_cc, max_cc]``.
    """

    id: str
    label: str
    registration_credit_general: Decimal
    registration_credit_santa_marta: Decimal
    registration_cash_envigado: Decimal
    registration_cash_cienaga: Decimal
    registration_cash_zona_bananera: Decimal
    registration_cash_santa_marta: Decimal
    min_cc: int | None = None
    max_cc: int | None = None
    category: str | None = None
    soat_price: Decimal | None = None

    def value_for(self, column: RegistrationColumn) -> Decimal:
        return getattr(self, column.value)

    def covers_displacement(self, displacement: int) -> bool:
        if self.min_cc is None and self.max_cc is None:
            return False
        low = self.min_cc if self.min_cc is not None else MIN_DISPLACEMENT_CC
        high = self.max_cc if self.max_cc is not None else MAX_DISPLACEMENT_CC
        return low <= displacement <= high


DEFAULT_SOAT_BANDS: tuple[RateBand, ...] = (
    RateBand(min_displacement=0, max_displacement=99, premium=Decimal("489400")),
    RateBand(min_displacement=100, max_displacement=124, premium=Decimal("678400")),
    RateBand(min_displacement=125, max_displacement=200, premium=Decimal("678400")),
    RateBand(min_displacement=201, max_displacement=99999, premium=Decimal("822500")),
)


DEFAULT_REGISTRATION_MATRIX: tuple[MatrixRow, ...] = (
    MatrixRow(
        id="0-99",
        label="0 - 99 cc",
        min_cc=0,
        max_cc=99,
        soat_price=Decimal("489400"),
        registration_credit_general=Decimal("660000"),
        registration_credit_santa_marta=Decimal("760000"),
        registration_cash_envigado=Decimal("530000"),
        registration_cash_cienaga=Decimal("595000"),
        registration_cash_zona_bananera=Decimal("600000"),
        registration_cash_santa_marta=Decimal("730000"),
    ),
    MatrixRow(
        id="100-124",
        label="100 - 124 cc",
        min_cc=100,
        max_cc=124,
        soat_price=Decimal("678400"),
        registration_credit_general=Decimal("740000"),
        registration_credit_santa_marta=Decimal("840000"),
        registration_cash_envigado=Decimal("605000"),
        registration_cash_cienaga=Decimal("680000"),
        registration_cash_zona_bananera=Decimal("680000"),
        registration_cash_santa_marta=Decimal("820000"),
    ),
    MatrixRow(
        id="125-200",
        label="125 - 200 cc",
        min_cc=125,
        max_cc=200,
        soat_price=Decimal("678400"),
        registration_credit_general=Decimal("820000"),
        registration_credit_santa_marta=Decimal("920000"),
        registration_cash_envigado=Decimal("605000"),
        registration_cash_cienaga=Decimal("680000"),
        registration_cash_zona_bananera=Decimal("680000"),
        registration_cash_santa_marta=Decimal("820000"),
    ),
    MatrixRow(
        id="gt-200",
        label="Mayor a 200 cc",
        min_cc=201,
        max_cc=99999,
        soat_price=Decimal("822500"),
        registration_credit_general=Decimal("1020000"),
        registration_credit_santa_marta=Decimal("1120000"),
        registration_cash_envigado=Decimal("1040000"),
        registration_cash_cienaga=Decimal("1110000"),
        registration_cash_zona_bananera=Decimal("1100000"),
        registration_cash_santa_marta=Decimal("1260000"),
    ),
    MatrixRow(
        id="electrical",
        label="Eléctricas",
        category="ELECTRICA",
        soat_price=Decimal("0"),
        registration_credit_general=Decimal("440000"),
        registration_credit_santa_marta=Decimal("540000"),
        registration_cash_envigado=Decimal("400000"),
        registration_cash_cienaga=Decimal("470000"),
        registration_cash_zona_bananera=Decimal("470000"),
        registration_cash_santa_marta=Decimal("605000"),
    ),
    MatrixRow(
        id="motocarro",
        label="Motocarros",
        category="MOTOCARRO Y/O MOTOCARGUERO",
        min_cc=0,
        max_cc=99999,
        soat_price=Decimal("0"),
        registration_credit_general=Decimal("850000"),
        registration_credit_santa_marta=Decimal("950000"),
        registration_cash_envigado=Decimal("650000"),
        registration_cash_cienaga=Decimal("720000"),
        registration_cash_zona_bananera=Decimal("720000"),
        registration_cash_santa_marta=Decimal("870000"),
    ),
)


DEFAULT_SCENARIOS: tuple[Scenario, ...] = (
    Scenario(id="credit-general", name="General, Crédito"),
    Scenario(id="credit-santa-marta", name="Santa Marta, Crédito"),
    Scenario(id="cash-envigado", name="Envigado, Contado"),
    Scenario(id="cash-cienaga", name="Ciénaga, Contado"),
    Scenario(id="cash-zona-bananera", name="Zona Bananera, Contado"),
    Scenario(id="cash-santa-marta", name="Santa Marta, Contado"),
)
