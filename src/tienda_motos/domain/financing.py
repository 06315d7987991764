from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from tienda_motos.domain.money import ZERO


DEFAULT_TERM_MONTHS = 48
# Monthly rate (%) used when an entity does not publish one
DEFAULT_MONTHLY_INTEREST_RATE = Decimal("2.5")
# Life insurance, % of the financed principal per month
DEFAULT_LIFE_INSURANCE_RATE = Decimal("0.1126")


class LifeInsuranceMode(str, Enum):
    PERCENTAGE = "percentage"
    FIXED_PER_MILLION = "fixed_per_million"


class UnemploymentInsuranceMode(str, Enum):
    FIXED_MONTHLY = "fixed_monthly"
    PERCENTAGE_MONTHLY = "percentage_monthly"


@dataclass(frozen=True, slots=True)
class FinancialEntity:
    """
    Parameter set of a lender (bank, Brilla gas-bill credit, fintech...).

    Every optional rate left as None (or zero) means the corresponding
    layer does not apply. See `resolve_entity_terms` for the defaults.
    """

    id: str
    name: str
    interest_rate: Decimal | None = None
    guarantee_fund_rate: Decimal | None = None
    management_fee_rate: Decimal | None = None
    coverage_rate: Decimal | None = None
    finances_registration: bool = True
    life_insurance_mode: LifeInsuranceMode = LifeInsuranceMode.PERCENTAGE
    life_insurance_value: Decimal | None = None
    unemployment_insurance_mode: UnemploymentInsuranceMode | None = None
    unemployment_insurance_value: Decimal | None = None
    min_down_payment_percentage: Decimal = ZERO
    synced_with_usury: bool = False
    manual_override: bool = False


@dataclass(frozen=True, slots=True)
class EntityTerms:
    """Entity parameters with every default resolved."""

    name: str | None
    interest_rate: Decimal
    guarantee_fund_rate: Decimal
    management_fee_rate: Decimal
    coverage_rate: Decimal
    finances_registration: bool
    life_insurance_mode: LifeInsuranceMode
    life_insurance_value: Decimal
    unemployment_insurance_mode: UnemploymentInsuranceMode | None
    unemployment_insurance_value: Decimal
    min_down_payment_percentage: Decimal


def _or_zero(value: Decimal | None) -> Decimal:
    return value if value is not None else ZERO


def resolve_entity_terms(entity: FinancialEntity | None) -> EntityTerms:
    """
    Resolve all entity defaults in one place.

    A missing entity behaves as an entity with no optional layers, the
    default interest rate and the default percentage life insurance.
    """
    if entity is None:
        return EntityTerms(
            name=None,
            interest_rate=DEFAULT_MONTHLY_INTEREST_RATE,
            guarantee_fund_rate=ZERO,
            management_fee_rate=ZERO,
            coverage_rate=ZERO,
            finances_registration=True,
            life_insurance_mode=LifeInsuranceMode.PERCENTAGE,
            life_insurance_value=DEFAULT_LIFE_INSURANCE_RATE,
            unemployment_insurance_mode=None,
            unemployment_insurance_value=ZERO,
            min_down_payment_percentage=ZERO,
        )

    if entity.life_insurance_value is not None:
        life_value = entity.life_insurance_value
    elif entity.life_insurance_mode is LifeInsuranceMode.PERCENTAGE:
        life_value = DEFAULT_LIFE_INSURANCE_RATE
    else:
        life_value = ZERO

    return EntityTerms(
        name=entity.name,
        interest_rate=(
            entity.interest_rate
            if entity.interest_rate is not None
            else DEFAULT_MONTHLY_INTEREST_RATE
        ),
        guarantee_fund_rate=_or_zero(entity.guarantee_fund_rate),
        management_fee_rate=_or_zero(entity.management_fee_rate),
        coverage_rate=_or_zero(entity.coverage_rate),
        finances_registration=entity.finances_registration,
        life_insurance_mode=entity.life_insurance_mode,
        life_insurance_value=life_value,
        unemployment_insurance_mode=entity.unemployment_insurance_mode,
        unemployment_insurance_value=_or_zero(entity.unemployment_insurance_value),
        min_down_payment_percentage=entity.min_down_payment_percentage,
    )


DEFAULT_FINANCIAL_ENTITIES: tuple[FinancialEntity, ...] = (
    FinancialEntity(
        id="crediorbe",
        name="Crediorbe",
        interest_rate=Decimal("1.87"),
        guarantee_fund_rate=Decimal("20.66"),
        life_insurance_mode=LifeInsuranceMode.PERCENTAGE,
        life_insurance_value=Decimal("0.1126"),
        min_down_payment_percentage=Decimal("10"),
    ),
    FinancialEntity(
        id="brilla",
        name="Brilla",
        interest_rate=Decimal("1.85"),
        management_fee_rate=Decimal("5"),
        coverage_rate=Decimal("4"),
        life_insurance_mode=LifeInsuranceMode.FIXED_PER_MILLION,
        life_insurance_value=Decimal("800"),
        synced_with_usury=True,
    ),
)
