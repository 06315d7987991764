"""
Purchasing power by daily budget ("¿cuánta moto me alcanza?").

Inverts the credit quote under a simplified lender profile:

1. Monthly budget = daily budget * 30
2. Installment = financed * (annuity factor + life insurance rate)
   so financed = budget / (annuity factor + life insurance rate)
3. Financed = net loan * (1 + guarantee fund rate)
4. Max vehicle price = net loan + initial payment

Documentation and SOAT are not financed in this profile.

A catalog vehicle is affordable when its price fits in the max loan plus
the initial payment the lender requires for it (its minimum down payment
plus the general credit registration cost).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from tienda_motos.domain.financing import (
    DEFAULT_LIFE_INSURANCE_RATE,
    DEFAULT_TERM_MONTHS,
    FinancialEntity,
    LifeInsuranceMode,
)
from tienda_motos.domain.money import HUNDRED, ZERO, percent_of, round_units
from tienda_motos.domain.pricing import MatrixRow, PaymentMethod, Scenario
from tienda_motos.domain.registration import resolve_registration_cost
from tienda_motos.domain.vehicle import Vehicle


DAYS_PER_MONTH = 30
DEFAULT_BUDGET_INTEREST_RATE = Decimal("2.3")
DEFAULT_BUDGET_GUARANTEE_FUND_RATE = Decimal("20.66")
# Down payment assumed when no lender is picked
DEFAULT_BUDGET_MIN_DOWN_PAYMENT_PERCENTAGE = Decimal("10")

# Registration is priced on the general credit column; the flat fee
# covers vehicles the matrix has no row for
BUDGET_SCENARIO = Scenario(
    id="credit-general",
    name="General, Crédito",
    legacy_registration_cost=Decimal("750000"),
)


@dataclass(frozen=True, slots=True)
class BudgetProfile:
    interest_rate: Decimal
    guarantee_fund_rate: Decimal
    life_insurance_rate: Decimal
    min_down_payment_percentage: Decimal


DEFAULT_BUDGET_PROFILE = BudgetProfile(
    interest_rate=DEFAULT_BUDGET_INTEREST_RATE,
    guarantee_fund_rate=DEFAULT_BUDGET_GUARANTEE_FUND_RATE,
    life_insurance_rate=DEFAULT_LIFE_INSURANCE_RATE,
    min_down_payment_percentage=DEFAULT_BUDGET_MIN_DOWN_PAYMENT_PERCENTAGE,
)


@dataclass(frozen=True, slots=True)
class PurchasingPower:
    monthly_budget: Decimal
    max_loan_amount: Decimal
    max_vehicle_price: Decimal
    guarantee_fund_cost: Decimal


def annuity_factor(monthly_rate_percent: Decimal, term_months: int) -> Decimal:
    """Installment per unit of principal."""
    n = Decimal(term_months)
    r = monthly_rate_percent / HUNDRED
    if r <= 0:
        return Decimal("1") / n
    factor = (Decimal("1") + r) ** term_months
    return r * factor / (factor - Decimal("1"))


def estimate_purchasing_power(
    daily_budget: Decimal,
    initial_payment: Decimal,
    term_months: int = DEFAULT_TERM_MONTHS,
    interest_rate: Decimal = DEFAULT_BUDGET_INTEREST_RATE,
    guarantee_fund_rate: Decimal = DEFAULT_BUDGET_GUARANTEE_FUND_RATE,
    life_insurance_rate: Decimal = DEFAULT_LIFE_INSURANCE_RATE,
) -> PurchasingPower:
    monthly_budget = daily_budget * DAYS_PER_MONTH

    if term_months <= 0:
        return PurchasingPower(
            monthly_budget=monthly_budget,
            max_loan_amount=ZERO,
            max_vehicle_price=round_units(initial_payment),
            guarantee_fund_cost=ZERO,
        )

    supported = monthly_budget / (
        annuity_factor(interest_rate, term_months) + life_insurance_rate / HUNDRED
    )
    net_loan = supported / (Decimal("1") + guarantee_fund_rate / HUNDRED)

    return PurchasingPower(
        monthly_budget=monthly_budget,
        max_loan_amount=round_units(net_loan),
        max_vehicle_price=round_units(net_loan + initial_payment),
        guarantee_fund_cost=round_units(supported - net_loan),
    )


def budget_profile(entity: FinancialEntity | None) -> BudgetProfile:
    """
    Lender terms used to invert a budget.

    Unset or zero rates fall back to 2.3 % interest and 0.1126 % life
    insurance. A picked lender without a guarantee fund has none.
    Per-million life insurance is converted to a percentage.
    """
    if entity is None:
        return DEFAULT_BUDGET_PROFILE

    life_rate = entity.life_insurance_value or ZERO
    if entity.life_insurance_mode is LifeInsuranceMode.FIXED_PER_MILLION:
        # value per 1,000,000 of principal -> percent of principal
        life_rate = life_rate / Decimal("10000")

    return BudgetProfile(
        interest_rate=entity.interest_rate or DEFAULT_BUDGET_INTEREST_RATE,
        guarantee_fund_rate=entity.guarantee_fund_rate or ZERO,
        life_insurance_rate=life_rate or DEFAULT_LIFE_INSURANCE_RATE,
        min_down_payment_percentage=entity.min_down_payment_percentage,
    )


@dataclass(frozen=True, slots=True)
class AffordableVehicle:
    vehicle: Vehicle
    registration_cost: Decimal
    required_initial_payment: Decimal


def affordable_vehicles(
    vehicles: Iterable[Vehicle],
    max_loan_amount: Decimal,
    min_down_payment_percentage: Decimal,
    matrix: Sequence[MatrixRow] | None,
) -> list[AffordableVehicle]:
    """Vehicles with ``price <= max_loan_amount + required initial``, priciest first."""
    affordable: list[AffordableVehicle] = []

    for vehicle in vehicles:
        registration = resolve_registration_cost(
            vehicle, BUDGET_SCENARIO, PaymentMethod.CREDIT, matrix
        )
        required_initial = percent_of(vehicle.price, min_down_payment_percentage) + registration
        if vehicle.price <= max_loan_amount + required_initial:
            affordable.append(
                AffordableVehicle(
                    vehicle=vehicle,
                    registration_cost=registration,
                    required_initial_payment=required_initial,
                )
            )

    return sorted(affordable, key=lambda item: item.vehicle.price, reverse=True)
