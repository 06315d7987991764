from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from tienda_motos.domain.financing import (
    EntityTerms,
    FinancialEntity,
    LifeInsuranceMode,
    UnemploymentInsuranceMode,
    resolve_entity_terms,
)
from tienda_motos.domain.money import HUNDRED, ZERO, ceil_units, percent_of, round_units


ONE_MILLION = Decimal("1000000")
# Coverage fee is billed over the first year of installments
COVERAGE_INSTALLMENTS = 12


@dataclass(frozen=True, slots=True)
class PaymentBreakdown:
    """
    Monthly cost components of a credit quote.

    ``monthly_payment`` is the figure for installments 1-12, which
    include ``coverage_monthly_component``. From installment 13 on the
    payment is ``monthly_payment - coverage_monthly_component``.
    """

    life_insurance: Decimal
    unemployment_insurance: Decimal
    coverage_monthly_component: Decimal
    base_payment: Decimal
    monthly_payment: Decimal
    total_projected_cost: Decimal


def annuity_payment(principal: Decimal, monthly_rate_percent: Decimal, term_months: int) -> Decimal:
    """
    Level installment for a fixed-rate loan, unrounded.

    Straight-line when the rate is zero and 0 for a non-positive term.
    """
    if term_months <= 0:
        return ZERO

    n = Decimal(term_months)
    r = monthly_rate_percent / HUNDRED

    if r == 0:
        return principal / n

    # P * r(1+r)^n / ((1+r)^n - 1), same as P * r / (1 - (1+r)^-n)
    one = Decimal("1")
    factor = (one + r) ** term_months
    return principal * (r * factor) / (factor - one)


def life_insurance_cost(final_principal: Decimal, terms: EntityTerms) -> Decimal:
    if terms.life_insurance_mode is LifeInsuranceMode.FIXED_PER_MILLION:
        return ceil_units(final_principal / ONE_MILLION * terms.life_insurance_value)
    return percent_of(final_principal, terms.life_insurance_value)


def unemployment_insurance_cost(final_principal: Decimal, terms: EntityTerms) -> Decimal:
    mode = terms.unemployment_insurance_mode
    if mode is UnemploymentInsuranceMode.FIXED_MONTHLY:
        return terms.unemployment_insurance_value
    if mode is UnemploymentInsuranceMode.PERCENTAGE_MONTHLY:
        return percent_of(final_principal, terms.unemployment_insurance_value)
    return ZERO


def coverage_monthly_component(coverage_fee: Decimal) -> Decimal:
    if coverage_fee <= 0:
        return ZERO
    return round_units(coverage_fee / Decimal(COVERAGE_INSTALLMENTS))


def compute_insurances_and_payment(
    final_principal: Decimal,
    amortization_principal: Decimal,
    coverage_fee: Decimal,
    entity: FinancialEntity | None,
    term_months: int,
    down_payment: Decimal = ZERO,
) -> PaymentBreakdown:
    """
    Insurances, installment and projected cost of a credit.

    Insurances accrue on the final principal; the annuity runs on the
    amortization principal. The projected cost counts the coverage fee
    once instead of twelve rounded monthly components.
    """
    terms = resolve_entity_terms(entity)

    life = life_insurance_cost(final_principal, terms)
    unemployment = unemployment_insurance_cost(final_principal, terms)
    coverage_component = coverage_monthly_component(coverage_fee)
    base_payment = annuity_payment(amortization_principal, terms.interest_rate, term_months)

    monthly_payment = round_units(base_payment + life + unemployment + coverage_component)
    total_projected_cost = round_units(
        down_payment + (base_payment + life + unemployment) * Decimal(term_months) + coverage_fee
    )

    return PaymentBreakdown(
        life_insurance=life,
        unemployment_insurance=unemployment,
        coverage_monthly_component=coverage_component,
        base_payment=base_payment,
        monthly_payment=monthly_payment,
        total_projected_cost=total_projected_cost,
    )
