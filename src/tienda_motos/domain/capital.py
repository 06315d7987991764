"""
Financed capital cascade.

Each layer reads the running total of the previous one:

    net capital
      -> + guarantee fund (FNG)        = guaranteed base
      -> + management fee ("gestión")  = pre-coverage base
      -> + coverage fee ("cobertura")  = final principal

The final principal is the loan amount and the base for insurances. When
a coverage fee applies it is billed over the first twelve installments,
so only the pre-coverage base is amortized.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from tienda_motos.domain.financing import FinancialEntity, resolve_entity_terms
from tienda_motos.domain.money import ZERO, percent_of
from tienda_motos.domain.vehicle import Vehicle


@dataclass(frozen=True, slots=True)
class NetCapital:
    amount: Decimal


@dataclass(frozen=True, slots=True)
class GuaranteedBase:
    amount: Decimal
    guarantee_fund_cost: Decimal


@dataclass(frozen=True, slots=True)
class PreCoverageBase:
    amount: Decimal
    management_fee: Decimal


@dataclass(frozen=True, slots=True)
class CapitalCascade:
    net_capital: Decimal
    guarantee_fund_cost: Decimal
    intermediate_base: Decimal
    management_fee: Decimal
    pre_coverage_base: Decimal
    coverage_fee: Decimal
    final_principal: Decimal
    amortization_principal: Decimal

    @property
    def risk_base(self) -> Decimal:
        """Principal used for insurances, whatever is amortized."""
        return self.final_principal


def net_capital(
    vehicle: Vehicle,
    registration_cost: Decimal,
    documentation_fee: Decimal,
    down_payment: Decimal,
    finances_registration: bool,
) -> NetCapital:
    amount = vehicle.price + vehicle.special_adjustment - down_payment
    if finances_registration:
        amount += registration_cost + documentation_fee
    return NetCapital(amount=amount)


def add_guarantee_fund(base: NetCapital, rate: Decimal) -> GuaranteedBase:
    cost = percent_of(base.amount, rate) if rate > 0 else ZERO
    return GuaranteedBase(amount=base.amount + cost, guarantee_fund_cost=cost)


def add_management_fee(base: GuaranteedBase, rate: Decimal) -> PreCoverageBase:
    fee = percent_of(base.amount, rate) if rate > 0 else ZERO
    return PreCoverageBase(amount=base.amount + fee, management_fee=fee)


def add_coverage_fee(base: PreCoverageBase, rate: Decimal) -> tuple[Decimal, Decimal]:
    """Return ``(coverage_fee, final_principal)``."""
    fee = percent_of(base.amount, rate) if rate > 0 else ZERO
    return fee, base.amount + fee


def build_capital_cascade(
    vehicle: Vehicle,
    registration_cost: Decimal,
    documentation_fee: Decimal,
    down_payment: Decimal,
    entity: FinancialEntity | None,
) -> CapitalCascade:
    terms = resolve_entity_terms(entity)

    net = net_capital(
        vehicle,
        registration_cost,
        documentation_fee,
        down_payment,
        terms.finances_registration,
    )
    guaranteed = add_guarantee_fund(net, terms.guarantee_fund_rate)
    pre_coverage = add_management_fee(guaranteed, terms.management_fee_rate)
    coverage_fee, final_principal = add_coverage_fee(pre_coverage, terms.coverage_rate)

    amortization_principal = pre_coverage.amount if coverage_fee > 0 else final_principal

    return CapitalCascade(
        net_capital=net.amount,
        guarantee_fund_cost=guaranteed.guarantee_fund_cost,
        intermediate_base=guaranteed.amount,
        management_fee=pre_coverage.management_fee,
        pre_coverage_base=pre_coverage.amount,
        coverage_fee=coverage_fee,
        final_principal=final_principal,
        amortization_principal=amortization_principal,
    )
