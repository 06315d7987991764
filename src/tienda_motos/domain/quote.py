from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Sequence

from tienda_motos.domain.amortization import compute_insurances_and_payment
from tienda_motos.domain.capital import build_capital_cascade
from tienda_motos.domain.errors import ValidationError
from tienda_motos.domain.financing import (
    DEFAULT_TERM_MONTHS,
    FinancialEntity,
    resolve_entity_terms,
)
from tienda_motos.domain.money import HUNDRED, ZERO
from tienda_motos.domain.pricing import MatrixRow, PaymentMethod, RateBand, Scenario
from tienda_motos.domain.registration import resolve_registration_cost
from tienda_motos.domain.soat import resolve_soat_premium
from tienda_motos.domain.vehicle import Vehicle


class InvalidQuoteInput(ValidationError):
    pass


@dataclass(frozen=True, slots=True)
class QuoteRequest:
    vehicle_id: str
    scenario_id: str
    payment_method: PaymentMethod
    term_months: int = DEFAULT_TERM_MONTHS
    down_payment: Decimal = ZERO
    financial_entity_id: str | None = None

    def validate(self) -> None:
        if self.term_months < 0:
            raise InvalidQuoteInput("term_months must be >= 0")
        if self.payment_method is PaymentMethod.CREDIT and self.term_months == 0:
            raise InvalidQuoteInput("term_months must be > 0 for credit")
        if self.down_payment < 0:
            raise InvalidQuoteInput("down_payment must be >= 0")

    def validate_for(self, vehicle: Vehicle, entity: FinancialEntity | None) -> None:
        """Checks that need the vehicle and lender being quoted."""
        if vehicle.price <= 0:
            raise InvalidQuoteInput("vehicle price must be > 0", vehicle_id=vehicle.id)
        if self.payment_method is not PaymentMethod.CREDIT:
            # cash ignores the down payment
            return

        if self.down_payment > vehicle.price:
            raise InvalidQuoteInput("down_payment must be <= vehicle price")

        if entity is not None:
            minimum = vehicle.price * entity.min_down_payment_percentage / HUNDRED
            if self.down_payment < minimum:
                raise InvalidQuoteInput(
                    f"down_payment must be >= {entity.min_down_payment_percentage}% of price",
                    financial_entity_id=entity.id,
                )


@dataclass(frozen=True, slots=True)
class QuoteResult:
    vehicle_price: Decimal
    soat_price: Decimal
    registration_price: Decimal
    documentation_fee: Decimal
    special_adjustment: Decimal
    subtotal: Decimal
    total: Decimal
    down_payment: Decimal
    loan_amount: Decimal
    guarantee_fund_cost: Decimal
    life_insurance: Decimal
    unemployment_insurance: Decimal
    management_fee: Decimal
    coverage_fee: Decimal
    coverage_monthly_component: Decimal
    monthly_payment: Decimal
    term_months: int
    interest_rate: Decimal
    financial_entity: str | None
    is_credit: bool

    @property
    def monthly_payment_after_coverage(self) -> Decimal:
        """Installment from month 13 on, once the coverage fee is paid."""
        return self.monthly_payment - self.coverage_monthly_component


def compute_quote(
    vehicle: Vehicle,
    scenario: Scenario,
    rate_bands: Sequence[RateBand] | None,
    payment_method: PaymentMethod | str,
    entity: FinancialEntity | None = None,
    term_months: int = DEFAULT_TERM_MONTHS,
    down_payment: Decimal = ZERO,
    matrix: Sequence[MatrixRow] | None = None,
    as_of: date | None = None,
) -> QuoteResult:
    """
    Build a cash or credit quote for a vehicle.

    Pure: inputs are read-only snapshots and a fresh result is returned
    on every call. Missing configuration falls back to defaults instead
    of raising; input validation is the caller's job.
    """
    method = PaymentMethod(payment_method)

    soat_price = resolve_soat_premium(vehicle.effective_displacement, rate_bands)
    registration_price = resolve_registration_cost(vehicle, scenario, method, matrix, as_of)
    documentation_fee = scenario.documentation_fee
    special_adjustment = vehicle.special_adjustment

    subtotal = vehicle.price + registration_price + documentation_fee + special_adjustment

    if method is PaymentMethod.CASH:
        return QuoteResult(
            vehicle_price=vehicle.price,
            soat_price=soat_price,
            registration_price=registration_price,
            documentation_fee=documentation_fee,
            special_adjustment=special_adjustment,
            subtotal=subtotal,
            total=subtotal,
            down_payment=ZERO,
            loan_amount=ZERO,
            guarantee_fund_cost=ZERO,
            life_insurance=ZERO,
            unemployment_insurance=ZERO,
            management_fee=ZERO,
            coverage_fee=ZERO,
            coverage_monthly_component=ZERO,
            monthly_payment=ZERO,
            term_months=0,
            interest_rate=ZERO,
            financial_entity=None,
            is_credit=False,
        )

    cascade = build_capital_cascade(
        vehicle, registration_price, documentation_fee, down_payment, entity
    )
    payment = compute_insurances_and_payment(
        cascade.final_principal,
        cascade.amortization_principal,
        cascade.coverage_fee,
        entity,
        term_months,
        down_payment,
    )
    terms = resolve_entity_terms(entity)

    return QuoteResult(
        vehicle_price=vehicle.price,
        soat_price=soat_price,
        registration_price=registration_price,
        documentation_fee=documentation_fee,
        special_adjustment=special_adjustment,
        subtotal=subtotal,
        total=payment.total_projected_cost,
        down_payment=down_payment,
        loan_amount=cascade.final_principal,
        guarantee_fund_cost=cascade.guarantee_fund_cost,
        life_insurance=payment.life_insurance,
        unemployment_insurance=payment.unemployment_insurance,
        management_fee=cascade.management_fee,
        coverage_fee=cascade.coverage_fee,
        coverage_monthly_component=payment.coverage_monthly_component,
        monthly_payment=payment.monthly_payment,
        term_months=term_months,
        interest_rate=terms.interest_rate,
        financial_entity=terms.name,
        is_credit=True,
    )
