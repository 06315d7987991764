from __future__ import annotations

from decimal import Decimal, InvalidOperation

from tienda_motos.domain.errors import ValidationError
from tienda_motos.domain.pricing import PaymentMethod
from tienda_motos.domain.quote import QuoteRequest, QuoteResult
from tienda_motos.entrypoints.http.dtos.quote import (
    AffordableVehicleDTO,
    PurchasingPowerRequestDTO,
    PurchasingPowerResponseDTO,
    QuoteRequestDTO,
    QuoteResponseDTO,
)
from tienda_motos.use_cases.estimate_purchasing_power import (
    PurchasingPowerRequest,
    PurchasingPowerResponse,
)


def _parse_decimal(field: str, raw: str, errors: list[dict[str, str]]) -> Decimal:
    try:
        return Decimal(raw)
    except (InvalidOperation, ValueError):
        errors.append(
            {
                "field": field,
                "message": f"Must be a valid decimal: {raw}",
                "code": "INVALID_DECIMAL",
            }
        )
        return Decimal("0")  # Placeholder to keep collecting errors


class QuoteMapper:
    """Maps between REST DTOs and domain models for quotes."""

    @staticmethod
    def to_domain_request(dto: QuoteRequestDTO) -> QuoteRequest:
        """
        Converts request DTO to domain QuoteRequest.

        Raises:
            ValidationError: If monetary strings are not valid decimals
        """
        errors: list[dict[str, str]] = []
        down_payment = _parse_decimal("down_payment", dto.down_payment, errors)

        if errors:
            raise ValidationError(errors=errors)

        return QuoteRequest(
            vehicle_id=dto.vehicle_id,
            scenario_id=dto.scenario_id,
            payment_method=PaymentMethod(dto.payment_method),
            term_months=dto.term_months,
            down_payment=down_payment,
            financial_entity_id=dto.financial_entity_id,
        )

    @staticmethod
    def to_response(result: QuoteResult) -> QuoteResponseDTO:
        return QuoteResponseDTO(
            vehicle_price=str(result.vehicle_price),
            soat_price=str(result.soat_price),
            registration_price=str(result.registration_price),
            documentation_fee=str(result.documentation_fee),
            special_adjustment=str(result.special_adjustment),
            subtotal=str(result.subtotal),
            total=str(result.total),
            down_payment=str(result.down_payment),
            loan_amount=str(result.loan_amount),
            guarantee_fund_cost=str(result.guarantee_fund_cost),
            life_insurance=str(result.life_insurance),
            unemployment_insurance=str(result.unemployment_insurance),
            management_fee=str(result.management_fee),
            coverage_fee=str(result.coverage_fee),
            coverage_monthly_component=str(result.coverage_monthly_component),
            monthly_payment=str(result.monthly_payment),
            monthly_payment_after_coverage=str(result.monthly_payment_after_coverage),
            term_months=result.term_months,
            interest_rate=str(result.interest_rate),
            financial_entity=result.financial_entity,
            is_credit=result.is_credit,
        )

    @staticmethod
    def to_purchasing_power_request(dto: PurchasingPowerRequestDTO) -> PurchasingPowerRequest:
        errors: list[dict[str, str]] = []
        daily_budget = _parse_decimal("daily_budget", dto.daily_budget, errors)
        initial_payment = _parse_decimal("initial_payment", dto.initial_payment, errors)

        if errors:
            raise ValidationError(errors=errors)

        return PurchasingPowerRequest(
            daily_budget=daily_budget,
            initial_payment=initial_payment,
            term_months=dto.term_months,
            financial_entity_id=dto.financial_entity_id,
        )

    @staticmethod
    def to_purchasing_power_response(
        result: PurchasingPowerResponse,
    ) -> PurchasingPowerResponseDTO:
        estimate = result.estimate
        return PurchasingPowerResponseDTO(
            monthly_budget=str(estimate.monthly_budget),
            max_loan_amount=str(estimate.max_loan_amount),
            max_vehicle_price=str(estimate.max_vehicle_price),
            guarantee_fund_cost=str(estimate.guarantee_fund_cost),
            financial_entity=result.financial_entity,
            vehicles=[
                AffordableVehicleDTO(
                    id=item.vehicle.id,
                    brand=item.vehicle.brand,
                    reference=item.vehicle.reference,
                    price=str(item.vehicle.price),
                    registration_cost=str(item.registration_cost),
                    required_initial_payment=str(item.required_initial_payment),
                )
                for item in result.vehicles
            ],
        )
