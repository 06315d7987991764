from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from tienda_motos.domain.errors import NotFoundError, ValidationError
from tienda_motos.domain.financing import DEFAULT_TERM_MONTHS, FinancialEntity
from tienda_motos.domain.purchasing_power import (
    AffordableVehicle,
    PurchasingPower,
    affordable_vehicles,
    budget_profile,
    estimate_purchasing_power,
)
from tienda_motos.ports.pricing_config_repository import PricingConfigRepository
from tienda_motos.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


class InvalidBudgetInput(ValidationError):
    pass


@dataclass(frozen=True, slots=True)
class PurchasingPowerRequest:
    daily_budget: Decimal
    initial_payment: Decimal = Decimal("0")
    term_months: int = DEFAULT_TERM_MONTHS
    financial_entity_id: str | None = None

    def validate(self) -> None:
        if self.daily_budget <= 0:
            raise InvalidBudgetInput("daily_budget must be > 0")
        if self.initial_payment < 0:
            raise InvalidBudgetInput("initial_payment must be >= 0")
        if self.term_months <= 0:
            raise InvalidBudgetInput("term_months must be > 0")


@dataclass(frozen=True, slots=True)
class PurchasingPowerResponse:
    estimate: PurchasingPower
    vehicles: list[AffordableVehicle]
    financial_entity: str | None = None


class EstimatePurchasingPower:
    """
    Largest loan a daily budget supports, and the catalog it can buy.

    Uses the picked lender's terms, or the default budget profile when
    no lender is given.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        pricing_config_repository: PricingConfigRepository,
    ) -> None:
        self._vehicles = vehicle_repository
        self._pricing = pricing_config_repository

    def execute(self, request: PurchasingPowerRequest) -> PurchasingPowerResponse:
        """
        Raises:
            InvalidBudgetInput: If the request fails validation
            NotFoundError: If the financial entity doesn't exist
        """
        request.validate()

        entity = self._load_entity(request.financial_entity_id)
        profile = budget_profile(entity)

        estimate = estimate_purchasing_power(
            daily_budget=request.daily_budget,
            initial_payment=request.initial_payment,
            term_months=request.term_months,
            interest_rate=profile.interest_rate,
            guarantee_fund_rate=profile.guarantee_fund_rate,
            life_insurance_rate=profile.life_insurance_rate,
        )
        vehicles = affordable_vehicles(
            self._vehicles.list_all(),
            estimate.max_loan_amount,
            profile.min_down_payment_percentage,
            self._pricing.registration_matrix(),
        )

        logger.info(
            "Purchasing power estimated",
            extra={
                "financial_entity_id": request.financial_entity_id,
                "max_loan_amount": str(estimate.max_loan_amount),
                "affordable_vehicles": len(vehicles),
            },
        )

        return PurchasingPowerResponse(
            estimate=estimate,
            vehicles=vehicles,
            financial_entity=entity.name if entity else None,
        )

    def _load_entity(self, entity_id: str | None) -> FinancialEntity | None:
        if entity_id is None:
            return None

        entity = self._pricing.get_financial_entity(entity_id)
        if entity is None:
            raise NotFoundError(resource="FinancialEntity", identifier=entity_id)
        return entity
