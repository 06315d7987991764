from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from tienda_motos.domain.errors import NotFoundError
from tienda_motos.domain.financing import FinancialEntity
from tienda_motos.domain.pricing import PaymentMethod
from tienda_motos.domain.quote import QuoteRequest, QuoteResult, compute_quote
from tienda_motos.ports.pricing_config_repository import PricingConfigRepository
from tienda_motos.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


class CalculateQuote:
    """
    Quote a catalog vehicle for a scenario, cash or credit.

    Responsibilities:
    - Validate the request (the engine itself never rejects input)
    - Load the vehicle, scenario, lender and pricing tables
    - Run the quote engine against that snapshot

    The financial entity is optional for credit quotes; without one the
    engine applies its default rates.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        pricing_config_repository: PricingConfigRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._vehicles = vehicle_repository
        self._pricing = pricing_config_repository
        self._today = today

    def execute(self, request: QuoteRequest) -> QuoteResult:
        """
        Raises:
            InvalidQuoteInput: If the request fails validation
            NotFoundError: If the vehicle, scenario or financial entity doesn't exist
        """
        request.validate()

        vehicle = self._vehicles.get_by_id(request.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        scenario = self._pricing.get_scenario(request.scenario_id)
        if scenario is None:
            raise NotFoundError(resource="Scenario", identifier=request.scenario_id)

        entity = self._load_entity(request)
        request.validate_for(vehicle, entity)

        result = compute_quote(
            vehicle=vehicle,
            scenario=scenario,
            rate_bands=self._pricing.rate_bands(),
            payment_method=request.payment_method,
            entity=entity,
            term_months=request.term_months,
            down_payment=request.down_payment,
            matrix=self._pricing.registration_matrix(),
            as_of=self._today(),
        )

        logger.info(
            "Quote calculated",
            extra={
                "vehicle_id": vehicle.id,
                "scenario_id": scenario.id,
                "payment_method": request.payment_method.value,
                "financial_entity_id": request.financial_entity_id,
                "total": str(result.total),
                "monthly_payment": str(result.monthly_payment),
            },
        )

        return result

    def _load_entity(self, request: QuoteRequest) -> FinancialEntity | None:
        if request.payment_method is not PaymentMethod.CREDIT:
            return None
        if request.financial_entity_id is None:
            return None

        entity = self._pricing.get_financial_entity(request.financial_entity_id)
        if entity is None:
            raise NotFoundError(
                resource="FinancialEntity", identifier=request.financial_entity_id
            )
        return entity
