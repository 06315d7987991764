from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal

from tienda_motos.domain.errors import ValidationError
from tienda_motos.domain.usury import effective_annual_to_monthly
from tienda_motos.ports.pricing_config_repository import PricingConfigRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ApplyUsuryRateRequest:
    effective_annual_rate: Decimal

    def validate(self) -> None:
        if self.effective_annual_rate <= 0:
            raise ValidationError("effective_annual_rate must be > 0")


@dataclass(frozen=True, slots=True)
class ApplyUsuryRateResponse:
    monthly_rate: Decimal
    updated_entity_ids: list[str]


class ApplyUsuryRate:
    """
    Apply a newly published usury rate to synced lenders.

    Converts the effective annual rate (E.A.) to a monthly rate (M.V.)
    and sets it as the interest rate of every entity that is synced with
    the usury rate and has no manual override.
    """

    def __init__(self, pricing_config_repository: PricingConfigRepository) -> None:
        self._pricing = pricing_config_repository

    def execute(self, request: ApplyUsuryRateRequest) -> ApplyUsuryRateResponse:
        request.validate()

        monthly_rate = effective_annual_to_monthly(request.effective_annual_rate)
        updated: list[str] = []

        for entity in self._pricing.list_financial_entities():
            if not entity.synced_with_usury or entity.manual_override:
                continue
            self._pricing.save_financial_entity(replace(entity, interest_rate=monthly_rate))
            updated.append(entity.id)

        logger.info(
            "Usury rate applied",
            extra={
                "effective_annual_rate": str(request.effective_annual_rate),
                "monthly_rate": str(monthly_rate),
                "updated_entity_ids": updated,
            },
        )

        return ApplyUsuryRateResponse(monthly_rate=monthly_rate, updated_entity_ids=updated)
