from __future__ import annotations

from decimal import Decimal, InvalidOperation

from tienda_motos.domain.errors import ValidationError
from tienda_motos.entrypoints.http.dtos.financial_entity import (
    UsuryRateRequestDTO,
    UsuryRateResponseDTO,
)
from tienda_motos.use_cases.apply_usury_rate import (
    ApplyUsuryRateRequest,
    ApplyUsuryRateResponse,
)


class FinancialEntityMapper:
    @staticmethod
    def to_usury_request(dto: UsuryRateRequestDTO) -> ApplyUsuryRateRequest:
        try:
            rate = Decimal(dto.effective_annual_rate)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "effective_annual_rate",
                        "message": f"Must be a valid decimal: {dto.effective_annual_rate}",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            ) from None
        return ApplyUsuryRateRequest(effective_annual_rate=rate)

    @staticmethod
    def to_usury_response(result: ApplyUsuryRateResponse) -> UsuryRateResponseDTO:
        return UsuryRateResponseDTO(
            monthly_rate=str(result.monthly_rate),
            updated_entity_ids=result.updated_entity_ids,
        )
