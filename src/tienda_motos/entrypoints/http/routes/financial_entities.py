from fastapi import APIRouter, Depends

from tienda_motos.entrypoints.http.dependencies import get_apply_usury_rate_use_case
from tienda_motos.entrypoints.http.dtos.financial_entity import (
    UsuryRateRequestDTO,
    UsuryRateResponseDTO,
)
from tienda_motos.entrypoints.http.error_responses import ErrorResponse
from tienda_motos.entrypoints.http.mappers.financial_entity_mapper import FinancialEntityMapper
from tienda_motos.use_cases.apply_usury_rate import ApplyUsuryRate


router = APIRouter(tags=["Financial entities"])


@router.post(
    "/financial-entities/usury-rate",
    response_model=UsuryRateResponseDTO,
    summary="Apply a published usury rate",
    description="""
    Converts the effective annual usury rate (E.A.) to its monthly
    equivalent (M.V.) and sets it on every lender synced with the usury
    rate, skipping lenders with a manual override.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def apply_usury_rate(
    payload: UsuryRateRequestDTO,
    use_case: ApplyUsuryRate = Depends(get_apply_usury_rate_use_case),
) -> UsuryRateResponseDTO:
    request = FinancialEntityMapper.to_usury_request(payload)
    result = use_case.execute(request)
    return FinancialEntityMapper.to_usury_response(result)
