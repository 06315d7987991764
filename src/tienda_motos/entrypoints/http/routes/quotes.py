from fastapi import APIRouter, Depends

from tienda_motos.entrypoints.http.dependencies import (
    get_calculate_quote_use_case,
    get_estimate_purchasing_power_use_case,
)
from tienda_motos.entrypoints.http.dtos.quote import (
    PurchasingPowerRequestDTO,
    PurchasingPowerResponseDTO,
    QuoteRequestDTO,
    QuoteResponseDTO,
)
from tienda_motos.entrypoints.http.error_responses import ErrorResponse
from tienda_motos.entrypoints.http.mappers.quote_mapper import QuoteMapper
from tienda_motos.use_cases.calculate_quote import CalculateQuote
from tienda_motos.use_cases.estimate_purchasing_power import EstimatePurchasingPower


router = APIRouter(tags=["Quotes"])


@router.post(
    "/quotes",
    response_model=QuoteResponseDTO,
    summary="Quote a vehicle",
    description="""
    Calculate a cash or credit quote for a catalog vehicle.

    ## Cash
    - total = price + registration + documentation fee + special adjustment
    - Cash sales above 125 cc include the pro-rated stamp tax

    ## Credit
    - Financed capital: net capital, then guarantee fund, management fee
      and coverage fee, each applied on the running total
    - `monthly_payment` is the installment for months 1-12 and includes
      the deferred coverage component
    - `monthly_payment_after_coverage` is the installment from month 13 on

    ## Monetary Values
    All monetary values are strings in whole pesos (e.g., "5990000").
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Vehicle, scenario or lender not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def calculate_quote(
    payload: QuoteRequestDTO,
    use_case: CalculateQuote = Depends(get_calculate_quote_use_case),
) -> QuoteResponseDTO:
    """Parse → execute → map → return."""
    request = QuoteMapper.to_domain_request(payload)
    result = use_case.execute(request)
    return QuoteMapper.to_response(result)


@router.post(
    "/quotes/purchasing-power",
    response_model=PurchasingPowerResponseDTO,
    summary="Estimate purchasing power from a daily budget",
    description="""
    Largest loan a daily budget supports under the picked lender's terms
    (or the default budget profile), plus the catalog vehicles it can
    finance: price <= max loan + lender minimum down payment +
    registration cost. Vehicles are listed priciest first.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Financial entity not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def estimate_purchasing_power(
    payload: PurchasingPowerRequestDTO,
    use_case: EstimatePurchasingPower = Depends(get_estimate_purchasing_power_use_case),
) -> PurchasingPowerResponseDTO:
    request = QuoteMapper.to_purchasing_power_request(payload)
    result = use_case.execute(request)
    return QuoteMapper.to_purchasing_power_response(result)
