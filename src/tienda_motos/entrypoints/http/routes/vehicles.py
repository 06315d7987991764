from fastapi import APIRouter, Depends

from tienda_motos.entrypoints.http.dependencies import get_vehicle_by_id_use_case
from tienda_motos.entrypoints.http.dtos.vehicle import VehicleResponseDTO
from tienda_motos.entrypoints.http.error_responses import ErrorResponse
from tienda_motos.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from tienda_motos.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get vehicle",
    responses={404: {"model": ErrorResponse, "description": "Vehicle not found"}},
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    response = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    return VehicleMapper.to_response(response.vehicle)
