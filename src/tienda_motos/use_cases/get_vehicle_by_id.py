"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from tienda_motos.domain.errors import NotFoundError, ValidationError
from tienda_motos.domain.vehicle import Vehicle
from tienda_motos.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    vehicle: Vehicle


class GetVehicleById:
    """
    Use case for retrieving a single catalog vehicle.

    Responsibilities:
    - Reject blank ids
    - Delegate to repository for data access
    - Raise NotFoundError if the vehicle doesn't exist
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Raises:
            ValidationError: If vehicle_id is blank
            NotFoundError: If no vehicle has the given id
        """
        if not request.vehicle_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must not be blank",
                        "code": "REQUIRED",
                    }
                ]
            )

        vehicle = self._repository.get_by_id(request.vehicle_id)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        return GetVehicleByIdResponse(vehicle=vehicle)
