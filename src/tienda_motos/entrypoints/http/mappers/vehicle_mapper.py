from __future__ import annotations

from tienda_motos.domain.vehicle import Vehicle
from tienda_motos.entrypoints.http.dtos.vehicle import VehicleResponseDTO


class VehicleMapper:
    """Maps domain vehicles to REST DTOs."""

    @staticmethod
    def to_response(vehicle: Vehicle) -> VehicleResponseDTO:
        return VehicleResponseDTO(
            id=vehicle.id,
            brand=vehicle.brand,
            reference=vehicle.reference,
            price=str(vehicle.price),
            displacement=vehicle.displacement,
            categories=vehicle.candidate_categories(),
            special_adjustment=str(vehicle.special_adjustment),
        )
