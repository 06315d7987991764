from __future__ import annotations

from tienda_motos.domain.vehicle import Vehicle
from tienda_motos.ports.vehicle_repository import VehicleRepository


class InMemoryVehicleRepository(VehicleRepository):
    """Canonical contract implementation for tests."""

    def __init__(self, vehicles: list[Vehicle]) -> None:
        self._vehicles = {vehicle.id: vehicle for vehicle in vehicles}

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def list_all(self) -> list[Vehicle]:
        return sorted(self._vehicles.values(), key=lambda v: v.price, reverse=True)
