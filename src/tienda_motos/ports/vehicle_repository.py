from __future__ import annotations

from abc import ABC, abstractmethod

from tienda_motos.domain.vehicle import Vehicle


class VehicleRepository(ABC):
    """
    Port for catalog data access.

    Contract:
        - Returns None for unknown ids (including malformed ones)
        - Never raises NotFoundError itself; that is the use case's job
    """

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None: ...

    @abstractmethod
    def list_all(self) -> list[Vehicle]:
        """Whole catalog, priciest first."""
        ...
