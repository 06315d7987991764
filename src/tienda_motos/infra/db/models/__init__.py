from tienda_motos.infra.db.models.base import Base
from tienda_motos.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "VehicleRow"]
