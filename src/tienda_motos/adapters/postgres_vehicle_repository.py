"""PostgreSQL implementation of VehicleRepository."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from tienda_motos.domain.vehicle import Vehicle
from tienda_motos.infra.db.models.vehicle import VehicleRow
from tienda_motos.ports.vehicle_repository import VehicleRepository


class PostgresVehicleRepository(VehicleRepository):
    """
    PostgreSQL implementation of VehicleRepository.

    - Uses SQLAlchemy ORM for database access
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """
        Get vehicle by ID.

        Args:
            vehicle_id: Vehicle ID (expected to be a UUID string)

        Returns:
            Vehicle if found, None otherwise (also for malformed ids)
        """
        try:
            key = UUID(vehicle_id)
        except ValueError:
            return None

        query = select(VehicleRow).where(VehicleRow.id == key)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def list_all(self) -> list[Vehicle]:
        query = select(VehicleRow).order_by(VehicleRow.price.desc(), VehicleRow.brand)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        return Vehicle(
            id=str(row.id),
            brand=row.brand,
            reference=row.reference,
            price=row.price,
            displacement=row.displacement_cc,
            categories=tuple(row.categories or ()),
            category=row.category,
            special_adjustment=row.special_adjustment or Decimal("0"),
        )
