"""
Unit test suite for PostgresVehicleRepository.

Uses a mocked Session. Tests verify:
- A SELECT is executed only for well-formed UUIDs
- Row to domain conversion (UUID -> string, displacement, categories)
- The catalog listing is ordered by price, priciest first
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.orm import Session

from tienda_motos.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from tienda_motos.domain.vehicle import Vehicle
from tienda_motos.infra.db.models.vehicle import VehicleRow

VEHICLE_ID = "00000000-0000-0000-0000-000000000001"


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


@pytest.fixture()
def sample_row() -> VehicleRow:
    return VehicleRow(
        id=uuid.UUID(VEHICLE_ID),
        brand="Kawasaki",
        reference="Z400",
        price=Decimal("28900000"),
        special_adjustment=Decimal("-500000"),
        displacement_cc=399,
        categories=["DEPORTIVA", "URBANA Y/O TRABAJO"],
        category=None,
    )


def given_row(mock_session: Mock, row: VehicleRow | None) -> None:
    result = Mock()
    result.scalar_one_or_none.return_value = row
    mock_session.execute.return_value = result


# ==============================================================================
# get_by_id
# ==============================================================================


def test_get_by_id_converts_row_to_domain(mock_session: Mock, sample_row: VehicleRow) -> None:
    given_row(mock_session, sample_row)
    repository = PostgresVehicleRepository(mock_session)

    vehicle = repository.get_by_id(VEHICLE_ID)

    assert vehicle == Vehicle(
        id=VEHICLE_ID,
        brand="Kawasaki",
        reference="Z400",
        price=Decimal("28900000"),
        displacement=399,
        categories=("DEPORTIVA", "URBANA Y/O TRABAJO"),
        category=None,
        special_adjustment=Decimal("-500000"),
    )
    mock_session.execute.assert_called_once()


def test_get_by_id_returns_none_when_missing(mock_session: Mock) -> None:
    given_row(mock_session, None)

    assert PostgresVehicleRepository(mock_session).get_by_id(VEHICLE_ID) is None


def test_get_by_id_skips_query_for_malformed_id(mock_session: Mock) -> None:
    assert PostgresVehicleRepository(mock_session).get_by_id("not-a-uuid") is None

    mock_session.execute.assert_not_called()


def test_legacy_row_without_categories(mock_session: Mock) -> None:
    row = VehicleRow(
        id=uuid.UUID(VEHICLE_ID),
        brand="Ceronte",
        reference="Motocarguero 200",
        price=Decimal("14500000"),
        special_adjustment=None,
        displacement_cc=None,
        categories=None,
        category="MOTOCARRO Y/O MOTOCARGUERO",
    )
    given_row(mock_session, row)

    vehicle = PostgresVehicleRepository(mock_session).get_by_id(VEHICLE_ID)

    assert vehicle is not None
    assert vehicle.categories == ()
    assert vehicle.category == "MOTOCARRO Y/O MOTOCARGUERO"
    assert vehicle.special_adjustment == Decimal("0")
    assert vehicle.displacement is None


# ==============================================================================
# list_all
# ==============================================================================


def given_rows(mock_session: Mock, rows: list[VehicleRow]) -> None:
    result = Mock()
    result.scalars.return_value.all.return_value = rows
    mock_session.execute.return_value = result


def test_list_all_converts_every_row(mock_session: Mock, sample_row: VehicleRow) -> None:
    given_rows(mock_session, [sample_row])

    vehicles = PostgresVehicleRepository(mock_session).list_all()

    assert [v.id for v in vehicles] == [VEHICLE_ID]
    assert vehicles[0].price == Decimal("28900000")


def test_list_all_orders_by_price_descending(mock_session: Mock) -> None:
    given_rows(mock_session, [])

    assert PostgresVehicleRepository(mock_session).list_all() == []

    query = mock_session.execute.call_args.args[0]
    compiled = str(query)
    assert "ORDER BY vehicles.price DESC, vehicles.brand" in compiled
