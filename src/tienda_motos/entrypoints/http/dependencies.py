"""
Dependency injection for FastAPI routes.

Database sessions are per-request. The pricing configuration repository
is a process-wide singleton (it is the source of truth for lenders and
tables), so it is the only provider cached with lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from tienda_motos.adapters.in_memory_pricing_config_repository import (
    InMemoryPricingConfigRepository,
)
from tienda_motos.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from tienda_motos.infra.db.session import get_session
from tienda_motos.ports.pricing_config_repository import PricingConfigRepository
from tienda_motos.ports.vehicle_repository import VehicleRepository
from tienda_motos.use_cases.apply_usury_rate import ApplyUsuryRate
from tienda_motos.use_cases.calculate_quote import CalculateQuote
from tienda_motos.use_cases.estimate_purchasing_power import EstimatePurchasingPower
from tienda_motos.use_cases.get_vehicle_by_id import GetVehicleById


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    Commit/rollback and close are handled by get_session() when the
    request ends.
    """
    with get_session() as session:
        yield session


@lru_cache
def get_pricing_config_repository() -> PricingConfigRepository:
    return InMemoryPricingConfigRepository()


def get_vehicle_repository(db: Session = Depends(get_db)) -> VehicleRepository:
    return PostgresVehicleRepository(session=db)


def get_vehicle_by_id_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=repository)


def get_calculate_quote_use_case(
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
    pricing: PricingConfigRepository = Depends(get_pricing_config_repository),
) -> CalculateQuote:
    """
    Factory for the quote use case.

    Each request gets a fresh use case bound to its own session-scoped
    vehicle repository and the shared pricing configuration.
    """
    return CalculateQuote(vehicle_repository=vehicles, pricing_config_repository=pricing)


def get_estimate_purchasing_power_use_case(
    vehicles: VehicleRepository = Depends(get_vehicle_repository),
    pricing: PricingConfigRepository = Depends(get_pricing_config_repository),
) -> EstimatePurchasingPower:
    return EstimatePurchasingPower(vehicle_repository=vehicles, pricing_config_repository=pricing)


def get_apply_usury_rate_use_case(
    pricing: PricingConfigRepository = Depends(get_pricing_config_repository),
) -> ApplyUsuryRate:
    return ApplyUsuryRate(pricing_config_repository=pricing)
