from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock

from tienda_motos.domain.financing import DEFAULT_FINANCIAL_ENTITIES, FinancialEntity
from tienda_motos.domain.pricing import (
    DEFAULT_REGISTRATION_MATRIX,
    DEFAULT_SCENARIOS,
    DEFAULT_SOAT_BANDS,
    MatrixRow,
    RateBand,
    Scenario,
)
from tienda_motos.ports.pricing_config_repository import PricingConfigRepository


@dataclass
class InMemoryPricingConfigRepository(PricingConfigRepository):
    """
    Pricing configuration held in process memory.

    Seeded with the dealership's default SOAT bands, registration matrix,
    scenarios and financial entities. Entity writes are guarded by a lock
    since the repository is shared across requests.
    """

    scenarios: list[Scenario] = field(default_factory=lambda: list(DEFAULT_SCENARIOS))
    financial_entities: list[FinancialEntity] = field(
        default_factory=lambda: list(DEFAULT_FINANCIAL_ENTITIES)
    )
    soat_bands: list[RateBand] = field(default_factory=lambda: list(DEFAULT_SOAT_BANDS))
    matrix: list[MatrixRow] = field(default_factory=lambda: list(DEFAULT_REGISTRATION_MATRIX))
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def get_scenario(self, scenario_id: str) -> Scenario | None:
        return next((s for s in self.scenarios if s.id == scenario_id), None)

    def get_financial_entity(self, entity_id: str) -> FinancialEntity | None:
        with self._lock:
            return next((e for e in self.financial_entities if e.id == entity_id), None)

    def list_financial_entities(self) -> list[FinancialEntity]:
        with self._lock:
            return list(self.financial_entities)

    def save_financial_entity(self, entity: FinancialEntity) -> None:
        with self._lock:
            ids = [e.id for e in self.financial_entities]
            if entity.id in ids:
                self.financial_entities[ids.index(entity.id)] = entity
            else:
                self.financial_entities.append(entity)

    def rate_bands(self) -> list[RateBand]:
        return list(self.soat_bands)

    def registration_matrix(self) -> list[MatrixRow]:
        return list(self.matrix)
