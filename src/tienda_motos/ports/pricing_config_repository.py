from __future__ import annotations

from abc import ABC, abstractmethod

from tienda_motos.domain.financing import FinancialEntity
from tienda_motos.domain.pricing import MatrixRow, RateBand, Scenario


class PricingConfigRepository(ABC):
    """
    Port for the pricing configuration read by the quote engine.

    Implementations return snapshots; the engine never mutates them.
    """

    @abstractmethod
    def get_scenario(self, scenario_id: str) -> Scenario | None: ...

    @abstractmethod
    def get_financial_entity(self, entity_id: str) -> FinancialEntity | None: ...

    @abstractmethod
    def list_financial_entities(self) -> list[FinancialEntity]: ...

    @abstractmethod
    def save_financial_entity(self, entity: FinancialEntity) -> None:
        """Insert or replace an entity by id."""
        ...

    @abstractmethod
    def rate_bands(self) -> list[RateBand]: ...

    @abstractmethod
    def registration_matrix(self) -> list[MatrixRow]: ...
