"""Interface do repositório de zonas de risco."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from georisk.domain.entities import RiskZoneRecord


class RiskZoneRepository(ABC):
    """Persistência somente de inserção usada para deduplicar links."""

    @abstractmethod
    def exists(self, link: str) -> bool:
        """Check whether any record with the given link was stored."""

    @abstractmethod
    def persist(self, record: RiskZoneRecord) -> None:
        """Insert a new record unconditionally."""

    @abstractmethod
    def list_all(self) -> Iterable[RiskZoneRecord]:
        """Return every stored record."""
