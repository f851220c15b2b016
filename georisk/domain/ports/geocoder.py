"""Porta para o serviço de geocodificação."""
from __future__ import annotations

from abc import ABC, abstractmethod

from georisk.domain.entities import GeoCoordinate


class Geocoder(ABC):
    """Converte endereços legíveis em coordenadas."""

    @abstractmethod
    def geocode(self, address: str) -> GeoCoordinate:
        """Return the coordinate of ``address`` or raise ``GeocodeError``."""
