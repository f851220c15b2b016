"""Entidade persistida que representa uma zona de risco."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .crime_category import CrimeCategory
from .geo_coordinate import GeoCoordinate

DEFAULT_RADIUS_METERS = 50


@dataclass(frozen=True)
class RiskZoneRecord:
    """Ponto geocodificado de um crime noticiado, com raio fixo de exibição.

    Attributes:
        link: URL da notícia de origem, usada como chave de deduplicação.
        latitude: Latitude em graus.
        longitude: Longitude em graus.
        category: Categoria do crime; nunca ``nao_identificado``.
        radius_meters: Raio de exibição gravado no campo ``raio``.
    """

    link: str
    latitude: float
    longitude: float
    category: CrimeCategory
    radius_meters: int = DEFAULT_RADIUS_METERS

    def __post_init__(self) -> None:
        if not self.link or not self.link.strip():
            raise ValueError("risk zone link cannot be empty")
        if not isinstance(self.category, CrimeCategory):
            object.__setattr__(self, "category", CrimeCategory(self.category))
        if not self.category.is_identified:
            raise ValueError("risk zone category must be identified")

    @classmethod
    def from_coordinate(
        cls,
        link: str,
        coordinate: GeoCoordinate,
        category: CrimeCategory,
        *,
        radius_meters: int = DEFAULT_RADIUS_METERS,
    ) -> "RiskZoneRecord":
        return cls(
            link=link,
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            category=category,
            radius_meters=radius_meters,
        )

    @property
    def coordinate(self) -> GeoCoordinate:
        return GeoCoordinate(latitude=self.latitude, longitude=self.longitude)

    def to_document(self) -> Dict[str, Any]:
        """Serializa o registro no formato da coleção ``risk_zones``."""

        return {
            "link": self.link,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "raio": self.radius_meters,
            "tipo": self.category.value,
        }

    @classmethod
    def from_document(cls, data: Mapping[str, Any]) -> "RiskZoneRecord":
        """Reconstrói o registro a partir de um documento armazenado."""

        return cls(
            link=str(data["link"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            category=CrimeCategory(data["tipo"]),
            radius_meters=int(data.get("raio", DEFAULT_RADIUS_METERS)),
        )


__all__ = ["DEFAULT_RADIUS_METERS", "RiskZoneRecord"]
