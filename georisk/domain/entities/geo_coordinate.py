"""Coordenada geográfica produzida pelo geocodificador."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoCoordinate:
    """Latitude e longitude em graus WGS84."""

    latitude: float
    longitude: float


__all__ = ["GeoCoordinate"]
