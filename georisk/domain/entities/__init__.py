"""Entidades do domínio de zonas de risco."""

from .crime_category import CrimeCategory
from .extracted_facts import ExtractedFacts
from .geo_coordinate import GeoCoordinate
from .risk_zone import DEFAULT_RADIUS_METERS, RiskZoneRecord

__all__ = [
    "CrimeCategory",
    "DEFAULT_RADIUS_METERS",
    "ExtractedFacts",
    "GeoCoordinate",
    "RiskZoneRecord",
]
