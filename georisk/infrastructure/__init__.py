"""Adaptadores de infraestrutura: HTTP, geocodificação e MongoDB."""

from .database import MongoClientFactory, MongoSettings
from .geocoding import NominatimGeocoder
from .repositories import MongoRiskZoneRepository, ensure_risk_zone_indexes
from .scraper import LinkDiscoverer, RequestsSoupFetcher

__all__ = [
    "LinkDiscoverer",
    "MongoClientFactory",
    "MongoRiskZoneRepository",
    "MongoSettings",
    "NominatimGeocoder",
    "RequestsSoupFetcher",
    "ensure_risk_zone_indexes",
]
