"""GeoRisk - coletor de zonas de risco a partir de notícias policiais."""
from .application import CycleResult, RiskZoneCollectorService
from .container import build_analysis_container, build_container
from .domain import CrimeCategory, ExtractedFacts, GeoCoordinate, RiskZoneRecord
from .extraction import AddressExtractor, TextClassifier

__all__ = [
    "AddressExtractor",
    "CrimeCategory",
    "CycleResult",
    "ExtractedFacts",
    "GeoCoordinate",
    "RiskZoneCollectorService",
    "RiskZoneRecord",
    "TextClassifier",
    "build_analysis_container",
    "build_container",
]
