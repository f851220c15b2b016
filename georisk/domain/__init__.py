"""API pública do domínio de zonas de risco.

Centraliza entidades, portas, repositórios e erros para importação direta de
``georisk.domain``.
"""

from .entities import (
    DEFAULT_RADIUS_METERS,
    CrimeCategory,
    ExtractedFacts,
    GeoCoordinate,
    RiskZoneRecord,
)
from .errors import (
    DecodeError,
    EmptyAddressError,
    FatalInitError,
    FetchError,
    GeocodeError,
    NoResultError,
    ParseError,
    PersistError,
    RepositoryError,
    TransportError,
)
from .ports import Geocoder, PageFetcher
from .repositories import RiskZoneRepository

__all__ = [
    "CrimeCategory",
    "DEFAULT_RADIUS_METERS",
    "DecodeError",
    "EmptyAddressError",
    "ExtractedFacts",
    "FatalInitError",
    "FetchError",
    "GeoCoordinate",
    "GeocodeError",
    "Geocoder",
    "NoResultError",
    "PageFetcher",
    "ParseError",
    "PersistError",
    "RepositoryError",
    "RiskZoneRecord",
    "RiskZoneRepository",
    "TransportError",
]
