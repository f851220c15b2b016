"""Implementações de repositórios baseadas em MongoDB."""

from .mongo_risk_zone_repository import MongoRiskZoneRepository
from .risk_zone_indexes import ensure_risk_zone_indexes

__all__ = ["MongoRiskZoneRepository", "ensure_risk_zone_indexes"]
