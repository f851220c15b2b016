from .risk_zone_repository import RiskZoneRepository

__all__ = ["RiskZoneRepository"]
