"""Interface pública dos serviços de aplicação do GeoRisk."""

from .servico_zonas_risco import CycleResult, RiskZoneCollectorService

__all__ = ["CycleResult", "RiskZoneCollectorService"]
