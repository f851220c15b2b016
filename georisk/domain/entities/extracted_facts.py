"""Fatos extraídos do corpo de uma notícia."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .crime_category import CrimeCategory


@dataclass(frozen=True)
class ExtractedFacts:
    """Resultado efêmero da análise de um artigo; nunca é persistido."""

    raw_text: str
    address: Optional[str]
    crime_type: CrimeCategory

    @property
    def is_actionable(self) -> bool:
        """Indica se há endereço e categoria suficientes para geocodificar."""

        return bool(self.address) and self.crime_type.is_identified

    def skip_reason(self) -> Optional[str]:
        """Descreve o motivo do descarte ou ``None`` quando o artigo é útil."""

        if not self.address and not self.crime_type.is_identified:
            return "endereço e tipo de crime ausentes"
        if not self.address:
            return "endereço ausente"
        if not self.crime_type.is_identified:
            return "tipo de crime não identificado"
        return None


__all__ = ["ExtractedFacts"]
