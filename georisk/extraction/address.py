"""Extração heurística de endereços a partir do texto das notícias.

O endereço é localizado por um tipo de logradouro seguido de até 80
caracteres, limpo de pontuação final e de cláusulas narrativas ("por um
homem...", "durante a madrugada...") e completado com o sufixo da localidade
para que o geocodificador consiga resolvê-lo. A heurística é propositalmente
simples: ``"Rua XV de Novembro"`` vira ``"Rua XV"``.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

log = logging.getLogger(__name__)

STREET_TYPES: tuple[str, ...] = (
    "Rua",
    "Avenida",
    "Av.",
    "Travessa",
    "Praça",
    "Bairro",
    "Jardim",
    "Vila",
    "Rodovia",
    "Parque",
)

NOISE_CONNECTORS: tuple[str, ...] = (
    "por",
    "em",
    "de",
    "que",
    "do",
    "da",
    "durante",
    "onde",
    "e",
)

DEFAULT_LOCALITY_SUFFIX = ", Limeira, SP, Brasil"

_TRAILING_CHARS = ",. \t\r\n"


def build_address_pattern(street_types: Sequence[str] = STREET_TYPES) -> re.Pattern[str]:
    """Compila o padrão de endereço para os tipos de logradouro informados."""

    alternatives = "|".join(re.escape(item) for item in street_types)
    return re.compile(
        rf"\b((?:{alternatives})\s+[^.,\n]{{5,80}}"
        r"(?:\s*,?\s*(?:n[oº°]?\.?\s*)?\d+)?)",
        re.IGNORECASE,
    )


def build_noise_pattern(connectors: Sequence[str] = NOISE_CONNECTORS) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(item) for item in connectors)
    return re.compile(rf"\s+(?:{alternatives})\s+.*", re.IGNORECASE | re.DOTALL)


class AddressExtractor:
    """Converte o texto de uma notícia em um endereço geocodificável."""

    def __init__(
        self,
        locality_suffix: str = DEFAULT_LOCALITY_SUFFIX,
        *,
        street_types: Sequence[str] = STREET_TYPES,
        connectors: Sequence[str] = NOISE_CONNECTORS,
    ) -> None:
        self._locality_suffix = locality_suffix
        self._address_re = build_address_pattern(street_types)
        self._noise_re = build_noise_pattern(connectors)

    def extract(self, text: str | None) -> Optional[str]:
        """Retorna o endereço com o sufixo da localidade ou ``None``."""

        base = self.extract_base(text)
        if base is None:
            return None
        address = f"{base}{self._locality_suffix}"
        log.debug("Endereço para geocodificação: %s", address)
        return address

    def extract_base(self, text: str | None) -> Optional[str]:
        """Retorna o trecho do endereço antes do sufixo da localidade."""

        if not text:
            return None
        match = self._address_re.search(text)
        if not match:
            log.debug("Nenhum endereço específico encontrado no texto")
            return None

        cleaned = match.group(1).strip().rstrip(_TRAILING_CHARS)
        cleaned = self._noise_re.sub("", cleaned, count=1)
        cleaned = cleaned.rstrip(_TRAILING_CHARS).strip()
        return cleaned or None


__all__ = [
    "AddressExtractor",
    "DEFAULT_LOCALITY_SUFFIX",
    "NOISE_CONNECTORS",
    "STREET_TYPES",
    "build_address_pattern",
    "build_noise_pattern",
]
