"""Classificação de notícias por palavras-chave de crime."""
from __future__ import annotations

from typing import Mapping, Sequence

from georisk.domain.entities import CrimeCategory

# A ordem das chaves define a prioridade quando mais de uma categoria casa.
CRIME_KEYWORDS: Mapping[CrimeCategory, Sequence[str]] = {
    CrimeCategory.FURTO: ("furto", "furtado", "furtaram", "furtada"),
    CrimeCategory.ROUBO: ("roubo", "roubado", "roubada", "roubaram", "assalto"),
    CrimeCategory.HOMICIDIO: (
        "homicídio",
        "assassinato",
        "morto",
        "assassinado",
        "assassinada",
    ),
    CrimeCategory.TRAFICO: ("tráfico", "drogas", "entorpecente"),
    CrimeCategory.AGRESSAO: ("agressão", "espancamento", "violência física"),
    CrimeCategory.SEQUESTRO: ("sequestro", "sequestrado", "sequestrada"),
}


class TextClassifier:
    """Atribui uma única categoria de crime ao texto de uma notícia."""

    def __init__(
        self, keywords: Mapping[CrimeCategory, Sequence[str]] | None = None
    ) -> None:
        table = CRIME_KEYWORDS if keywords is None else keywords
        self._keywords: tuple[tuple[CrimeCategory, tuple[str, ...]], ...] = tuple(
            (category, tuple(word.lower() for word in words))
            for category, words in table.items()
        )

    def classify(self, text: str | None) -> CrimeCategory:
        """Retorna a primeira categoria cuja palavra-chave aparece no texto."""

        lowered = (text or "").lower()
        for category, words in self._keywords:
            if any(word in lowered for word in words):
                return category
        return CrimeCategory.NAO_IDENTIFICADO


__all__ = ["CRIME_KEYWORDS", "TextClassifier"]
