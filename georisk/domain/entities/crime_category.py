"""Categorias de crime reconhecidas pelo classificador."""
from __future__ import annotations

from enum import Enum


class CrimeCategory(str, Enum):
    """Vocabulário fixo de categorias gravadas no campo ``tipo``."""

    FURTO = "furto"
    ROUBO = "roubo"
    HOMICIDIO = "homicidio"
    TRAFICO = "trafico"
    AGRESSAO = "agressao"
    SEQUESTRO = "sequestro"
    NAO_IDENTIFICADO = "nao_identificado"

    @property
    def is_identified(self) -> bool:
        return self is not CrimeCategory.NAO_IDENTIFICADO


__all__ = ["CrimeCategory"]
