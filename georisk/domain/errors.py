"""Erros do coletor de zonas de risco.

Falhas por item (``FetchError``, ``ParseError``, ``GeocodeError`` e
``RepositoryError``) são tratadas pelo serviço de coleta como descarte do item.
Somente ``FatalInitError`` encerra o processo.
"""
from __future__ import annotations


class FatalInitError(RuntimeError):
    """Falha ao carregar credenciais ou conectar ao armazenamento."""


class FetchError(RuntimeError):
    """Página ou artigo inacessível."""


class ParseError(RuntimeError):
    """Não foi possível construir a árvore do documento HTML."""


class GeocodeError(RuntimeError):
    """Base para falhas de geocodificação."""


class EmptyAddressError(GeocodeError):
    """Endereço vazio; nenhuma requisição é feita."""


class TransportError(GeocodeError):
    """Falha de conexão ou resposta HTTP de erro do serviço."""


class DecodeError(GeocodeError):
    """Resposta do serviço fora do formato esperado."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(message)
        self.body = body


class NoResultError(GeocodeError):
    """O serviço respondeu com uma lista vazia."""


class RepositoryError(RuntimeError):
    """Falha ao consultar o armazenamento de zonas de risco."""


class PersistError(RepositoryError):
    """Falha ao gravar uma nova zona de risco."""


__all__ = [
    "DecodeError",
    "EmptyAddressError",
    "FatalInitError",
    "FetchError",
    "GeocodeError",
    "NoResultError",
    "ParseError",
    "PersistError",
    "RepositoryError",
    "TransportError",
]
