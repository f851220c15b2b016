"""Utilitários para criação de índices da coleção de zonas de risco."""
from __future__ import annotations

import logging

from pymongo.collection import Collection
from pymongo.errors import OperationFailure

log = logging.getLogger(__name__)

# IndexOptionsConflict / IndexKeySpecsConflict
_EXISTING_INDEX_CODES = {85, 86}


def ensure_risk_zone_indexes(collection: Collection) -> None:
    """Garante o índice (não único) usado pela consulta de deduplicação."""

    try:
        collection.create_index([("link", 1)], name="link", background=True)
    except OperationFailure as exc:
        if exc.code not in _EXISTING_INDEX_CODES:
            raise
        log.debug("Índice link já existe com outra definição: %s", exc)


__all__ = ["ensure_risk_zone_indexes"]
