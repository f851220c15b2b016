"""Repositório de zonas de risco com persistência em MongoDB."""
from __future__ import annotations

import logging
from typing import Iterable

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from georisk.domain import PersistError, RepositoryError, RiskZoneRecord
from georisk.domain.repositories import RiskZoneRepository

log = logging.getLogger(__name__)


class MongoRiskZoneRepository(RiskZoneRepository):
    """Grava :class:`RiskZoneRecord` na coleção ``risk_zones``."""

    def __init__(self, collection: Collection) -> None:
        self._collection: Collection = collection
        """Coleção MongoDB com um documento por link processado."""

    def exists(self, link: str) -> bool:
        """Verifica se algum documento já usa o link informado."""

        try:
            return self._collection.count_documents({"link": link}, limit=1) > 0
        except PyMongoError as exc:
            raise RepositoryError(
                f"Erro ao verificar duplicidade para o link {link}: {exc}"
            ) from exc

    def persist(self, record: RiskZoneRecord) -> None:
        """Insere o registro sem upsert; a falha é reportada, não repetida."""

        try:
            self._collection.insert_one(record.to_document())
        except PyMongoError as exc:
            raise PersistError(f"Falha ao salvar {record.link}: {exc}") from exc

    def list_all(self) -> Iterable[RiskZoneRecord]:
        try:
            cursor = self._collection.find({}, {"_id": False})
            for data in cursor:
                try:
                    yield RiskZoneRecord.from_document(data)
                except (KeyError, ValueError) as exc:
                    log.warning("Documento de zona de risco ignorado: %s", exc)
        except PyMongoError as exc:
            raise RepositoryError(f"Erro ao listar zonas de risco: {exc}") from exc


__all__ = ["MongoRiskZoneRepository"]
