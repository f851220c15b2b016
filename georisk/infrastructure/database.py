"""Mongo database utilities."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from georisk.domain import FatalInitError
from georisk.settings import get_collection_name, get_credentials_file

log = logging.getLogger(__name__)


class StoreCredentials(BaseModel):
    """Conteúdo do arquivo de conta de serviço do armazenamento."""

    uri: str
    database: str = "georisk"


@dataclass
class MongoSettings:
    uri: str
    database: str
    collection: str = "risk_zones"

    @classmethod
    def from_credentials_file(
        cls, path: Path, *, collection: str = "risk_zones"
    ) -> "MongoSettings":
        """Carrega as configurações do arquivo de credenciais obrigatório."""

        if not path.is_file():
            raise FatalInitError(
                f"Arquivo de credenciais '{path}' não encontrado. "
                "Verifique se ele está na pasta correta."
            )
        try:
            credentials = StoreCredentials.model_validate_json(
                path.read_text(encoding="utf-8")
            )
        except (OSError, ValidationError) as exc:
            raise FatalInitError(
                f"Arquivo de credenciais '{path}' inválido: {exc}"
            ) from exc
        return cls(
            uri=credentials.uri,
            database=credentials.database,
            collection=collection,
        )

    @classmethod
    def from_env(cls) -> "MongoSettings":
        return cls.from_credentials_file(
            get_credentials_file(), collection=get_collection_name()
        )


class MongoClientFactory:
    """Creates Mongo clients following the dependency inversion principle."""

    def __init__(self, settings: MongoSettings | None = None) -> None:
        self._settings = settings or MongoSettings.from_env()
        self._client: MongoClient | None = None

    @property
    def settings(self) -> MongoSettings:
        return self._settings

    def create_client(self) -> MongoClient:
        if not self._client:
            self._client = MongoClient(self._settings.uri)
        return self._client

    def get_database(self) -> Any:
        client = self.create_client()
        return client[self._settings.database]

    def get_collection(self) -> Any:
        return self.get_database()[self._settings.collection]

    def check_connection(self) -> None:
        """Garante que o servidor responde; qualquer falha é fatal."""

        try:
            self.create_client().admin.command("ping")
        except PyMongoError as exc:
            self.close()
            raise FatalInitError(f"Erro ao conectar ao MongoDB: {exc}") from exc
        log.debug("Conexão com MongoDB verificada em %s", self._settings.database)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


__all__ = ["MongoClientFactory", "MongoSettings", "StoreCredentials"]
