"""Testes da carga de credenciais e da verificação de conexão."""
from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from georisk.domain import FatalInitError
from georisk.infrastructure.database import MongoClientFactory, MongoSettings


def test_missing_credentials_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(FatalInitError):
        MongoSettings.from_credentials_file(tmp_path / "credentials.json")


def test_invalid_credentials_file_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps({"database": "georisk"}), encoding="utf-8")

    with pytest.raises(FatalInitError):
        MongoSettings.from_credentials_file(path)


def test_credentials_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "credentials.json"
    path.write_text(
        json.dumps({"uri": "mongodb://localhost:27017", "database": "zonas"}),
        encoding="utf-8",
    )

    settings = MongoSettings.from_credentials_file(path, collection="zonas_teste")

    assert settings == MongoSettings(
        uri="mongodb://localhost:27017", database="zonas", collection="zonas_teste"
    )


def test_unreachable_store_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    factory = MongoClientFactory(MongoSettings(uri="mongodb://localhost", database="x"))
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("sem servidor")
    monkeypatch.setattr(factory, "create_client", lambda: client)

    with pytest.raises(FatalInitError):
        factory.check_connection()


def test_failed_ping_closes_client(monkeypatch: pytest.MonkeyPatch) -> None:
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("sem servidor")
    monkeypatch.setattr(
        "georisk.infrastructure.database.MongoClient", lambda uri: client
    )
    factory = MongoClientFactory(MongoSettings(uri="mongodb://localhost", database="x"))

    with pytest.raises(FatalInitError):
        factory.check_connection()

    client.close.assert_called_once_with()
