"""Testes do repositório MongoDB de zonas de risco."""
from __future__ import annotations

from copy import deepcopy
from typing import Any

import pytest
from pymongo.errors import AutoReconnect, DuplicateKeyError

from georisk.domain import CrimeCategory, PersistError, RepositoryError, RiskZoneRecord
from georisk.infrastructure.repositories import MongoRiskZoneRepository


class FakeCollection:
    def __init__(self, documents: list[dict[str, Any]] | None = None) -> None:
        self.documents = [deepcopy(doc) for doc in documents or []]
        self.count_calls: list[tuple[dict[str, Any], int]] = []

    def count_documents(self, criteria: dict[str, Any], limit: int = 0) -> int:
        self.count_calls.append((criteria, limit))
        matched = [
            doc
            for doc in self.documents
            if all(doc.get(key) == value for key, value in criteria.items())
        ]
        return len(matched[:limit] if limit else matched)

    def insert_one(self, document: dict[str, Any]):
        self.documents.append(deepcopy(document))

    def find(self, criteria: dict[str, Any], projection: dict[str, Any] | None = None):
        return iter([deepcopy(doc) for doc in self.documents])


class _BrokenCollection:
    def count_documents(self, *_args, **_kwargs):
        raise AutoReconnect("conexão perdida")

    def insert_one(self, *_args, **_kwargs):
        raise DuplicateKeyError("duplicado")

    def find(self, *_args, **_kwargs):
        raise AutoReconnect("conexão perdida")


@pytest.fixture
def record() -> RiskZoneRecord:
    return RiskZoneRecord(
        link="https://example.com/noticia-1",
        latitude=-22.5,
        longitude=-47.4,
        category=CrimeCategory.ROUBO,
    )


def test_persist_writes_store_shape(record: RiskZoneRecord) -> None:
    collection = FakeCollection()
    repository = MongoRiskZoneRepository(collection)  # type: ignore[arg-type]

    repository.persist(record)

    assert collection.documents == [
        {
            "link": "https://example.com/noticia-1",
            "latitude": -22.5,
            "longitude": -47.4,
            "raio": 50,
            "tipo": "roubo",
        }
    ]


def test_exists_queries_by_link(record: RiskZoneRecord) -> None:
    collection = FakeCollection([record.to_document()])
    repository = MongoRiskZoneRepository(collection)  # type: ignore[arg-type]

    assert repository.exists("https://example.com/noticia-1")
    assert not repository.exists("https://example.com/noticia-2")
    assert collection.count_calls[0] == ({"link": "https://example.com/noticia-1"}, 1)


def test_persist_does_not_upsert(record: RiskZoneRecord) -> None:
    collection = FakeCollection([record.to_document()])
    repository = MongoRiskZoneRepository(collection)  # type: ignore[arg-type]

    repository.persist(record)

    assert len(collection.documents) == 2


def test_list_all_reads_records_back(record: RiskZoneRecord) -> None:
    collection = FakeCollection(
        [record.to_document(), {"link": "https://example.com/x", "tipo": "roubo"}]
    )
    repository = MongoRiskZoneRepository(collection)  # type: ignore[arg-type]

    assert list(repository.list_all()) == [record]


def test_store_failures_are_wrapped(record: RiskZoneRecord) -> None:
    repository = MongoRiskZoneRepository(_BrokenCollection())  # type: ignore[arg-type]

    with pytest.raises(RepositoryError):
        repository.exists(record.link)
    with pytest.raises(PersistError):
        repository.persist(record)
    with pytest.raises(RepositoryError):
        list(repository.list_all())
