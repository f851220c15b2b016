"""Dependency container for the risk zone collector."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from pymongo.errors import PyMongoError

from georisk import settings
from georisk.application import RiskZoneCollectorService
from georisk.domain import FatalInitError
from georisk.extraction import AddressExtractor, ArticleAnalyzer, TextClassifier
from georisk.infrastructure import (
    LinkDiscoverer,
    MongoClientFactory,
    MongoRiskZoneRepository,
    NominatimGeocoder,
    RequestsSoupFetcher,
    ensure_risk_zone_indexes,
)

log = logging.getLogger(__name__)


@dataclass
class AnalysisContainer:
    """Components that work without the document store."""

    fetcher: RequestsSoupFetcher
    link_discoverer: LinkDiscoverer
    article_analyzer: ArticleAnalyzer
    geocoder: NominatimGeocoder

    def close(self) -> None:
        self.geocoder.close()
        self.fetcher.close()


@dataclass
class Container(AnalysisContainer):
    """Container exposing the full collection pipeline."""

    client_factory: MongoClientFactory
    repository: MongoRiskZoneRepository
    collector_service: RiskZoneCollectorService

    def close(self) -> None:
        super().close()
        self.client_factory.close()


def build_analysis_container() -> AnalysisContainer:
    """Build fetcher, extraction and geocoding components from settings."""

    fetcher = RequestsSoupFetcher()
    link_discoverer = LinkDiscoverer(fetcher, link_pattern=settings.get_link_pattern())
    article_analyzer = ArticleAnalyzer(
        fetcher,
        AddressExtractor(settings.get_locality_suffix()),
        TextClassifier(),
        content_selectors=settings.get_content_selectors(),
    )
    geocoder = NominatimGeocoder(
        settings.get_geocoder_url(),
        user_agent=settings.get_geocoder_user_agent(),
        timeout=settings.get_geocoder_timeout(),
        strict_coordinates=settings.get_geocoder_strict(),
    )
    return AnalysisContainer(
        fetcher=fetcher,
        link_discoverer=link_discoverer,
        article_analyzer=article_analyzer,
        geocoder=geocoder,
    )


def build_container(
    *,
    factory: MongoClientFactory | None = None,
    seed_urls: Iterable[str] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> Container:
    """Build the collector container.

    Raises:
        FatalInitError: When the credentials file is missing or invalid, or
            the store cannot be reached.
    """

    factory = factory or MongoClientFactory()
    try:
        factory.check_connection()
        collection = factory.get_collection()
        try:
            ensure_risk_zone_indexes(collection)
        except PyMongoError as exc:
            raise FatalInitError(
                f"Erro ao preparar a coleção de zonas de risco: {exc}"
            ) from exc
        repository = MongoRiskZoneRepository(collection)
        analysis = build_analysis_container()
    except BaseException:
        factory.close()
        raise
    service_kwargs = {}
    if sleep is not None:
        service_kwargs["sleep"] = sleep
    try:
        collector_service = RiskZoneCollectorService(
            analysis.link_discoverer,
            analysis.article_analyzer,
            analysis.geocoder,
            repository,
            seed_urls=(
                tuple(seed_urls) if seed_urls is not None else settings.get_seed_urls()
            ),
            throttle_seconds=settings.get_throttle_seconds(),
            **service_kwargs,
        )
    except BaseException:
        analysis.close()
        factory.close()
        raise
    log.debug("Container montado para a coleção %s", factory.settings.collection)

    return Container(
        fetcher=analysis.fetcher,
        link_discoverer=analysis.link_discoverer,
        article_analyzer=analysis.article_analyzer,
        geocoder=analysis.geocoder,
        client_factory=factory,
        repository=repository,
        collector_service=collector_service,
    )


__all__ = [
    "AnalysisContainer",
    "Container",
    "build_analysis_container",
    "build_container",
]
