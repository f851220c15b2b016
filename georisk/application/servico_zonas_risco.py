"""Serviço de orquestração da coleta de zonas de risco."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from georisk.domain import (
    DEFAULT_RADIUS_METERS,
    ExtractedFacts,
    FetchError,
    GeocodeError,
    Geocoder,
    ParseError,
    PersistError,
    RepositoryError,
    RiskZoneRecord,
)
from georisk.domain.repositories import RiskZoneRepository
from georisk.extraction import ArticleAnalyzer
from georisk.infrastructure.scraper import LinkDiscoverer

_BANNER = "======================================="
DEFAULT_CYCLE_INTERVAL_SECONDS = 24 * 60 * 60
MIN_THROTTLE_SECONDS = 1.0


@dataclass(frozen=True)
class CycleResult:
    """Resumo das métricas de um ciclo de coleta."""

    discovered: int
    created: int
    skipped_existing: int
    skipped_incomplete: int
    fetch_failures: int
    geocode_failures: int
    persist_failures: int
    errors: tuple[tuple[str, str], ...]
    elapsed_ms_total: int
    dry_run: bool = False

    def to_mapping(self) -> dict[str, Any]:
        """Serializa o resultado completo para inspeção ou logs."""

        return {
            "discovered": self.discovered,
            "created": self.created,
            "skipped_existing": self.skipped_existing,
            "skipped_incomplete": self.skipped_incomplete,
            "fetch_failures": self.fetch_failures,
            "geocode_failures": self.geocode_failures,
            "persist_failures": self.persist_failures,
            "errors": [list(item) for item in self.errors],
            "elapsed_ms_total": self.elapsed_ms_total,
            "dry_run": self.dry_run,
        }

    def to_summary(self) -> dict[str, int]:
        """Retorna um resumo reduzido com as principais métricas."""

        return {
            "discovered": self.discovered,
            "created": self.created,
            "skipped": self.skipped_existing + self.skipped_incomplete,
            "failures": self.fetch_failures
            + self.geocode_failures
            + self.persist_failures,
            "elapsed_ms_total": self.elapsed_ms_total,
        }


@dataclass(slots=True)
class _CycleCounters:
    discovered: int = 0
    created: int = 0
    skipped_existing: int = 0
    skipped_incomplete: int = 0
    fetch_failures: int = 0
    geocode_failures: int = 0
    persist_failures: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


class RiskZoneCollectorService:
    """Coordena descoberta, extração, geocodificação e persistência.

    Os links são processados um por vez. Após cada tentativa de
    geocodificação, com ou sem sucesso, o serviço pausa ``throttle_seconds``
    para respeitar a política de uso do geocodificador.
    """

    def __init__(
        self,
        link_discoverer: LinkDiscoverer,
        article_analyzer: ArticleAnalyzer,
        geocoder: Geocoder,
        repository: RiskZoneRepository,
        *,
        seed_urls: Iterable[str],
        radius_meters: int = DEFAULT_RADIUS_METERS,
        throttle_seconds: float = MIN_THROTTLE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Configura o serviço com todas as dependências necessárias.

        Args:
            link_discoverer: Extrai os links candidatos das páginas semente.
            article_analyzer: Busca cada notícia e deriva endereço e categoria.
            geocoder: Converte o endereço em coordenadas.
            repository: Armazenamento usado para deduplicar e gravar as zonas.
            seed_urls: Páginas semente varridas em cada ciclo.
            radius_meters: Raio gravado em cada zona de risco.
            throttle_seconds: Pausa após cada chamada ao geocodificador; nunca
                menor que um segundo.
            sleep: Função de espera, substituível em testes.
        """

        self._link_discoverer = link_discoverer
        self._article_analyzer = article_analyzer
        self._geocoder = geocoder
        self._repository = repository
        self._seed_urls = tuple(seed_urls)
        self._radius_meters = radius_meters
        self._throttle_seconds = max(MIN_THROTTLE_SECONDS, throttle_seconds)
        self._sleep = sleep
        self._log = logging.getLogger("georisk.service")

    @property
    def seed_urls(self) -> tuple[str, ...]:
        return self._seed_urls

    def run_cycle(self, *, dry_run: bool = False) -> CycleResult:
        """Executa um ciclo completo sobre as páginas semente configuradas.

        Falhas de um link são registradas e o ciclo segue para o próximo.

        Args:
            dry_run: Quando ``True``, geocodifica mas não grava as zonas.

        Returns:
            Um ``CycleResult`` com os contadores do ciclo.
        """

        self._log.info(_BANNER)
        self._log.info("Iniciando nova execução do coletor...")
        start = time.perf_counter()
        counters = _CycleCounters()

        links = self._link_discoverer.discover_links(self._seed_urls)
        counters.discovered = len(links)
        self._log.info("Total de %d links únicos encontrados para processar.", len(links))

        for link in links:
            try:
                self._process_link(link, counters, dry_run=dry_run)
            except Exception as exc:  # pragma: no cover - falha não prevista
                counters.errors.append((link, str(exc)))
                self._log.exception("Falha inesperada ao processar %s", link)

        result = CycleResult(
            discovered=counters.discovered,
            created=counters.created,
            skipped_existing=counters.skipped_existing,
            skipped_incomplete=counters.skipped_incomplete,
            fetch_failures=counters.fetch_failures,
            geocode_failures=counters.geocode_failures,
            persist_failures=counters.persist_failures,
            errors=tuple(counters.errors),
            elapsed_ms_total=int((time.perf_counter() - start) * 1000),
            dry_run=dry_run,
        )
        self._log.info(
            "Coleta concluída. Links: %d, novos: %d, existentes: %d, "
            "incompletos: %d, falhas: %d",
            result.discovered,
            result.created,
            result.skipped_existing,
            result.skipped_incomplete,
            len(result.errors),
        )
        self._log.info(_BANNER)
        return result

    def run_forever(
        self,
        interval_seconds: float = DEFAULT_CYCLE_INTERVAL_SECONDS,
        *,
        max_cycles: int | None = None,
        dry_run: bool = False,
    ) -> int:
        """Repete ``run_cycle`` com uma pausa fixa entre os ciclos.

        ``max_cycles`` limita o laço; quando ``None`` roda indefinidamente.
        Retorna a quantidade de ciclos executados.
        """

        if max_cycles is not None and max_cycles <= 0:
            raise ValueError("max_cycles deve ser maior que zero")

        cycles = 0
        while True:
            self._log.info("Iniciando ciclo de coleta...")
            self.run_cycle(dry_run=dry_run)
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                return cycles
            self._log.info(
                "Ciclo finalizado. Dormindo por %.0f segundos...", interval_seconds
            )
            self._sleep(interval_seconds)

    def _process_link(
        self, link: str, counters: _CycleCounters, *, dry_run: bool
    ) -> None:
        try:
            if self._repository.exists(link):
                counters.skipped_existing += 1
                self._log.debug("Link já processado: %s", link)
                return
        except RepositoryError as exc:
            counters.errors.append((link, str(exc)))
            self._log.warning("Erro ao verificar duplicidade para o link %s: %s", link, exc)
            return

        try:
            facts = self._article_analyzer.analyze(link)
        except (FetchError, ParseError) as exc:
            counters.fetch_failures += 1
            counters.errors.append((link, str(exc)))
            self._log.warning("Falha ao ler artigo %s: %s", link, exc)
            return

        reason = facts.skip_reason()
        if reason is not None:
            counters.skipped_incomplete += 1
            self._log.info("Ignorando %s: %s", link, reason)
            return

        try:
            self._geocode_and_store(link, facts, counters, dry_run=dry_run)
        finally:
            # Pausa obrigatória para respeitar os limites do geocodificador.
            self._sleep(self._throttle_seconds)

    def _geocode_and_store(
        self,
        link: str,
        facts: ExtractedFacts,
        counters: _CycleCounters,
        *,
        dry_run: bool,
    ) -> None:
        address = facts.address or ""
        try:
            coordinate = self._geocoder.geocode(address)
        except GeocodeError as exc:
            counters.geocode_failures += 1
            counters.errors.append((link, str(exc)))
            self._log.warning(
                "Falha na geocodificação para o endereço '%s' (%s): %s",
                address,
                link,
                exc,
            )
            return

        record = RiskZoneRecord.from_coordinate(
            link,
            coordinate,
            facts.crime_type,
            radius_meters=self._radius_meters,
        )
        if dry_run:
            counters.created += 1
            self._log.info(
                "[dry-run] Salvaria %s (%s) em %.6f, %.6f",
                link,
                record.category.value,
                record.latitude,
                record.longitude,
            )
            return

        try:
            self._repository.persist(record)
        except PersistError as exc:
            counters.persist_failures += 1
            counters.errors.append((link, str(exc)))
            self._log.error("Falha ao salvar zona de risco de %s: %s", link, exc)
            return

        counters.created += 1
        self._log.info("SUCESSO! Novo link salvo: %s", link)


__all__ = [
    "CycleResult",
    "DEFAULT_CYCLE_INTERVAL_SECONDS",
    "MIN_THROTTLE_SECONDS",
    "RiskZoneCollectorService",
]
