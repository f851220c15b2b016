"""Fetching of news pages and discovery of article links."""
from __future__ import annotations

import logging
import re
from typing import Iterable, Pattern

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from georisk.domain import FetchError, PageFetcher, ParseError


_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/126.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
    "Connection": "keep-alive",
    "Pragma": "no-cache",
    "Cache-Control": "no-cache",
}

_DEFAULT_TIMEOUT = 15


class RequestsSoupFetcher(PageFetcher):
    """Page fetcher based on requests and BeautifulSoup."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = _DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._headers = dict(_DEFAULT_HEADERS)
        if headers:
            self._headers.update(headers)
        self._timeout = timeout
        self._log = logging.getLogger("georisk.scraper")

    def fetch(self, url: str) -> BeautifulSoup:
        self._log.debug("GET %s", url)
        try:
            response = self._session.get(url, headers=self._headers, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Erro ao acessar {url}: {exc}") from exc

        # Sem charset no cabeçalho, requests assume ISO-8859-1; o BeautifulSoup
        # lê os bytes e respeita o <meta charset> da página.
        content_type = response.headers.get("Content-Type", "")
        encoding = response.encoding if "charset=" in content_type.lower() else None
        try:
            return BeautifulSoup(response.content, "html.parser", from_encoding=encoding)
        except ParserRejectedMarkup as exc:
            raise ParseError(f"Erro ao ler o conteúdo de {url}: {exc}") from exc

    def close(self) -> None:
        if self._owns_session:
            self._session.close()


class LinkDiscoverer:
    """Coleta os links absolutos publicados nas páginas semente."""

    def __init__(
        self,
        fetcher: PageFetcher,
        *,
        link_pattern: str | Pattern[str] | None = None,
    ) -> None:
        self._fetcher = fetcher
        if isinstance(link_pattern, str):
            link_pattern = re.compile(link_pattern)
        self._link_pattern = link_pattern
        self._log = logging.getLogger("georisk.scraper")

    def discover_links(self, seed_urls: Iterable[str]) -> set[str]:
        """Return the deduplicated set of ``http`` links found on the seeds.

        A seed that cannot be fetched or parsed is logged and skipped; the
        remaining seeds are still processed.
        """

        links: set[str] = set()
        for seed_url in seed_urls:
            try:
                document = self._fetcher.fetch(seed_url)
            except (FetchError, ParseError) as exc:
                self._log.warning("Erro ao buscar links de %s: %s", seed_url, exc)
                continue

            found = 0
            for anchor in document.find_all("a", href=True):
                href = str(anchor["href"]).strip()
                if not href.startswith("http"):
                    continue
                if self._link_pattern is not None and not self._link_pattern.search(href):
                    continue
                links.add(href)
                found += 1
            self._log.info("%d links absolutos em %s", found, seed_url)
        return links


__all__ = ["LinkDiscoverer", "RequestsSoupFetcher"]
