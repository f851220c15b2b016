"""Análise de artigos: seleção do corpo do texto e extração de fatos."""
from __future__ import annotations

import logging
from typing import Sequence

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from georisk.domain import ExtractedFacts, PageFetcher

from .address import AddressExtractor
from .classifier import TextClassifier

log = logging.getLogger(__name__)

CONTENT_SELECTORS: tuple[str, ...] = (
    ".entry-content",
    ".post-text",
    ".materia-conteudo",
)


def extract_body_text(
    document: BeautifulSoup, selectors: Sequence[str] = CONTENT_SELECTORS
) -> str:
    """Retorna o texto do primeiro contêiner de conteúdo não vazio.

    Os seletores são testados na ordem informada; quando nenhum deles produz
    texto, usa-se o ``body`` inteiro da página.
    """

    for query in selectors:
        try:
            elements = document.select(query)
        except SelectorSyntaxError as exc:
            log.warning("seletor de conteúdo inválido '%s': %s", query, exc)
            continue
        text = "".join(element.get_text() for element in elements)
        if text.strip():
            return text

    body = document.find("body")
    if body is None:
        return document.get_text()
    return body.get_text()


class ArticleAnalyzer:
    """Busca uma notícia e deriva endereço e tipo de crime do mesmo texto."""

    def __init__(
        self,
        fetcher: PageFetcher,
        address_extractor: AddressExtractor,
        classifier: TextClassifier,
        *,
        content_selectors: Sequence[str] = CONTENT_SELECTORS,
    ) -> None:
        self._fetcher = fetcher
        self._address_extractor = address_extractor
        self._classifier = classifier
        self._content_selectors = tuple(content_selectors)

    def analyze(self, url: str) -> ExtractedFacts:
        """Busca ``url`` e extrai os fatos; propaga ``FetchError``/``ParseError``."""

        document = self._fetcher.fetch(url)
        return self.analyze_document(document)

    def analyze_document(self, document: BeautifulSoup) -> ExtractedFacts:
        text = extract_body_text(document, self._content_selectors)
        return self.analyze_text(text)

    def analyze_text(self, text: str) -> ExtractedFacts:
        return ExtractedFacts(
            raw_text=text,
            address=self._address_extractor.extract(text),
            crime_type=self._classifier.classify(text),
        )


__all__ = ["ArticleAnalyzer", "CONTENT_SELECTORS", "extract_body_text"]
