"""Porta para obtenção de páginas HTML."""
from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup


class PageFetcher(ABC):
    """Fornece a árvore de documento de uma URL."""

    @abstractmethod
    def fetch(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` raising ``FetchError`` or ``ParseError`` on failure."""
