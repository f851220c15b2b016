"""Regras de extração de endereço e classificação de crimes."""

from .address import (
    DEFAULT_LOCALITY_SUFFIX,
    NOISE_CONNECTORS,
    STREET_TYPES,
    AddressExtractor,
)
from .article import CONTENT_SELECTORS, ArticleAnalyzer, extract_body_text
from .classifier import CRIME_KEYWORDS, TextClassifier

__all__ = [
    "AddressExtractor",
    "ArticleAnalyzer",
    "CONTENT_SELECTORS",
    "CRIME_KEYWORDS",
    "DEFAULT_LOCALITY_SUFFIX",
    "NOISE_CONNECTORS",
    "STREET_TYPES",
    "TextClassifier",
    "extract_body_text",
]
