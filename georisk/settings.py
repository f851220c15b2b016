"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_SEED_URLS = ("https://www.gazetadelimeira.com.br/noticias/editoria/9",)
_DEFAULT_CREDENTIALS_FILE = "credentials.json"
_DEFAULT_COLLECTION = "risk_zones"
_DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org/search"
_DEFAULT_GEOCODER_USER_AGENT = "GeoRisk Scraper Project (georisk@example.com)"
_DEFAULT_GEOCODER_TIMEOUT = 10.0
_DEFAULT_THROTTLE_SECONDS = 1.0
_DEFAULT_CYCLE_INTERVAL_SECONDS = 24 * 60 * 60
_DEFAULT_LOCALITY_SUFFIX = ", Limeira, SP, Brasil"
_DEFAULT_CONTENT_SELECTORS = (".entry-content", ".post-text", ".materia-conteudo")

_TRUE_VALUES = {"1", "true", "yes", "sim", "on"}


def _split_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@lru_cache(maxsize=None)
def get_seed_urls() -> tuple[str, ...]:
    """Retorna a lista ordenada de páginas semente a varrer."""

    raw = os.getenv("GEORISK_SEED_URLS")
    if not raw:
        return _DEFAULT_SEED_URLS
    return _split_list(raw) or _DEFAULT_SEED_URLS


@lru_cache(maxsize=None)
def get_credentials_file() -> Path:
    """Retorna o caminho do arquivo de credenciais do armazenamento."""

    return Path(os.getenv("GEORISK_CREDENTIALS_FILE", _DEFAULT_CREDENTIALS_FILE))


@lru_cache(maxsize=None)
def get_collection_name() -> str:
    return os.getenv("GEORISK_COLLECTION", _DEFAULT_COLLECTION)


@lru_cache(maxsize=None)
def get_geocoder_url() -> str:
    return os.getenv("GEORISK_GEOCODER_URL", _DEFAULT_GEOCODER_URL)


@lru_cache(maxsize=None)
def get_geocoder_user_agent() -> str:
    """Retorna o ``User-Agent`` exigido pela política de uso do geocodificador."""

    return os.getenv("GEORISK_GEOCODER_USER_AGENT", _DEFAULT_GEOCODER_USER_AGENT)


@lru_cache(maxsize=None)
def get_geocoder_timeout() -> float:
    return float(os.getenv("GEORISK_GEOCODER_TIMEOUT", _DEFAULT_GEOCODER_TIMEOUT))


@lru_cache(maxsize=None)
def get_geocoder_strict() -> bool:
    return os.getenv("GEORISK_GEOCODER_STRICT", "").strip().lower() in _TRUE_VALUES


@lru_cache(maxsize=None)
def get_throttle_seconds() -> float:
    """Retorna a pausa mínima após cada chamada ao geocodificador."""

    return max(
        _DEFAULT_THROTTLE_SECONDS,
        float(os.getenv("GEORISK_THROTTLE_SECONDS", _DEFAULT_THROTTLE_SECONDS)),
    )


@lru_cache(maxsize=None)
def get_cycle_interval_seconds() -> float:
    return float(
        os.getenv("GEORISK_CYCLE_INTERVAL_SECONDS", _DEFAULT_CYCLE_INTERVAL_SECONDS)
    )


@lru_cache(maxsize=None)
def get_locality_suffix() -> str:
    return os.getenv("GEORISK_LOCALITY_SUFFIX", _DEFAULT_LOCALITY_SUFFIX)


@lru_cache(maxsize=None)
def get_content_selectors() -> tuple[str, ...]:
    raw = os.getenv("GEORISK_CONTENT_SELECTORS")
    if not raw:
        return _DEFAULT_CONTENT_SELECTORS
    return _split_list(raw) or _DEFAULT_CONTENT_SELECTORS


@lru_cache(maxsize=None)
def get_link_pattern() -> str | None:
    """Regex opcional que os links descobertos devem satisfazer."""

    return os.getenv("GEORISK_LINK_PATTERN") or None


__all__ = [
    "get_collection_name",
    "get_content_selectors",
    "get_credentials_file",
    "get_cycle_interval_seconds",
    "get_geocoder_strict",
    "get_geocoder_timeout",
    "get_geocoder_url",
    "get_geocoder_user_agent",
    "get_link_pattern",
    "get_locality_suffix",
    "get_seed_urls",
    "get_throttle_seconds",
]
