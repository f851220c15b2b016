from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from georisk import settings

_GETTERS = (
    settings.get_seed_urls,
    settings.get_credentials_file,
    settings.get_throttle_seconds,
    settings.get_geocoder_strict,
    settings.get_content_selectors,
    settings.get_link_pattern,
    settings.get_geocoder_timeout,
)


@pytest.fixture(autouse=True)
def _clear_cache() -> Iterator[None]:
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


def test_seed_urls_are_split_and_trimmed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        "GEORISK_SEED_URLS", " https://a.example/policia , ,https://b.example/x "
    )

    assert settings.get_seed_urls() == (
        "https://a.example/policia",
        "https://b.example/x",
    )


def test_seed_urls_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEORISK_SEED_URLS", raising=False)

    assert settings.get_seed_urls() == (
        "https://www.gazetadelimeira.com.br/noticias/editoria/9",
    )


def test_throttle_is_clamped_to_one_second(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEORISK_THROTTLE_SECONDS", "0.2")

    assert settings.get_throttle_seconds() == 1.0


def test_throttle_accepts_larger_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEORISK_THROTTLE_SECONDS", "2.5")

    assert settings.get_throttle_seconds() == 2.5


@pytest.mark.parametrize("raw, expected", [("sim", True), ("1", True), ("no", False)])
def test_geocoder_strict_flag(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("GEORISK_GEOCODER_STRICT", raw)

    assert settings.get_geocoder_strict() is expected


def test_credentials_file_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEORISK_CREDENTIALS_FILE", "/etc/georisk/conta.json")

    assert settings.get_credentials_file() == Path("/etc/georisk/conta.json")


def test_blank_link_pattern_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEORISK_LINK_PATTERN", "")

    assert settings.get_link_pattern() is None


def test_geocoder_timeout_defaults_to_ten_seconds(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("GEORISK_GEOCODER_TIMEOUT", raising=False)

    assert settings.get_geocoder_timeout() == 10.0


def test_geocoder_timeout_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEORISK_GEOCODER_TIMEOUT", "4.5")

    assert settings.get_geocoder_timeout() == 4.5
