from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from georisk import cli
from georisk.domain import (
    CrimeCategory,
    ExtractedFacts,
    FatalInitError,
    GeoCoordinate,
    NoResultError,
)


class _StubGeocoder:
    def __init__(self, error: Exception | None = None) -> None:
        self._error = error
        self.calls: list[str] = []

    def geocode(self, address: str) -> GeoCoordinate:
        self.calls.append(address)
        if self._error is not None:
            raise self._error
        return GeoCoordinate(latitude=-22.56, longitude=-47.40)


class _StubAnalyzer:
    def analyze(self, url: str) -> ExtractedFacts:
        return ExtractedFacts(
            raw_text="texto",
            address="Rua das Flores, 123, Limeira, SP, Brasil",
            crime_type=CrimeCategory.FURTO,
        )


def _analysis_container(geocoder: _StubGeocoder) -> SimpleNamespace:
    closed: list[bool] = []
    return SimpleNamespace(
        geocoder=geocoder,
        article_analyzer=_StubAnalyzer(),
        close=lambda: closed.append(True),
        closed=closed,
    )


def test_parse_args_run_flags() -> None:
    args = cli.parse_args(["run", "--once", "--dry-run", "--log-level", "DEBUG"])

    assert args.command == "run"
    assert args.once is True
    assert args.dry_run is True
    assert args.max_cycles is None
    assert args.log_level == "DEBUG"


def test_parse_args_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])


@pytest.mark.parametrize(
    "extra", [["--max-cycles", "0"], ["--interval", "-1"], ["--interval", "abc"]]
)
def test_parse_args_rejects_non_positive_loop_options(extra: list[str]) -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["run", *extra])


def test_parse_args_accepts_positive_loop_options() -> None:
    args = cli.parse_args(["run", "--max-cycles", "2", "--interval", "0.5"])

    assert args.max_cycles == 2
    assert args.interval == 0.5


def test_geocode_command_prints_coordinates(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    geocoder = _StubGeocoder()
    container = _analysis_container(geocoder)
    monkeypatch.setattr(cli, "build_analysis_container", lambda: container)

    exit_code = cli.main(
        ["geocode", "Rua A 10, Limeira, SP, Brasil", "--log-level", "WARNING"]
    )

    assert exit_code == 0
    assert geocoder.calls == ["Rua A 10, Limeira, SP, Brasil"]
    assert container.closed == [True]
    payload = json.loads(capsys.readouterr().out)
    assert payload["latitude"] == pytest.approx(-22.56)
    assert payload["longitude"] == pytest.approx(-47.40)


def test_geocode_command_reports_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    container = _analysis_container(_StubGeocoder(NoResultError("nada encontrado")))
    monkeypatch.setattr(cli, "build_analysis_container", lambda: container)

    assert cli.main(["geocode", "Rua Inexistente"]) == 1
    assert container.closed == [True]


def test_analyze_command_with_geocode(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    container = _analysis_container(_StubGeocoder())
    monkeypatch.setattr(cli, "build_analysis_container", lambda: container)

    exit_code = cli.main(
        ["analyze", "https://example.com/n1", "--geocode", "--log-level", "WARNING"]
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["tipo"] == "furto"
    assert payload["motivo_descarte"] is None
    assert payload["latitude"] == pytest.approx(-22.56)


def test_run_returns_error_when_initialization_fails(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail() -> None:
        raise FatalInitError("Arquivo de credenciais ausente")

    monkeypatch.setattr(cli, "build_container", _fail)

    assert cli.main(["run", "--once"]) == 1
