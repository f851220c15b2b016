"""Interface de linha de comando para operar o coletor GeoRisk."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from georisk import settings
from georisk.container import build_analysis_container, build_container
from georisk.domain import FatalInitError, FetchError, GeocodeError, ParseError, RepositoryError


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"deve ser maior que zero: {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"deve ser maior que zero: {value}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="georisk", description="GeoRisk - coletor de zonas de risco"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser(
        "run", help="Executa ciclos de coleta (a cada 24 horas por padrão)"
    )
    run.add_argument(
        "--once", action="store_true", help="Executa um único ciclo e encerra"
    )
    run.add_argument(
        "--dry-run",
        action="store_true",
        help="Geocodifica sem gravar zonas de risco, exibindo apenas o resumo",
    )
    run.add_argument(
        "--max-cycles",
        type=_positive_int,
        default=None,
        help="Limite de ciclos no modo contínuo",
    )
    run.add_argument(
        "--interval",
        type=_positive_float,
        default=None,
        help="Intervalo entre ciclos em segundos (padrão: GEORISK_CYCLE_INTERVAL_SECONDS)",
    )

    analyze = subparsers.add_parser(
        "analyze", help="Extrai endereço e tipo de crime de uma notícia"
    )
    analyze.add_argument("url", help="URL da notícia")
    analyze.add_argument(
        "--geocode",
        action="store_true",
        help="Também geocodifica o endereço encontrado",
    )

    geocode = subparsers.add_parser("geocode", help="Geocodifica um endereço")
    geocode.add_argument("address", help="Endereço completo a resolver")

    list_zones = subparsers.add_parser(
        "list-zones", help="Lista as zonas de risco gravadas"
    )

    # Nível de log por subcomando (também lê GEORISK_LOG_LEVEL)
    for sp in (run, analyze, geocode, list_zones):
        sp.add_argument(
            "--log-level",
            default=None,
            help="Nível de log: DEBUG, INFO, WARNING, ERROR (padrão INFO)",
        )

    return parser.parse_args(argv)


def configure_logging(console: Console, level_name: str | None) -> None:
    level_name = level_name or os.getenv("GEORISK_LOG_LEVEL", "INFO")
    handler = RichHandler(console=console, markup=False, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    configure_logging(console, getattr(args, "log_level", None))
    logger = logging.getLogger("georisk.cli")

    if args.command == "run":
        return _run(args, console, logger)
    if args.command == "analyze":
        return _analyze(args, console)
    if args.command == "geocode":
        return _geocode(args, console)
    if args.command == "list-zones":
        return _list_zones(console, logger)
    raise ValueError(f"Comando desconhecido: {args.command}")


def _run(args: argparse.Namespace, console: Console, logger: logging.Logger) -> int:
    try:
        container = build_container()
    except FatalInitError as exc:
        logger.critical("Inicialização falhou: %s", exc)
        return 1

    try:
        service = container.collector_service
        if args.once:
            result = service.run_cycle(dry_run=args.dry_run)
            console.print_json(data=result.to_summary())
            if result.errors:
                logger.warning("Ciclo finalizado com %d erros", len(result.errors))
        else:
            interval = (
                args.interval
                if args.interval is not None
                else settings.get_cycle_interval_seconds()
            )
            service.run_forever(
                interval, max_cycles=args.max_cycles, dry_run=args.dry_run
            )
    except KeyboardInterrupt:
        logger.info("Interrompido pelo usuário.")
    finally:
        container.close()
    return 0


def _analyze(args: argparse.Namespace, console: Console) -> int:
    container = build_analysis_container()
    try:
        try:
            facts = container.article_analyzer.analyze(args.url)
        except (FetchError, ParseError) as exc:
            console.print(f"[red]{exc}[/red]")
            return 1
        payload: dict[str, object] = {
            "url": args.url,
            "endereco": facts.address,
            "tipo": facts.crime_type.value,
            "motivo_descarte": facts.skip_reason(),
        }
        if args.geocode and facts.address:
            try:
                coordinate = container.geocoder.geocode(facts.address)
            except GeocodeError as exc:
                payload["erro_geocodificacao"] = str(exc)
            else:
                payload["latitude"] = coordinate.latitude
                payload["longitude"] = coordinate.longitude
        console.print_json(data=payload)
        return 0
    finally:
        container.close()


def _geocode(args: argparse.Namespace, console: Console) -> int:
    container = build_analysis_container()
    try:
        try:
            coordinate = container.geocoder.geocode(args.address)
        except GeocodeError as exc:
            console.print(f"[red]Falha na geocodificação: {exc}[/red]")
            return 1
        console.print_json(
            data={
                "endereco": args.address,
                "latitude": coordinate.latitude,
                "longitude": coordinate.longitude,
            }
        )
        return 0
    finally:
        container.close()


def _list_zones(console: Console, logger: logging.Logger) -> int:
    try:
        container = build_container()
    except FatalInitError as exc:
        logger.critical("Inicialização falhou: %s", exc)
        return 1
    try:
        found_any = False
        for record in container.repository.list_all():
            found_any = True
            console.print_json(data=record.to_document())
        if not found_any:
            console.print("[yellow]Nenhuma zona de risco gravada.[/yellow]")
        return 0
    except RepositoryError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
