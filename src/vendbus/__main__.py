"""Command-line entry point: ``python -m vendbus``."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from vendbus.application.simulation import Simulation
from vendbus.config import DotenvSettingsLoader, EnvSettingsLoader, SimulationSettings
from vendbus.kernel.errors import BaseError
from vendbus.observability.logging import configure_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vendbus",
        description="Run a vending machine inventory simulation over the event bus.",
    )
    parser.add_argument("--events", type=int, help="number of random events to publish")
    parser.add_argument("--seed", type=int, help="random seed for a reproducible run")
    parser.add_argument("--initial-stock", type=int, help="starting stock for every machine")
    parser.add_argument("--threshold", type=int, help="low-stock threshold")
    parser.add_argument("--machines", help="comma-separated machine ids")
    parser.add_argument("--env-file", help="load VENDBUS_* settings from this .env file")
    parser.add_argument("--json-logs", action="store_true", default=None, help="emit JSON log lines")
    parser.add_argument("--log-level", help="log level (DEBUG, INFO, ...)")
    return parser


def load_settings(args: argparse.Namespace) -> SimulationSettings:
    loader = DotenvSettingsLoader(args.env_file) if args.env_file else EnvSettingsLoader()
    settings = loader.load(SimulationSettings)

    machine_ids = None
    if args.machines:
        machine_ids = [m.strip() for m in args.machines.split(",") if m.strip()]
    return settings.overridden(
        event_count=args.events,
        seed=args.seed,
        initial_stock=args.initial_stock,
        low_stock_threshold=args.threshold,
        machine_ids=machine_ids,
        log_json=args.json_logs,
        log_level=args.log_level,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or "INFO", json=bool(args.json_logs))
    log = get_logger("vendbus")
    try:
        settings = load_settings(args)
        configure_logging(settings.log_level, json=settings.log_json)
        report = Simulation(settings).run()
    except BaseError as exc:
        log.error("simulation.failed", **exc.to_dict())
        return 1

    for machine_id, stock in sorted(report.final_stock.items()):
        print(f"{machine_id}: {stock}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
