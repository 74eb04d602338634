"""
Command-line entry point for the latitude sweep.

Usage
-----
    cyclogenesis-sim --latitudes 30 45 60 --hours 24
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from common.exceptions import ConfigError, ConsistencyError
from common.logging_config import get_log_level, get_logger, set_log_level
from scenario_simulation.latitude_sweep import DEFAULT_LATITUDES, LatitudeSweep, SweepConfig
from scenario_simulation.report import format_banner, format_table

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cyclogenesis-sim",
        description="Toy model of baroclinic cyclogenesis from a surface and an upper-level thermal anomaly."
    )
    parser.add_argument('--surface-temp', type=float, default=5.0,
                        help='Surface temperature perturbation in K (default: 5.0)')
    parser.add_argument('--altitude-temp', type=float, default=-8.0,
                        help='500 hPa temperature perturbation in K (default: -8.0)')
    parser.add_argument('--latitudes', type=float, nargs='+', default=list(DEFAULT_LATITUDES),
                        help='Latitudes in degrees (default: 30 45 60)')
    parser.add_argument('--hours', type=int, default=24,
                        help='Number of hourly steps (default: 24)')
    parser.add_argument('--no-baroclinic-zone', action='store_true',
                        help='Disable the time-growing interaction factor')
    parser.add_argument('--strict', action='store_true',
                        help='Fail on the first consistency check that does not pass')
    parser.add_argument('--audit-dir', type=Path, default=None,
                        help='Directory for audit logs and JSON artifacts')
    parser.add_argument('--verbose', action='store_true',
                        help='Log at DEBUG level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the sweep and print one table per latitude.

    Returns
    -------
    int
        0 if every latitude ran, 1 if any was rejected, 2 on a bad configuration.
    """
    args = build_parser().parse_args(argv)

    # stdout carries the tables; INFO logging is opt-in through --verbose
    previous_level = get_log_level()
    set_log_level(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return _run(args)
    finally:
        set_log_level(previous_level)


def _run(args: argparse.Namespace) -> int:
    try:
        config = SweepConfig(
            surface_temp=args.surface_temp,
            altitude_temp=args.altitude_temp,
            latitudes=tuple(args.latitudes),
            time_steps=args.hours,
            baroclinic_zone=not args.no_baroclinic_zone,
            strict_checks=args.strict,
            audit_dir=args.audit_dir,
        )
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    try:
        outcome = LatitudeSweep(config).run()
    except ConsistencyError as e:
        logger.error(f"Consistency check failed: {e}")
        return 1

    print(format_banner())
    for latitude in config.latitudes:
        print()
        if latitude in outcome.results:
            print(format_table(latitude, outcome.results[latitude]))
        else:
            print(f"Simulation at {latitude}° skipped: {outcome.failures[latitude]}")

    return 0 if outcome.all_succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
