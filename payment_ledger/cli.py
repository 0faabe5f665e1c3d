"""
Command line entry point.

    payment-ledger transactions.csv > accounts.csv

Reads the event stream from the input file and writes the final
account snapshot to stdout. Logs go to stderr.
"""

import argparse
import logging
import sys
from pathlib import Path

from payment_ledger import __version__
from payment_ledger.config import get_settings
from payment_ledger.csv_io import read_events, write_snapshot
from payment_ledger.logging_config import configure_logging, get_logger
from payment_ledger.services.factory import RECORD_STORES, build_ledger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-ledger",
        description=(
            "Process an input CSV file of payment transactions and "
            "output a CSV of final account balances."
        ),
    )
    parser.add_argument("input_file", type=Path, help="Path of the input CSV file")
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Emit debug logging"
    )
    parser.add_argument(
        "--shards",
        type=int,
        default=None,
        help="Number of independent ledger engines to route clients across",
    )
    parser.add_argument(
        "--store",
        choices=RECORD_STORES,
        default=None,
        help="Where transaction records are kept (default: RECORD_STORE setting)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level = logging.DEBUG if args.debug or settings.DEBUG else settings.LOG_LEVEL
    configure_logging(level=level)

    if args.shards is not None and args.shards < 1:
        logger.error("--shards must be at least 1")
        return 2
    if not args.input_file.is_file():
        logger.error("Cannot open input file: %s", args.input_file)
        return 1

    ledger = build_ledger(settings, backend=args.store, shard_count=args.shards)
    try:
        ledger.apply_all(read_events(args.input_file))
    except OSError as e:
        logger.error("Failed reading %s: %s", args.input_file, e)
        return 1
    except ValueError as e:
        logger.error("Invalid input file %s: %s", args.input_file, e)
        return 1
    ledger.commit()

    write_snapshot(ledger.snapshot(), sys.stdout)
    skipped = ledger.skipped
    if skipped:
        logger.info(
            "Skipped %d events: %s",
            sum(skipped.values()),
            ", ".join(f"{reason.value}={count}" for reason, count in sorted(skipped.items())),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
