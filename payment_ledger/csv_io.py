"""
CSV input and output.

Input has the header `type, client, tx, amount`. Whitespace around
fields is trimmed and rows may leave out the trailing amount column,
as dispute, resolve and chargeback rows usually do. A row that does
not validate is logged and skipped; reading carries on.

Output has the header `client,available,held,total,locked`, one row
per account ordered by client id.
"""

import csv
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from pydantic import ValidationError

from payment_ledger.logging_config import get_logger
from payment_ledger.models.account import AccountSnapshot
from payment_ledger.schemas.event import TransactionEvent

logger = get_logger("csv_io")

INPUT_COLUMNS = ("type", "client", "tx", "amount")
OUTPUT_COLUMNS = ("client", "available", "held", "total", "locked")


def iter_events(lines: Iterable[str]) -> Iterator[TransactionEvent]:
    """Stream events from CSV text lines, skipping rows that fail validation."""
    reader = csv.reader(lines)
    header = next(reader, None)
    if header is None:
        return
    columns = [name.strip().lower() for name in header]
    missing = [name for name in INPUT_COLUMNS[:3] if name not in columns]
    if missing:
        raise ValueError(f"CSV header is missing columns: {', '.join(missing)}")

    for row in reader:
        values = [value.strip() for value in row]
        if not any(values):
            continue
        data = dict(zip(columns, values))
        try:
            yield TransactionEvent.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "Skipping line %d: %s",
                reader.line_num,
                "; ".join(error["msg"] for error in e.errors()),
            )


def read_events(path: Path) -> Iterator[TransactionEvent]:
    """Stream events from a CSV file without loading it into memory."""
    # utf-8-sig strips a byte order mark if present. Undecodable bytes
    # become U+FFFD so the row fails validation and is skipped.
    with path.open("r", encoding="utf-8-sig", errors="replace", newline="") as f:
        yield from iter_events(f)


def write_snapshot(rows: Iterable[AccountSnapshot], stream: TextIO) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(OUTPUT_COLUMNS)
    for row in rows:
        writer.writerow([
            row.client_id,
            row.available.to_display_text(),
            row.held.to_display_text(),
            row.total.to_display_text(),
            "true" if row.locked else "false",
        ])
