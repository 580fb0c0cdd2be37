"""Load historical price files into a PriceSeries."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from crossover_sim.data.models import PriceObservation, PriceSeries
from crossover_sim.errors import DataLoadError

logger = logging.getLogger(__name__)

MIN_FIELDS = 6
DEFAULT_HEADER_LINES = 3
REPLACEMENT_CHAR = "\ufffd"


@dataclass(frozen=True)
class LoadReport:
    series: PriceSeries
    rows_read: int
    rows_skipped: int
    rows_dropped: int
    coerced_fields: int


def load_price_series(path: str | Path, header_lines: int = DEFAULT_HEADER_LINES) -> PriceSeries:
    return load_price_file(path, header_lines=header_lines).series


def load_price_file(path: str | Path, header_lines: int = DEFAULT_HEADER_LINES) -> LoadReport:
    """Parse a comma separated price table.

    The first ``header_lines`` lines are skipped. Each data line carries
    label, close, high, low, open and volume in that order; extra trailing
    columns are ignored. Short lines are skipped, unparsable numbers become
    zero, and rows whose close is not positive are dropped.
    """
    path = Path(path)
    if not path.exists():
        raise DataLoadError(f"Price file not found: {path}")

    observations: list[PriceObservation] = []
    rows_read = 0
    rows_skipped = 0
    rows_dropped = 0
    coerced = 0

    logger.info("Reading price data from %s", path)
    try:
        # Undecodable bytes become U+FFFD so one bad line cannot abort the load.
        handle = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise DataLoadError(f"Cannot open price file {path}: {exc}") from exc
    with handle:
        for line_number, line in enumerate(handle, start=1):
            if line_number <= header_lines:
                continue
            text = line.rstrip("\r\n")
            rows_read += 1
            if not text.strip():
                logger.debug("Line %d is blank; skipping", line_number)
                rows_skipped += 1
                continue
            if REPLACEMENT_CHAR in text:
                logger.warning("Line %d contains bytes that are not valid UTF-8: %r", line_number, text)
            row = text.split(",")
            if len(row) < MIN_FIELDS:
                logger.warning(
                    "Line %d has %d columns, expected at least %d; skipping: %r",
                    line_number,
                    len(row),
                    MIN_FIELDS,
                    text,
                )
                rows_skipped += 1
                continue

            close, bad_close = _parse_float(row[1], line_number, "close")
            high, bad_high = _parse_float(row[2], line_number, "high")
            low, bad_low = _parse_float(row[3], line_number, "low")
            open_, bad_open = _parse_float(row[4], line_number, "open")
            volume, bad_volume = _parse_int(row[5], line_number, "volume")
            coerced += sum((bad_close, bad_high, bad_low, bad_open, bad_volume))

            if close <= 0:
                logger.debug("Line %d dropped: non-positive close %s", line_number, close)
                rows_dropped += 1
                continue

            observations.append(
                PriceObservation(
                    label=row[0].strip(),
                    open=open_,
                    high=high,
                    low=low,
                    close=close,
                    volume=volume,
                )
            )

    if not observations:
        raise DataLoadError(f"No valid price records found in {path}")

    logger.info("Loaded %d data points from %s", len(observations), path)
    return LoadReport(
        series=PriceSeries(tuple(observations)),
        rows_read=rows_read,
        rows_skipped=rows_skipped,
        rows_dropped=rows_dropped,
        coerced_fields=coerced,
    )


def _parse_float(raw: str, line_number: int, field: str) -> tuple[float, bool]:
    text = "".join(raw.split())
    if not text:
        return 0.0, False
    try:
        value = float(text)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        logger.warning("Line %d: cannot convert %s value %r; using 0.0", line_number, field, raw)
        return 0.0, True
    return value, False


def _parse_int(raw: str, line_number: int, field: str) -> tuple[int, bool]:
    text = "".join(raw.split())
    if not text:
        return 0, False
    try:
        return int(text), False
    except ValueError:
        pass
    # Volumes exported as "1.2e6" or "1200.0" still carry a usable integer.
    try:
        return int(float(text)), False
    except (ValueError, OverflowError):
        logger.warning("Line %d: cannot convert %s value %r; using 0", line_number, field, raw)
        return 0, True
