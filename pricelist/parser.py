"""
CSV -> price records.

Rows are read line by line rather than through a CSV dialect: the published
sheet carries stray quotes and currency noise, and the tolerance rules below
(column-count slack, blank-row skipping, numeric cleanup) are what the
dashboard relies on.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from pricelist.config import LAYOUTS, Layout
from pricelist.errors import PriceListConfigError, SheetContentError, SheetShapeError
from pricelist.records import CLARITY_GRADES, FlatRateRecord, MatrixRateRecord, PriceRecord


logger = logging.getLogger(__name__)

# A comma splits only when an even number of quotes follow it on the line.
_COLUMN_SPLIT_RE = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')
_WRAPPING_QUOTE_RE = re.compile(r'^"|"$')
_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

FLAT_MIN_COLUMNS = 4
MATRIX_MIN_COLUMNS = 2


def split_columns(line: str) -> List[str]:
    return [_WRAPPING_QUOTE_RE.sub("", col.strip()).strip() for col in _COLUMN_SPLIT_RE.split(line)]


def clean_sleeve(value: str) -> str:
    return value.replace("--", "-")


def parse_rate(value: Optional[str]) -> float:
    """Parse rate text like "₹1,200.50" -> 1200.5. Blank or junk -> 0.0."""
    if not value:
        return 0.0
    cleaned = _NON_NUMERIC_RE.sub("", value)
    match = _LEADING_NUMBER_RE.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


def parse_flat_row(columns: List[str], line_no: int) -> Optional[FlatRateRecord]:
    if len(columns) < FLAT_MIN_COLUMNS:
        logger.debug("Line %s skipped: %s columns, need %s", line_no, len(columns), FLAT_MIN_COLUMNS)
        return None
    sleeve, colour, clarity, rate_text = columns[:FLAT_MIN_COLUMNS]
    if not (sleeve or colour or clarity or rate_text):
        logger.debug("Line %s skipped: all fields empty", line_no)
        return None

    sleeve = clean_sleeve(sleeve)
    if not (sleeve and colour and clarity):
        logger.debug(
            "Line %s skipped: missing identity field (sleeve=%r colour=%r clarity=%r)",
            line_no,
            sleeve,
            colour,
            clarity,
        )
        return None
    return FlatRateRecord(
        sleeve=sleeve,
        colour=colour.upper(),
        clarity=clarity.upper(),
        rate=parse_rate(rate_text),
    )


def parse_matrix_row(columns: List[str], line_no: int) -> Optional[MatrixRateRecord]:
    if len(columns) < MATRIX_MIN_COLUMNS:
        logger.debug("Line %s skipped: %s columns, need %s", line_no, len(columns), MATRIX_MIN_COLUMNS)
        return None
    width = MATRIX_MIN_COLUMNS + len(CLARITY_GRADES)
    padded = (columns + [""] * width)[:width]
    sleeve, colour = padded[0], padded[1]
    rate_texts = padded[MATRIX_MIN_COLUMNS:]
    if not any(padded):
        logger.debug("Line %s skipped: all fields empty", line_no)
        return None

    rates = {grade: parse_rate(text) for grade, text in zip(CLARITY_GRADES, rate_texts)}
    return MatrixRateRecord(sleeve=clean_sleeve(sleeve), colour=colour.upper(), **rates)


def parse_price_list(text: str, layout: Layout = "flat") -> List[PriceRecord]:
    """Parse a published CSV export into records, in source order.

    The first line is the header and is ignored. Raises SheetShapeError when
    there is no data line and SheetContentError when no row survives.
    """
    if layout not in LAYOUTS:
        raise PriceListConfigError(f"Unknown layout {layout!r}; expected one of {', '.join(LAYOUTS)}")
    parse_row = parse_flat_row if layout == "flat" else parse_matrix_row

    # "\n" only: sheet cells may hold other Unicode line separators
    lines = (text or "").strip().split("\n")
    if len(lines) < 2:
        raise SheetShapeError(f"CSV has {len(lines)} line(s); expected a header and at least one data row")

    records: List[PriceRecord] = []
    for line_no, raw_line in enumerate(lines[1:], start=1):
        line = raw_line.strip()
        if not line:
            continue
        record = parse_row(split_columns(line), line_no)
        if record is not None:
            records.append(record)

    logger.info("Parsed %s %s records from %s data lines", len(records), layout, len(lines) - 1)
    if not records:
        raise SheetContentError("No valid data rows found in CSV")
    return records
