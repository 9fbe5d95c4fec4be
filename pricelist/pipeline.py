from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import requests

from pricelist.config import FLAT_RATE_SOURCE, SheetSource
from pricelist.errors import PriceListError, SheetContentError, SheetShapeError, SheetTransportError
from pricelist.fetcher import fetch_csv_text
from pricelist.parser import parse_price_list
from pricelist.records import PriceRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    records: List[PriceRecord] = field(default_factory=list)
    error: Optional[PriceListError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None


def run_price_list_pipeline(
    source: SheetSource = FLAT_RATE_SOURCE,
    *,
    session: Optional[requests.Session] = None,
) -> PipelineResult:
    """Fetch and parse one sheet tab; failures come back as a structured error."""
    try:
        text = fetch_csv_text(source, session=session)
        records = parse_price_list(text, source.layout)
    except (SheetTransportError, SheetShapeError, SheetContentError) as exc:
        logger.warning("Price list pipeline failed (%s): %s", exc.kind, exc)
        return PipelineResult(error=exc)
    return PipelineResult(records=records)


def load_price_list(
    source: SheetSource = FLAT_RATE_SOURCE,
    *,
    session: Optional[requests.Session] = None,
) -> List[PriceRecord]:
    """Records for the dashboard. Any failure yields an empty list ("no data")."""
    try:
        result = run_price_list_pipeline(source, session=session)
    except Exception:
        logger.exception("Unexpected failure loading price list")
        return []
    return result.records
