"""
Sheet source configuration.

Spreadsheet and tab identifiers are deploy-time constants. They are bundled
into a SheetSource that callers pass to the fetcher, one per published tab.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from pricelist.errors import PriceListConfigError


Layout = Literal["flat", "matrix"]
LAYOUTS: Tuple[str, ...] = ("flat", "matrix")

SPREADSHEET_HOST = "docs.google.com"
DEFAULT_SHEET_ID = "1cTNY19s84Kntql_IYtm2JFpFlNKQCi7W"
NATURAL_POLISH_RATE_GID = "293612211"

USER_AGENT = "Mozilla/5.0 (compatible; DiamondPricing/1.0)"
REQUEST_TIMEOUT_SECONDS = 30.0
REFRESH_INTERVAL_SECONDS = 300


@dataclass(frozen=True)
class SheetSource:
    sheet_id: str
    tab_gid: str
    layout: Layout = "flat"
    host: str = SPREADSHEET_HOST

    def __post_init__(self) -> None:
        if self.layout not in LAYOUTS:
            raise PriceListConfigError(f"Unknown layout {self.layout!r}; expected one of {', '.join(LAYOUTS)}")
        if not self.sheet_id or not self.tab_gid:
            raise PriceListConfigError("Sheet source needs both a sheet id and a tab gid")

    @property
    def export_url(self) -> str:
        return f"https://{self.host}/spreadsheets/d/{self.sheet_id}/export?format=csv&gid={self.tab_gid}"


FLAT_RATE_SOURCE = SheetSource(sheet_id=DEFAULT_SHEET_ID, tab_gid=NATURAL_POLISH_RATE_GID, layout="flat")
