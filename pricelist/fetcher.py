from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from pricelist.config import REQUEST_TIMEOUT_SECONDS, USER_AGENT, SheetSource
from pricelist.errors import SheetTransportError


logger = logging.getLogger(__name__)


def request_headers() -> Dict[str, str]:
    return {
        "Accept": "text/csv",
        "User-Agent": USER_AGENT,
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


def fetch_csv_text(
    source: SheetSource,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> str:
    """GET the CSV export of one sheet tab and return the body text.

    Raises SheetTransportError on network errors and non-2xx responses.
    """
    http = session if session is not None else requests
    url = source.export_url
    logger.info("Fetching price list CSV from %s", url)
    try:
        response = http.get(url, headers=request_headers(), allow_redirects=True, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        status = getattr(getattr(exc, "response", None), "status_code", None)
        detail = f"HTTP {status}" if status is not None else type(exc).__name__
        raise SheetTransportError(f"Failed to fetch {url}: {detail}: {exc}") from exc

    # Export responses often omit the charset; requests would then assume latin-1.
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        response.encoding = "utf-8"
    text = response.text
    logger.info("Fetched %s characters (status %s)", len(text), response.status_code)
    return text
