"""Fake requests session objects for fetcher tests."""

from __future__ import annotations

from typing import Dict, List, Optional

import requests


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text: str, status_code: int = 200, content_type: str = "text/csv") -> None:
        self.status_code = status_code
        self.headers: Dict[str, str] = {"Content-Type": content_type}
        self.encoding: Optional[str] = None
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records GET calls and replays a canned response or exception."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    def get(self, url: str, **kwargs: object) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response
