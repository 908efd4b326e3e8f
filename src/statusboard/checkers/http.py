"""HTTP reachability checker."""

from __future__ import annotations

import time
from typing import Optional

import httpx

from statusboard.checkers.base import StatusChecker
from statusboard.checkers.errors import TransportError, UnexpectedStatusCodeError
from statusboard.registry.models import CheckResult


class HTTPChecker(StatusChecker):
    """Online when a GET on *url* answers with a 2xx status code.

    A *timeout* of ``0`` or ``None`` disables the request timeout.
    """

    checker_type = "http"

    def __init__(self, url: str, timeout: Optional[float] = 5.0) -> None:
        self.url = url
        self.timeout = timeout if timeout else None

    def describe(self) -> str:
        return f"http {self.url}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def check_status(self) -> CheckResult:
        start = time.monotonic()
        try:
            async with self._client() as client:
                resp = await client.get(self.url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            latency = (time.monotonic() - start) * 1000
            return CheckResult.failed(
                TransportError(f"HTTP request failed: {exc!r}"),
                latency_ms=round(latency, 1),
            )
        latency = round((time.monotonic() - start) * 1000, 1)
        if 200 <= resp.status_code < 300:
            return CheckResult.ok(latency_ms=latency)
        return CheckResult.failed(UnexpectedStatusCodeError(resp.status_code), latency_ms=latency)
