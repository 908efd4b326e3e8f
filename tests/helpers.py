"""Test doubles and process helpers shared across test modules."""

from __future__ import annotations

import asyncio
import subprocess
import time
from typing import Optional

from statusboard.checkers.base import StatusChecker
from statusboard.registry.models import CheckResult


class FakeChecker(StatusChecker):
    """Checker returning a canned result after an optional delay."""

    checker_type = "fake"

    def __init__(self, result: Optional[CheckResult] = None, delay: float = 0.0) -> None:
        self.result = result or CheckResult.ok()
        self.delay = delay
        self.calls = 0
        self.active = 0
        self.max_active = 0

    async def check_status(self) -> CheckResult:
        self.calls += 1
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            return self.result
        finally:
            self.active -= 1


def processes_matching(marker: str) -> list[str]:
    """Live ``ps ax`` lines whose command line contains *marker*.

    Zombies are listed without arguments, so they never match.
    """
    out = subprocess.run(["ps", "ax"], capture_output=True, text=True, check=True).stdout
    return [line for line in out.splitlines() if marker in line]


def wait_until_gone(marker: str, timeout: float = 2.0) -> list[str]:
    """Poll until no process matches *marker*; return whatever is left."""
    deadline = time.monotonic() + timeout
    remaining = processes_matching(marker)
    while remaining and time.monotonic() < deadline:
        time.sleep(0.05)
        remaining = processes_matching(marker)
    return remaining
