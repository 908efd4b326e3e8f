"""Placeholder host reachability checker."""

from __future__ import annotations

from statusboard.checkers.base import StatusChecker
from statusboard.checkers.errors import EmptyHostError
from statusboard.registry.models import CheckResult


class PingChecker(StatusChecker):
    """Reports ONLINE for any non-empty host.

    No packet is sent. Swap in a real reachability check behind the same interface.
    """

    checker_type = "ping"

    def __init__(self, host: str) -> None:
        self.host = host

    def describe(self) -> str:
        return f"ping {self.host}"

    async def check_status(self) -> CheckResult:
        if self.host:
            return CheckResult.ok()
        return CheckResult.failed(EmptyHostError())
