"""Base class for status checkers."""

from __future__ import annotations

import abc

from statusboard.registry.models import CheckResult


class StatusChecker(abc.ABC):
    """Determines the current status of one service.

    Implementations enforce their own timeout and report check failures as an
    OFFLINE result carrying a CheckError instead of raising.
    """

    checker_type: str = "base"

    @abc.abstractmethod
    async def check_status(self) -> CheckResult:
        """Check the service, returning a CheckResult."""

    def describe(self) -> str:
        return self.checker_type
