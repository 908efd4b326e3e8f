"""Data models for service status."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from statusboard.checkers.base import StatusChecker
    from statusboard.checkers.errors import CheckError


class ServiceStatus(enum.IntEnum):
    """Online/offline state of a service.

    The integer values are the wire encoding and must not be renumbered.
    """

    ONLINE = 0
    OFFLINE = 1

    @property
    def label(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_label(cls, label: str) -> ServiceStatus:
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown service status: {label!r}") from None


@dataclass
class CheckResult:
    """Result of a single checker invocation."""

    status: ServiceStatus
    error: Optional[CheckError] = None
    latency_ms: float = 0.0

    @property
    def online(self) -> bool:
        return self.status is ServiceStatus.ONLINE

    @classmethod
    def ok(cls, latency_ms: float = 0.0) -> CheckResult:
        return cls(status=ServiceStatus.ONLINE, latency_ms=latency_ms)

    @classmethod
    def failed(cls, error: CheckError, latency_ms: float = 0.0) -> CheckResult:
        return cls(status=ServiceStatus.OFFLINE, error=error, latency_ms=latency_ms)


@dataclass
class Service:
    """A registered service and its last known status."""

    name: str
    description: str = ""
    url: str = ""
    status: ServiceStatus = ServiceStatus.ONLINE
    last_checked: Optional[datetime] = None
    last_error: Optional[str] = None
    checker: Optional[StatusChecker] = field(default=None, repr=False, compare=False)

    def apply_result(self, result: CheckResult, checked_at: datetime) -> None:
        """Record a completed check. Only the manager calls this."""
        if self.last_checked is not None and checked_at < self.last_checked:
            checked_at = self.last_checked
        self.status = result.status
        self.last_checked = checked_at
        self.last_error = str(result.error) if result.error is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "status": int(self.status),
            "status_label": self.status.label,
            "last_checked": self.last_checked.isoformat() if self.last_checked else None,
            "last_error": self.last_error,
        }
