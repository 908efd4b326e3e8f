"""Status checker implementations."""

from __future__ import annotations

from statusboard.checkers.base import StatusChecker
from statusboard.checkers.command import CommandChecker
from statusboard.checkers.http import HTTPChecker
from statusboard.checkers.ping import PingChecker
from statusboard.config.models import CheckerDef

CHECKER_REGISTRY: dict[str, type[StatusChecker]] = {
    "http": HTTPChecker,
    "ping": PingChecker,
    "command": CommandChecker,
}


def create_checker(definition: CheckerDef, service_url: str = "") -> StatusChecker:
    """Build a checker from its configuration entry."""
    checker_cls = CHECKER_REGISTRY.get(definition.type)
    if checker_cls is None:
        raise ValueError(f"Unknown checker type: {definition.type}")
    if checker_cls is HTTPChecker:
        return HTTPChecker(url=definition.url or service_url, timeout=definition.timeout)
    if checker_cls is PingChecker:
        return PingChecker(host=definition.host)
    return CommandChecker(
        process_name=definition.process_name,
        timeout=definition.timeout,
        list_command=definition.list_command,
    )


__all__ = [
    "CHECKER_REGISTRY",
    "CommandChecker",
    "HTTPChecker",
    "PingChecker",
    "StatusChecker",
    "create_checker",
]
