"""Service manager — owns the registered services and serializes refresh passes."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import List, Optional

from statusboard.checkers import create_checker
from statusboard.checkers.errors import CheckError
from statusboard.config.models import StatusboardConfig
from statusboard.registry.models import CheckResult, Service, ServiceStatus

logger = logging.getLogger(__name__)


class ServiceManager:
    """Registry of services with skip-if-busy status refresh.

    At most one refresh pass runs at a time. A refresh requested while another
    pass is running is dropped, not queued.
    """

    def __init__(self, concurrent: bool = False) -> None:
        self._services: List[Service] = []
        self._lock = asyncio.Lock()
        self._refreshing = False
        self._concurrent = concurrent
        self._pending: set[asyncio.Task[bool]] = set()
        self._periodic: Optional[asyncio.Task[None]] = None
        self.refresh_count = 0

    @classmethod
    def from_config(cls, config: StatusboardConfig) -> ServiceManager:
        manager = cls(concurrent=config.refresh.concurrent)
        for entry in config.services:
            checker = create_checker(entry.checker, service_url=entry.url) if entry.checker else None
            manager.add_service(
                Service(
                    name=entry.name,
                    description=entry.description,
                    url=entry.url,
                    status=ServiceStatus.from_label(entry.initial_status),
                    checker=checker,
                )
            )
        return manager

    @property
    def refreshing(self) -> bool:
        return self._refreshing

    def add_service(self, service: Service) -> None:
        """Register a service. Meant to be called before serving traffic."""
        self._services.append(service)

    def get_services(self) -> List[Service]:
        """Snapshot of the registered services, in registration order.

        The list is a copy; its entries are the live Service objects.
        """
        return list(self._services)

    def get_service(self, name: str) -> Optional[Service]:
        for service in self._services:
            if service.name == name:
                return service
        return None

    async def update_status(self, service: Service) -> None:
        """Run the service's checker and record the outcome. No-op without a checker."""
        if service.checker is None:
            return
        try:
            result = await service.checker.check_status()
        except Exception as exc:
            logger.exception("Checker for service %s crashed", service.name)
            result = CheckResult.failed(CheckError(f"Checker crashed: {exc}"))
        service.apply_result(result, datetime.now(UTC))
        if result.error is not None:
            logger.warning("Status check for service %s failed: %s", service.name, result.error)

    async def update_all_status(self) -> bool:
        """Refresh every service. Returns False if a pass was already running."""
        async with self._lock:
            if self._refreshing:
                logger.debug("Refresh already in progress, skipping")
                return False
            self._refreshing = True
        try:
            if self._concurrent:
                await asyncio.gather(*(self.update_status(s) for s in self.get_services()))
            else:
                for service in self.get_services():
                    await self.update_status(service)
            self.refresh_count += 1
        finally:
            async with self._lock:
                self._refreshing = False
        return True

    def trigger_refresh(self) -> asyncio.Task[bool]:
        """Schedule a refresh pass in the background without waiting for it."""
        task = asyncio.create_task(self.update_all_status(), name="statusboard-refresh")
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _refresh_forever(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            await self.update_all_status()

    def start_periodic_refresh(self, interval: float) -> None:
        """Refresh every *interval* seconds until stopped."""
        if interval <= 0:
            raise ValueError("Refresh interval must be positive")
        if self._periodic is not None and not self._periodic.done():
            return
        self._periodic = asyncio.create_task(self._refresh_forever(interval), name="statusboard-periodic")

    async def stop_periodic_refresh(self) -> None:
        if self._periodic is None:
            return
        self._periodic.cancel()
        try:
            await self._periodic
        except asyncio.CancelledError:
            pass
        self._periodic = None

    async def shutdown(self) -> None:
        """Stop periodic refresh and cancel background refreshes still in flight."""
        await self.stop_periodic_refresh()
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
