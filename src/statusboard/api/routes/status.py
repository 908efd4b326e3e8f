"""Service status endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from statusboard.registry.manager import ServiceManager

router = APIRouter(tags=["status"])

LAST_UPDATED_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_manager(request: Request) -> ServiceManager:
    return request.app.state.manager


@router.get("/status")
async def service_status(manager: ServiceManager = Depends(get_manager)) -> Dict[str, Any]:
    """Return the cached statuses and kick off a background refresh."""
    manager.trigger_refresh()
    return {
        "services": [s.to_dict() for s in manager.get_services()],
        "last_updated": datetime.now().strftime(LAST_UPDATED_FORMAT),
    }


@router.get("/services/{name}")
async def service_detail(name: str, manager: ServiceManager = Depends(get_manager)) -> Dict[str, Any]:
    service = manager.get_service(name)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Unknown service: {name}")
    data = service.to_dict()
    data["checker"] = service.checker.describe() if service.checker else None
    return data


@router.get("/info")
async def dashboard_info(request: Request) -> Dict[str, Any]:
    config = request.app.state.config
    return {
        "name": config.statusboard.name,
        "title": config.statusboard.title,
        "version": config.statusboard.version,
        "refresh_interval": config.refresh.interval,
    }
