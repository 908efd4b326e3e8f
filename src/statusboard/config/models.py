"""Pydantic models for Statusboard configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class CheckerDef(BaseModel):
    """How a service's status is determined."""

    type: str
    url: str = ""  # http; falls back to the service url
    host: str = ""  # ping
    process_name: str = ""  # command
    list_command: str = "ps ax"  # command
    timeout: float = Field(default=5.0, ge=0.0)  # 0 = no timeout for http, default for command


class ServiceEntry(BaseModel):
    """Configuration for a monitored service."""

    name: str
    description: str = ""
    url: str = ""
    initial_status: Literal["online", "offline"] = "online"
    checker: CheckerDef | None = None


class StatusboardIdentity(BaseModel):
    """Top-level dashboard identity metadata."""

    name: str = "Statusboard"
    title: str = "Service Status"
    version: str = "0.1.0"


class ServerConfig(BaseModel):
    """Bind address for the web server."""

    host: str = "127.0.0.1"
    port: int = 8000


class RefreshConfig(BaseModel):
    """When and how status refresh passes run."""

    interval: float = Field(default=0.0, ge=0.0)  # 0 = only on demand
    concurrent: bool = False
    on_startup: bool = True


class StatusboardConfig(BaseModel):
    """Root configuration model for .statusboard.yaml."""

    statusboard: StatusboardIdentity = Field(default_factory=StatusboardIdentity)
    server: ServerConfig = Field(default_factory=ServerConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)
    services: list[ServiceEntry] = Field(default_factory=list)

    @field_validator("services")
    @classmethod
    def _unique_names(cls, services: list[ServiceEntry]) -> list[ServiceEntry]:
        seen: set[str] = set()
        for entry in services:
            if entry.name in seen:
                raise ValueError(f"Duplicate service name: {entry.name}")
            seen.add(entry.name)
        return services
