"""Statusboard configuration system."""

from statusboard.config.loader import find_config_file, load_config
from statusboard.config.models import (
    CheckerDef,
    RefreshConfig,
    ServerConfig,
    ServiceEntry,
    StatusboardConfig,
)

__all__ = [
    "CheckerDef",
    "RefreshConfig",
    "ServerConfig",
    "ServiceEntry",
    "StatusboardConfig",
    "load_config",
    "find_config_file",
]
