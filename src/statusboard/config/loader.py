"""Load .statusboard.yaml, expanding ${VAR} references from the environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from statusboard.config.models import StatusboardConfig

CONFIG_FILENAME = ".statusboard.yaml"
CONFIG_ENV_VAR = "STATUSBOARD_CONFIG"

_ENV_REF = re.compile(r"\$\{\s*(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*(?::-(?P<default>[^}]*))?\}")


def expand_env(value: str, environ: Mapping[str, str]) -> str:
    """Expand ``${NAME}`` and ``${NAME:-default}`` in *value*.

    With ``:-`` an unset or empty variable takes the default, so
    ``port: ${PORTS:-8000}`` still binds when PORTS is exported empty.
    A reference without a default to an unset variable is kept verbatim.
    """

    def _sub(match: re.Match[str]) -> str:
        current = environ.get(match.group("name"))
        default = match.group("default")
        if default is not None:
            return current or default
        return match.group(0) if current is None else current

    return _ENV_REF.sub(_sub, value)


def expand_tree(data: Any, environ: Mapping[str, str]) -> Any:
    """Apply expand_env to every string in a parsed YAML document."""
    if isinstance(data, str):
        return expand_env(data, environ)
    if isinstance(data, dict):
        return {key: expand_tree(item, environ) for key, item in data.items()}
    if isinstance(data, list):
        return [expand_tree(item, environ) for item in data]
    return data


def find_config_file(start: Path | None = None, environ: Mapping[str, str] | None = None) -> Path | None:
    """Locate the dashboard config.

    ``$STATUSBOARD_CONFIG`` names the file outright; otherwise the nearest
    .statusboard.yaml at or above *start* (default cwd) is used.
    """
    env = os.environ if environ is None else environ
    if env.get(CONFIG_ENV_VAR):
        return Path(env[CONFIG_ENV_VAR]).expanduser()
    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )


def load_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> StatusboardConfig:
    """Read, expand and validate the dashboard config.

    Raises FileNotFoundError when no file is found and ValueError when the
    expanded document does not validate.
    """
    env = os.environ if environ is None else environ
    config_path = path or find_config_file(environ=env)
    if config_path is None or not config_path.is_file():
        raise FileNotFoundError(
            f"Could not find {CONFIG_FILENAME} (or ${CONFIG_ENV_VAR}). "
            f"Copy {CONFIG_FILENAME}.example or pass --path."
        )
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    try:
        return StatusboardConfig(**expand_tree(raw, env))
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {config_path}: {exc}") from exc
