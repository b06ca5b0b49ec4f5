"""
Logging setup for the Orbiter CLI.

Library modules log through Loguru's global ``logger`` and never add sinks.
The CLI calls :func:`configure_logging` once so diagnostics land on stderr at
the requested level.
"""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from .env import EnvLookup, OrbiterEnvKey, process_env

DEFAULT_LEVEL = "WARNING"
_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def resolve_level(level: Optional[str] = None, env: Optional[EnvLookup] = None) -> str:
    """Pick the log level from the argument, then ``ORBITER_LOG``, then the default."""
    if level:
        return level.upper()
    configured = (env or process_env).get(OrbiterEnvKey.LOG)
    return configured.upper() if configured else DEFAULT_LEVEL


def configure_logging(level: Optional[str] = None, env: Optional[EnvLookup] = None) -> str:
    """Replace Loguru's sinks with a single stderr sink and return the level in use."""
    resolved = resolve_level(level, env)
    logger.remove()
    logger.add(sys.stderr, level=resolved, format=_FORMAT)
    return resolved
