"""
Environment variables read by Orbiter.

Lookups go through the small :class:`EnvLookup` capability so callers can
inject a fixed environment in tests instead of mutating ``os.environ``.
Only presence is checked; values are never inspected here.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Mapping, Optional, Protocol, Union


class OrbiterEnvKey(str, Enum):
    """Environment variable names understood by Orbiter."""

    CONFIG_HOME = "ORBITER_CONFIG_HOME"
    LOG = "ORBITER_LOG"

    def __str__(self) -> str:
        return self.value


EnvName = Union[OrbiterEnvKey, str]


class EnvLookup(Protocol):
    def is_set(self, name: EnvName) -> bool:
        ...

    def get(self, name: EnvName) -> Optional[str]:
        ...


class ProcessEnv:
    """Reads the live process environment on every call."""

    def is_set(self, name: EnvName) -> bool:
        return str(name) in os.environ

    def get(self, name: EnvName) -> Optional[str]:
        return os.environ.get(str(name))


class StaticEnv:
    """Lookup backed by a fixed mapping."""

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values = {str(key): value for key, value in (values or {}).items()}

    def is_set(self, name: EnvName) -> bool:
        return str(name) in self._values

    def get(self, name: EnvName) -> Optional[str]:
        return self._values.get(str(name))


process_env = ProcessEnv()


__all__ = ["OrbiterEnvKey", "EnvLookup", "ProcessEnv", "StaticEnv", "process_env"]
