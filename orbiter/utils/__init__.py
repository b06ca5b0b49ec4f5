"""Utility exports for Orbiter."""

from .env import EnvLookup, OrbiterEnvKey, ProcessEnv, StaticEnv, process_env
from .logger import configure_logging

__all__ = ["EnvLookup", "OrbiterEnvKey", "ProcessEnv", "StaticEnv", "process_env", "configure_logging"]
