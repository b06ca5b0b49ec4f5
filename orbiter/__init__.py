"""Top-level package exposing Orbiter diagnostics entrypoints."""

from .diagnostics import Metadata, classify
from .exceptions import ConfigProblem, OrbiterClientError, OrbiterError

__all__ = ["Metadata", "classify", "OrbiterError", "OrbiterClientError", "ConfigProblem"]
