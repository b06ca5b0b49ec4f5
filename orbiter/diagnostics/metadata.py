"""Metadata record produced for every classified failure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .code import Code
from .suggestion import Suggestion

if TYPE_CHECKING:
    from orbiter.utils.env import EnvLookup


@dataclass(frozen=True)
class Metadata:
    """Optional :class:`Suggestion` and optional :class:`Code` for one failure."""

    suggestion: Optional[Suggestion] = None
    code: Optional[Code] = None

    @property
    def is_empty(self) -> bool:
        return self.suggestion is None and self.code is None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "suggestion": self.suggestion.as_dict() if self.suggestion is not None else None,
            "code": self.code.value if self.code is not None else None,
        }

    @classmethod
    def from_error(cls, error: object, env: Optional["EnvLookup"] = None) -> "Metadata":
        """Classify ``error``; see :func:`orbiter.diagnostics.classifier.classify`."""
        from .classifier import classify

        return classify(error, env=env)


__all__ = ["Metadata"]
