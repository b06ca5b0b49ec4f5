"""
Stable diagnostic codes for well-known failure classes.

Codes are independent of suggestions: a code never implies a particular piece
of advice and vice versa.  No failure family is assigned a code yet, so the
enumeration is empty; new families add their members here.
"""

from __future__ import annotations

from enum import Enum


class Code(str, Enum):
    """Stable, user-facing diagnostic identifier."""


__all__ = ["Code"]
