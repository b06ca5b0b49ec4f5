"""Rendering helpers that turn diagnostics into user-facing text."""

from .messages import MessageCatalog, default_catalog, describe_error

__all__ = ["MessageCatalog", "default_catalog", "describe_error"]
