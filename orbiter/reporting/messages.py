"""
Render structured diagnostics into user-facing advice.

Templates ship in ``messages.yaml`` next to this module and can be
overridden per-kind from a mapping, a YAML/JSON file, or a YAML string.
Overrides are merged on top of the packaged defaults with OmegaConf, the same
way run configuration is layered elsewhere.
"""

from __future__ import annotations

import dataclasses
import string
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Union

import yaml
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from orbiter.diagnostics import SUGGESTION_TYPES, Metadata, Suggestion, SuggestionKind, classify
from orbiter.utils.env import EnvLookup, OrbiterEnvKey

TEMPLATES_PATH = Path(__file__).resolve().with_name("messages.yaml")

TemplateSource = Union[str, Path, Mapping[str, Any], DictConfig]


def _coerce(source: TemplateSource) -> DictConfig:
    """Convert arbitrary template sources into an OmegaConf instance."""
    if isinstance(source, DictConfig):
        return source
    if isinstance(source, Mapping):
        return OmegaConf.create(dict(source))
    if isinstance(source, Path):
        return _load_path(source)
    if isinstance(source, str):
        potential_path = Path(source)
        if potential_path.suffix and potential_path.exists():
            return _load_path(potential_path)
        try:
            parsed = yaml.safe_load(source)
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse message templates: {exc}") from exc
        if not isinstance(parsed, MutableMapping):
            raise ValueError("Message templates must evaluate to a mapping.")
        return OmegaConf.create(dict(parsed))
    raise TypeError(f"Unsupported template source: {type(source)!r}")


def _load_path(path: Path) -> DictConfig:
    if not path.exists():
        raise FileNotFoundError(f"Message template file not found: {path}")
    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise ValueError(f"Unsupported template file format: '{suffix}'. Expected YAML or JSON.")
    return OmegaConf.create(yaml.safe_load(path.read_text(encoding="utf-8")) or {})


def _validate(conf: DictConfig) -> None:
    known = {kind.value for kind in SuggestionKind}
    unknown = sorted(str(key) for key in conf.keys() if key not in known)
    if unknown:
        raise ValueError(f"Unknown suggestion kinds in message templates: {unknown}")


def _check_placeholders(key: str, text: str) -> None:
    payload = dataclasses.fields(SUGGESTION_TYPES[SuggestionKind(key)])
    allowed = {"config_home_key"} | {item.name for item in payload}
    try:
        names = {name for _, name, _, _ in string.Formatter().parse(text) if name is not None}
    except ValueError as exc:
        raise ValueError(f"Malformed message template for '{key}': {exc}") from exc
    unknown = sorted(names - allowed)
    if unknown:
        raise ValueError(f"Unknown placeholders in message template for '{key}': {unknown}")


class MessageCatalog:
    """
    Advice templates for every :class:`SuggestionKind`.

    Parameters
    ----------
    overrides : Optional[TemplateSource]
        Templates replacing the packaged defaults for some kinds.
    """

    def __init__(self, overrides: Optional[TemplateSource] = None) -> None:
        defaults = _load_path(TEMPLATES_PATH)
        _validate(defaults)
        merged = defaults
        if overrides is not None:
            extra = _coerce(overrides)
            _validate(extra)
            merged = OmegaConf.merge(defaults, extra)
        self._templates: Dict[str, str] = {
            str(key): " ".join(str(value).split()) for key, value in merged.items()
        }
        missing = sorted(kind.value for kind in SuggestionKind if kind.value not in self._templates)
        if missing:
            raise ValueError(f"Message templates missing for suggestion kinds: {missing}")
        for key, text in self._templates.items():
            _check_placeholders(key, text)

    def template(self, kind: Union[SuggestionKind, str]) -> str:
        key = SuggestionKind(kind).value
        return self._templates[key]

    def templates(self) -> Dict[str, str]:
        return dict(self._templates)

    def render(self, suggestion: Suggestion) -> str:
        """Fill the template for ``suggestion`` with its payload."""
        fields: Dict[str, Any] = {"config_home_key": OrbiterEnvKey.CONFIG_HOME.value}
        for key, value in suggestion.as_dict().items():
            if key == "kind":
                continue
            fields[key] = ", ".join(str(item) for item in value) if isinstance(value, list) else value
        return self.template(suggestion.kind).format(**fields)

    def render_metadata(self, metadata: Metadata) -> Optional[str]:
        if metadata.suggestion is None:
            return None
        return self.render(metadata.suggestion)


default_catalog = MessageCatalog()


def describe_error(
    error: BaseException,
    *,
    env: Optional[EnvLookup] = None,
    catalog: Optional[MessageCatalog] = None,
) -> str:
    """Return the error line plus indented advice for ``error``, when there is any."""

    metadata = classify(error, env=env)
    text = f"error: {error}"
    if metadata.code is not None:
        text = f"error[{metadata.code.value}]: {error}"
    advice = (catalog or default_catalog).render_metadata(metadata)
    if advice:
        logger.debug("Attaching advice for {}", metadata.suggestion.kind.value)
        text = f"{text}\n        {advice}"
    return text


__all__ = ["MessageCatalog", "default_catalog", "describe_error", "TEMPLATES_PATH"]
