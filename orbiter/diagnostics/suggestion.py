"""
Structured remediation advice attached to classified failures.

Each suggestion is an immutable value.  Payload fields are snapshots taken
from the originating exception so the exception can be discarded once the
suggestion exists.  Turning a suggestion into text is left to
:mod:`orbiter.reporting.messages`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Tuple


class SuggestionKind(str, Enum):
    """Tag identifying every suggestion variant."""

    SUBMIT_ISSUE = "submit_issue"
    USE_FEDERATED_GRAPH = "use_federated_graph"
    RUN_GRAPH_LIST = "run_graph_list"
    PROVIDE_VALID_SUBGRAPH = "provide_valid_subgraph"
    CHECK_GRAPH_NAME_AND_AUTH = "check_graph_name_and_auth"
    RERUN_WITH_SENSITIVE = "rerun_with_sensitive"
    SET_CONFIG_HOME = "set_config_home"
    MIGRATE_CONFIG_HOME_OR_CREATE_CONFIG = "migrate_config_home_or_create_config"
    CREATE_CONFIG = "create_config"
    LIST_PROFILES = "list_profiles"


@dataclass(frozen=True)
class Suggestion:
    """Base class for suggestion variants."""

    kind: ClassVar[SuggestionKind]

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"kind": self.kind.value}
        for item in fields(self):
            value = getattr(self, item.name)
            payload[item.name] = list(value) if isinstance(value, tuple) else value
        return payload

    def copy(self) -> "Suggestion":
        return copy.copy(self)


@dataclass(frozen=True)
class SubmitIssue(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.SUBMIT_ISSUE


@dataclass(frozen=True)
class UseFederatedGraph(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.USE_FEDERATED_GRAPH


@dataclass(frozen=True)
class RunGraphList(Suggestion):
    """List the variants of ``graph``."""

    graph: str
    kind: ClassVar[SuggestionKind] = SuggestionKind.RUN_GRAPH_LIST


@dataclass(frozen=True)
class ProvideValidSubgraph(Suggestion):
    """Retry with one of ``valid_subgraphs``."""

    valid_subgraphs: Tuple[str, ...] = ()
    kind: ClassVar[SuggestionKind] = SuggestionKind.PROVIDE_VALID_SUBGRAPH

    def __post_init__(self) -> None:
        object.__setattr__(self, "valid_subgraphs", _snapshot(self.valid_subgraphs))


@dataclass(frozen=True)
class CheckGraphNameAndAuth(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.CHECK_GRAPH_NAME_AND_AUTH


@dataclass(frozen=True)
class RerunWithSensitive(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.RERUN_WITH_SENSITIVE


@dataclass(frozen=True)
class SetConfigHome(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.SET_CONFIG_HOME


@dataclass(frozen=True)
class MigrateConfigHomeOrCreateConfig(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.MIGRATE_CONFIG_HOME_OR_CREATE_CONFIG


@dataclass(frozen=True)
class CreateConfig(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.CREATE_CONFIG


@dataclass(frozen=True)
class ListProfiles(Suggestion):
    kind: ClassVar[SuggestionKind] = SuggestionKind.LIST_PROFILES


def _snapshot(names: Iterable[str]) -> Tuple[str, ...]:
    # Unordered inputs are sorted so equal sets always give equal suggestions.
    if isinstance(names, (set, frozenset)):
        return tuple(sorted(names))
    return tuple(names)


SUGGESTION_TYPES: Dict[SuggestionKind, type] = {
    cls.kind: cls
    for cls in (
        SubmitIssue,
        UseFederatedGraph,
        RunGraphList,
        ProvideValidSubgraph,
        CheckGraphNameAndAuth,
        RerunWithSensitive,
        SetConfigHome,
        MigrateConfigHomeOrCreateConfig,
        CreateConfig,
        ListProfiles,
    )
}


__all__ = [
    "SuggestionKind",
    "Suggestion",
    "SubmitIssue",
    "UseFederatedGraph",
    "RunGraphList",
    "ProvideValidSubgraph",
    "CheckGraphNameAndAuth",
    "RerunWithSensitive",
    "SetConfigHome",
    "MigrateConfigHomeOrCreateConfig",
    "CreateConfig",
    "ListProfiles",
    "SUGGESTION_TYPES",
]
