"""
Map arbitrary failures to structured remediation metadata.

The classifier accepts any value (usually an exception caught at the CLI
boundary) and checks it against the known failure families in priority
order.  The first family the value belongs to decides the outcome; inside a
family the variant's ``kind`` tag selects a rule from that family's table.
Values outside every family produce an empty :class:`Metadata`.

Rule tables are checked against their family enum when this module is
imported, so a new variant without a rule fails loudly at import time
instead of silently losing its advice.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Type

from loguru import logger

from orbiter.exceptions import (
    ClientErrorKind,
    ConfigProblem,
    ConfigProblemKind,
    OrbiterClientError,
)
from orbiter.utils.env import EnvLookup, OrbiterEnvKey, process_env

from .code import Code
from .metadata import Metadata
from .suggestion import (
    CheckGraphNameAndAuth,
    CreateConfig,
    ListProfiles,
    MigrateConfigHomeOrCreateConfig,
    ProvideValidSubgraph,
    RerunWithSensitive,
    RunGraphList,
    SetConfigHome,
    SubmitIssue,
    Suggestion,
    UseFederatedGraph,
)

Outcome = Tuple[Optional[Suggestion], Optional[Code]]
ClientRule = Callable[[OrbiterClientError], Outcome]
ConfigRule = Callable[[ConfigProblem, EnvLookup], Outcome]


def _fixed(suggestion: Optional[Suggestion]) -> Callable[..., Outcome]:
    def rule(*_: object) -> Outcome:
        return suggestion, None

    return rule


def _run_graph_list(error: OrbiterClientError) -> Outcome:
    return RunGraphList(graph=str(getattr(error, "graph", ""))), None


def _provide_valid_subgraph(error: OrbiterClientError) -> Outcome:
    # The invalid name is dropped; only the alternatives are actionable.
    return ProvideValidSubgraph(valid_subgraphs=getattr(error, "valid_subgraphs", None) or ()), None


def _no_config_found(_: ConfigProblem, env: EnvLookup) -> Outcome:
    # A set override (even empty) means the user moved their config home.
    if env.is_set(OrbiterEnvKey.CONFIG_HOME):
        return MigrateConfigHomeOrCreateConfig(), None
    return CreateConfig(), None


CLIENT_RULES: Dict[ClientErrorKind, ClientRule] = {
    ClientErrorKind.INVALID_JSON: _fixed(SubmitIssue()),
    ClientErrorKind.INVALID_HEADER_NAME: _fixed(SubmitIssue()),
    ClientErrorKind.INVALID_HEADER_VALUE: _fixed(SubmitIssue()),
    ClientErrorKind.SEND_REQUEST: _fixed(SubmitIssue()),
    ClientErrorKind.MALFORMED_RESPONSE: _fixed(SubmitIssue()),
    ClientErrorKind.INVALID_SEVERITY: _fixed(SubmitIssue()),
    ClientErrorKind.EXPECTED_FEDERATED_GRAPH: _fixed(UseFederatedGraph()),
    ClientErrorKind.NO_SCHEMA_FOR_VARIANT: _run_graph_list,
    ClientErrorKind.NO_SUBGRAPH_IN_GRAPH: _provide_valid_subgraph,
    ClientErrorKind.NO_SERVICE: _fixed(CheckGraphNameAndAuth()),
    ClientErrorKind.ADHOC: _fixed(None),
    ClientErrorKind.GRAPHQL: _fixed(None),
}

CONFIG_RULES: Dict[ConfigProblemKind, ConfigRule] = {
    ConfigProblemKind.NO_NON_SENSITIVE_CONFIG_FOUND: _fixed(RerunWithSensitive()),
    ConfigProblemKind.COULD_NOT_CREATE_CONFIG_HOME: _fixed(SetConfigHome()),
    ConfigProblemKind.DEFAULT_CONFIG_DIR_NOT_FOUND: _fixed(SetConfigHome()),
    ConfigProblemKind.INVALID_OVERRIDE_CONFIG_DIR: _fixed(SetConfigHome()),
    ConfigProblemKind.NO_CONFIG_FOUND: _no_config_found,
    ConfigProblemKind.PROFILE_NOT_FOUND: _fixed(ListProfiles()),
    ConfigProblemKind.TOML_DESERIALIZATION: _fixed(SubmitIssue()),
    ConfigProblemKind.TOML_SERIALIZATION: _fixed(SubmitIssue()),
    ConfigProblemKind.IO_ERROR: _fixed(SubmitIssue()),
}


def ensure_exhaustive(kinds: Type[Enum], rules: Mapping[Enum, object]) -> None:
    """Raise ``NotImplementedError`` unless every member of ``kinds`` has a rule."""
    missing = [member.name for member in kinds if member not in rules]
    if missing:
        raise NotImplementedError(f"No classification rule for {kinds.__name__} variants: {missing}")


ensure_exhaustive(ClientErrorKind, CLIENT_RULES)
ensure_exhaustive(ConfigProblemKind, CONFIG_RULES)


def _classify_client(error: OrbiterClientError, env: EnvLookup) -> Outcome:
    rule = CLIENT_RULES.get(getattr(error, "kind", None))
    return rule(error) if rule is not None else (None, None)


def _classify_config(error: ConfigProblem, env: EnvLookup) -> Outcome:
    # Family bases carry no tag; they get no advice.
    rule = CONFIG_RULES.get(getattr(error, "kind", None))
    return rule(error, env) if rule is not None else (None, None)


# Checked in order; the first family the failure belongs to wins.
FAMILIES: List[Tuple[type, Callable[..., Outcome]]] = [
    (OrbiterClientError, _classify_client),
    (ConfigProblem, _classify_config),
]


def classify(error: object, env: Optional[EnvLookup] = None) -> Metadata:
    """
    Derive the :class:`Metadata` for ``error``.

    Parameters
    ----------
    error : object
        Any failure value. Exceptions outside the known families, and
        non-exceptions, yield an empty record.
    env : EnvLookup, optional
        Environment used by rules that depend on it. Defaults to the live
        process environment, read afresh on every call.
    """

    lookup = env if env is not None else process_env
    for family, handler in FAMILIES:
        if isinstance(error, family):
            suggestion, code = handler(error, lookup)
            logger.debug(
                "Classified {} ({}) -> suggestion={} code={}",
                type(error).__name__,
                family.__name__,
                suggestion.kind.value if suggestion is not None else None,
                code,
            )
            return Metadata(suggestion=suggestion, code=code)
    logger.debug("No diagnostics for {}", type(error).__name__)
    return Metadata()


__all__ = ["classify", "ensure_exhaustive", "CLIENT_RULES", "CONFIG_RULES", "FAMILIES"]
