"""Diagnostics exports: suggestions, codes, metadata and the classifier."""

from .classifier import classify, ensure_exhaustive
from .code import Code
from .metadata import Metadata
from .suggestion import (
    SUGGESTION_TYPES,
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
    SuggestionKind,
    UseFederatedGraph,
)

__all__ = [
    "classify",
    "ensure_exhaustive",
    "Code",
    "Metadata",
    "Suggestion",
    "SuggestionKind",
    "SUGGESTION_TYPES",
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
]
