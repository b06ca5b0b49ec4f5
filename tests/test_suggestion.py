"""Tests for suggestion values and metadata records."""

import dataclasses

import pytest

from orbiter.diagnostics import (
    SUGGESTION_TYPES,
    Code,
    CreateConfig,
    Metadata,
    ProvideValidSubgraph,
    RunGraphList,
    SubmitIssue,
    SuggestionKind,
)


def test_every_kind_has_a_suggestion_type() -> None:
    assert set(SUGGESTION_TYPES) == set(SuggestionKind)


def test_suggestions_are_immutable() -> None:
    suggestion = RunGraphList(graph="my-graph")
    with pytest.raises(dataclasses.FrozenInstanceError):
        suggestion.graph = "other"  # type: ignore[misc]


def test_equality_and_hashing_follow_payload() -> None:
    assert RunGraphList(graph="a") == RunGraphList(graph="a")
    assert RunGraphList(graph="a") != RunGraphList(graph="b")
    assert SubmitIssue() != CreateConfig()
    assert len({SubmitIssue(), SubmitIssue(), CreateConfig()}) == 2


def test_provide_valid_subgraph_copies_input() -> None:
    names = ["a", "b"]
    suggestion = ProvideValidSubgraph(valid_subgraphs=names)
    names.append("c")
    assert suggestion.valid_subgraphs == ("a", "b")
    assert suggestion.copy() == suggestion


def test_provide_valid_subgraph_sorts_frozenset() -> None:
    suggestion = ProvideValidSubgraph(valid_subgraphs=frozenset({"gamma", "alpha", "epsilon", "beta", "delta"}))
    assert suggestion.valid_subgraphs == ("alpha", "beta", "delta", "epsilon", "gamma")


def test_suggestion_as_dict() -> None:
    assert SubmitIssue().as_dict() == {"kind": "submit_issue"}
    assert ProvideValidSubgraph(valid_subgraphs=("a", "b")).as_dict() == {
        "kind": "provide_valid_subgraph",
        "valid_subgraphs": ["a", "b"],
    }


def test_empty_metadata() -> None:
    metadata = Metadata()
    assert metadata.is_empty
    assert metadata.as_dict() == {"suggestion": None, "code": None}


def test_metadata_as_dict_with_suggestion() -> None:
    metadata = Metadata(suggestion=RunGraphList(graph="my-graph"))
    assert not metadata.is_empty
    assert metadata.as_dict() == {"suggestion": {"kind": "run_graph_list", "graph": "my-graph"}, "code": None}


def test_code_catalogue_is_separate_from_suggestions() -> None:
    assert not issubclass(Code, SuggestionKind)
    assert list(Code) == []
