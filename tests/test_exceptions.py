"""Tests for the failure families raised by the client and config store."""

import pytest

from orbiter import exceptions as exc


def test_every_client_kind_has_a_concrete_exception() -> None:
    declared = {cls.kind for cls in _concrete(exc.OrbiterClientError)}
    assert declared == set(exc.ClientErrorKind)


def test_every_config_kind_has_a_concrete_exception() -> None:
    declared = {cls.kind for cls in _concrete(exc.ConfigProblem)}
    assert declared == set(exc.ConfigProblemKind)


def test_families_are_disjoint() -> None:
    assert not issubclass(exc.OrbiterClientError, exc.ConfigProblem)
    assert not issubclass(exc.ConfigProblem, exc.OrbiterClientError)
    assert issubclass(exc.OrbiterClientError, exc.OrbiterError)
    assert issubclass(exc.ConfigProblem, exc.OrbiterError)


def test_variant_without_kind_is_rejected() -> None:
    with pytest.raises(TypeError):

        class Untagged(exc.OrbiterClientError):
            pass


def test_variant_with_foreign_kind_is_rejected() -> None:
    with pytest.raises(TypeError):

        class Misfiled(exc.ConfigProblem):
            kind = exc.ClientErrorKind.ADHOC


def test_exception_context_carries_payload() -> None:
    error = exc.NoSchemaForVariant(graph="my-graph", invalid_variant="staging")
    assert error.context == {"graph": "my-graph", "invalid_variant": "staging"}
    assert "staging" in str(error)


def test_toml_problem_keeps_cause() -> None:
    cause = ValueError("bad toml")
    error = exc.TomlDeserialization("could not parse", cause=cause)
    assert error.__cause__ is cause
    assert error.kind is exc.ConfigProblemKind.TOML_DESERIALIZATION


def _concrete(base):
    found = []
    for cls in base.__subclasses__():
        if "kind" in cls.__dict__ and cls.__module__ == exc.__name__:
            found.append(cls)
        found.extend(_concrete(cls))
    return found
