"""
Centralised exception hierarchy for Orbiter.

Collaborators raise typed exceptions instead of generic ``ValueError`` or
``RuntimeError`` instances.  Two closed families are defined here:

* :class:`OrbiterClientError` - failures raised while talking to the registry
  over HTTP/GraphQL.
* :class:`ConfigProblem` - failures raised by the local configuration and
  profile store.

Every concrete variant carries a ``kind`` tag from its family enum so the
diagnostics layer can dispatch on the tag instead of the class.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Iterable, Optional


class OrbiterError(Exception):
    """Base class for all Orbiter specific exceptions."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context or {})


class ClientErrorKind(str, Enum):
    """Variants of :class:`OrbiterClientError`."""

    INVALID_JSON = "invalid_json"
    INVALID_HEADER_NAME = "invalid_header_name"
    INVALID_HEADER_VALUE = "invalid_header_value"
    SEND_REQUEST = "send_request"
    MALFORMED_RESPONSE = "malformed_response"
    INVALID_SEVERITY = "invalid_severity"
    EXPECTED_FEDERATED_GRAPH = "expected_federated_graph"
    NO_SCHEMA_FOR_VARIANT = "no_schema_for_variant"
    NO_SUBGRAPH_IN_GRAPH = "no_subgraph_in_graph"
    NO_SERVICE = "no_service"
    ADHOC = "adhoc"
    GRAPHQL = "graphql"


class ConfigProblemKind(str, Enum):
    """Variants of :class:`ConfigProblem`."""

    NO_NON_SENSITIVE_CONFIG_FOUND = "no_non_sensitive_config_found"
    COULD_NOT_CREATE_CONFIG_HOME = "could_not_create_config_home"
    DEFAULT_CONFIG_DIR_NOT_FOUND = "default_config_dir_not_found"
    INVALID_OVERRIDE_CONFIG_DIR = "invalid_override_config_dir"
    NO_CONFIG_FOUND = "no_config_found"
    PROFILE_NOT_FOUND = "profile_not_found"
    TOML_DESERIALIZATION = "toml_deserialization"
    TOML_SERIALIZATION = "toml_serialization"
    IO_ERROR = "io_error"


class _TaggedFamily(OrbiterError):
    """Shared plumbing for exception families whose variants carry a ``kind`` tag."""

    kind_enum: ClassVar[type[Enum]]
    kind: ClassVar[Enum]

    def __init_subclass__(cls, *, family: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if family:
            return
        kind = cls.__dict__.get("kind")
        if not isinstance(kind, cls.kind_enum):
            raise TypeError(f"{cls.__name__} must declare a {cls.kind_enum.__name__} 'kind' tag.")


# ---------------------------------------------------------------------------
# Remote-operation failures
# ---------------------------------------------------------------------------


class OrbiterClientError(_TaggedFamily, family=True):
    """Raised by the registry client for request and response failures."""

    kind_enum = ClientErrorKind


class _DetailClientError(OrbiterClientError, family=True):
    summary: ClassVar[str] = ""

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.summary}: {detail}", context={"detail": detail})
        self.detail = detail


class InvalidJSON(_DetailClientError):
    kind = ClientErrorKind.INVALID_JSON
    summary = "Could not parse JSON"


class InvalidHeaderName(_DetailClientError):
    kind = ClientErrorKind.INVALID_HEADER_NAME
    summary = "Invalid header name"


class InvalidHeaderValue(_DetailClientError):
    kind = ClientErrorKind.INVALID_HEADER_VALUE
    summary = "Invalid header value"


class SendRequest(_DetailClientError):
    kind = ClientErrorKind.SEND_REQUEST
    summary = "Could not send request"


class MalformedResponse(OrbiterClientError):
    """The registry answered, but a field the client relies on was null."""

    kind = ClientErrorKind.MALFORMED_RESPONSE

    def __init__(self, null_field: str) -> None:
        super().__init__(
            f"The response from the server was malformed. There was no data found in the response body. "
            f"This is likely an error in GraphQL execution. Null field: {null_field}",
            context={"null_field": null_field},
        )
        self.null_field = null_field


class InvalidSeverity(OrbiterClientError):
    kind = ClientErrorKind.INVALID_SEVERITY

    def __init__(self) -> None:
        super().__init__("Invalid ChangeSeverity.")


class ExpectedFederatedGraph(OrbiterClientError):
    kind = ClientErrorKind.EXPECTED_FEDERATED_GRAPH

    def __init__(self, graph: str) -> None:
        super().__init__(
            f"The graph '{graph}' is a non-federated graph. This operation is only possible for federated graphs.",
            context={"graph": graph},
        )
        self.graph = graph


class NoSchemaForVariant(OrbiterClientError):
    kind = ClientErrorKind.NO_SCHEMA_FOR_VARIANT

    def __init__(self, graph: str, invalid_variant: str) -> None:
        super().__init__(
            f"The graph registry does not contain variant '{invalid_variant}' for graph '{graph}'.",
            context={"graph": graph, "invalid_variant": invalid_variant},
        )
        self.graph = graph
        self.invalid_variant = invalid_variant


class NoSubgraphInGraph(OrbiterClientError):
    """The requested subgraph does not exist; ``valid_subgraphs`` lists the ones that do."""

    kind = ClientErrorKind.NO_SUBGRAPH_IN_GRAPH

    def __init__(self, invalid_subgraph: str, valid_subgraphs: Iterable[str]) -> None:
        # Sets are sorted so the listed alternatives do not depend on hash order.
        if isinstance(valid_subgraphs, (set, frozenset)):
            valid = sorted(valid_subgraphs)
        else:
            valid = list(valid_subgraphs)
        super().__init__(
            f"Could not find subgraph '{invalid_subgraph}'.",
            context={"invalid_subgraph": invalid_subgraph, "valid_subgraphs": valid},
        )
        self.invalid_subgraph = invalid_subgraph
        self.valid_subgraphs = valid


class NoService(OrbiterClientError):
    kind = ClientErrorKind.NO_SERVICE

    def __init__(self, graph: str) -> None:
        super().__init__(f"Could not find graph with name '{graph}'.", context={"graph": graph})
        self.graph = graph


class AdhocError(OrbiterClientError):
    kind = ClientErrorKind.ADHOC

    def __init__(self, msg: str) -> None:
        super().__init__(msg, context={"msg": msg})
        self.msg = msg


class GraphQLError(OrbiterClientError):
    """Error message returned verbatim by the registry's GraphQL endpoint."""

    kind = ClientErrorKind.GRAPHQL

    def __init__(self, msg: str) -> None:
        super().__init__(msg, context={"msg": msg})
        self.msg = msg


# ---------------------------------------------------------------------------
# Local-configuration failures
# ---------------------------------------------------------------------------


class ConfigProblem(_TaggedFamily, family=True):
    """Raised by the configuration and profile store."""

    kind_enum = ConfigProblemKind


class NoNonSensitiveConfigFound(ConfigProblem):
    kind = ConfigProblemKind.NO_NON_SENSITIVE_CONFIG_FOUND

    def __init__(self, detail: str) -> None:
        super().__init__(f"No non-sensitive configuration found for {detail}.", context={"detail": detail})
        self.detail = detail


class CouldNotCreateConfigHome(ConfigProblem):
    kind = ConfigProblemKind.COULD_NOT_CREATE_CONFIG_HOME

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not create a configuration directory at {path}.", context={"path": path})
        self.path = path


class DefaultConfigDirNotFound(ConfigProblem):
    kind = ConfigProblemKind.DEFAULT_CONFIG_DIR_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Could not find a configuration directory at the default location.")


class InvalidOverrideConfigDir(ConfigProblem):
    kind = ConfigProblemKind.INVALID_OVERRIDE_CONFIG_DIR

    def __init__(self, path: str) -> None:
        super().__init__(
            f"{path} is not a valid configuration directory override.", context={"path": path}
        )
        self.path = path


class NoConfigFound(ConfigProblem):
    kind = ConfigProblemKind.NO_CONFIG_FOUND

    def __init__(self, detail: str) -> None:
        super().__init__(f"Could not find a configuration: {detail}", context={"detail": detail})
        self.detail = detail


class ProfileNotFound(ConfigProblem):
    kind = ConfigProblemKind.PROFILE_NOT_FOUND

    def __init__(self, profile: str) -> None:
        super().__init__(f"There is no profile named '{profile}'.", context={"profile": profile})
        self.profile = profile


class _DetailConfigProblem(ConfigProblem, family=True):
    summary: ClassVar[str] = ""

    def __init__(self, detail: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"{self.summary}: {detail}", context={"detail": detail})
        self.detail = detail
        if cause is not None:
            self.__cause__ = cause


class TomlDeserialization(_DetailConfigProblem):
    kind = ConfigProblemKind.TOML_DESERIALIZATION
    summary = "Could not parse configuration file"


class TomlSerialization(_DetailConfigProblem):
    kind = ConfigProblemKind.TOML_SERIALIZATION
    summary = "Could not write configuration file"


class ConfigIOError(_DetailConfigProblem):
    kind = ConfigProblemKind.IO_ERROR
    summary = "Could not access configuration"


__all__ = [
    "OrbiterError",
    "ClientErrorKind",
    "ConfigProblemKind",
    "OrbiterClientError",
    "InvalidJSON",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "SendRequest",
    "MalformedResponse",
    "InvalidSeverity",
    "ExpectedFederatedGraph",
    "NoSchemaForVariant",
    "NoSubgraphInGraph",
    "NoService",
    "AdhocError",
    "GraphQLError",
    "ConfigProblem",
    "NoNonSensitiveConfigFound",
    "CouldNotCreateConfigHome",
    "DefaultConfigDirNotFound",
    "InvalidOverrideConfigDir",
    "NoConfigFound",
    "ProfileNotFound",
    "TomlDeserialization",
    "TomlSerialization",
    "ConfigIOError",
]
