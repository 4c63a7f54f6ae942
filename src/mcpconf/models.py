# Core data models for mcp-conf
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, runtime_checkable

from mcpconf.config import DEFAULT_COMMAND, DEFAULT_TIMEOUT

Action = Literal["add", "update", "remove", "enable", "disable", "list", "show", "where"]
ClientName = Literal[
    "cline",
    "codex",
    "claude",
    "goose",
    "cursor",
    "windsurf",
    "opencode",
    "copilot",
    "antigravity",
    "crush",
]
Scope = Literal["global", "local"]
Transport = Literal["stdio", "sse", "http"]
FormatKind = Literal["json", "yaml", "toml"]
AuthType = Literal["mcp", "env", "env-path", "session-env", "unknown"]

# ABOUTME: Raw documents and entries are plain parsed trees (json/yaml/toml)
RawDocument = dict[str, Any]
RawEntry = dict[str, Any]

ACTIONS: tuple[Action, ...] = (
    "add", "update", "remove", "enable", "disable", "list", "show", "where",
)
TRANSPORTS: tuple[Transport, ...] = ("stdio", "sse", "http")
MUTATING_ACTIONS: frozenset[str] = frozenset({"add", "update", "remove", "enable", "disable"})


@dataclass(frozen=True)
class Auth:
    """Auth source of a stdio server.

    ABOUTME: value is None for session-env and unknown
    ABOUTME: mcp destinations are case-insensitive and kept lowercase on disk
    """
    type: AuthType
    value: str | None = None

    @classmethod
    def destination(cls, name: str) -> "Auth":
        return cls("mcp", name)

    @classmethod
    def env_name(cls, name: str) -> "Auth":
        return cls("env", name)

    @classmethod
    def env_path(cls, path: str) -> "Auth":
        return cls("env-path", path)

    @classmethod
    def session_env(cls) -> "Auth":
        return cls("session-env")

    def to_dict(self) -> dict[str, str]:
        result = {"type": self.type}
        if self.value is not None:
            result["value"] = self.value
        return result


@dataclass(frozen=True)
class Operation:
    """Canonical, immutable description of one requested change or query.

    ABOUTME: Built once per client and passed explicitly to every adapter call
    ABOUTME: Derived values (scope, project path) go into a new Operation via replace()
    ABOUTME: disabled=None means "client default" on add and "keep the current state" on update
    """
    action: Action
    client: ClientName
    name: str | None = None
    scope: Scope | None = None
    transport: Transport = "stdio"
    command: str = DEFAULT_COMMAND
    timeout: float = DEFAULT_TIMEOUT
    url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    auth: Auth | None = None
    force: bool = False
    disabled: bool | None = None
    all_projects: bool = False
    project_path: str | None = None

    @property
    def is_toggle(self) -> bool:
        return self.action in ("enable", "disable")

    @property
    def is_mutation(self) -> bool:
        return self.action in MUTATING_ACTIONS

    @property
    def creates_entry(self) -> bool:
        return self.action in ("add", "update")

    @property
    def wants_disabled(self) -> bool:
        """Target state of a toggle."""
        return self.action == "disable"


@dataclass(frozen=True)
class ClientCapabilities:
    """Static description of what one client's store supports.

    ABOUTME: One instance per adapter class, declared next to the schema code
    """
    client: ClientName
    display_name: str
    supported_scopes: tuple[Scope, ...]
    supported_transports: tuple[Transport, ...]
    store_field: str
    format_kind: FormatKind
    default_disabled_on_create: bool
    supports_toggle: bool

    @property
    def default_scope(self) -> Scope:
        return "global" if "global" in self.supported_scopes else self.supported_scopes[0]


@dataclass(frozen=True)
class NormalizedEntry:
    """Client-independent view of one stored server entry.

    ABOUTME: Stdio entries carry command and auth, remote entries carry url and headers
    """
    client: ClientName
    name: str
    transport: Transport
    timeout: float
    command: str | None = None
    url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    auth: Auth | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "client": self.client,
            "name": self.name,
            "transport": self.transport,
        }
        if self.transport == "stdio":
            result["command"] = self.command
            result["timeout"] = self.timeout
            result["auth"] = (self.auth or Auth("unknown")).to_dict()
        else:
            result["timeout"] = self.timeout
            result["url"] = self.url
            result["headers"] = dict(self.headers)
        return result


@runtime_checkable
class ClientAdapter(Protocol):
    """Protocol for per-client store adapters.

    ABOUTME: Every method works on an in-memory raw document
    ABOUTME: Mutating methods return the (mutated) document
    """

    capabilities: ClientCapabilities

    def ensure_store(self, doc: RawDocument, op: Operation) -> dict[str, Any]:
        """Create the store container(s) in doc if absent.

        ABOUTME: doc is mutated in place; the return value is the store mapping
        ABOUTME: itself (the dict entries are written into), not the document
        ABOUTME: Raises MalformedDocumentError when the store exists but isn't a mapping
        """
        ...

    def add(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Insert a new entry built from the operation."""
        ...

    def update(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Replace an existing entry."""
        ...

    def remove(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Delete an entry."""
        ...

    def toggle(self, doc: RawDocument, op: Operation) -> RawDocument:
        """Enable or disable an entry according to op.action."""
        ...

    def list_names(self, doc: RawDocument, op: Operation) -> list[str]:
        """Sorted server names."""
        ...

    def show(self, doc: RawDocument, op: Operation) -> RawEntry:
        """Raw stored entry."""
        ...

    def contains(self, doc: RawDocument, op: Operation) -> bool:
        """Whether op.name is present."""
        ...
