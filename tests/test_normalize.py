# Tests for the normalized entry view
import pytest

from mcpconf.models import Auth, Operation
from mcpconf.normalize import infer_transport, normalize_entry
from mcpconf.platforms import CLIENTS, get_adapter

AUTHS = [
    Auth.destination("TRIAL"),
    Auth.env_name("dev"),
    Auth.env_path("/a/.env"),
    Auth.session_env(),
]


def _operation(client: str, **kwargs) -> Operation:
    adapter = get_adapter(client)
    defaults = {
        "action": "add",
        "client": client,
        "name": "abap",
        "scope": adapter.capabilities.default_scope,
        "timeout": 45,
    }
    if client == "claude":
        defaults["project_path"] = "/work/proj"
    defaults.update(kwargs)
    return Operation(**defaults)


def _stored(op: Operation) -> dict:
    adapter = get_adapter(op.client)
    doc: dict = {}
    adapter.add(doc, op)
    return adapter.show(doc, op)


def _remote_cases():
    for client, adapter_cls in sorted(CLIENTS.items()):
        for transport in adapter_cls.capabilities.supported_transports:
            if transport != "stdio":
                yield client, transport


class TestRoundTrip:
    """add followed by show --normalized reproduces the operation."""

    @pytest.mark.parametrize("client", sorted(CLIENTS))
    @pytest.mark.parametrize("auth", AUTHS, ids=lambda a: a.type)
    def test_stdio(self, client, auth):
        op = _operation(client, transport="stdio", command="my-server", auth=auth)
        normalized = get_adapter(client).normalize("abap", _stored(op))

        assert normalized.client == client
        assert normalized.name == "abap"
        assert normalized.transport == "stdio"
        assert normalized.command == "my-server"
        assert normalized.timeout == 45
        assert normalized.url is None
        assert normalized.headers == {}
        expected_value = auth.value.lower() if auth.type == "mcp" else auth.value
        assert normalized.auth == Auth(auth.type, expected_value)

    @pytest.mark.parametrize("client,transport", list(_remote_cases()))
    def test_remote(self, client, transport):
        op = _operation(
            client,
            transport=transport,
            url="https://example.com/mcp",
            headers={"Authorization": "Bearer x"},
        )
        normalized = get_adapter(client).normalize("abap", _stored(op))

        assert normalized.transport == transport
        assert normalized.url == "https://example.com/mcp"
        assert normalized.headers == {"Authorization": "Bearer x"}
        assert normalized.auth is None
        assert normalized.command is None
        if client == "copilot":
            # Copilot remote entries have no timeout field
            assert normalized.timeout == 60
        else:
            assert normalized.timeout == 45


class TestNormalizeEntry:
    """Tests for normalize_entry on hand-written entries."""

    def test_missing_timeout_defaults_to_60(self):
        entry = normalize_entry("cursor", "x", {"command": "c", "args": ["--mcp=a"]})
        assert entry.timeout == 60

    def test_non_numeric_timeout_defaults_to_60(self):
        entry = normalize_entry("cline", "x", {"command": "c", "timeout": "soon"})
        assert entry.timeout == 60

    def test_boolean_timeout_is_ignored(self):
        entry = normalize_entry("cline", "x", {"command": "c", "timeout": True})
        assert entry.timeout == 60

    def test_foreign_args_give_unknown_auth(self):
        entry = normalize_entry("cursor", "fs", {"command": "npx", "args": ["-y", "server-fs"]})
        assert entry.transport == "stdio"
        assert entry.auth == Auth("unknown")

    def test_url_without_type_is_http(self):
        entry = normalize_entry("codex", "x", {"url": "https://x", "http_headers": {"a": "b"}})
        assert entry.transport == "http"
        assert entry.headers == {"a": "b"}

    def test_antigravity_falls_back_to_url(self):
        entry = normalize_entry("antigravity", "x", {"url": "https://x"})
        assert entry.url == "https://x"

    def test_goose_fields(self):
        entry = normalize_entry(
            "goose", "x", {"type": "sse", "uri": "https://x", "timeout": 10}
        )
        assert entry.transport == "sse"
        assert entry.url == "https://x"
        assert entry.timeout == 10

    def test_args_transport_used_when_untagged(self):
        assert infer_transport({"args": ["--transport=sse"]}) == "sse"

    def test_non_dict_entry(self):
        entry = normalize_entry("cline", "x", "garbage")
        assert entry.transport == "stdio"
        assert entry.auth == Auth("unknown")

    def test_to_dict_stdio_omits_url(self):
        data = normalize_entry("cline", "x", {"command": "c", "args": ["--session-env"]}).to_dict()
        assert data == {
            "client": "cline",
            "name": "x",
            "transport": "stdio",
            "command": "c",
            "timeout": 60,
            "auth": {"type": "session-env"},
        }

    def test_to_dict_remote_omits_auth(self):
        data = normalize_entry("cursor", "x", {"type": "sse", "url": "https://x"}).to_dict()
        assert "auth" not in data
        assert "command" not in data
        assert data["headers"] == {}
