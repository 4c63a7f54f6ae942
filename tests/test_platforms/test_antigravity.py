# Tests for Antigravity platform adapter
from mcpconf.models import Auth, Operation
from mcpconf.platforms.antigravity import AntigravityAdapter


def op(action: str = "add", **kwargs) -> Operation:
    fields = {
        "action": action,
        "client": "antigravity",
        "name": "abap",
        "scope": "global",
        "auth": Auth.destination("trial"),
    }
    fields.update(kwargs)
    return Operation(**fields)


def test_add_stdio_enabled_by_default() -> None:
    doc: dict = {}
    AntigravityAdapter().add(doc, op())
    assert doc["mcpServers"]["abap"] == {
        "command": "mcp-abap-adt",
        "args": ["--transport=stdio", "--mcp=trial"],
        "timeout": 60,
        "disabled": False,
    }


def test_remote_uses_server_url() -> None:
    doc: dict = {}
    AntigravityAdapter().add(doc, op(transport="http", url="https://x", auth=None))
    assert doc["mcpServers"]["abap"] == {
        "type": "http",
        "serverUrl": "https://x",
        "timeout": 60,
        "disabled": False,
    }


def test_disable() -> None:
    doc = {"mcpServers": {"abap": {"serverUrl": "https://x"}}}
    AntigravityAdapter().toggle(doc, op("disable"))
    assert doc["mcpServers"]["abap"] == {"serverUrl": "https://x", "disabled": True}
