# Tests for OpenCode platform adapter
from mcpconf.models import Auth, Operation
from mcpconf.platforms import get_adapter
from mcpconf.platforms.opencode import OpenCodeAdapter


def op(action: str = "add", **kwargs) -> Operation:
    fields = {
        "action": action,
        "client": "opencode",
        "name": "abap",
        "scope": "global",
        "auth": Auth.env_name("dev"),
    }
    fields.update(kwargs)
    return Operation(**fields)


def test_kilo_alias() -> None:
    assert isinstance(get_adapter("kilo"), OpenCodeAdapter)


def test_add_local_entry() -> None:
    doc = {"$schema": "https://opencode.ai/config.json"}
    OpenCodeAdapter().add(doc, op())
    assert doc == {
        "$schema": "https://opencode.ai/config.json",
        "mcp": {
            "abap": {
                "type": "local",
                "command": "mcp-abap-adt",
                "args": ["--transport=stdio", "--env=dev"],
                "timeout": 60,
                "enabled": False,
            }
        },
    }


def test_add_remote_entry() -> None:
    doc: dict = {}
    OpenCodeAdapter().add(doc, op(transport="http", url="https://x", auth=None, disabled=False))
    assert doc["mcp"]["abap"] == {
        "type": "remote",
        "url": "https://x",
        "timeout": 60,
        "enabled": True,
    }


def test_toggle() -> None:
    doc = {"mcp": {"abap": {"type": "local", "enabled": False}}}
    OpenCodeAdapter().toggle(doc, op("enable"))
    assert doc["mcp"]["abap"]["enabled"] is True


def test_sse_not_supported() -> None:
    assert "sse" not in OpenCodeAdapter.capabilities.supported_transports
