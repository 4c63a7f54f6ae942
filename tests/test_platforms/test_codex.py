# Tests for Codex CLI platform adapter
from pathlib import Path

import pytest

from mcpconf.documents import read_document, write_document
from mcpconf.errors import NotFoundError
from mcpconf.models import Auth, Operation
from mcpconf.platforms.codex import CodexAdapter


def op(action: str = "add", **kwargs) -> Operation:
    fields = {
        "action": action,
        "client": "codex",
        "name": "abap",
        "scope": "global",
        "auth": Auth.env_path("/a/.env"),
    }
    fields.update(kwargs)
    return Operation(**fields)


def test_codex_adapter_properties() -> None:
    """Test adapter name and capabilities."""
    adapter = CodexAdapter()
    assert adapter.name == "Codex"
    assert adapter.capabilities.store_field == "mcp_servers"
    assert adapter.capabilities.format_kind == "toml"
    assert "sse" not in adapter.capabilities.supported_transports


def test_add_stdio_entry() -> None:
    """Test that new entries start disabled with startup_timeout_sec."""
    doc: dict = {}
    CodexAdapter().add(doc, op())
    assert doc == {
        "mcp_servers": {
            "abap": {
                "command": "mcp-abap-adt",
                "args": ["--transport=stdio", "--env-path=/a/.env"],
                "startup_timeout_sec": 60,
                "enabled": False,
            }
        }
    }


def test_add_http_entry() -> None:
    doc: dict = {}
    CodexAdapter().add(
        doc, op(transport="http", url="https://x/mcp", headers={"X-Key": "1"}, auth=None, timeout=30)
    )
    assert doc["mcp_servers"]["abap"] == {
        "url": "https://x/mcp",
        "startup_timeout_sec": 30,
        "http_headers": {"X-Key": "1"},
        "enabled": False,
    }


def test_toggle_flips_enabled() -> None:
    adapter = CodexAdapter()
    doc = {"mcp_servers": {"abap": {"command": "c", "enabled": False, "extra": 1}}}
    adapter.toggle(doc, op("enable"))
    assert doc["mcp_servers"]["abap"] == {"command": "c", "enabled": True, "extra": 1}

    adapter.toggle(doc, op("disable"))
    assert doc["mcp_servers"]["abap"]["enabled"] is False


def test_update_requires_existing_entry() -> None:
    with pytest.raises(NotFoundError):
        CodexAdapter().update({}, op("update"))


def test_update_replaces_entry() -> None:
    adapter = CodexAdapter()
    doc = {"mcp_servers": {"abap": {"command": "old", "custom": True}}}
    adapter.update(doc, op("update", auth=Auth.destination("Prod"), disabled=False))
    assert doc["mcp_servers"]["abap"] == {
        "command": "mcp-abap-adt",
        "args": ["--transport=stdio", "--mcp=prod"],
        "startup_timeout_sec": 60,
        "enabled": True,
    }


def test_toml_file_round_trip(tmp_path: Path) -> None:
    """Test that other tables in config.toml survive a write."""
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        'model = "o3"\n\n[mcp_servers.other]\ncommand = "npx"\nargs = ["-y", "srv"]\n'
    )

    adapter = CodexAdapter()
    doc = read_document(config_file, "toml")
    adapter.add(doc, op())
    write_document(config_file, doc, "toml")

    reloaded = read_document(config_file, "toml")
    assert reloaded["model"] == "o3"
    assert reloaded["mcp_servers"]["other"] == {"command": "npx", "args": ["-y", "srv"]}
    assert reloaded["mcp_servers"]["abap"]["enabled"] is False
    assert adapter.list_names(reloaded, op("list")) == ["abap", "other"]
