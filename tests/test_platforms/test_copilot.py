# Tests for GitHub Copilot platform adapter
import copy

import pytest

from mcpconf.errors import MalformedDocumentError, UnsupportedOperationError
from mcpconf.models import Auth, Operation
from mcpconf.platforms.copilot import CopilotAdapter


def op(action: str = "add", **kwargs) -> Operation:
    fields = {
        "action": action,
        "client": "copilot",
        "name": "abap",
        "scope": "local",
        "auth": Auth.destination("trial"),
    }
    fields.update(kwargs)
    return Operation(**fields)


def test_local_scope_only() -> None:
    assert CopilotAdapter.capabilities.supported_scopes == ("local",)
    assert CopilotAdapter.capabilities.default_scope == "local"


def test_add_creates_servers_and_inputs() -> None:
    doc: dict = {}
    CopilotAdapter().add(doc, op())
    assert doc == {
        "servers": {
            "abap": {
                "type": "stdio",
                "command": "mcp-abap-adt",
                "args": ["--transport=stdio", "--mcp=trial"],
                "timeout": 60,
            }
        },
        "inputs": [],
    }


def test_inputs_that_are_not_a_list_are_reported() -> None:
    doc = {"inputs": {"id": "token"}}
    with pytest.raises(MalformedDocumentError, match='"inputs" must be a list'):
        CopilotAdapter().add(doc, op())
    assert doc == {"inputs": {"id": "token"}}


def test_existing_inputs_are_kept() -> None:
    doc = {"inputs": [{"id": "token"}]}
    CopilotAdapter().add(doc, op())
    assert doc["inputs"] == [{"id": "token"}]


def test_remote_entry_has_no_timeout() -> None:
    doc: dict = {}
    CopilotAdapter().add(doc, op(transport="sse", url="https://x", auth=None))
    assert doc["servers"]["abap"] == {"type": "sse", "url": "https://x"}


def test_toggle_unsupported_leaves_document_unchanged() -> None:
    """Test that a rejected toggle doesn't touch the document."""
    doc = {"servers": {"abap": {"type": "stdio", "command": "c"}}, "inputs": []}
    before = copy.deepcopy(doc)
    with pytest.raises(UnsupportedOperationError, match="GitHub Copilot enable/disable is not supported."):
        CopilotAdapter().toggle(doc, op("disable"))
    assert doc == before
