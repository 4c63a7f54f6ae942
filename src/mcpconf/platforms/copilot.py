# GitHub Copilot (VS Code) platform adapter
from typing import Any

from mcpconf.errors import MalformedDocumentError
from mcpconf.models import ClientCapabilities, Operation, RawDocument, RawEntry
from mcpconf.platforms.base import BaseAdapter


class CopilotAdapter(BaseAdapter):
    """Adapter for GitHub Copilot in VS Code (./.vscode/mcp.json).

    ABOUTME: Project-level only; servers live under 'servers' next to an 'inputs' array
    ABOUTME: No enable/disable support, entries carry no disabled field
    ABOUTME: URL entries omit timeout
    """

    capabilities = ClientCapabilities(
        client="copilot",
        display_name="GitHub Copilot",
        supported_scopes=("local",),
        supported_transports=("stdio", "sse", "http"),
        store_field="servers",
        format_kind="json",
        default_disabled_on_create=False,
        supports_toggle=False,
    )
    toggle_field = None
    remote_type_tags = {"sse": "sse", "http": "http"}

    def ensure_store(self, doc: RawDocument, op: Operation) -> dict[str, Any]:
        inputs = doc.get("inputs")
        if inputs is not None and not isinstance(inputs, list):
            raise MalformedDocumentError(
                f'"inputs" must be a list, found {type(inputs).__name__}.'
            )
        store = super().ensure_store(doc, op)
        if inputs is None:
            doc["inputs"] = []
        return store

    def build_stdio_entry(self, op: Operation) -> RawEntry:
        return {"type": "stdio", **super().build_stdio_entry(op)}

    def build_remote_entry(self, op: Operation) -> RawEntry:
        entry: RawEntry = {
            "type": self.remote_type_tags[op.transport],
            "url": op.url,
        }
        if op.headers:
            entry["headers"] = dict(op.headers)
        return entry
