# Crush platform adapter
from mcpconf.models import ClientCapabilities, Operation, RawEntry
from mcpconf.platforms.base import BaseAdapter


class CrushAdapter(BaseAdapter):
    """Adapter for Crush (crush.json, ~/.config/crush/crush.json).

    ABOUTME: Servers live under the 'mcp' key, each tagged stdio, sse or http
    ABOUTME: Boolean 'disabled' flag; new entries are enabled by default
    """

    capabilities = ClientCapabilities(
        client="crush",
        display_name="Crush",
        supported_scopes=("global", "local"),
        supported_transports=("stdio", "sse", "http"),
        store_field="mcp",
        format_kind="json",
        default_disabled_on_create=False,
        supports_toggle=True,
    )
    remote_type_tags = {"sse": "sse", "http": "http"}

    def build_stdio_entry(self, op: Operation) -> RawEntry:
        return {"type": "stdio", **super().build_stdio_entry(op)}
