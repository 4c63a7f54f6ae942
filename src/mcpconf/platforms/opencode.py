# OpenCode platform adapter (also used for the "kilo" alias)
from mcpconf.models import ClientCapabilities, Operation, RawEntry
from mcpconf.platforms.base import BaseAdapter


class OpenCodeAdapter(BaseAdapter):
    """Adapter for OpenCode (opencode.json).

    ABOUTME: Servers live under the 'mcp' key
    ABOUTME: Stdio entries are type 'local', URL entries are type 'remote'
    ABOUTME: Uses an 'enabled' flag (inverted polarity); new entries start disabled
    """

    capabilities = ClientCapabilities(
        client="opencode",
        display_name="OpenCode",
        supported_scopes=("global", "local"),
        # 'remote' can't tell sse from http, so only http round-trips
        supported_transports=("stdio", "http"),
        store_field="mcp",
        format_kind="json",
        default_disabled_on_create=True,
        supports_toggle=True,
    )
    toggle_field = "enabled"

    def build_stdio_entry(self, op: Operation) -> RawEntry:
        return {"type": "local", **super().build_stdio_entry(op)}

    def build_remote_entry(self, op: Operation) -> RawEntry:
        entry: RawEntry = {
            "type": "remote",
            "url": op.url,
            "timeout": op.timeout,
        }
        if op.headers:
            entry["headers"] = dict(op.headers)
        return entry
