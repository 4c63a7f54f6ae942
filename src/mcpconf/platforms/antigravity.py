# Antigravity platform adapter
from mcpconf.models import ClientCapabilities, Operation, RawEntry
from mcpconf.platforms.base import BaseAdapter


class AntigravityAdapter(BaseAdapter):
    """Adapter for Antigravity (~/.gemini/antigravity/mcp_config.json).

    ABOUTME: Remote entries store their endpoint under 'serverUrl'
    ABOUTME: New entries are enabled unless --disable is given
    ABOUTME: Project-level config isn't supported yet (global scope only)
    """

    capabilities = ClientCapabilities(
        client="antigravity",
        display_name="Antigravity",
        supported_scopes=("global",),
        supported_transports=("stdio", "sse", "http"),
        store_field="mcpServers",
        format_kind="json",
        default_disabled_on_create=False,
        supports_toggle=True,
    )
    remote_type_tags = {"sse": "sse", "http": "http"}

    def build_remote_entry(self, op: Operation) -> RawEntry:
        entry: RawEntry = {
            "type": self.remote_type_tags[op.transport],
            "serverUrl": op.url,
            "timeout": op.timeout,
        }
        if op.headers:
            entry["headers"] = dict(op.headers)
        return entry
