# Cursor platform adapter
from mcpconf.models import ClientCapabilities
from mcpconf.platforms.base import BaseAdapter


class CursorAdapter(BaseAdapter):
    """Adapter for Cursor (~/.cursor/mcp.json or ./.cursor/mcp.json).

    ABOUTME: Cursor's schema has no enabled/disabled field
    ABOUTME: Entries are written without one and enable/disable is rejected
    """

    capabilities = ClientCapabilities(
        client="cursor",
        display_name="Cursor",
        supported_scopes=("global", "local"),
        supported_transports=("stdio", "sse", "http"),
        store_field="mcpServers",
        format_kind="json",
        default_disabled_on_create=False,
        supports_toggle=False,
    )
    toggle_field = None
